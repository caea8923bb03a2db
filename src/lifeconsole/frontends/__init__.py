"""Frontend interfaces for the Game of Life."""

from .terminal import Terminal
from .renderer import Renderer
from .cli import TerminalLife

__all__ = ["Terminal", "Renderer", "TerminalLife"]
