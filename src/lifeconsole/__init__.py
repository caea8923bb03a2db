"""Conway's Game of Life rendered full-screen in a terminal."""

__version__ = "0.1.0"

from .core.board import Board
from .core.game import GameOfLife, next_generation
from .core.randomizer import randomize, random_board

__all__ = ["Board", "GameOfLife", "next_generation", "randomize", "random_board"]
