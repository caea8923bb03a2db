"""Core Game of Life logic."""

from .board import Board, NEIGHBOR_OFFSETS
from .game import GameOfLife, next_generation
from .randomizer import randomize, random_board

__all__ = ["Board", "NEIGHBOR_OFFSETS", "GameOfLife", "next_generation", "randomize", "random_board"]
