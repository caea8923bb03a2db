"""Conway's Game of Life generation rule."""

from typing import Deque, Dict
from collections import deque

from .board import Board


def next_generation(board: Board) -> Board:
    """Compute the successor of a board.

    Implements the classic rules on a bounded grid:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Args:
        board: Current generation, left untouched

    Returns:
        New frozen board with the same dimensions
    """
    neighbor_counts = board.count_all_neighbors()
    cells = board.cells

    survive_mask = cells & ((neighbor_counts == 2) | (neighbor_counts == 3))
    birth_mask = ~cells & (neighbor_counts == 3)

    return Board.from_array(survive_mask | birth_mask).freeze()


class GameOfLife:
    """Tracks the current board of a running simulation."""

    def __init__(self, board: Board) -> None:
        """Initialize the game with its generation 0 board.

        Args:
            board: Starting board, frozen if it is not already
        """
        self._board = board.freeze()
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._population_history.append(self.population)

    @property
    def board(self) -> Board:
        """Current generation's board."""
        return self._board

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    @property
    def population_history(self) -> list:
        """Population counts of the most recent generations."""
        return list(self._population_history)

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self._board = next_generation(self._board)
        self._generation += 1
        self._population_history.append(self.population)
        return self._board

    def get_statistics(self) -> Dict:
        """Get statistics for the current generation.

        Returns:
            Dictionary with generation, population and board size
        """
        rows, cols = self._board.shape
        return {
            "generation": self._generation,
            "population": self.population,
            "grid_size": (rows, cols),
            "population_density": self.population / (rows * cols),
            "population_history": list(self._population_history),
        }
