"""Random initial populations."""

from typing import Optional
import numpy as np

from .board import Board


def randomize(board: Board, rng: Optional[np.random.Generator] = None, probability: float = 0.5) -> Board:
    """Randomly populate a board of the same size as ``board``.

    Args:
        board: Board whose dimensions are used; its cells are not modified
        rng: Pseudo-random source, seeded from system entropy if omitted
        probability: Chance each cell will be alive (0.0 to 1.0)

    Returns:
        New frozen board
    """
    return random_board(board.rows, board.cols, rng, probability)


def random_board(
    rows: int, cols: int, rng: Optional[np.random.Generator] = None, probability: float = 0.5
) -> Board:
    """Create a frozen board with each cell independently alive."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")
    if rng is None:
        rng = np.random.default_rng()

    return Board.from_array(rng.random((rows, cols)) < probability).freeze()
