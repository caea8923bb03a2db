"""Board data structure for the Game of Life."""

from typing import Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# (row, col) deltas of the eight cells surrounding a cell
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1), (-1, 0),
    (1, 0), (-1, 1), (0, 1), (1, 1),
)

_NEIGHBOR_KERNEL = torch.tensor(
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32
).unsqueeze(0).unsqueeze(0)


class Board:
    """A fixed-size 2D grid of alive/dead cells for one generation.

    Cells are stored in a numpy bool array of shape (rows, cols). The grid
    has hard edges: positions outside it are never alive and never wrap.
    Once frozen, a board is read-only and safe to hand to a renderer.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize an all-dead board.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")

        self._cells = np.zeros((rows, cols), dtype=bool)

        # Single-threaded: the simulation never runs computation in parallel
        torch.set_num_threads(1)

    @classmethod
    def from_array(cls, data: Sequence) -> "Board":
        """Build a board from a 2D array or nested list of truthy values.

        Args:
            data: 2D array-like with one entry per cell

        Returns:
            New, unfrozen board holding a copy of the data

        Raises:
            ValueError: If data is not two-dimensional
        """
        arr = np.array(data, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Board data must be 2D, got {arr.ndim}D")

        board = cls(arr.shape[0], arr.shape[1])
        board._cells[:] = arr
        return board

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array."""
        return self._cells

    @property
    def frozen(self) -> bool:
        """Whether the board has been made read-only."""
        return not self._cells.flags.writeable

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def freeze(self) -> "Board":
        """Make the board read-only.

        Returns:
            The board itself, for chaining
        """
        self._cells.flags.writeable = False
        return self

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell while populating the board.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
            ValueError: If the board is frozen
        """
        self._check_bounds(row, col)
        if self.frozen:
            raise ValueError("Cannot modify a frozen board")

        self._cells[row, col] = alive

    def get_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell, ignoring positions off the board.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding gives the bounded topology: cells beyond the edge
        contribute nothing.

        Returns:
            2D int array of shape (rows, cols) with neighbor counts
        """
        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> list:
        """Convert board to nested list of bools.

        Returns:
            2D list representation of the board
        """
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two boards are equal."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if alive else "." for alive in row) for row in self._cells)

