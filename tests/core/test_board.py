"""Tests for the Board class."""

import numpy as np
import pytest
from unittest.mock import patch
from lifeconsole.core.board import Board, NEIGHBOR_OFFSETS


class TestBoard:
    """Test cases for the Board class."""

    def test_initialization(self):
        """Test board initialization."""
        board = Board(10, 20)
        assert board.rows == 10
        assert board.cols == 20
        assert board.shape == (10, 20)
        assert board.population == 0
        assert not board.frozen

    def test_torch_pinned_to_one_thread_on_creation(self):
        """Test that building a board pins torch to a single thread."""
        with patch("lifeconsole.core.board.torch.set_num_threads") as mock_threads:
            Board(3, 3)

        mock_threads.assert_called_once_with(1)

    def test_invalid_dimensions(self):
        """Test that empty boards are rejected."""
        with pytest.raises(ValueError):
            Board(0, 5)

        with pytest.raises(ValueError):
            Board(5, -1)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        board = Board(5, 5)

        # Initially all cells should be dead
        assert board.get_cell(0, 0) is False
        assert board.get_cell(2, 3) is False

        board.set_cell(1, 1, True)
        board.set_cell(2, 3, True)

        assert board.get_cell(1, 1) is True
        assert board.get_cell(2, 3) is True
        assert board.get_cell(3, 2) is False

        board.set_cell(1, 1, False)
        assert board.get_cell(1, 1) is False

    def test_out_of_bounds(self):
        """Test that out-of-range coordinates fail instead of wrapping."""
        board = Board(3, 4)

        with pytest.raises(IndexError):
            board.get_cell(-1, 0)

        with pytest.raises(IndexError):
            board.get_cell(0, -1)

        with pytest.raises(IndexError):
            board.get_cell(3, 0)

        with pytest.raises(IndexError):
            board.get_cell(0, 4)

        with pytest.raises(IndexError):
            board.set_cell(3, 3, True)

    def test_freeze(self):
        """Test that a frozen board rejects writes."""
        board = Board(3, 3)
        board.set_cell(1, 1, True)

        assert board.freeze() is board
        assert board.frozen

        with pytest.raises(ValueError):
            board.set_cell(0, 0, True)

        with pytest.raises(ValueError):
            board.cells[0, 0] = True

        assert board.get_cell(1, 1) is True
        assert board.population == 1

    def test_from_array(self):
        """Test building a board from nested lists."""
        data = [[0, 1, 0], [1, 1, 0]]
        board = Board.from_array(data)

        assert board.shape == (2, 3)
        assert board.population == 3
        assert board.get_cell(0, 1)
        assert board.get_cell(1, 0)
        assert not board.get_cell(1, 2)
        assert board.to_list() == [[False, True, False], [True, True, False]]

    def test_from_array_copies(self):
        """Test that the board does not share memory with its source."""
        source = np.zeros((3, 3), dtype=bool)
        board = Board.from_array(source)
        source[1, 1] = True
        assert board.population == 0

    def test_from_array_rejects_non_2d(self):
        with pytest.raises(ValueError):
            Board.from_array([1, 0, 1])

    def test_neighbor_offsets(self):
        """Test the fixed neighborhood."""
        assert len(NEIGHBOR_OFFSETS) == 8
        assert len(set(NEIGHBOR_OFFSETS)) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS
        for dr, dc in NEIGHBOR_OFFSETS:
            assert dr in (-1, 0, 1)
            assert dc in (-1, 0, 1)

    def test_get_neighbors(self):
        """Test neighbor counting for individual cells."""
        board = Board(5, 5)

        # Empty board
        assert board.get_neighbors(2, 2) == 0

        board.set_cell(1, 1, True)
        board.set_cell(1, 2, True)
        board.set_cell(2, 1, True)

        assert board.get_neighbors(0, 0) == 1  # Only (1,1)
        assert board.get_neighbors(2, 2) == 3  # All three cells
        assert board.get_neighbors(1, 1) == 2  # Cell itself doesn't count
        assert board.get_neighbors(3, 3) == 0

    def test_corner_has_three_candidates(self):
        """Test that a corner only sees its in-bounds neighbors."""
        board = Board.from_array(np.ones((5, 5), dtype=bool))

        assert board.get_neighbors(0, 0) == 3
        assert board.get_neighbors(4, 4) == 3
        assert board.get_neighbors(0, 2) == 5
        assert board.get_neighbors(2, 2) == 8

    def test_no_wraparound(self):
        """Test that opposite corners are not neighbors."""
        board = Board(3, 3)
        board.set_cell(0, 0, True)
        board.set_cell(2, 2, True)

        assert board.get_neighbors(0, 0) == 0
        assert board.get_neighbors(2, 2) == 0

    def test_count_all_neighbors(self):
        """Test vectorized neighbor counting."""
        board = Board(5, 5)

        # Horizontal line in the middle row
        board.set_cell(2, 1, True)
        board.set_cell(2, 2, True)
        board.set_cell(2, 3, True)

        counts = board.count_all_neighbors()

        assert counts.shape == (5, 5)
        assert counts[2, 2] == 2
        assert counts[1, 2] == 3
        assert counts[3, 2] == 3
        assert counts[0, 0] == 0

    def test_count_all_neighbors_matches_per_cell(self):
        """Test that the convolution agrees with the per-cell count."""
        rng = np.random.default_rng(7)
        board = Board.from_array(rng.random((6, 9)) < 0.4).freeze()

        counts = board.count_all_neighbors()

        for row in range(board.rows):
            for col in range(board.cols):
                assert counts[row, col] == board.get_neighbors(row, col)

    def test_equality(self):
        """Test board comparison."""
        a = Board.from_array([[1, 0], [0, 1]])
        b = Board.from_array([[1, 0], [0, 1]]).freeze()
        c = Board.from_array([[1, 0], [1, 1]])

        assert a == b
        assert a != c
        assert a != Board(2, 3)
        assert a != "not a board"

    def test_str(self):
        """Test string rendering."""
        board = Board.from_array([[1, 0, 0], [0, 0, 1]])
        assert str(board) == "*..\n..*"
