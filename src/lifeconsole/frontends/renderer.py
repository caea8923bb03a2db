"""Draws boards onto a terminal surface."""

from ..core.board import Board
from .terminal import Terminal


ALIVE_GLYPH = "\u2588"  # full block
DEAD_GLYPH = " "


def format_row(board: Board, row: int) -> str:
    """Format one board row as a string of glyphs.

    Args:
        board: Board to read
        row: Row index

    Returns:
        String with one glyph per column
    """
    return "".join(ALIVE_GLYPH if alive else DEAD_GLYPH for alive in board.cells[row])


class Renderer:
    """Writes boards to a terminal, one line per board row."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def render(self, left: int, top: int, board: Board) -> None:
        """Draw a board with its top-left corner at (left, top).

        Rows that would land below the viewport are skipped, and each row is
        cut at the right edge so it never wraps onto the next line.

        Args:
            left: Column of the first glyph in each row
            top: Line of the board's first row
            board: Board to draw
        """
        height, width = self.terminal.size()
        visible_cols = max(0, width - left)

        for x in range(board.rows):
            if top + x >= height:
                break
            self.terminal.move_cursor(left, top + x)
            self.terminal.write(format_row(board, x)[:visible_cols])

        self.terminal.flush()

    def render_status(self, line: int, text: str) -> None:
        """Draw a status line, padded to clear leftovers.

        The text stops one column short of the right edge so that writing the
        bottom line never scrolls the terminal.
        """
        height, width = self.terminal.size()
        if line >= height:
            return

        self.terminal.move_cursor(0, line)
        self.terminal.write(text.ljust(width - 1)[: width - 1])
        self.terminal.flush()
