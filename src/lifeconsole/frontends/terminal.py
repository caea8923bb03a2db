"""Terminal surface: viewport size, cursor control, output and key polling."""

import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, Tuple

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty


CSI = "\033["


class Terminal:
    """Character-grid terminal driven with ANSI escape sequences.

    Coordinates are zero-based: ``left`` is the column, ``top`` the line.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stdin: Optional[TextIO] = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin
        self._cursor_visible = True

    @property
    def cursor_visible(self) -> bool:
        """Whether the cursor is currently shown."""
        return self._cursor_visible

    def size(self) -> Tuple[int, int]:
        """Get the viewport size.

        Returns:
            Tuple of (lines, columns)

        Raises:
            OSError: If the output stream is not attached to a terminal
        """
        size = os.get_terminal_size(self.stdout.fileno())
        return (size.lines, size.columns)

    def configure_encoding(self, encoding: str = "utf-8") -> None:
        """Switch the output stream to an encoding that can write block glyphs."""
        reconfigure = getattr(self.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding=encoding)

    def clear(self) -> None:
        self.write(f"{CSI}2J{CSI}H")

    def hide_cursor(self) -> None:
        self.write(f"{CSI}?25l")
        self._cursor_visible = False

    def show_cursor(self) -> None:
        self.write(f"{CSI}?25h")
        self._cursor_visible = True

    def move_cursor(self, left: int, top: int) -> None:
        """Place the cursor at column ``left`` of line ``top``."""
        self.write(f"{CSI}{top + 1};{left + 1}H")

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()

    def key_available(self) -> bool:
        """Check, without blocking, whether a keypress is waiting."""
        if sys.platform == "win32":
            return msvcrt.kbhit()
        readable, _, _ = select.select([self.stdin], [], [], 0)
        return bool(readable)

    def read_key(self) -> str:
        """Consume one pending key."""
        if sys.platform == "win32":
            return msvcrt.getwch()
        return self.stdin.read(1)

    @contextmanager
    def input_mode(self) -> Iterator[None]:
        """Deliver keys unbuffered and unechoed for the duration of the block.

        Only applies on POSIX when stdin is a TTY; elsewhere this is a no-op.
        """
        if sys.platform == "win32" or not self.stdin.isatty():
            yield
            return

        fd = self.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        # TCSANOW keeps keys typed before the switch pending
        tty.setcbreak(fd, termios.TCSANOW)
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
