"""Command-line interface: runs the Game of Life full-screen in a terminal."""

import argparse
import sys
import time
from enum import Enum
from typing import Callable, Dict, Optional

import numpy as np

from ..core.board import Board
from ..core.game import GameOfLife
from ..core.randomizer import randomize
from .renderer import Renderer
from .terminal import Terminal


DEFAULT_INTERVAL = 0.25
STATUS_ROWS = 1
BOARD_LEFT = 1
BOARD_TOP = 0


class State(Enum):
    """Lifecycle of the driver loop."""

    SETUP = "setup"
    RUNNING = "running"
    STOPPED = "stopped"


class TerminalLife:
    """Drives a random Game of Life in the terminal until a key is pressed."""

    def __init__(
        self,
        terminal: Terminal,
        rng: Optional[np.random.Generator] = None,
        interval: float = DEFAULT_INTERVAL,
        show_status: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the driver.

        Args:
            terminal: Output surface to draw on and poll for keys
            rng: Pseudo-random source for the initial board
            interval: Pause between generations in seconds
            show_status: Draw generation and population on the reserved row
            sleep: Blocking pause function
        """
        self.terminal = terminal
        self.renderer = Renderer(terminal)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.interval = interval
        self.show_status = show_status
        self.sleep = sleep
        self.state = State.SETUP
        self.game: Optional[GameOfLife] = None

    def setup(self) -> GameOfLife:
        """Prepare the terminal and draw a random generation 0.

        Raises:
            OSError: If the viewport size cannot be determined
        """
        self.terminal.configure_encoding("utf-8")
        self.terminal.clear()

        height, width = self.terminal.size()
        board = Board(height - STATUS_ROWS, width)

        self.terminal.hide_cursor()
        self.game = GameOfLife(randomize(board, self.rng))
        self._draw()
        return self.game

    def _draw(self) -> None:
        self.renderer.render(BOARD_LEFT, BOARD_TOP, self.game.board)
        if self.show_status:
            self.renderer.render_status(
                BOARD_TOP + self.game.board.rows,
                format_status(self.game.generation, self.game.population),
            )

    def tick(self) -> bool:
        """Run one iteration: advance, draw, pause, then poll for a key.

        Returns:
            True if a key is pending and the loop should stop
        """
        self.game.step()
        self._draw()
        self.sleep(self.interval)
        return self.terminal.key_available()

    def run(self) -> Dict:
        """Run until a keypress, restoring the cursor on every exit path.

        Returns:
            Statistics of the final generation
        """
        start_time = time.time()
        try:
            with self.terminal.input_mode():
                self.state = State.SETUP
                self.setup()

                self.state = State.RUNNING
                while not self.tick():
                    pass

                self.terminal.read_key()
        finally:
            self.state = State.STOPPED
            self.terminal.show_cursor()
            self.terminal.flush()

        duration = time.time() - start_time
        stats = self.game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = stats["generation"] / duration if duration > 0 else 0
        return stats


def format_status(generation: int, population: int) -> str:
    """Format the status line shown below the board."""
    return f" Generation {generation}  Population {population}  (press any key to stop)"


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifeconsole",
        description="Run Conway's Game of Life full-screen in the terminal until a key is pressed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random board filling the terminal, 4 generations per second
  lifeconsole

  # Faster, reproducible run with a status line
  lifeconsole --interval 0.05 --seed 42 --status
        """,
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help=f"Seconds to pause between generations (default: {DEFAULT_INTERVAL})",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible initial board",
    )

    parser.add_argument(
        "--status",
        action="store_true",
        help="Show generation and population on the bottom line",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed statistics on exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.interval <= 0:
        errors.append("Interval must be positive")

    if args.seed is not None and args.seed < 0:
        errors.append("Seed must be non-negative")

    if errors:
        print("Error: Invalid arguments:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return False

    return True


def print_results(stats: dict, verbose: bool) -> None:
    """Print a summary once the terminal has been restored.

    Args:
        stats: Statistics from TerminalLife.run
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation stopped after {stats['generation']} generations (population {stats['population']})")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        if stats.get("population_history"):
            recent = stats["population_history"][-10:]
            print(f"  Recent populations: {' → '.join(str(p) for p in recent)}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.2f} generations/second")


def main() -> int:
    """Main entry point for the terminal interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    life = TerminalLife(
        Terminal(),
        rng=np.random.default_rng(args.seed),
        interval=args.interval,
        show_status=args.status,
    )

    try:
        stats = life.run()
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print_results(stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
