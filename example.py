#!/usr/bin/env python3
"""
Example usage of the lifeconsole package without a terminal surface.
"""

import numpy as np

from lifeconsole import Board, GameOfLife, random_board


def main():
    """Print a blinker and a small random board for a few generations."""
    board = Board(5, 5)
    for col in (1, 2, 3):
        board.set_cell(2, col, True)

    game = GameOfLife(board)
    print("Initial state:")
    print(game.board)
    print()

    for _ in range(2):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.board)
        print()

    # Seeded generator gives the same board every run
    game = GameOfLife(random_board(12, 30, np.random.default_rng(42)))
    for _ in range(10):
        game.step()

    print("Final statistics:")
    for key, value in game.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
