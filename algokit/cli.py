"""Command line entry point for the Tower of Hanoi and guess-the-number game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algokit.game import GuessGame, Outcome, random_secret
from algokit.hanoi import format_move, hanoi_moves

_BANNER = "*" * 56


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)

    hanoi = commands.add_parser("hanoi", help="print the moves for the Tower of Hanoi")
    hanoi.add_argument("disks", type=int, help="number of disks")

    guess = commands.add_parser("guess", help="play guess the number")
    guess.add_argument("--moves", type=int, default=7, help="number of guesses allowed")
    guess.add_argument("--secret", type=int, default=None, help=argparse.SUPPRESS)
    return parser


def _run_hanoi(parser: argparse.ArgumentParser, disks: int) -> int:
    if disks < 1:
        parser.error("number of disks must be at least 1")
    for move in hanoi_moves(disks, "A", "C", "B"):
        print(format_move(*move))
    return 0


def _read_guess(remaining: int) -> int:
    while True:
        text = input(f"\nGuess the number in {remaining} moves: ")
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _run_guess(parser: argparse.ArgumentParser, moves: int, secret: int | None) -> int:
    if moves < 1:
        parser.error("a game needs at least one move")
    game = GuessGame(random_secret() if secret is None else secret, moves)
    print(_BANNER)
    print("\t\t\tGame Time")
    print(_BANNER)
    print(
        "Here Computer guessed a number less than 100.\n"
        f"Now it's your time to match the number in {moves} moves."
    )
    while True:
        try:
            move = _read_guess(game.remaining)
        except EOFError:
            print()
            return 1
        outcome = game.guess(move)
        if outcome is Outcome.WON:
            print("\nYou Won! Your number is matched.")
            return 0
        if outcome is Outcome.LOST:
            print("\n\nSorry You Lose. Try Again for the next time.")
            print(f"The Number that computer guessed was {game.secret}")
            return 0
        if outcome is Outcome.TOO_LOW:
            print("\nYour Number is smaller. Enter a Greater Number --->")
        else:
            print("\nYour Number is Greater. Now enter a smaller Number --->")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "hanoi":
        return _run_hanoi(parser, args.disks)
    return _run_guess(parser, args.moves, args.secret)


if __name__ == "__main__":
    raise SystemExit(main())