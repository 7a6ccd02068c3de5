"""Guess-my-number on the console."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

SECRET = 10


class Outcome(enum.Enum):
    CORRECT = "correct"
    TOO_HIGH = "too high"
    TOO_LOW = "too low"


def check_guess(secret: int, guess: int) -> Outcome:
    """Compare a guess with the secret number."""
    if guess == secret:
        return Outcome.CORRECT
    if guess > secret:
        return Outcome.TOO_HIGH
    return Outcome.TOO_LOW


def play(read: Callable[[], str] = input,
         write: Callable[[str], object] = print,
         secret: int = SECRET) -> int:
    """Ask for guesses until the secret is found; return the number of guesses."""
    guesses = 0
    while True:
        write("Guess my number.")
        try:
            guess = int(read().strip())
        except ValueError:
            write("Please enter a whole number.")
            continue
        guesses += 1
        outcome = check_guess(secret, guess)
        if outcome is Outcome.CORRECT:
            noun = "guess" if guesses == 1 else "guesses"
            write(f"Well done! I took you {guesses} {noun} to find my number.")
            return guesses
        if outcome is Outcome.TOO_HIGH:
            write(f"My number is less than {guess}")
        else:
            write(f"My number is greater than {guess}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game."""
    try:
        play(input, print)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())