"""Word jumble: put the letters of a scrambled word back in order."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

PUZZLES: tuple[tuple[str, str], ...] = (
    ("banana", "a funky shaped fruit"),
    ("gigantic", "an adjective to describe the size of something"),
    ("storm", "a weather anomaly"),
    ("serendipity", "the positive outcome of luck"),
    ("global", "a scale used to describe the planet"),
)


def jumble(word: str, rng: random.Random | None = None) -> str:
    """Scramble a word by swapping random pairs of letters, once per letter."""
    rng = rng or random.Random()
    letters = list(word)
    for _ in letters:
        a = rng.randrange(len(letters))
        b = rng.randrange(len(letters))
        letters[a], letters[b] = letters[b], letters[a]
    return "".join(letters)


def play(read: Callable[[], str] = input,
         write: Callable[[str], object] = print,
         rng: random.Random | None = None) -> list[int]:
    """Play rounds until the player types 'quit'; return the scores of solved words."""
    rng = rng or random.Random()
    write("Put the letters of a word in the correct order. ")
    scores: list[int] = []
    while True:
        word, hint = PUZZLES[rng.randrange(len(PUZZLES))]
        score = len(word)
        write(jumble(word, rng))
        guess = read().strip()
        while True:
            if guess == word:
                write("Congratulations! You guessed correctly.")
                write(f"You scored {score} points.")
                scores.append(score)
                break
            if guess == "hint":
                write(f"Here's a little help: {hint}")
                score -= 1
            elif guess == "quit":
                write(f"Thanks for playing. The correct answer was: {word}")
                return scores
            else:
                write("Wrong. Guess again.")
            guess = read().strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game."""
    try:
        play(input, print, random.Random())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())