"""Virtual pets that get hungry and bored, and the farm that keeps them."""

from __future__ import annotations

import random
from collections.abc import Iterator

FACTS: tuple[str, ...] = (
    "Did you know that Barbie's full name is Barbara Millicent Roberts? I didn't.",
    "I just found out that dragonflies have six legs but can't walk. Fascinating.",
    "Golf balls have 336 dimples. I'm gonna check that out.",
    "The Monopoly guy is called Milburn Pennybags. It's better than my name.",
    "The infinity symbol is called lemniscate.",
    "Did you know that I can see you through the monitor?",
    "Birds are actually governments spies.",
    "When you pour Coca-Cola on your keyboard, it stops working.",
    "When people use the word 'quantum', 99% of the time, it just means they "
    "don't have a clue what they're talking about.",
    "Did you know that most boring facts are made up? Now that's interesting.",
)

# Only the first nine facts are ever spoken.
_SPOKEN_FACTS = 9


class Tamagochi:
    """A pet with hunger and boredom levels that rise as time passes."""

    def __init__(self, name: str):
        self.name = name
        self.hunger = 5
        self.boredom = 5

    def __repr__(self) -> str:
        return f"Tamagochi({self.name!r}, hunger={self.hunger}, boredom={self.boredom})"

    def pass_time(self) -> None:
        self.hunger += 1
        self.boredom += 1

    def talk(self, rng: random.Random | None = None) -> list[str]:
        """Return what the pet says about its state; talking also passes time."""
        rng = rng or random.Random()
        name = self.name
        lines: list[str] = []
        if self.hunger < 5:
            lines.append(f"{name} says: I'm a bit peckish, no big deal.")
            lines.append(f"{name} doesn't need you, worthless human.")
        elif self.hunger <= 7:
            lines.append(f"{name} says: I'm hungry, I need to eat. Soon")
            lines.append(f"{name} is just being needy. Ignore it.")
        else:
            lines.append(f"{name} says: I'm starving, I'm gonna eat myself soon.")
            lines.append(f"{name} really needs your help. But you don't have to help it.")

        if self.boredom < 5:
            lines.append(f"{name} says: I'm a bit bored, but that's ok, "
                         "I've got work to do anyways")
            lines.append(f"{name} is lying, it's unemployed and completly relies "
                         "on you to provide.")
        elif self.boredom <= 7:
            lines.append(f"{name} says: {FACTS[rng.randrange(_SPOKEN_FACTS)]}")
            lines.append(f"{name} is gonna keep giving useless facts, unless you entertain it.")
        else:
            lines.append(f"{name}says: I have started to grasp my own mortality.")
            lines.append(f"You might want to play with {name} before it starts "
                         "quoting Nietzsche...")
        self.pass_time()
        return lines

    def play(self) -> None:
        self.boredom -= 3
        self.pass_time()

    def eat(self) -> None:
        self.hunger -= 3
        self.pass_time()

    def mood(self) -> int:
        """Overall discomfort: hunger plus boredom."""
        return self.hunger + self.boredom


class Farm:
    """An ordered collection of pets."""

    def __init__(self) -> None:
        self.tamagochis: list[Tamagochi] = []

    def __len__(self) -> int:
        return len(self.tamagochis)

    def __iter__(self) -> Iterator[Tamagochi]:
        return iter(self.tamagochis)

    def add(self, tamagochi: Tamagochi) -> None:
        self.tamagochis.append(tamagochi)

    def roll_call(self) -> list[str]:
        """Names of all pets, in the order they were added."""
        return [t.name for t in self.tamagochis]

    def find(self, name: str) -> list[Tamagochi]:
        """All pets with exactly this name."""
        return [t for t in self.tamagochis if t.name == name]