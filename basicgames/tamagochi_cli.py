"""Console game for looking after a farm of virtual pets."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

from basicgames.tamagochi import Farm, Tamagochi

_ACTIONS = {
    "listen": "listen to",
    "feed": "feed",
    "play": "play with",
}


def _write_roll_call(farm: Farm, write: Callable[[str], object]) -> None:
    for name in farm.roll_call():
        write(name)


def run(read: Callable[[], str] = input,
        write: Callable[[str], object] = print,
        rng: random.Random | None = None) -> Farm:
    """Run the interaction loop until the player quits; return the farm."""
    rng = rng or random.Random()
    richard = Tamagochi("Richard")
    willy = Tamagochi("Willy")
    farm = Farm()
    farm.add(richard)
    farm.add(willy)

    write(f"Your Tamagochi farm contains {len(farm)} tamgochis. Here are their names: ")
    _write_roll_call(farm, write)
    for pet in (richard, willy):
        write(f"{pet.name}'s hunger level is: {pet.hunger}")
        write(f"{pet.name}'s boredom level is: {pet.boredom}")

    while True:
        _write_roll_call(farm, write)
        write("Do you want to listen to your Tamagochi, feed it, play with it, pass some "
              "time, create a new Tamagochi or quit the game?")
        write("Please type your choice (listen, feed, play, pass, create, quit)")
        choice = read().strip()

        if choice in _ACTIONS:
            write(f"Which Tamagochi do you want to {_ACTIONS[choice]}? "
                  "Please type in your answer.")
            _write_roll_call(farm, write)
            for pet in farm.find(read().strip()):
                if choice == "listen":
                    for line in pet.talk(rng):
                        write(line)
                elif choice == "feed":
                    pet.eat()
                else:
                    pet.play()
        elif choice == "pass":
            write(f"{richard.name} stares at you blankly.")
            richard.pass_time()
        elif choice == "create":
            write("Please enter a name for your new Tamagochi.")
            pet = Tamagochi(read().strip())
            farm.add(pet)
            write(f"A new Tamagochi named {pet.name} has been added to your farm.")
            write(f"Your farm now contains {len(farm)} tamgochis. Here are their names: ")
            _write_roll_call(farm, write)
        elif choice == "quit":
            return farm


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive session."""
    try:
        run(input, print, random.Random())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())