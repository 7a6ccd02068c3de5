from basicgames.tamagochi import FACTS, Farm, Tamagochi


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        assert self.value < n
        return self.value


def test_new_pet_starts_at_five():
    pet = Tamagochi("Richard")
    assert (pet.name, pet.hunger, pet.boredom) == ("Richard", 5, 5)


def test_pass_time_raises_both_levels():
    pet = Tamagochi("Willy")
    pet.pass_time()
    assert pet.hunger == pet.boredom
    assert pet.hunger > 5


def test_eat_lowers_hunger_and_passes_time():
    pet = Tamagochi("Willy")
    before_hunger, before_boredom = pet.hunger, pet.boredom
    pet.eat()
    assert pet.hunger < before_hunger
    assert pet.boredom == before_boredom + 1


def test_play_lowers_boredom_and_passes_time():
    pet = Tamagochi("Willy")
    before_hunger, before_boredom = pet.hunger, pet.boredom
    pet.play()
    assert pet.boredom < before_boredom
    assert pet.hunger == before_hunger + 1


def test_mood_is_sum_of_levels():
    pet = Tamagochi("Willy")
    pet.eat()
    pet.pass_time()
    assert pet.mood() == pet.hunger + pet.boredom


def test_talk_at_start_gives_fact_and_passes_time():
    pet = Tamagochi("Richard")
    lines = pet.talk(FixedRng(4))
    assert lines[0] == "Richard says: I'm hungry, I need to eat. Soon"
    assert lines[2] == f"Richard says: {FACTS[4]}"
    assert len(lines) == 4
    assert pet.hunger > 5


def test_talk_when_content():
    pet = Tamagochi("Richard")
    pet.eat()
    pet.play()
    lines = pet.talk(FixedRng(0))
    assert lines[0] == "Richard says: I'm a bit peckish, no big deal."
    assert lines[3] == ("Richard is lying, it's unemployed and completly relies "
                        "on you to provide.")


def test_talk_when_neglected():
    pet = Tamagochi("Richard")
    for _ in range(3):
        pet.pass_time()
    lines = pet.talk(FixedRng(0))
    assert lines[0] == "Richard says: I'm starving, I'm gonna eat myself soon."
    assert lines[2] == "Richardsays: I have started to grasp my own mortality."


def test_farm_roll_call_and_find():
    farm = Farm()
    richard = Tamagochi("Richard")
    farm.add(richard)
    farm.add(Tamagochi("Willy"))
    assert farm.roll_call() == ["Richard", "Willy"]
    assert len(farm) == 2
    assert farm.find("Richard") == [richard]
    assert farm.find("Nobody") == []