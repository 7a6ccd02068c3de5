import random

from basicgames.tamagochi_cli import run


def run_script(lines):
    output = []
    farm = run(iter(lines).__next__, output.append, random.Random(0))
    return farm, output


def test_quit_immediately_keeps_starting_pets():
    farm, output = run_script(["quit"])
    assert farm.roll_call() == ["Richard", "Willy"]
    assert output[0] == "Your Tamagochi farm contains 2 tamgochis. Here are their names: "


def test_feed_only_named_pet():
    farm, _ = run_script(["feed", "Willy", "quit"])
    (willy,) = farm.find("Willy")
    (richard,) = farm.find("Richard")
    assert willy.hunger < richard.hunger
    assert willy.boredom > richard.boredom


def test_play_lowers_boredom():
    farm, _ = run_script(["play", "Richard", "quit"])
    (richard,) = farm.find("Richard")
    (willy,) = farm.find("Willy")
    assert richard.boredom < willy.boredom


def test_listen_writes_pet_speech():
    farm, output = run_script(["listen", "Richard", "quit"])
    assert "Richard says: I'm hungry, I need to eat. Soon" in output
    (richard,) = farm.find("Richard")
    assert richard.hunger > farm.find("Willy")[0].hunger


def test_pass_ages_first_pet_only():
    farm, output = run_script(["pass", "quit"])
    assert "Richard stares at you blankly." in output
    assert farm.find("Richard")[0].mood() > farm.find("Willy")[0].mood()


def test_create_adds_pet():
    farm, output = run_script(["create", "Bob", "quit"])
    assert farm.roll_call() == ["Richard", "Willy", "Bob"]
    assert "A new Tamagochi named Bob has been added to your farm." in output


def test_unknown_choice_and_unknown_name_change_nothing():
    farm, _ = run_script(["dance", "feed", "Nobody", "quit"])
    assert [p.hunger for p in farm] == [5, 5]