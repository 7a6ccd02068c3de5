import random

import pytest

from basicgames.word_jumble import PUZZLES, jumble, play


class ZeroRng:
    def randrange(self, n):
        return 0


@pytest.mark.parametrize("word", [w for w, _ in PUZZLES])
def test_jumble_keeps_letters(word):
    result = jumble(word, random.Random(3))
    assert sorted(result) == sorted(word)
    assert len(result) == len(word)


def test_jumble_with_self_swaps_leaves_word_unchanged():
    assert jumble("serendipity", ZeroRng()) == "serendipity"


def test_jumble_empty_word():
    assert jumble("", random.Random(1)) == ""


def test_play_hint_wrong_correct_then_quit():
    inputs = iter(["hint", "wrong", "banana", "quit"])
    output = []
    scores = play(inputs.__next__, output.append, ZeroRng())
    assert scores == [5]
    assert output[0] == "Put the letters of a word in the correct order. "
    assert "Here's a little help: a funky shaped fruit" in output
    assert "Wrong. Guess again." in output
    assert "You scored 5 points." in output
    assert output[-1] == "Thanks for playing. The correct answer was: banana"


def test_play_immediate_quit_scores_nothing():
    output = []
    assert play(iter(["quit"]).__next__, output.append, ZeroRng()) == []