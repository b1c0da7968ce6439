import pytest

from puzzlebox.score import score_of_string


def test_zaz():
    assert score_of_string("zaz") == 50


def test_hello():
    assert score_of_string("hello") == 13


@pytest.mark.parametrize("s", ["", "q"])
def test_short_strings_score_nothing(s):
    assert score_of_string(s) == 0


def test_repeated_character_scores_nothing():
    assert score_of_string("aaaaaa") == 0


@pytest.mark.parametrize("s", ["abcxyz", "Hello, World", "zaz"])
def test_reversal_keeps_score(s):
    assert score_of_string(s) == score_of_string(s[::-1])


def test_adjacent_letters():
    s = "abcdef"
    assert score_of_string(s) == len(s) - 1