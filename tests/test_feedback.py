import pytest

from wordle_entropy.errors import LengthMismatch
from wordle_entropy.feedback import (
    LetterState,
    compute_feedback,
    is_correct_guess,
    parse_pattern,
    pattern_states,
    pattern_to_glyphs,
    pattern_to_string,
)

C, P, A = LetterState.CORRECT, LetterState.PRESENT, LetterState.ABSENT


@pytest.mark.parametrize("word", ["house", "alley", "eerie", "slate"])
def test_word_against_itself_is_all_correct(word):
    assert pattern_states(compute_feedback(word, word)) == (C,) * 5


def test_no_shared_letters_is_all_absent():
    assert pattern_states(compute_feedback("chump", "slate")) == (A,) * 5


def test_duplicate_letter_alley_plane():
    assert pattern_states(compute_feedback("ALLEY", "PLANE")) == (P, C, A, P, A)


def test_exact_match_reserved_before_present():
    # the last e is exact, leaving one e of "there" for the first e only
    assert pattern_states(compute_feedback("eerie", "there")) == (P, A, P, A, C)


def test_exact_matches_use_up_repeated_letter():
    assert pattern_states(compute_feedback("lolly", "hello")) == (A, P, C, C, A)


def test_case_is_normalized():
    pattern = compute_feedback("HoUsE", "mouse")
    assert [fb.letter for fb in pattern] == list("house")
    assert pattern_states(pattern) == (A, C, C, C, C)


@pytest.mark.parametrize("guess, target", [("toolong", "house"), ("hous", "house"), ("house", ""), ("", "")])
def test_length_mismatch(guess, target):
    with pytest.raises(LengthMismatch):
        compute_feedback(guess, target)


def test_is_correct_guess():
    assert is_correct_guess(parse_pattern("ggggg", "house"))
    assert not is_correct_guess(compute_feedback("mouse", "house"))


def test_glyphs_and_debug_string():
    pattern = compute_feedback("alley", "plane")
    assert pattern_to_glyphs(pattern) == "\U0001f7e8\U0001f7e9⬜\U0001f7e8⬜"
    assert pattern_to_string(pattern).startswith("a:present|l:correct|l:absent")


@pytest.mark.parametrize("typed", ["ygbyb", "YGBYB", "12010"])
def test_parse_pattern(typed):
    assert parse_pattern(typed, "alley") == compute_feedback("alley", "plane")


@pytest.mark.parametrize("typed", ["ygby", "ygbyx", "hello"])
def test_parse_pattern_rejects_garbage(typed):
    with pytest.raises(ValueError):
        parse_pattern(typed, "alley")
