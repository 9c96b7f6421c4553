import pytest

from wordle_entropy.entropy import expected_entropy
from wordle_entropy.errors import LengthMismatch, NoCandidatesAvailable
from wordle_entropy.selection import ScoredGuess, find_highest_entropy_guess, rank_guesses, select_guess


def test_fixed_opening_returned_on_first_attempt(small_words):
    assert select_guess(0, small_words.words, small_words.words, "ADIEU") == "adieu"


def test_fixed_opening_ignored_after_first_attempt(small_words):
    best = rank_guesses(small_words.words, small_words.words)[0].guess
    assert select_guess(1, small_words.words, small_words.words, "adieu") == best


def test_bad_opening_rejected(small_words):
    with pytest.raises(LengthMismatch):
        select_guess(0, small_words.words, small_words.words, "toolong")


def test_single_candidate_returned_without_scoring():
    assert select_guess(3, ["house"], ["house"]) == "house"


def test_single_candidate_is_lower_cased():
    assert select_guess(1, ["HOUSE"], ["HOUSE"]) == "house"


def test_empty_pool():
    with pytest.raises(NoCandidatesAvailable):
        select_guess(2, ["house"], [])
    with pytest.raises(NoCandidatesAvailable):
        select_guess(0, [], [])
    with pytest.raises(NoCandidatesAvailable):
        rank_guesses(["house"], [])
    with pytest.raises(NoCandidatesAvailable):
        find_highest_entropy_guess([])


def test_maximum_entropy_wins(small_words):
    chosen = select_guess(1, small_words.words, small_words.words)
    h = expected_entropy(chosen, small_words.words)
    assert all(expected_entropy(g, small_words.words) <= h for g in small_words.words)


def test_ties_go_to_first_in_pool():
    candidates = ["abcde", "fghij"]
    assert select_guess(1, candidates, ["fghij", "abcde"]) == "fghij"
    assert select_guess(1, candidates, ["abcde", "fghij"]) == "abcde"


def test_rank_is_sorted_and_stable():
    candidates = ["abcde", "fghij", "house"]
    ranked = rank_guesses(candidates, ["fghij", "zzzzz", "abcde"])
    assert [s.guess for s in ranked] == ["fghij", "abcde", "zzzzz"]
    assert ranked[-1].expected_entropy == 0.0


def test_rank_top_k(small_words):
    assert len(rank_guesses(small_words.words, small_words.words, 3)) == 3


def test_parallel_scan_matches_sequential(small_words):
    seq = rank_guesses(small_words.words, small_words.words)
    par = rank_guesses(small_words.words, small_words.words, workers=2)
    assert par == seq


def test_find_highest_entropy_guess(small_words):
    best = find_highest_entropy_guess(small_words.words)
    assert isinstance(best, ScoredGuess)
    assert best == rank_guesses(small_words.words, small_words.words)[0]
    assert str(best).startswith(best.guess)
