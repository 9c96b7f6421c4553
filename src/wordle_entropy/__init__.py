"""Wordle solver by expected information gain."""

from .entropy import PatternStatistics, entropy_from_counts, expected_entropy, score_guess
from .errors import (
    DailyPuzzleError,
    EmptyCandidateSet,
    LengthMismatch,
    NoCandidatesAvailable,
    WordleError,
    WordListError,
)
from .feedback import (
    FeedbackPattern,
    LetterFeedback,
    LetterState,
    compute_feedback,
    is_correct_guess,
    parse_pattern,
    pattern_to_glyphs,
)
from .filtering import GuessWithFeedback, filter_by_feedback, narrow
from .selection import ScoredGuess, find_highest_entropy_guess, rank_guesses, select_guess
from .solver import AttemptRecord, SolveState, SolveTrace, WordleEntropySolver, solve_wordle
from .words import WordList, load_default_word_list, load_words_from_file

__version__ = "2.0.0"

__all__ = [
    "AttemptRecord",
    "DailyPuzzleError",
    "EmptyCandidateSet",
    "FeedbackPattern",
    "GuessWithFeedback",
    "LengthMismatch",
    "LetterFeedback",
    "LetterState",
    "NoCandidatesAvailable",
    "PatternStatistics",
    "ScoredGuess",
    "SolveState",
    "SolveTrace",
    "WordList",
    "WordListError",
    "WordleEntropySolver",
    "WordleError",
    "compute_feedback",
    "entropy_from_counts",
    "expected_entropy",
    "filter_by_feedback",
    "find_highest_entropy_guess",
    "is_correct_guess",
    "load_default_word_list",
    "load_words_from_file",
    "narrow",
    "parse_pattern",
    "pattern_to_glyphs",
    "rank_guesses",
    "score_guess",
    "select_guess",
    "solve_wordle",
]
