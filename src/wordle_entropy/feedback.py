"""Per-letter feedback for a guess against a target word."""

from __future__ import annotations

import re
from collections import Counter
from enum import Enum
from typing import NamedTuple, Tuple

from .config import WORD_LENGTH
from .errors import LengthMismatch


class LetterState(Enum):
    CORRECT = "correct"  # right letter, right position
    PRESENT = "present"  # in the word, elsewhere
    ABSENT = "absent"    # not in the word, or every copy already accounted for


class LetterFeedback(NamedTuple):
    letter: str
    state: LetterState


FeedbackPattern = Tuple[LetterFeedback, ...]

# presentation glyphs are fixed by state
GLYPHS = {
    LetterState.CORRECT: "\U0001f7e9",
    LetterState.PRESENT: "\U0001f7e8",
    LetterState.ABSENT: "⬜",
}

_TYPED_STATES = {
    "g": LetterState.CORRECT, "2": LetterState.CORRECT,
    "y": LetterState.PRESENT, "1": LetterState.PRESENT,
    "b": LetterState.ABSENT, "0": LetterState.ABSENT,
}


def normalize_word(word: str) -> str:
    """Lower-case *word* and check its length."""
    w = word.strip().lower()
    if len(w) != WORD_LENGTH:
        raise LengthMismatch(word, WORD_LENGTH)
    return w


# compute Wordle-style feedback for guess given the target word
def compute_feedback(guess: str, target: str) -> FeedbackPattern:
    """
    Exact positions are reserved first, so a repeated guess letter is only
    marked present while the target still has an unexplained copy of it.
    """
    guess = normalize_word(guess)
    target = normalize_word(target)

    states = [LetterState.ABSENT] * WORD_LENGTH
    # counts of target letters not yet consumed by a correct or present mark
    unconsumed = Counter(target)

    # first pass: exact matches
    for i, (g_ch, t_ch) in enumerate(zip(guess, target)):
        if g_ch == t_ch:
            states[i] = LetterState.CORRECT
            unconsumed[g_ch] -= 1

    # second pass: left to right over what is left
    for i, g_ch in enumerate(guess):
        if states[i] is LetterState.CORRECT:
            continue
        if unconsumed[g_ch] > 0:
            states[i] = LetterState.PRESENT
            unconsumed[g_ch] -= 1

    return tuple(LetterFeedback(ch, st) for ch, st in zip(guess, states))


def is_correct_guess(pattern: FeedbackPattern) -> bool:
    return all(fb.state is LetterState.CORRECT for fb in pattern)


def pattern_states(pattern: FeedbackPattern) -> Tuple[LetterState, ...]:
    return tuple(fb.state for fb in pattern)


def pattern_to_glyphs(pattern: FeedbackPattern) -> str:
    return "".join(GLYPHS[fb.state] for fb in pattern)


def pattern_to_string(pattern: FeedbackPattern) -> str:
    """Debug form, e.g. ``h:correct|o:absent|...``."""
    return "|".join(f"{fb.letter}:{fb.state.value}" for fb in pattern)


# parse_pattern converts what a human typed ('bygyb' or '02120') into a pattern for guess
def parse_pattern(text: str, guess: str) -> FeedbackPattern:
    guess = normalize_word(guess)
    s = text.strip().lower()
    if not (re.fullmatch(r"[gyb]{5}", s) or re.fullmatch(r"[012]{5}", s)):
        raise ValueError("Pattern must be 5 chars of [g,y,b] or [0,1,2]. Example: 'bygyb' or '02120'.")
    return tuple(LetterFeedback(ch, _TYPED_STATES[code]) for ch, code in zip(guess, s))

