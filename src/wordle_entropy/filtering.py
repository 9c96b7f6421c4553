"""Narrow a candidate list to the words consistent with observed feedback."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from .entropy import FeedbackFn
from .feedback import FeedbackPattern, compute_feedback, pattern_states


class GuessWithFeedback(NamedTuple):
    guess: str
    feedback: FeedbackPattern


# keep only words that would have produced exactly this pattern for guess
def filter_by_feedback(
    words: Iterable[str],
    guess: str,
    pattern: FeedbackPattern,
    feedback: FeedbackFn = compute_feedback,
) -> List[str]:
    # compare states only: letters are the guess's own and carry no information
    wanted = pattern_states(pattern)
    return [w for w in words if pattern_states(feedback(guess, w)) == wanted]


def narrow(
    candidates: Iterable[str],
    history: Sequence[GuessWithFeedback],
    feedback: FeedbackFn = compute_feedback,
) -> List[str]:
    """Apply every (guess, pattern) of *history* in order.

    An empty history returns the candidates as given; pass the full word
    list when starting a fresh game. Contradictory feedback simply leaves
    nothing, it is not an error.
    """
    remaining = list(candidates)
    for guess, pattern in history:
        if not remaining:
            break
        remaining = filter_by_feedback(remaining, guess, pattern, feedback)
    return remaining
