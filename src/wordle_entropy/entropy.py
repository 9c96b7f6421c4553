"""Probability model: how a guess partitions the candidate set.

For a guess g and candidate set C, every target t in C produces one
feedback pattern. Grouping C by pattern gives a distribution over
patterns; the expected information of g is the Shannon entropy of that
distribution,

    H(g) = sum(p * -log2(p))   over patterns with probability p

i.e. how many bits we expect to learn about which candidate is the
answer. See https://en.wikipedia.org/wiki/Entropy_(information_theory)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .errors import EmptyCandidateSet
from .feedback import FeedbackPattern, compute_feedback

FeedbackFn = Callable[[str, str], FeedbackPattern]


@dataclass(frozen=True)
class PatternStatistics:
    pattern: FeedbackPattern
    probability: float
    self_information: float
    # candidates that produce this pattern, in candidate scan order
    matching_candidates: Tuple[str, ...]


def entropy_from_counts(counts: Iterable[int], total: int) -> float:
    """Shannon entropy in bits, from bucket counts"""
    if total <= 0:
        return 0.0
    h = 0.0
    for c in counts:
        if c:
            p = c / total
            h -= p * math.log2(p)
    return h


def self_information(probability: float) -> float:
    # log2(0) is undefined; an observed pattern never has p == 0
    return -math.log2(probability) if probability > 0 else 0.0


def partition(
    guess: str,
    candidates: Sequence[str],
    feedback: FeedbackFn = compute_feedback,
) -> Dict[FeedbackPattern, List[str]]:
    """Group candidates by the pattern *guess* would get against each of them."""
    if not candidates:
        raise EmptyCandidateSet(f"cannot score {guess!r} against zero candidates")
    groups: Dict[FeedbackPattern, List[str]] = {}
    for target in candidates:
        groups.setdefault(feedback(guess, target), []).append(target)
    return groups


def score_guess(
    guess: str,
    candidates: Sequence[str],
    feedback: FeedbackFn = compute_feedback,
) -> List[PatternStatistics]:
    """Per-pattern probability and self-information for *guess*.

    Sorted by descending probability; equal probabilities keep the order in
    which their pattern was first seen. The order is for display only.
    """
    groups = partition(guess, candidates, feedback)
    total = len(candidates)
    stats = []
    for pattern, members in groups.items():
        p = len(members) / total
        stats.append(PatternStatistics(pattern, p, self_information(p), tuple(members)))
    # list.sort is stable and dicts keep insertion order
    stats.sort(key=lambda s: s.probability, reverse=True)
    return stats


def expected_entropy(
    guess: str,
    candidates: Sequence[str],
    feedback: FeedbackFn = compute_feedback,
) -> float:
    """Expected bits of information revealed by guessing *guess*.

    Same value as summing probability * self_information over
    score_guess(), without building the per-pattern records.
    """
    groups = partition(guess, candidates, feedback)
    return entropy_from_counts((len(g) for g in groups.values()), total=len(candidates))
