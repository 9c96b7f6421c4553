"""Guess selection by maximum expected entropy."""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Iterable, List, Optional, Sequence

import tqdm

from .entropy import FeedbackFn, expected_entropy
from .errors import NoCandidatesAvailable
from .feedback import compute_feedback, normalize_word


@dataclass(frozen=True)
class ScoredGuess:
    guess: str
    expected_entropy: float

    def __str__(self) -> str:
        return f"{self.guess}  |  {self.expected_entropy:.4f}"


def _entropy_in_worker(guess: str, candidates: Sequence[str]) -> float:
    return expected_entropy(guess, candidates)


def _iter_scores(
    candidates: Sequence[str],
    pool: Sequence[str],
    feedback: FeedbackFn,
    show_progress: bool,
    workers: int,
) -> Iterable[ScoredGuess]:
    """Yield a ScoredGuess per pool word, always in pool order."""
    if workers > 1:
        # executor.map returns results in submission order, so tie-breaking
        # stays the same as the sequential scan
        score = partial(_entropy_in_worker, candidates=tuple(candidates))
        chunk = max(1, len(pool) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as ex:
            results = ex.map(score, pool, chunksize=chunk)
            if show_progress:
                results = tqdm.tqdm(results, total=len(pool), desc="Scoring guesses", unit="word")
            for g, h in zip(pool, results):
                yield ScoredGuess(g, h)
        return

    iterator = tqdm.tqdm(pool, desc="Scoring guesses", unit="word") if show_progress else pool
    for g in iterator:
        yield ScoredGuess(g, expected_entropy(g, candidates, feedback))


def rank_guesses(
    candidates: Sequence[str],
    pool: Sequence[str],
    top_k: Optional[int] = None,
    *,
    feedback: FeedbackFn = compute_feedback,
    show_progress: bool = False,
    workers: int = 1,
) -> List[ScoredGuess]:
    """Score every guess in *pool*, best first (stable for equal scores)."""
    if not pool:
        raise NoCandidatesAvailable("no guesses to rank: the pool is empty")
    scored = list(_iter_scores(candidates, pool, feedback, show_progress, workers))
    scored.sort(key=lambda s: s.expected_entropy, reverse=True)
    return scored if top_k is None else scored[:top_k]


def select_guess(
    attempt_index: int,
    candidates: Sequence[str],
    pool: Sequence[str],
    fixed_opening: Optional[str] = None,
    *,
    feedback: FeedbackFn = compute_feedback,
    show_progress: bool = False,
    workers: int = 1,
) -> str:
    """Pick the next guess.

    The fixed opening is returned unscored on attempt 0, a lone candidate is
    returned as is, otherwise the pool word with the highest expected entropy
    wins, ties going to whichever came first in *pool*.
    """
    if attempt_index == 0 and fixed_opening:
        return normalize_word(fixed_opening)
    if not pool:
        raise NoCandidatesAvailable("cannot select a guess from an empty pool")
    if len(candidates) == 1:
        return normalize_word(candidates[0])

    best: Optional[ScoredGuess] = None
    for s in _iter_scores(candidates, pool, feedback, show_progress, workers):
        # strict > keeps the first of equal scores
        if best is None or s.expected_entropy > best.expected_entropy:
            best = s
    return best.guess


def find_highest_entropy_guess(words: Sequence[str], feedback: FeedbackFn = compute_feedback) -> ScoredGuess:
    """Best guess when the pool and the candidates are the same list."""
    if not words:
        raise NoCandidatesAvailable("no valid words found in word list")
    return rank_guesses(words, words, top_k=1, feedback=feedback)[0]
