"""Entropy-maximising solver: score, guess, filter, repeat."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_MAX_ATTEMPTS, DEFAULT_OPENING
from .entropy import PatternStatistics, expected_entropy, score_guess
from .feedback import (
    FeedbackPattern,
    compute_feedback,
    is_correct_guess,
    normalize_word,
    pattern_states,
)
from .filtering import GuessWithFeedback, narrow
from .log import LogFn
from .selection import ScoredGuess, rank_guesses, select_guess
from .words import WordList, load_default_word_list


class SolveState(Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class AttemptRecord:
    guess: str
    feedback: FeedbackPattern
    remaining_candidates: int


@dataclass(frozen=True)
class SolveTrace:
    target_word: str
    attempts: Tuple[AttemptRecord, ...]
    solved: bool

    @property
    def state(self) -> SolveState:
        return SolveState.SOLVED if self.solved else SolveState.EXHAUSTED

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def first_guess(self) -> Optional[str]:
        return self.attempts[0].guess if self.attempts else None

    def to_dict(self) -> dict:
        return {
            "target": self.target_word,
            "solved": self.solved,
            "state": self.state.value,
            "attempts": [
                {
                    "guess": a.guess,
                    "feedback": [s.value for s in pattern_states(a.feedback)],
                    "remaining": a.remaining_candidates,
                }
                for a in self.attempts
            ],
        }


# solver class for Wordle using entropy maximization
class WordleEntropySolver:
    def __init__(
        self,
        word_list: WordList,
        fixed_opening: Optional[str] = DEFAULT_OPENING,
        *,
        workers: int = 1,
        log: Optional[LogFn] = None,
    ):
        self.word_list = word_list
        self.fixed_opening = normalize_word(fixed_opening) if fixed_opening else None
        self.workers = workers
        self._log = log

        # Cache per (guess, target) feedback, scoring and filtering both go
        # through it, so narrowing by a guess that was just scored is lookups only.
        self._fb_cache: Dict[Tuple[str, str], FeedbackPattern] = {}

    def _emit(self, msg: str) -> None:
        if self._log is not None:
            self._log(msg)

    # get feedback pattern for guess and target, with caching
    def feedback(self, guess: str, target: str) -> FeedbackPattern:
        key = (guess, target)
        if key in self._fb_cache:
            return self._fb_cache[key]
        p = compute_feedback(guess, target)
        self._fb_cache[key] = p
        return p

    def candidates_for(self, history: Sequence[GuessWithFeedback]) -> List[str]:
        """Words from the full list still consistent with every entry of *history*."""
        return narrow(self.word_list.words, history, self.feedback)

    def score_guess(self, guess: str, candidates: Optional[Sequence[str]] = None) -> List[PatternStatistics]:
        guess = normalize_word(guess)
        pool = self.word_list.words if candidates is None else candidates
        return score_guess(guess, pool, self.feedback)

    def expected_entropy(self, guess: str, candidates: Optional[Sequence[str]] = None) -> float:
        guess = normalize_word(guess)
        pool = self.word_list.words if candidates is None else candidates
        return expected_entropy(guess, pool, self.feedback)

    def select_guess(self, attempt_index: int, candidates: Sequence[str], show_progress: bool = False) -> str:
        # pool is the remaining candidates themselves, not the whole dictionary
        return select_guess(
            attempt_index,
            candidates,
            candidates,
            self.fixed_opening,
            feedback=self.feedback,
            show_progress=show_progress,
            workers=self.workers,
        )

    # suggest top_k guesses by entropy
    def suggest(
        self,
        history: Sequence[GuessWithFeedback] = (),
        top_k: int = 10,
        guess_space: str = "candidates",
        show_progress: bool = False,
    ) -> List[ScoredGuess]:
        """
        guess_space: "candidates" (remaining words only) or "all" (whole list)
        """
        candidates = self.candidates_for(history)
        if not candidates:
            return []
        if len(candidates) == 1:
            return [ScoredGuess(candidates[0], 0.0)]

        if not history and self.fixed_opening is not None:
            h = self.expected_entropy(self.fixed_opening, candidates)
            return [ScoredGuess(self.fixed_opening, h)]

        pool = self.word_list.words if guess_space == "all" else candidates
        return rank_guesses(
            candidates,
            pool,
            top_k,
            feedback=self.feedback,
            show_progress=show_progress,
            workers=self.workers,
        )

    def solve(self, target: str, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> SolveTrace:
        """Play against a known *target* until solved or out of attempts."""
        target = normalize_word(target)
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        history: List[GuessWithFeedback] = []
        attempts: List[AttemptRecord] = []
        candidates = list(self.word_list.words)
        state = SolveState.IN_PROGRESS

        for attempt_index in range(max_attempts):
            # the fixed opening needs no candidates to be played
            if not candidates and not (attempt_index == 0 and self.fixed_opening):
                # contradictory feedback or a target outside the list: stuck
                self._emit(f"solver: no candidates left after {attempt_index} attempts")
                break

            self._emit(f"turn {attempt_index + 1}: candidates remaining = {len(candidates)}")
            guess = self.select_guess(attempt_index, candidates)
            pattern = self.feedback(guess, target)
            history.append(GuessWithFeedback(guess, pattern))

            if is_correct_guess(pattern):
                state = SolveState.SOLVED
                remaining: List[str] = []
            else:
                remaining = narrow(candidates, history[-1:], self.feedback)

            attempts.append(AttemptRecord(guess, pattern, len(remaining)))
            self._emit(f"turn {attempt_index + 1}: guess '{guess}' -> {len(candidates)} -> {len(remaining)}")

            if state is SolveState.SOLVED:
                break
            candidates = remaining

        if state is not SolveState.SOLVED:
            state = SolveState.EXHAUSTED
        self._emit(f"solver: {target} {state.value} in {len(attempts)} attempts")
        return SolveTrace(target, tuple(attempts), state is SolveState.SOLVED)


def solve_wordle(
    target: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    word_list: Optional[WordList] = None,
    fixed_opening: Optional[str] = DEFAULT_OPENING,
) -> SolveTrace:
    """One-shot convenience: solve *target* against the bundled list by default."""
    words = word_list if word_list is not None else load_default_word_list()
    return WordleEntropySolver(words, fixed_opening).solve(target, max_attempts)
