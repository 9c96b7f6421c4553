"""Batch simulations of the solver and summary statistics.

matplotlib is only needed for plot_results (``pip install wordle-entropy[plot]``).
"""

from __future__ import annotations

import statistics
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import tqdm

from .config import DEFAULT_MAX_ATTEMPTS, DEFAULT_OPENING
from .log import LogFn
from .solver import SolveTrace, WordleEntropySolver
from .words import WordList

# how many unsolved targets the summary names
FAILED_EXAMPLES = 10


def simulate(
    secrets: Sequence[str],
    word_list: WordList,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    fixed_opening: Optional[str] = DEFAULT_OPENING,
    show_progress: bool = False,
    log: Optional[LogFn] = None,
) -> List[SolveTrace]:
    # one solver for the whole run so the feedback cache is shared
    solver = WordleEntropySolver(word_list, fixed_opening)
    iterator = tqdm.tqdm(secrets, desc="Simulating", unit="game") if show_progress else secrets
    traces = []
    for secret in iterator:
        trace = solver.solve(secret, max_attempts)
        if log is not None:
            log(f"simulate: {trace.target_word} {trace.state.value} after {trace.attempt_count}")
        traces.append(trace)
    return traces


@dataclass(frozen=True)
class SimulationReport:
    """Aggregate of a batch of solve traces."""

    games: int
    # attempt count of every solved game, in trace order
    solved_attempts: Tuple[int, ...]
    failed_targets: Tuple[str, ...]
    # (first guess, games) pairs, most frequent first
    openings: Tuple[Tuple[str, int], ...]

    @classmethod
    def from_traces(cls, traces: Iterable[SolveTrace]) -> "SimulationReport":
        traces = list(traces)
        openings = Counter(t.first_guess for t in traces if t.first_guess)
        return cls(
            games=len(traces),
            solved_attempts=tuple(t.attempt_count for t in traces if t.solved),
            failed_targets=tuple(t.target_word for t in traces if not t.solved),
            openings=tuple(openings.most_common()),
        )

    @property
    def solved(self) -> int:
        return len(self.solved_attempts)

    @property
    def failed(self) -> int:
        return len(self.failed_targets)

    def rate(self, n: int) -> float:
        return n / self.games * 100.0 if self.games else 0.0

    def histogram(self, max_attempts: Optional[int] = None) -> Dict[int, int]:
        """Solved games per attempt count.

        With *max_attempts* every count from 1 up to it is present, zero or not.
        """
        counts = Counter(self.solved_attempts)
        if max_attempts is None:
            return dict(sorted(counts.items()))
        return {n: counts.get(n, 0) for n in range(1, max_attempts + 1)}

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "solved": self.solved,
            "failed": self.failed,
            "histogram": {str(n): c for n, c in self.histogram().items()},
            "openings": dict(self.openings),
            "failed_targets": list(self.failed_targets),
        }


def summarize(traces: Iterable[SolveTrace]) -> str:
    report = SimulationReport.from_traces(traces)
    if not report.games:
        return "No results."

    rows = [
        ("games", str(report.games)),
        ("solved", f"{report.solved} ({report.rate(report.solved):.2f}%)"),
        ("failed", f"{report.failed} ({report.rate(report.failed):.2f}%)"),
    ]
    if report.solved_attempts:
        rows.append((
            "attempts",
            f"mean {statistics.mean(report.solved_attempts):.3f}, "
            f"median {statistics.median(report.solved_attempts):.1f}",
        ))
        rows.append(("histogram", " ".join(f"{n}:{c}" for n, c in report.histogram().items())))
    if report.openings:
        guess, count = report.openings[0]
        rows.append(("opening", f"{guess} in {count} of {report.games} games"))
    if report.failed_targets:
        rows.append(("unsolved", ", ".join(report.failed_targets[:FAILED_EXAMPLES])))

    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}  {value}" for label, value in rows)


def plot_results(*, traces: List[SolveTrace], max_attempts: int, out_path: str) -> None:
    # Import matplotlib only if plotting is requested.
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    report = SimulationReport.from_traces(traces)
    hist = report.histogram(max_attempts)

    # one bar per attempt count, then a final bar for unsolved games
    labels = [str(n) for n in hist] + ["fail"]
    heights = list(hist.values()) + [report.failed]
    colors = ["C0"] * len(hist) + ["C3"]

    fig, ax = plt.subplots(figsize=(10, 4.5))
    bars = ax.bar(range(len(labels)), heights, color=colors)
    ax.bar_label(bars)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels)
    ax.set_xlabel("Attempts to solve")
    ax.set_ylabel("# games")
    ax.set_title(f"Entropy solver: {report.solved}/{report.games} solved ({report.rate(report.solved):.1f}%)")

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
