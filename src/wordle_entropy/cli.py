"""wordle-entropy command line.

Examples:
  wordle-entropy entropy HOUSE
  wordle-entropy compare HOUSE ADIEU
  wordle-entropy solve HOUSE --json trace.json
  wordle-entropy suggest            # you play elsewhere, type the feedback here
  wordle-entropy play               # play against a random word, type 'hint' for help
  wordle-entropy daily --date 2024-06-01
  wordle-entropy simulate --limit 200 --plot results.png
  wordle-entropy opening            # compute and cache the best opening for --words
"""

from __future__ import annotations

import argparse
import json
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_MAX_ATTEMPTS, DEFAULT_OPENING, WORD_LENGTH
from .daily import fetch_daily_puzzle
from .errors import DailyPuzzleError, WordleError, WordListError
from .feedback import (
    compute_feedback,
    is_correct_guess,
    parse_pattern,
    pattern_to_glyphs,
)
from .filtering import GuessWithFeedback
from .log import make_loggers
from .opening import rank_openings
from .simulate import SimulationReport, plot_results, simulate, summarize
from .solver import SolveTrace, WordleEntropySolver
from .words import WordList, load_default_word_list, load_words_from_file


def _word_error(word: str) -> Optional[str]:
    if len(word) != WORD_LENGTH:
        return f'Word "{word.upper()}" must be exactly {WORD_LENGTH} letters long'
    if not word.isalpha():
        return f'Word "{word.upper()}" must contain only letters'
    return None


def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    tmp.replace(path)


def _print_trace(trace: SolveTrace, max_attempts: int) -> None:
    print(f"\nAttempts: {len(trace.attempts)}/{max_attempts}")
    print(f"Solved: {'Yes' if trace.solved else 'No'}\n")
    for i, a in enumerate(trace.attempts, 1):
        print(f"{i}. {a.guess.upper()} {pattern_to_glyphs(a.feedback)} ({a.remaining_candidates} words remaining)")
    if trace.solved:
        n = len(trace.attempts)
        print(f"\nSolved in {n} attempt{'' if n == 1 else 's'}!")
    else:
        print(f"\nFailed to solve within {max_attempts} attempts.")
        if trace.attempts:
            left = trace.attempts[-1].remaining_candidates
            print(f"{left} possible word{'' if left == 1 else 's'} remaining.")


def _make_solver(args, words: WordList, log) -> WordleEntropySolver:
    opening = None if args.no_opening else args.opening
    return WordleEntropySolver(words, opening, workers=args.workers, log=log)


def cmd_entropy(args, words: WordList, log) -> int:
    word = args.word.lower()
    err = _word_error(word)
    if err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    solver = _make_solver(args, words, log)
    print(f"\nCalculating entropy for word: {word.upper()}")
    print("=" * 40)
    start = time.time()
    stats = solver.score_guess(word)
    h = sum(s.probability * s.self_information for s in stats)
    elapsed_ms = (time.time() - start) * 1000

    print(f"Average Entropy: {h:.4f} bits")
    print(f"Calculation time: {elapsed_ms:.0f}ms")
    print(f"Number of possible feedback patterns: {len(stats)}")
    print(f"\nTop {min(args.top, len(stats))} most likely feedback patterns:")
    print("-" * 40)
    for i, s in enumerate(stats[: args.top], 1):
        print(f"{i}. {pattern_to_glyphs(s.pattern)} ({s.probability * 100:.2f}% - {s.self_information:.2f} bits)")
    return 0


def cmd_compare(args, words: WordList, log) -> int:
    pair = [args.word1.lower(), args.word2.lower()]
    for w in pair:
        err = _word_error(w)
        if err:
            print(f"Error: {err}", file=sys.stderr)
            return 1

    solver = _make_solver(args, words, log)
    print(f"\nComparing entropy: {pair[0].upper()} vs {pair[1].upper()}")
    print("=" * 50)
    h = [solver.expected_entropy(w) for w in pair]
    for w, bits in zip(pair, h):
        print(f"{w.upper()}: {bits:.4f} bits")

    better = 0 if h[0] >= h[1] else 1
    print("-" * 50)
    print(f"Better choice: {pair[better].upper()} ({h[better]:.4f} bits)")
    diff = abs(h[0] - h[1])
    if min(h) > 0:
        print(f"Difference: {diff:.4f} bits ({diff / min(h) * 100:.2f}% improvement)")
    else:
        print(f"Difference: {diff:.4f} bits")
    return 0


def cmd_solve(args, words: WordList, log) -> int:
    target = args.target.lower()
    err = _word_error(target)
    if err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    solver = _make_solver(args, words, log)
    print(f"\nSolving for target word: {target.upper()}")
    print("=" * 50)
    trace = solver.solve(target, args.max_attempts)
    _print_trace(trace, args.max_attempts)

    if args.json:
        out_path = Path(args.json).expanduser()
        _write_json(out_path, trace.to_dict())
        if log is not None:
            log(f"result: wrote {out_path}")
    return 0 if trace.solved else 4


def cmd_suggest(args, words: WordList, log) -> int:
    solver = _make_solver(args, words, log)
    history: List[GuessWithFeedback] = []

    print("\n=== Wordle Entropy Assistant ===")
    print(f"Words: {len(words)}")
    print("Feedback input: 5 letters [g,y,b] or digits [2,1,0]. Example: bygyb or 02120")
    print("Type 'quit' to exit.\n")

    turn = 1
    while True:
        candidates = solver.candidates_for(history)
        n = len(candidates)
        if n == 0:
            print("No candidates left. Either the word list doesn't match the game's dictionary,")
            print("or a feedback pattern was mistyped.")
            return 5

        print(f"Turn {turn} | Remaining candidates: {n}")
        if n <= 20:
            print("Candidates:", " ".join(candidates))

        suggestions = solver.suggest(history, top_k=args.top, guess_space=args.guess_space,
                                     show_progress=not args.no_progress)
        best_word = suggestions[0].guess
        print("\nTop suggestions (guess | expected bits):")
        for s in suggestions:
            print(f"  {s}")
        print(f"\nSuggested guess: {best_word}\n")

        if n == 1:
            print(f"There's only one word left, the answer is {best_word}!\n")
            return 0

        guess = input("Enter the guess you used (or press Enter to use suggested): ").strip().lower()
        if guess == "":
            guess = best_word
        if guess == "quit":
            return 0
        err = _word_error(guess)
        if err:
            print(f"{err}\n")
            continue

        pat_s = input("Enter the feedback pattern (g/y/b or 2/1/0): ").strip().lower()
        if pat_s == "quit":
            return 0
        try:
            pattern = parse_pattern(pat_s, guess)
        except ValueError as e:
            print(f"{e}\n")
            continue

        if is_correct_guess(pattern):
            print(f"Solved in {turn} turns.\n")
            return 0

        history.append(GuessWithFeedback(guess, pattern))
        print("")
        turn += 1


def cmd_play(args, words: WordList, log) -> int:
    if args.solution:
        solution = args.solution.lower()
        err = _word_error(solution)
        if err:
            print(f"Error: {err}", file=sys.stderr)
            return 1
    else:
        solution = random.Random(args.seed).choice(words.words)

    solver = _make_solver(args, words, log)
    history: List[GuessWithFeedback] = []

    print("Welcome to Wordle!")
    print("-" * 40)
    print(f"Enter {WORD_LENGTH}-letter words to guess the solution.")
    print("\U0001f7e9 = correct letter in correct position")
    print("\U0001f7e8 = correct letter in wrong position")
    print("⬜ = letter not in word")
    print("Type 'hint' for a suggestion, 'quit' to exit")
    print("-" * 40)

    while len(history) < args.max_attempts:
        attempt = len(history) + 1
        print(f"\nAttempt {attempt}/{args.max_attempts} ({args.max_attempts - len(history)} remaining)")
        guess = input("Enter your guess: ").strip().lower()

        if guess == "quit":
            print("\nThanks for playing!")
            return 0
        if guess == "hint":
            suggestions = solver.suggest(history, top_k=1)
            if suggestions:
                left = len(solver.candidates_for(history))
                print(f"Hint: try {suggestions[0].guess.upper()} "
                      f"({suggestions[0].expected_entropy:.2f} bits, {left} words possible)")
            else:
                print("No word in the list matches the feedback so far.")
            continue

        err = _word_error(guess)
        if err:
            print(err)
            continue
        if guess not in words:
            print("Word not in word list. Try another word.")
            continue

        pattern = compute_feedback(guess, solution)
        history.append(GuessWithFeedback(guess, pattern))
        print(f"\n{guess.upper()} {pattern_to_glyphs(pattern)}")
        if is_correct_guess(pattern):
            print(f"\nYou got it in {attempt} attempt{'' if attempt == 1 else 's'}!")
            return 0

    print(f"\nOut of attempts. The word was {solution.upper()}.")
    return 0


def cmd_daily(args, words: WordList, log) -> int:
    try:
        puzzle = fetch_daily_puzzle(args.date, log=log)
    except DailyPuzzleError as e:
        print(str(e), file=sys.stderr)
        return 3

    print(f"Wordle #{puzzle.id} ({puzzle.print_date})")
    if args.reveal:
        print(f"Solution: {puzzle.solution.upper()}")
    if puzzle.solution not in words and log is not None:
        log(f"daily: solution is not in the loaded word list ({len(words)} words)")

    solver = _make_solver(args, words, log)
    trace = solver.solve(puzzle.solution, args.max_attempts)
    _print_trace(trace, args.max_attempts)
    return 0 if trace.solved else 4


def cmd_simulate(args, words: WordList, log) -> int:
    if args.secrets:
        secrets = list(load_words_from_file(args.secrets).words)
    else:
        secrets = list(words.words)
    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]

    opening = None if args.no_opening else args.opening
    traces = simulate(
        secrets,
        words,
        max_attempts=args.max_attempts,
        fixed_opening=opening,
        show_progress=not args.no_progress,
        log=log,
    )
    print(summarize(traces))
    if args.json:
        _write_json(Path(args.json).expanduser(), SimulationReport.from_traces(traces).to_dict())
        if log is not None:
            log(f"result: wrote {args.json}")

    if args.plot:
        try:
            plot_results(traces=traces, max_attempts=args.max_attempts, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2
    return 0


def cmd_opening(args, words: WordList, log) -> int:
    ranking = rank_openings(
        words,
        args.cache,
        show_progress=not args.no_progress,
        workers=args.workers,
        log=log,
    )
    print("\nBest openings (guess | expected bits):")
    for s in ranking[: args.top]:
        print(f"  {s}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-entropy", description="Wordle solver by expected information gain.")
    ap.add_argument("--words", type=str, default=None,
                    help="Word list (.txt one per line, or .csv with a 'word' column). Defaults to the bundled list.")
    ap.add_argument("--opening", type=str, default=DEFAULT_OPENING, help="Fixed first guess.")
    ap.add_argument("--no-opening", action="store_true", help="Score the first guess like any other.")
    ap.add_argument("--workers", type=int, default=1, help="Processes used to score guesses.")
    ap.add_argument("--verbose", action="store_true", help="Print progress messages.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("entropy", help="Expected entropy of one word against the whole list.")
    p.add_argument("word")
    p.add_argument("--top", type=int, default=5, help="How many patterns to show.")
    p.set_defaults(func=cmd_entropy)

    p = sub.add_parser("compare", help="Compare the expected entropy of two words.")
    p.add_argument("word1")
    p.add_argument("word2")
    p.set_defaults(func=cmd_compare)

    p = sub.add_parser("solve", help="Solve for a known target word.")
    p.add_argument("target")
    p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    p.add_argument("--json", type=str, default=None, help="Write the attempt trace to this JSON file.")
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser("suggest", help="Interactive assistant for a game played elsewhere.")
    p.add_argument("--top", type=int, default=10, help="How many suggestions to show each turn.")
    p.add_argument("--guess-space", choices=["candidates", "all"], default="candidates",
                   help="Score guesses from remaining candidates only or from the whole list.")
    p.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    p.set_defaults(func=cmd_suggest)

    p = sub.add_parser("play", help="Play an interactive game.")
    p.add_argument("--solution", type=str, default=None, help="Solution word (random if omitted).")
    p.add_argument("--seed", type=int, default=None, help="Seed for picking the random solution.")
    p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    p.set_defaults(func=cmd_play)

    p = sub.add_parser("daily", help="Fetch the daily puzzle and solve it.")
    p.add_argument("--date", type=str, default=None, help="YYYY-MM-DD (default: today).")
    p.add_argument("--reveal", action="store_true", help="Print the solution before solving.")
    p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    p.set_defaults(func=cmd_daily)

    p = sub.add_parser("simulate", help="Solve many words and print statistics.")
    p.add_argument("--secrets", type=str, default=None, help="Secrets to test (defaults to the word list).")
    p.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    p.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    p.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    p.add_argument("--json", type=str, default=None, help="Write the aggregate report to this JSON file.")
    p.set_defaults(func=cmd_simulate)

    p = sub.add_parser("opening", help="Compute (and cache) the best opening for the word list.")
    p.add_argument("--cache", type=str, default=None, help="Cache file path.")
    p.add_argument("--top", type=int, default=10)
    p.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    p.set_defaults(func=cmd_opening)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log, log_debug = make_loggers(args.verbose, args.debug)

    try:
        words = load_words_from_file(args.words) if args.words else load_default_word_list()
    except WordListError as e:
        print(str(e), file=sys.stderr)
        return 2
    if not words:
        print(f"Loaded 0 usable words from {args.words}. Check the file.", file=sys.stderr)
        return 2
    if log_debug is not None:
        log_debug(f"words: loaded {len(words)} from {args.words or 'bundled list'}")

    try:
        return args.func(args, words, log)
    except (WordleError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
