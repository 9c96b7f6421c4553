"""Module-level defaults. Override them from the CLI flags, not by editing here."""

from __future__ import annotations

from pathlib import Path

WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6

# established opener for the bundled list; injectable, see WordleEntropySolver
DEFAULT_OPENING = "slate"

PROBABILITY_TOLERANCE = 1e-6

DAILY_PUZZLE_URL = "https://www.nytimes.com/svc/wordle/v2/{date}.json"
REQUEST_TIMEOUT_S = 10.0

OPENING_CACHE_FORMAT_VERSION = 1
DEFAULT_OPENING_CACHE_PATH = Path("~/.cache/wordle-entropy/openings.json")
