"""Fetch the published daily puzzle."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from typing import Optional

import requests

from .config import DAILY_PUZZLE_URL, REQUEST_TIMEOUT_S, WORD_LENGTH
from .errors import DailyPuzzleError
from .log import LogFn

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class DailyPuzzle:
    id: int
    solution: str
    print_date: str
    days_since_launch: int
    editor: str


def fetch_daily_puzzle(
    date: Optional[str] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT_S,
    log: Optional[LogFn] = None,
) -> DailyPuzzle:
    """Puzzle for *date* (YYYY-MM-DD), today when omitted."""
    if date is None:
        date = _dt.date.today().isoformat()
    elif not _DATE_RE.fullmatch(date):
        raise ValueError(f"Date must be in YYYY-MM-DD format, got {date!r}")

    url = DAILY_PUZZLE_URL.format(date=date)
    if log is not None:
        log(f"daily: GET {url}")

    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        raise DailyPuzzleError(f"Error fetching puzzle for {date}: {e}") from e
    except ValueError as e:
        raise DailyPuzzleError(f"Puzzle for {date} is not valid JSON: {e}") from e

    solution = data.get("solution") if isinstance(data, dict) else None
    if not isinstance(solution, str) or len(solution) != WORD_LENGTH:
        raise DailyPuzzleError(f"Invalid puzzle data for {date}: solution is missing or not {WORD_LENGTH} letters")

    return DailyPuzzle(
        id=int(data.get("id", 0)),
        solution=solution.lower(),
        print_date=str(data.get("print_date", date)),
        days_since_launch=int(data.get("days_since_launch", 0)),
        editor=str(data.get("editor", "")),
    )
