"""Offline computation of the opening guess, cached on disk.

Turn-one scoring depends only on the word list, so the full ranking is
computed once and stored in a JSON file keyed by a hash of the list.
"""

from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_OPENING_CACHE_PATH, OPENING_CACHE_FORMAT_VERSION
from .log import LogFn
from .selection import ScoredGuess, rank_guesses
from .words import WordList


def cache_key(words: WordList) -> str:
    digest = hashlib.sha256("\n".join(words.words).encode("utf-8")).hexdigest()
    return f"v{OPENING_CACHE_FORMAT_VERSION}|words={digest}"


class OpeningCache:
    """JSON file holding one turn-one ranking per word list.

    Layout: ``{key: {"size": N, "ranking": [{"guess": w, "bits": h}, ...]}}``.
    An entry only counts when it ranks exactly the words of its list.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path if path is not None else DEFAULT_OPENING_CACHE_PATH).expanduser()

    def _entries(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            # missing or unreadable file is the same as an empty cache
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, words: WordList) -> Optional[List[ScoredGuess]]:
        entry = self._entries().get(cache_key(words))
        rows = entry.get("ranking") if isinstance(entry, dict) else None
        if not isinstance(rows, list) or len(rows) != len(words):
            return None
        try:
            ranking = [ScoredGuess(r["guess"], float(r["bits"])) for r in rows]
        except (TypeError, KeyError, ValueError):
            return None
        if any(s.guess not in words for s in ranking):
            return None
        return ranking

    def put(self, words: WordList, ranking: List[ScoredGuess]) -> bool:
        """Store *ranking*; False if the file could not be written."""
        entries = self._entries()
        entries[cache_key(words)] = {
            "size": len(words),
            "ranking": [{"guess": s.guess, "bits": s.expected_entropy} for s in ranking],
        }
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(entries, separators=(",", ":")), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError:
            return False
        return True


def rank_openings(
    words: WordList,
    cache_path: Union[str, Path, None] = None,
    *,
    show_progress: bool = False,
    workers: int = 1,
    log: Optional[LogFn] = None,
) -> List[ScoredGuess]:
    """Full turn-one ranking for *words*, best first."""
    cache = OpeningCache(cache_path)

    cached = cache.get(words)
    if cached is not None:
        if log is not None:
            log(f"opening: cache hit in {cache.path}")
        return cached

    if log is not None:
        log(f"opening: scoring {len(words)} words against {len(words)} candidates")
    ranking = rank_guesses(words.words, words.words, show_progress=show_progress, workers=workers)
    stored = cache.put(words, ranking)
    if log is not None:
        log(f"opening: wrote {cache.path}" if stored else f"opening: could not write {cache.path}")
    return ranking


def best_opening(
    words: WordList,
    cache_path: Union[str, Path, None] = None,
    **kwargs,
) -> ScoredGuess:
    return rank_openings(words, cache_path, **kwargs)[0]
