"""Word-list loading.

Two formats are accepted:
  - plain text, one word per line
  - CSV with a ``word`` column in the header row

Anything that is not exactly five ASCII letters is skipped. The result is
a WordList, which callers construct once and pass to whatever needs it.
"""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Tuple, Union

from .config import WORD_LENGTH
from .errors import WordListError

_WORD_RE = re.compile(rf"[a-z]{{{WORD_LENGTH}}}")

PathLike = Union[str, Path]


@dataclass(frozen=True)
class WordList:
    """Ordered, de-duplicated, read-only list of lowercase words."""

    words: Tuple[str, ...]
    _lookup: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # copy so a caller-owned list cannot change underneath the handle
        object.__setattr__(self, "words", tuple(self.words))
        object.__setattr__(self, "_lookup", frozenset(self.words))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordList":
        return cls(tuple(clean_words(words)))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._lookup

    def is_valid_word(self, word: str) -> bool:
        return word in self


# Deduplicate while keeping order, dropping anything that isn't a 5-letter word
def clean_words(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for raw in words:
        w = raw.strip().lower()
        if not _WORD_RE.fullmatch(w) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def _words_from_csv(text: str, source: str) -> List[str]:
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header is None:
        raise WordListError(f"{source}: empty CSV file")
    columns = [h.strip().lower() for h in header]
    if "word" not in columns:
        raise WordListError(f"{source}: CSV header does not contain 'word' column")
    idx = columns.index("word")
    return [row[idx] for row in reader if len(row) > idx]


def parse_word_list(text: str, *, csv_format: bool = False, source: str = "<string>") -> WordList:
    raw = _words_from_csv(text, source) if csv_format else text.splitlines()
    return WordList.from_words(raw)


def load_words_from_file(path: PathLike) -> WordList:
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise WordListError(f"cannot read word list {p}: {e}") from e
    return parse_word_list(text, csv_format=p.suffix.lower() == ".csv", source=str(p))


def load_default_word_list() -> WordList:
    """The list shipped with the package (wordle_entropy/data/words.txt)."""
    text = resources.files("wordle_entropy").joinpath("data/words.txt").read_text(encoding="utf-8")
    return parse_word_list(text, source="wordle_entropy/data/words.txt")
