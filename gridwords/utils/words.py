from __future__ import annotations

"""Word list capability and grid id <-> three-word mapping.

A grid id is written as three base-n digits (n = word list length), least
significant first, each digit picking one word.
"""

import logging
from collections.abc import Iterable, Sequence
from importlib import resources
from pathlib import Path
from typing import Protocol

from gridwords.core.errors import CapacityExceededError, WordListError
from gridwords.models.encoded_location import EncodedLocation, ParsedCode


logger = logging.getLogger(__name__)

WORDS_PER_CODE = 3
SEPARATOR = "."


class WordSource(Protocol):
    def __len__(self) -> int: ...

    def get_word_by_index(self, index: int) -> str | None: ...

    def get_index_by_word(self, word: str) -> int | None: ...


class WordList:
    """Ordered, read-only word list with O(1) lookups both ways."""

    def __init__(self, words: Iterable[str]) -> None:
        ordered = tuple(words)
        if not ordered:
            raise WordListError("Word list is empty")

        index: dict[str, int] = {}
        for i, word in enumerate(ordered):
            if not (word.isascii() and word.isalpha() and word.islower()):
                raise WordListError(
                    f"Word list entry {i} is not lowercase alphabetic: {word!r}",
                    details={"index": i, "word": word},
                )
            if word in index:
                raise WordListError(
                    f"Duplicate word {word!r} at {index[word]} and {i}",
                    details={"word": word, "indices": [index[word], i]},
                )
            index[word] = i

        self._words = ordered
        self._index = index

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.get_index_by_word(word) is not None

    def get_word_by_index(self, index: int) -> str | None:
        if 0 <= index < len(self._words):
            return self._words[index]
        return None

    def get_index_by_word(self, word: str) -> int | None:
        return self._index.get(word.strip().lower())


def _read_lines(text: str) -> list[str]:
    out: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        # Blank lines and comments are not entries.
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


def load_word_list(path: str | Path | None = None) -> WordList:
    """Load a word list file (one word per line); None loads the bundled list."""

    if path is None:
        source = "bundled"
        text = resources.files("gridwords").joinpath("data/words.txt").read_text(
            encoding="utf-8"
        )
    else:
        source = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise WordListError(
                f"Cannot read word list {source}", details={"path": source}
            ) from e

    words = WordList(_read_lines(text))
    logger.info("Loaded %d words from %s word list", len(words), source)
    return words


def is_valid_word(source: WordSource, word: str) -> bool:
    return source.get_index_by_word(word) is not None


def capacity(n: int) -> int:
    return n**WORDS_PER_CODE


def grid_id_to_word_indices(grid_id: int, n: int) -> tuple[int, int, int]:
    if grid_id < 0 or grid_id >= capacity(n):
        raise CapacityExceededError(grid_id, capacity(n))
    return grid_id % n, (grid_id // n) % n, (grid_id // (n * n)) % n


def word_indices_to_grid_id(indices: Sequence[int], n: int) -> int:
    if len(indices) != WORDS_PER_CODE:
        raise ValueError(f"Expected {WORDS_PER_CODE} indices, got {len(indices)}")
    for i in indices:
        if not 0 <= i < n:
            raise ValueError(f"Word index {i} outside [0, {n})")
    i0, i1, i2 = indices
    return i0 + i1 * n + i2 * n * n


def format_encoded_location(encoded: EncodedLocation) -> str:
    out = SEPARATOR.join(encoded.words)
    if encoded.floor is not None:
        out += f"{SEPARATOR}{encoded.floor}"
    return out


def parse_encoded_location(text: str) -> ParsedCode | None:
    """Parse "w0.w1.w2" or "w0.w1.w2.floor"; return None when malformed.

    Only the shape is checked here; whether the words exist is decode's job.
    """

    parts = text.strip().split(SEPARATOR)
    if len(parts) not in (WORDS_PER_CODE, WORDS_PER_CODE + 1):
        return None

    words = tuple(p.strip().lower() for p in parts[:WORDS_PER_CODE])
    if any(not w for w in words):
        return None

    floor: int | None = None
    if len(parts) == WORDS_PER_CODE + 1:
        raw = parts[WORDS_PER_CODE].strip()
        # Digits only: rejects "-1", "+1", "1.5", "" and "3abc".
        if not (raw.isascii() and raw.isdigit()):
            return None
        try:
            floor = int(raw)
        except ValueError:
            # Past the interpreter's int conversion digit limit.
            return None

    return ParsedCode(words=words, floor=floor)
