"""Character, line, and word statistics for the status bar."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_CHAR_COUNT = 0
DEFAULT_LINE_COUNT = 1
DEFAULT_WORD_COUNT = 0

# Only these four count as word separators; other Unicode spaces do not.
_WORD_SEPARATORS = re.compile(r"[ \t\r\n]+")


@dataclass(frozen=True, slots=True)
class TextStats:
    characters: int = DEFAULT_CHAR_COUNT
    lines: int = DEFAULT_LINE_COUNT
    words: int = DEFAULT_WORD_COUNT


def count_lines(text: str) -> int:
    """Number of ``\\n``-separated lines; never less than one."""

    if not text:
        return DEFAULT_LINE_COUNT
    return text.count("\n") + 1


def count_words(text: str) -> int:
    stripped = text.strip(" \t\r\n")
    if not stripped:
        return DEFAULT_WORD_COUNT
    return len(_WORD_SEPARATORS.split(stripped))


def calculate_text_stats(text: str) -> TextStats:
    if not text:
        return TextStats()
    return TextStats(
        characters=len(text),
        lines=count_lines(text),
        words=count_words(text),
    )


class StatsCache:
    """Keeps the last computed :class:`TextStats` until the text changes."""

    def __init__(self) -> None:
        self._stats: Optional[TextStats] = None

    @property
    def valid(self) -> bool:
        return self._stats is not None

    def invalidate(self) -> None:
        self._stats = None

    def get(self, text: str) -> TextStats:
        if self._stats is None:
            self._stats = calculate_text_stats(text)
        return self._stats


__all__ = [
    "TextStats",
    "StatsCache",
    "calculate_text_stats",
    "count_lines",
    "count_words",
]
