"""Cyclic, case-insensitive text search and the Find dialog state machine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from smalledit.runtime.telemetry import span

from .state import Location

NO_MATCH = -1


class SearchNoMatch(LookupError):
    """Raised when the search term does not occur anywhere in the text."""

    def __init__(self, term: str, *, reason: str | None = None) -> None:
        message = reason or f"'{term}' not found"
        super().__init__(message)
        self.term = term
        self.reason = message


@dataclass(frozen=True, slots=True)
class SearchHit:
    offset: int
    length: int
    start: Location
    end: Location


def offset_to_location(text: str, offset: int) -> Location:
    """Convert a character offset into a 0-based ``(row, column)`` pair."""

    limit = max(0, min(offset, len(text)))
    row = text.count("\n", 0, limit)
    if row == 0:
        return (0, limit)
    line_start = text.rfind("\n", 0, limit) + 1
    return (row, limit - line_start)


class TextSearch:
    """Remembers the last term and match offset between searches.

    Each search starts one character past the previous match and wraps to
    the beginning of the text when nothing is found further on. A term that
    is absent from the whole text raises :class:`SearchNoMatch` and leaves
    the remembered state untouched.
    """

    def __init__(self) -> None:
        self.term: str = ""
        self.last_index: int = NO_MATCH

    def set_term(self, term: str) -> None:
        if not term:
            raise ValueError("search term cannot be empty")
        self.term = term
        self.last_index = NO_MATCH

    def rewind(self) -> None:
        """Start the next search from the top of the text, keeping the term."""

        self.last_index = NO_MATCH

    def find_next(self, text: str, term: Optional[str] = None) -> SearchHit:
        if term is not None and term != self.term:
            self.set_term(term)
        if not self.term:
            raise ValueError("no search term set")
        if not text:
            raise SearchNoMatch(self.term, reason="No text to search")

        pattern = re.compile(re.escape(self.term), re.IGNORECASE)
        with span(
            "search::find_next",
            component="search",
            metadata={"term": self.term, "from": self.last_index + 1},
        ) as handle:
            match = pattern.search(text, self.last_index + 1)
            if match is None:
                match = pattern.search(text, 0)
            handle.add_metadata("status", "miss" if match is None else "match")

        if match is None:
            raise SearchNoMatch(self.term)
        self.last_index = match.start()
        return SearchHit(
            offset=match.start(),
            length=match.end() - match.start(),
            start=offset_to_location(text, match.start()),
            end=offset_to_location(text, match.end()),
        )


class FindState(str, Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    FOUND = "found"
    NOT_FOUND = "not_found"


class FindSession:
    """Tracks the Find dialog through open, confirm and cancel."""

    def __init__(self) -> None:
        self.state = FindState.IDLE

    def open(self) -> None:
        self.state = FindState.AWAITING_INPUT

    def cancel(self) -> None:
        self._require_awaiting("cancel")
        self.state = FindState.IDLE

    def resolve(self, found: bool) -> None:
        self._require_awaiting("resolve")
        self.state = FindState.FOUND if found else FindState.NOT_FOUND

    def _require_awaiting(self, action: str) -> None:
        if self.state is not FindState.AWAITING_INPUT:
            raise RuntimeError(f"cannot {action} find dialog in state '{self.state.value}'")


__all__ = [
    "FindSession",
    "FindState",
    "NO_MATCH",
    "SearchHit",
    "SearchNoMatch",
    "TextSearch",
    "offset_to_location",
]
