"""Status-bar and window-title text."""

from __future__ import annotations

from dataclasses import dataclass

from smalledit.document.state import Location
from smalledit.document.stats import TextStats

WINDOW_TITLE = "Text Editor"
CURSOR_POSITION_OFFSET = 1


@dataclass(frozen=True, slots=True)
class StatusInfo:
    """Everything the status bar shows, cursor already 1-based."""

    file_name: str
    modified: bool
    line: int
    column: int
    stats: TextStats


def status_info(
    file_name: str, modified: bool, cursor: Location, stats: TextStats
) -> StatusInfo:
    row, column = cursor
    return StatusInfo(
        file_name=file_name,
        modified=modified,
        line=max(1, row + CURSOR_POSITION_OFFSET),
        column=max(1, column + CURSOR_POSITION_OFFSET),
        stats=stats,
    )


def format_status(info: StatusInfo) -> str:
    marker = "*" if info.modified else ""
    stats = info.stats
    return (
        f"{info.file_name}{marker} | "
        f"Ln {info.line}, Col {info.column} | "
        f"{stats.characters} chars, {stats.words} words, {stats.lines} lines"
    )


def format_title(file_name: str, modified: bool) -> str:
    marker = "*" if modified else ""
    return f"{WINDOW_TITLE} - {file_name}{marker}"


__all__ = ["StatusInfo", "status_info", "format_status", "format_title", "WINDOW_TITLE"]
