"""Document-level services: statistics, gutter, search, and file state."""

from .gutter import DEFAULT_GUTTER_WIDTH, format_gutter, gutter_for_text, render_line_numbers
from .search import (
    FindSession,
    FindState,
    SearchHit,
    SearchNoMatch,
    TextSearch,
    offset_to_location,
)
from .state import UNTITLED, FileState, Location, display_file_name
from .stats import StatsCache, TextStats, calculate_text_stats, count_lines, count_words
from .store import (
    FileMissingError,
    FileReadError,
    FileStore,
    FileStoreError,
    FileWriteError,
)

__all__ = [
    "DEFAULT_GUTTER_WIDTH",
    "render_line_numbers",
    "format_gutter",
    "gutter_for_text",
    "FindSession",
    "FindState",
    "SearchHit",
    "SearchNoMatch",
    "TextSearch",
    "offset_to_location",
    "FileState",
    "Location",
    "UNTITLED",
    "display_file_name",
    "StatsCache",
    "TextStats",
    "calculate_text_stats",
    "count_lines",
    "count_words",
    "FileStore",
    "FileStoreError",
    "FileReadError",
    "FileMissingError",
    "FileWriteError",
]
