"""Editor controller and status formatting."""

from .controller import (
    ABOUT_TEXT,
    EditorController,
    EditorHost,
    GeometryUnavailable,
    QuitChoice,
    Viewport,
)
from .status import StatusInfo, format_status, format_title, status_info

__all__ = [
    "ABOUT_TEXT",
    "EditorController",
    "EditorHost",
    "GeometryUnavailable",
    "QuitChoice",
    "Viewport",
    "StatusInfo",
    "format_status",
    "format_title",
    "status_info",
]
