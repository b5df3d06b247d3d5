"""File path and modification state shared by the editor components."""

from __future__ import annotations

import os
from typing import Callable, List, Tuple

from smalledit.runtime import telemetry

Location = Tuple[int, int]  # (row, column), 0-based
StateListener = Callable[["FileState"], None]

UNTITLED = "Untitled"


class FileState:
    """Current path plus a modified flag, with explicit change listeners.

    Listeners are called only when the path or the flag actually changes.
    """

    def __init__(self, path: str = "", *, modified: bool = False) -> None:
        self._path = path or ""
        self._modified = modified
        self._listeners: List[StateListener] = []

    @property
    def path(self) -> str:
        return self._path

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def untitled(self) -> bool:
        return not self._path

    @property
    def display_name(self) -> str:
        return display_file_name(self._path)

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def mark_modified(self) -> None:
        if not self._modified:
            self._modified = True
            self._emit("modified")

    def mark_saved(self) -> None:
        if self._modified:
            self._modified = False
            self._emit("saved")

    def adopt(self, path: str, *, modified: bool = False) -> None:
        self._path = path or ""
        self._modified = modified
        self._emit("adopt")

    def reset(self) -> None:
        self._path = ""
        self._modified = False
        self._emit("reset")

    def _emit(self, reason: str) -> None:
        telemetry.record_event(
            "file_state.change",
            level="debug",
            data={"reason": reason, "path": self._path, "modified": self._modified},
        )
        for listener in list(self._listeners):
            listener(self)


def display_file_name(path: str) -> str:
    return os.path.basename(path) if path else UNTITLED


__all__ = ["FileState", "Location", "StateListener", "UNTITLED", "display_file_name"]
