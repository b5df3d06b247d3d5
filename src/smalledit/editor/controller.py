"""UI-agnostic editor controller driven by a host widget toolkit."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from smalledit.commands import CommandRegistry, load_default_commands
from smalledit.config import EditorConfig
from smalledit.document import (
    FileReadError,
    FileState,
    FileStore,
    FileWriteError,
    FindSession,
    Location,
    SearchNoMatch,
    StatsCache,
    TextSearch,
    format_gutter,
    render_line_numbers,
)
from smalledit.runtime import telemetry
from smalledit.runtime.refresh import RefreshCoordinator, Scheduler

from .status import format_status, format_title, status_info

ABOUT_TEXT = "Simple Text Editor\nBuilt with Textual\n\nPress Ctrl+Q to quit"

PathCallback = Callable[[Optional[str]], None]


class GeometryUnavailable(RuntimeError):
    """Raised by a host that cannot report its viewport yet."""


class QuitChoice(str, Enum):
    SAVE = "save"
    DISCARD = "discard"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class Viewport:
    height: int
    top_row: int = 0


class EditorHost(Protocol):
    """Everything the controller needs from the widget toolkit."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_cursor(self) -> Location: ...

    def show_match(self, start: Location, end: Location) -> None: ...

    def get_viewport(self) -> Viewport:
        """Return the text view geometry or raise :class:`GeometryUnavailable`."""
        ...

    def update_gutter(self, text: str) -> None: ...

    def update_status(self, text: str) -> None: ...

    def update_title(self, title: str) -> None: ...

    def set_line_numbers_visible(self, visible: bool) -> None: ...

    def set_word_wrap(self, enabled: bool) -> None: ...

    def run_text_action(self, name: str) -> None: ...

    def show_error(self, title: str, message: str) -> None:
        """Blocking (modal) error report."""
        ...

    def show_info(self, title: str, message: str) -> None:
        """Non-blocking notification."""
        ...

    def prompt_path(self, title: str, initial: str, callback: PathCallback) -> None: ...

    def prompt_find(self, initial: str, callback: Callable[[Optional[str]], None]) -> None: ...

    def confirm_quit(self, callback: Callable[[QuitChoice], None]) -> None: ...

    def exit(self) -> None: ...


class EditorController:
    """Owns file, search and statistics state and keeps the host views current.

    The host reports edits through :meth:`on_text_changed` and cursor or
    viewport movement through :meth:`on_view_changed`. Both only poke the
    refresh coordinator; the gutter and status bar are recomputed once the
    burst of notifications is over.
    """

    def __init__(
        self,
        host: EditorHost,
        *,
        schedule: Scheduler,
        config: EditorConfig | None = None,
        store: FileStore | None = None,
        commands: CommandRegistry | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.host = host
        self.config = config or EditorConfig()
        self.store = store or FileStore()
        self.file_state = FileState()
        self.stats = StatsCache()
        self.search = TextSearch()
        self.find_session = FindSession()
        self.line_numbers_visible = self.config.show_line_numbers
        self.word_wrap = self.config.word_wrap
        if commands is None:
            commands = CommandRegistry(logger_name="smalledit.commands")
            load_default_commands(commands)
        self.commands = commands
        self.refresh = RefreshCoordinator(
            schedule,
            self.refresh_now,
            delay_ms=self.config.debounce_ms,
            quiet_ms=self.config.quiet_ms,
            clock=clock,
        )
        self.logger = telemetry.get_logger("smalledit.editor")
        self._baseline = ""
        self.file_state.subscribe(self._on_file_state_changed)
        self.host.update_title(format_title(self.file_state.display_name, False))

    # --- Notifications from the host -----------------------------------------
    def on_text_changed(self) -> None:
        self.stats.invalidate()
        if not self.file_state.modified and self.host.get_text() != self._baseline:
            self.file_state.mark_modified()
        self.refresh.notify_changed()

    def on_view_changed(self) -> None:
        self.refresh.notify_changed()

    def dispatch(self, command_id: str) -> object:
        return self.commands.dispatch(command_id, self)

    # --- Derived views ---------------------------------------------------------
    def refresh_now(self) -> None:
        self.update_line_numbers()
        self.update_status_bar()

    def update_line_numbers(self) -> None:
        if not self.line_numbers_visible:
            return
        text = self.host.get_text()
        viewport = self._viewport()
        labels = render_line_numbers(
            self.stats.get(text).lines,
            viewport.height,
            viewport.top_row,
            word_wrap=self.word_wrap,
            width=self.config.gutter_width,
        )
        self.host.update_gutter(format_gutter(labels))

    def update_status_bar(self) -> None:
        text = self.host.get_text()
        info = status_info(
            self.file_state.display_name,
            self.file_state.modified,
            self.host.get_cursor(),
            self.stats.get(text),
        )
        self.host.update_status(format_status(info))

    def _viewport(self) -> Viewport:
        try:
            viewport = self.host.get_viewport()
        except GeometryUnavailable as exc:
            self.logger.debug(f"viewport unavailable, using defaults: {exc}")
            return Viewport(height=self.config.default_visible_height)
        if viewport.height <= 0:
            return Viewport(
                height=self.config.default_visible_height, top_row=viewport.top_row
            )
        return viewport

    def _on_file_state_changed(self, state: FileState) -> None:
        self.host.update_title(format_title(state.display_name, state.modified))
        self.update_status_bar()

    # --- File commands -------------------------------------------------------
    def load_initial(self, path: str) -> None:
        """Open ``path`` at startup; a missing file becomes a new, unsaved one."""

        if not path or not path.strip():
            return
        if not self.store.exists(path):
            self._replace_document("", path, modified=True)
            telemetry.record_event("file.create_pending", data={"path": path})
            return
        try:
            content = self.store.read_text(path)
        except FileReadError as exc:
            self.logger.warning(f"could not load {path}: {exc}")
            self.host.show_error(
                "Error Loading File", f"Could not load file '{path}':\n{exc}"
            )
            self.new_file()
            return
        self._replace_document(content, path)

    def new_file(self) -> None:
        self._replace_document("", "")

    def open_file(self) -> None:
        self.host.prompt_path("Open File", self.file_state.path, self._open_chosen)

    def _open_chosen(self, path: Optional[str]) -> None:
        if not path:
            return
        try:
            content = self.store.read_text(path)
        except FileReadError as exc:
            self.logger.warning(f"could not open {path}: {exc}")
            self.host.show_error("Error", f"Could not open file: {exc}")
            return
        self._replace_document(content, path)

    def save(self, on_complete: Callable[[bool], None] | None = None) -> None:
        if self.file_state.untitled:
            self.save_as(on_complete)
            return
        saved = self._write(self.file_state.path)
        if saved:
            self.file_state.mark_saved()
        _complete(on_complete, saved)

    def save_as(self, on_complete: Callable[[bool], None] | None = None) -> None:
        def chosen(path: Optional[str]) -> None:
            if not path:
                _complete(on_complete, False)
                return
            saved = self._write(path)
            if saved:
                self.file_state.adopt(path)
            _complete(on_complete, saved)

        self.host.prompt_path("Save As", self.file_state.path, chosen)

    def _write(self, path: str) -> bool:
        text = self.host.get_text()
        try:
            self.store.write_text(path, text)
        except FileWriteError as exc:
            self.logger.warning(f"could not save {path}: {exc}")
            self.host.show_error("Error", f"Could not save file: {exc}")
            return False
        self._baseline = text
        telemetry.record_event("file.saved", data={"path": path, "chars": len(text)})
        return True

    def _replace_document(self, content: str, path: str, *, modified: bool = False) -> None:
        self.host.set_text(content)
        # The host may normalize line endings on load; compare against what it holds.
        self._baseline = self.host.get_text()
        self.stats.invalidate()
        self.search.rewind()
        self.file_state.adopt(path, modified=modified)
        self.refresh.notify_changed()

    def quit(self) -> None:
        if not self.file_state.modified:
            self.host.exit()
            return
        self.host.confirm_quit(self._on_quit_choice)

    def _on_quit_choice(self, choice: QuitChoice) -> None:
        if choice is QuitChoice.SAVE:
            self.save(on_complete=self._exit_if_saved)
        elif choice is QuitChoice.DISCARD:
            self.host.exit()

    def _exit_if_saved(self, saved: bool) -> None:
        if saved:
            self.host.exit()

    # --- Search ----------------------------------------------------------------
    def show_find_dialog(self) -> None:
        self.find_session.open()
        self.host.prompt_find(self.search.term, self._on_find_submitted)

    def _on_find_submitted(self, term: Optional[str]) -> None:
        if not term:
            self.find_session.cancel()
            return
        self.search.set_term(term)
        self.find_session.resolve(self._find())

    def find_next(self) -> None:
        if not self.search.term:
            self.show_find_dialog()
            return
        self._find()

    def _find(self) -> bool:
        try:
            hit = self.search.find_next(self.host.get_text())
        except SearchNoMatch as exc:
            self.host.show_info("Find", exc.reason)
            return False
        self.host.show_match(hit.start, hit.end)
        self.refresh.notify_changed()
        return True

    # --- View and edit commands --------------------------------------------
    def toggle_line_numbers(self) -> None:
        self.line_numbers_visible = not self.line_numbers_visible
        self.host.set_line_numbers_visible(self.line_numbers_visible)
        self.update_line_numbers()

    def toggle_word_wrap(self) -> None:
        self.word_wrap = not self.word_wrap
        self.host.set_word_wrap(self.word_wrap)
        self.update_line_numbers()

    def run_text_action(self, name: str) -> None:
        self.host.run_text_action(name)

    def show_about(self) -> None:
        self.host.show_info("About", ABOUT_TEXT)


def _complete(callback: Callable[[bool], None] | None, saved: bool) -> None:
    if callback is not None:
        callback(saved)


__all__ = [
    "EditorController",
    "EditorHost",
    "GeometryUnavailable",
    "QuitChoice",
    "Viewport",
    "ABOUT_TEXT",
]
