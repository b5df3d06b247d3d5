"""EditorHost implementation backed by Textual widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from textual.app import App
from textual.widgets import Static, TextArea

from smalledit.document import Location
from smalledit.editor import GeometryUnavailable, QuitChoice, Viewport

from .dialogs import MessageDialog, PromptDialog, QuitDialog


@dataclass
class UIState:
    """Last text pushed to each derived view."""

    gutter_text: str = ""
    status_text: str = ""
    title: str = ""


class TextualHost:
    """Adapts a TextArea, gutter and status bar to the controller's needs."""

    def __init__(
        self,
        app: App,
        editor: TextArea,
        gutter: Static,
        status: Static,
        *,
        state: UIState | None = None,
    ) -> None:
        self.app = app
        self.editor = editor
        self.gutter = gutter
        self.status = status
        self.state = state or UIState()

    def get_text(self) -> str:
        return self.editor.text

    def set_text(self, text: str) -> None:
        self.editor.load_text(text)

    def get_cursor(self) -> Location:
        row, column = self.editor.cursor_location
        return (row, column)

    def show_match(self, start: Location, end: Location) -> None:
        # Select from the end of the match back to its start so the cursor
        # sits on the first matched character.
        self.editor.move_cursor(end)
        self.editor.move_cursor(start, select=True, center=True)

    def get_viewport(self) -> Viewport:
        if not self.editor.is_mounted:
            raise GeometryUnavailable("text area is not mounted")
        region = self.editor.scrollable_content_region
        return Viewport(height=region.height, top_row=self.editor.scroll_offset.y)

    def update_gutter(self, text: str) -> None:
        self.state.gutter_text = text
        self.gutter.update(text)

    def update_status(self, text: str) -> None:
        self.state.status_text = text
        self.status.update(text)

    def update_title(self, title: str) -> None:
        self.state.title = title
        self.app.title = title

    def set_line_numbers_visible(self, visible: bool) -> None:
        self.gutter.display = visible

    def set_word_wrap(self, enabled: bool) -> None:
        self.editor.soft_wrap = enabled

    def run_text_action(self, name: str) -> None:
        if name == "select_all":
            self.editor.select_all()
            return
        action = getattr(self.editor, f"action_{name}", None)
        if action is None:
            raise ValueError(f"Unsupported text action '{name}'")
        action()

    def show_error(self, title: str, message: str) -> None:
        self.app.push_screen(MessageDialog(title, message))

    def show_info(self, title: str, message: str) -> None:
        self.app.notify(message, title=title, markup=False)

    def prompt_path(
        self, title: str, initial: str, callback: Callable[[Optional[str]], None]
    ) -> None:
        self.app.push_screen(
            PromptDialog(title, "File path:", initial, confirm_label="OK"), callback
        )

    def prompt_find(
        self, initial: str, callback: Callable[[Optional[str]], None]
    ) -> None:
        self.app.push_screen(
            PromptDialog("Find", "Search for:", initial, confirm_label="Find"), callback
        )

    def confirm_quit(self, callback: Callable[[QuitChoice], None]) -> None:
        self.app.push_screen(QuitDialog(), callback)

    def exit(self) -> None:
        self.app.exit()


__all__ = ["TextualHost", "UIState"]
