"""Modal dialogs used by the Textual editor."""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from smalledit.editor import QuitChoice

DIALOG_CSS = """
    Vertical.dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }

    Vertical.dialog > .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }

    Horizontal.dialog-buttons {
        height: auto;
        margin-top: 1;
    }

    Horizontal.dialog-buttons > Button {
        margin-right: 2;
    }
"""


class PromptDialog(ModalScreen[Optional[str]]):
    """Single-line text prompt. Dismisses with the text, or ``None`` on cancel."""

    DEFAULT_CSS = (
        """
    PromptDialog {
        align: center middle;
    }
    """
        + DIALOG_CSS
    )

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self,
        title: str,
        label: str,
        initial: str = "",
        *,
        confirm_label: str = "OK",
    ) -> None:
        super().__init__()
        self._dialog_title = title
        self._prompt_label = label
        self._initial = initial
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self._dialog_title, classes="dialog-title")
            yield Label(self._prompt_label)
            yield Input(value=self._initial, id="prompt-input")
            with Horizontal(classes="dialog-buttons"):
                yield Button(self._confirm_label, variant="primary", id="confirm")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "confirm":
            self.dismiss(self.query_one("#prompt-input", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class QuitDialog(ModalScreen[QuitChoice]):
    """Asks what to do with unsaved changes before quitting."""

    DEFAULT_CSS = (
        """
    QuitDialog {
        align: center middle;
    }
    """
        + DIALOG_CSS
    )

    BINDINGS = [("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Do you really want to quit?", classes="dialog-title")
            yield Label(
                "You are about to quit with unsaved changes. Do you want to save?"
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Save", variant="primary", id=QuitChoice.SAVE.value)
                yield Button(
                    "Quit Without Saving", variant="warning", id=QuitChoice.DISCARD.value
                )
                yield Button("Cancel", id=QuitChoice.CANCEL.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(QuitChoice(event.button.id or QuitChoice.CANCEL.value))

    def action_cancel(self) -> None:
        self.dismiss(QuitChoice.CANCEL)


class MessageDialog(ModalScreen[None]):
    """Blocking message box with a single OK button."""

    DEFAULT_CSS = (
        """
    MessageDialog {
        align: center middle;
    }
    """
        + DIALOG_CSS
    )

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, title: str, message: str) -> None:
        super().__init__()
        self._dialog_title = title
        self._body = message

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self._dialog_title, classes="dialog-title")
            yield Label(self._body, markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", variant="primary", id="ok")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = ["PromptDialog", "QuitDialog", "MessageDialog"]
