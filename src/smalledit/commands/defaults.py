"""Built-in commands and the keys bound to them."""

from __future__ import annotations

from . import actions
from .models import CommandRef, KeyBinding
from .registry import CommandRegistry

DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef("file.new", actions.new_file, "New", "Create a new file"),
    CommandRef("file.open", actions.open_file, "Open", "Open a file"),
    CommandRef("file.save", actions.save_file, "Save", "Save current file"),
    CommandRef("file.save_as", actions.save_file_as, "Save As", "Save file with new name"),
    CommandRef("app.quit", actions.quit_editor, "Quit", "Exit the application"),
    CommandRef("edit.cut", actions.cut_text, "Cut", "Cut selected text"),
    CommandRef("edit.copy", actions.copy_text, "Copy", "Copy selected text"),
    CommandRef("edit.paste", actions.paste_text, "Paste", "Paste text"),
    CommandRef("edit.select_all", actions.select_all, "Select All", "Select all text"),
    CommandRef("search.find", actions.open_find, "Find", "Find text"),
    CommandRef("search.find_next", actions.find_next, "Find Next", "Find next occurrence"),
    CommandRef("view.line_numbers", actions.toggle_line_numbers, "Line Numbers", "Toggle line numbers"),
    CommandRef("view.word_wrap", actions.toggle_word_wrap, "Word Wrap", "Toggle word wrapping"),
    CommandRef("help.about", actions.show_about, "About", "About this editor"),
)

DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding("ctrl+n", "file.new", "New"),
    KeyBinding("ctrl+o", "file.open", "Open"),
    KeyBinding("ctrl+s", "file.save", "Save"),
    KeyBinding("ctrl+q", "app.quit", "Quit"),
    KeyBinding("ctrl+f", "search.find", "Find"),
    KeyBinding("f3", "search.find_next", "Find Next"),
    KeyBinding("ctrl+g", "search.find_next", "Find Next", show=False),
    KeyBinding("f4", "view.word_wrap", "Wrap"),
    KeyBinding("f5", "view.line_numbers", "Lines"),
)


def load_default_commands(registry: CommandRegistry) -> None:
    """Register the built-in commands."""

    for command in DEFAULT_COMMANDS:
        registry.register_command(command)


__all__ = ["load_default_commands", "DEFAULT_COMMANDS", "DEFAULT_BINDINGS"]
