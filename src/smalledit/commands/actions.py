"""Command handlers. Each receives the editor controller it acts on."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from smalledit.editor.controller import EditorController


def new_file(editor: "EditorController") -> None:
    editor.new_file()


def open_file(editor: "EditorController") -> None:
    editor.open_file()


def save_file(editor: "EditorController") -> None:
    editor.save()


def save_file_as(editor: "EditorController") -> None:
    editor.save_as()


def quit_editor(editor: "EditorController") -> None:
    editor.quit()


def cut_text(editor: "EditorController") -> None:
    editor.run_text_action("cut")


def copy_text(editor: "EditorController") -> None:
    editor.run_text_action("copy")


def paste_text(editor: "EditorController") -> None:
    editor.run_text_action("paste")


def select_all(editor: "EditorController") -> None:
    editor.run_text_action("select_all")


def open_find(editor: "EditorController") -> None:
    editor.show_find_dialog()


def find_next(editor: "EditorController") -> None:
    editor.find_next()


def toggle_line_numbers(editor: "EditorController") -> None:
    editor.toggle_line_numbers()


def toggle_word_wrap(editor: "EditorController") -> None:
    editor.toggle_word_wrap()


def show_about(editor: "EditorController") -> None:
    editor.show_about()
