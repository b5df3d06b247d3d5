"""Executable Textual app hosting the editor controller."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Optional, Sequence

try:  # pragma: no cover - friendly error for missing dep
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.command import Hit, Hits, Provider
    from textual.containers import Horizontal
    from textual.screen import ModalScreen
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover
    raise RuntimeError(
        "Install the 'textual' package to use smalledit.adapters.textual.app"
    ) from exc

from smalledit.commands import DEFAULT_BINDINGS, KeyBinding
from smalledit.config import EditorConfig
from smalledit.editor import EditorController
from smalledit.runtime import telemetry

from .host import TextualHost, UIState


def _app_bindings(bindings: Sequence[KeyBinding]) -> list[Binding]:
    return [
        Binding(
            binding.key,
            f"run_command('{binding.command_id}')",
            binding.description,
            show=binding.show,
            priority=True,
        )
        for binding in bindings
    ]


class EditorCommands(Provider):
    """Lists every registered editor command in the command palette."""

    async def search(self, query: str) -> Hits:
        app = self.app
        if not isinstance(app, SmalleditApp) or app.controller is None:
            return
        matcher = self.matcher(query)
        for command in app.controller.commands.iter_commands():
            score = matcher.match(command.title)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(command.title),
                    partial(app.controller.dispatch, command.id),
                    help=command.description,
                )


class SmalleditApp(App[None]):
    """Text area with a line-number gutter and a status bar."""

    CSS = """
	#body {
		height: 1fr;
	}

	#gutter {
		width: 5;
		height: 1fr;
		padding: 0 1 0 0;
		color: $text-muted;
		background: $surface;
	}

	#editor {
		width: 1fr;
		height: 1fr;
		border: none;
		padding: 0;
	}

	#status-bar {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = _app_bindings(DEFAULT_BINDINGS)
    COMMANDS = App.COMMANDS | {EditorCommands}

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        config: EditorConfig | None = None,
    ) -> None:
        super().__init__()
        self.editor_config = config or EditorConfig.from_env()
        self.ui_state = UIState()
        self.controller: EditorController | None = None
        self.editor_host: TextualHost | None = None
        self._initial_path = path
        self.logger = telemetry.get_logger("smalledit.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="body"):
            yield Static("", id="gutter", markup=False)
            yield TextArea(
                "",
                id="editor",
                soft_wrap=self.editor_config.word_wrap,
                show_line_numbers=False,
            )
        yield Static("", id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one("#editor", TextArea)
        gutter = self.query_one("#gutter", Static)
        gutter.display = self.editor_config.show_line_numbers
        self.editor_host = TextualHost(
            self,
            editor,
            gutter,
            self.query_one("#status-bar", Static),
            state=self.ui_state,
        )
        self.controller = EditorController(
            self.editor_host, schedule=self._schedule, config=self.editor_config
        )
        self.watch(editor, "scroll_y", self._on_editor_scrolled, init=False)
        if self._initial_path:
            self.controller.load_initial(self._initial_path)
        self.call_after_refresh(self.controller.refresh.flush)
        editor.focus()
        self.logger.info(f"editor ready path={self._initial_path or '<untitled>'}")

    def _schedule(self, delay: float, callback) -> object:
        return self.set_timer(delay, callback)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.controller:
            self.controller.on_text_changed()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self.controller:
            self.controller.on_view_changed()

    def on_resize(self, event: events.Resize) -> None:
        if self.controller:
            self.controller.on_view_changed()

    def _on_editor_scrolled(self) -> None:
        if self.controller:
            self.controller.on_view_changed()

    def action_run_command(self, command_id: str) -> None:
        if self.controller is None or isinstance(self.screen, ModalScreen):
            return
        self.controller.dispatch(command_id)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smalledit", description="Small terminal text editor."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to open at startup (created on first save if missing)",
    )
    # Anything argparse does not recognise is ignored; a leading unknown
    # "option" such as "-notes.txt" is taken as the path.
    args, extra = parser.parse_known_args(argv)
    if args.path is None and extra:
        args.path = extra[0]
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        SmalleditApp(args.path).run()
    except Exception as exc:
        telemetry.logger.error(f"editor stopped with an unhandled error: {exc!r}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
