"""Textual front end: app, host adapter and dialogs."""

from .host import TextualHost, UIState

__all__ = ["TextualHost", "UIState"]
