"""Dataclasses describing editor commands and their key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def normalize_key(key: str) -> str:
    """Lower-case a Textual key name and sort its modifiers (``shift+ctrl+a`` -> ``ctrl+shift+a``)."""

    parts = [part.strip().lower() for part in key.split("+") if part.strip()]
    if not parts:
        raise ValueError("key cannot be empty")
    *modifiers, base = parts
    return "+".join(sorted(dict.fromkeys(modifiers)) + [base])


@dataclass(frozen=True, slots=True)
class CommandRef:
    """A named editor command and the callable that performs it."""

    id: str
    handler: Callable[..., object]
    title: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if not self.title:
            object.__setattr__(self, "title", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Maps a single key (Textual key name) to a command id."""

    key: str
    command_id: str
    description: str = ""
    show: bool = True

    def __post_init__(self) -> None:
        if not self.command_id:
            raise ValueError("binding command_id cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))


__all__ = ["CommandRef", "KeyBinding", "normalize_key"]
