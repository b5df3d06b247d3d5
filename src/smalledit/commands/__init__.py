"""Command dispatch table and default key bindings."""

from .models import CommandRef, KeyBinding, normalize_key
from .registry import CommandConflictError, CommandRegistry
from .defaults import DEFAULT_BINDINGS, DEFAULT_COMMANDS, load_default_commands

__all__ = [
    "CommandRef",
    "KeyBinding",
    "normalize_key",
    "CommandRegistry",
    "CommandConflictError",
    "DEFAULT_COMMANDS",
    "DEFAULT_BINDINGS",
    "load_default_commands",
]
