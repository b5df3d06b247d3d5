"""Editor settings and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "SMALLEDIT_"


@dataclass(frozen=True)
class EditorConfig:
    """Tunable constants for refresh timing and layout."""

    debounce_ms: int = 50
    quiet_ms: int = 45
    gutter_width: int = 4
    default_visible_height: int = 20
    show_line_numbers: bool = True
    word_wrap: bool = False

    def __post_init__(self) -> None:
        for name in ("debounce_ms", "gutter_width", "default_visible_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.quiet_ms < 0 or self.quiet_ms > self.debounce_ms:
            raise ValueError("quiet_ms must be between 0 and debounce_ms")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        debounce = _env_int(env, "DEBOUNCE_MS", defaults.debounce_ms)
        quiet = _env_int(env, "QUIET_MS", defaults.quiet_ms)
        if debounce <= 0:
            debounce = defaults.debounce_ms
        if quiet < 0 or quiet > debounce:
            quiet = min(defaults.quiet_ms, debounce)
        return cls(
            debounce_ms=debounce,
            quiet_ms=quiet,
            show_line_numbers=_env_flag(env, "LINE_NUMBERS", defaults.show_line_numbers),
            word_wrap=_env_flag(env, "WORD_WRAP", defaults.word_wrap),
        )


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_flag(env: Mapping[str, str], key: str, fallback: bool) -> bool:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    return value.lower() in {"1", "true", "yes", "on"}


__all__ = ["EditorConfig", "ENV_PREFIX"]
