"""Small terminal text editor built on Textual."""

__all__ = [
    "adapters",
    "commands",
    "config",
    "document",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
