"""Whole-file reads and writes with editor-specific error types."""

from __future__ import annotations

from pathlib import Path

from smalledit.runtime.telemetry import span

ENCODING = "utf-8"


class FileStoreError(RuntimeError):
    """Base class for file errors surfaced to the user."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class FileReadError(FileStoreError):
    """Raised when a file cannot be read."""


class FileMissingError(FileReadError):
    """Raised when the requested path does not exist."""


class FileWriteError(FileStoreError):
    """Raised when content cannot be written to the target path."""


class FileStore:
    """Reads and writes plain text files in one piece.

    Undecodable bytes are replaced on read. Line endings are kept exactly as
    they are on disk and written back verbatim.
    """

    def __init__(self, *, encoding: str = ENCODING) -> None:
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        with span("file::read", component="file_store", metadata={"path": path}):
            try:
                with open(path, "r", encoding=self.encoding, errors="replace", newline="") as handle:
                    return handle.read()
            except FileNotFoundError as exc:
                raise FileMissingError(_describe(exc), path=path) from exc
            except OSError as exc:
                raise FileReadError(_describe(exc), path=path) from exc

    def write_text(self, path: str, content: str) -> None:
        with span(
            "file::write",
            component="file_store",
            metadata={"path": path, "chars": len(content)},
        ):
            try:
                with open(path, "w", encoding=self.encoding, newline="") as handle:
                    handle.write(content)
            except (OSError, UnicodeEncodeError) as exc:
                raise FileWriteError(_describe(exc), path=path) from exc


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


__all__ = [
    "FileStore",
    "FileStoreError",
    "FileReadError",
    "FileMissingError",
    "FileWriteError",
]
