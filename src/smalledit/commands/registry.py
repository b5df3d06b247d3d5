"""Command dispatch table: command ids to handlers."""

from __future__ import annotations

from typing import Dict, Iterator

from smalledit.runtime.telemetry import span

from .models import CommandRef


class CommandConflictError(RuntimeError):
    """Raised when a command id is already taken."""

    def __init__(self, message: str, *, command_id: str):
        super().__init__(message)
        self.command_id = command_id


class CommandRegistry:
    """Owns the command references the editor can dispatch by id."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name

    def get_command(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register_command(self, command: CommandRef) -> CommandRef:
        if command.id in self._commands:
            raise CommandConflictError(
                f"Command '{command.id}' already registered", command_id=command.id
            )
        self._commands[command.id] = command
        return command

    def iter_commands(self) -> Iterator[CommandRef]:
        yield from self._commands.values()

    def dispatch(self, command_id: str, *args: object) -> object:
        command = self.get_command(command_id)
        with span(
            "commands::dispatch",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id},
        ):
            return command(*args)


__all__ = ["CommandRegistry", "CommandConflictError"]
