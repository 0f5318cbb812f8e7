"""Append-only log of submitted command lines."""
from __future__ import annotations

import itertools
import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence, Union

if TYPE_CHECKING:
    from .executor import CommandExecutor, ExecutionResult


Command = Union[str, Sequence[str]]


def to_argv(command: Command) -> tuple[str, ...]:
    """Normalize a command into an argument tuple.

    Strings are split on whitespace with no quoting rules; sequences are
    taken verbatim.
    """
    if isinstance(command, str):
        return tuple(command.split())
    return tuple(str(part) for part in command)


def to_command_line(command: Command) -> str:
    """Human-readable form of a command, as stored in history."""
    if isinstance(command, str):
        return command
    return shlex.join(str(part) for part in command)


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted command. Never mutated once recorded."""

    sequence: int
    command_line: str
    argv: tuple[str, ...]


class HistoryLog:
    """Ordered record of every command handed to the executor.

    Entries are stored oldest first. Newest-first is only a view used for
    display; it never changes storage order.
    """

    def __init__(self):
        self._entries: list[HistoryEntry] = []
        self._counter = itertools.count(1)

    def append(self, command: Command) -> HistoryEntry:
        """Record a command and return its entry.

        Args:
            command: Command string or argument list

        Returns:
            The new entry with the next sequence number
        """
        entry = HistoryEntry(
            sequence=next(self._counter),
            command_line=to_command_line(command),
            argv=to_argv(command),
        )
        self._entries.append(entry)
        return entry

    def entries(self, newest_first: bool = False) -> list[HistoryEntry]:
        """Return a snapshot of the log."""
        if newest_first:
            return list(reversed(self._entries))
        return list(self._entries)

    def latest(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def reexecute(self, entry: HistoryEntry, executor: CommandExecutor) -> ExecutionResult:
        """Run a recorded command again.

        The executor records a fresh entry; ``entry`` itself is left as is.
        """
        return executor.execute(entry.argv)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
