"""External command execution.

``SubprocessExecutor.execute`` is blocking: the caller is suspended until
the child process exits. There is no timeout and no cancellation path.
``ThreadedExecutor`` runs the same call on a worker thread and hands back
a future for callers that must stay responsive.
"""
from __future__ import annotations

import logging
import subprocess
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Protocol

from .history import Command, HistoryEntry, HistoryLog

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one command run."""

    command_line: str
    argv: tuple[str, ...]
    output: str
    succeeded: bool
    returncode: int | None = None


class CommandExecutor(Protocol):
    def execute(self, command: Command) -> ExecutionResult: ...


class SubprocessExecutor:
    """Run commands to completion and capture combined stdout/stderr.

    Failures never propagate: a program that cannot be started or that
    exits non-zero is reported inline in ``ExecutionResult.output`` with
    the ``Error:`` prefix and ``succeeded=False``.
    """

    def __init__(self, history: HistoryLog):
        self.history = history

    def execute(self, command: Command) -> ExecutionResult:
        entry = self.history.append(command)
        return self.run_entry(entry)

    def run_entry(self, entry: HistoryEntry) -> ExecutionResult:
        """Spawn the process for an already recorded entry."""
        if not entry.argv:
            logger.warning("Skipping empty command (history #%d)", entry.sequence)
            return ExecutionResult(
                command_line=entry.command_line,
                argv=entry.argv,
                output=f"{ERROR_PREFIX}empty command",
                succeeded=False,
            )

        logger.info("Executing #%d: %s", entry.sequence, entry.command_line)
        try:
            proc = subprocess.run(
                list(entry.argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            logger.error("Could not start %r: %s", entry.argv[0], e)
            return ExecutionResult(
                command_line=entry.command_line,
                argv=entry.argv,
                output=f"{ERROR_PREFIX}{e}",
                succeeded=False,
            )

        output = proc.stdout or ""
        if proc.returncode != 0:
            logger.info("Command #%d exited with status %d", entry.sequence, proc.returncode)
            output = f"{ERROR_PREFIX}exit status {proc.returncode}\n\n{output}"

        return ExecutionResult(
            command_line=entry.command_line,
            argv=entry.argv,
            output=output,
            succeeded=proc.returncode == 0,
            returncode=proc.returncode,
        )


class ThreadedExecutor:
    """Non-blocking wrapper around ``SubprocessExecutor``.

    History is appended on the submitting thread, so the log stays in
    submission order even when commands finish out of order.
    """

    def __init__(self, inner: SubprocessExecutor, max_workers: int = 1):
        self.inner = inner
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="oc-nav-exec")

    @property
    def history(self) -> HistoryLog:
        return self.inner.history

    def execute(self, command: Command) -> ExecutionResult:
        return self.inner.execute(command)

    def submit(
        self,
        command: Command,
        on_done: Callable[[ExecutionResult], None] | None = None,
    ) -> Future[ExecutionResult]:
        """Record ``command`` now and run it on the worker pool."""
        entry = self.inner.history.append(command)
        future = self._pool.submit(self.inner.run_entry, entry)
        if on_done is not None:
            future.add_done_callback(lambda f: on_done(f.result()))
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)
