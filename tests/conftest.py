from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `oc_nav/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from oc_nav.tui.executor import ExecutionResult  # noqa: E402
from oc_nav.tui.history import HistoryLog, to_argv, to_command_line  # noqa: E402


class FakePrompts:
    """Scripted stand-in for the interactive prompts."""

    def __init__(self, answers=None, confirm=True, entry_index=0):
        self.answers = list(answers or [])
        self.confirm_answer = confirm
        self.entry_index = entry_index
        self.asked: list[tuple] = []
        self.confirmed: list[str] = []
        self.messages: list[str] = []
        self.offered: list = []

    def ask_text(self, label, default=None, max_length=None):
        self.asked.append((label, default, max_length))
        return self.answers.pop(0) if self.answers else None

    def confirm(self, message):
        self.confirmed.append(message)
        return self.confirm_answer

    def choose_entry(self, entries):
        self.offered = list(entries)
        if self.entry_index is None:
            return None
        return entries[self.entry_index]

    def show_message(self, text):
        self.messages.append(text)


class FakeExecutor:
    """Records commands in a real HistoryLog without spawning anything."""

    def __init__(self, history: HistoryLog, succeeded: bool = True):
        self.history = history
        self.succeeded = succeeded
        self.calls: list = []

    def execute(self, command):
        self.calls.append(command)
        self.history.append(command)
        return ExecutionResult(
            command_line=to_command_line(command),
            argv=to_argv(command),
            output="ok\n" if self.succeeded else "Error: exit status 1\n\n",
            succeeded=self.succeeded,
            returncode=0 if self.succeeded else 1,
        )


@pytest.fixture
def history():
    return HistoryLog()


@pytest.fixture
def fake_executor(history):
    return FakeExecutor(history)
