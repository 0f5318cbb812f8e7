"""Unit tests for UIState class."""
from __future__ import annotations

from oc_nav.tui.catalog import MenuNode
from oc_nav.tui.executor import ExecutionResult
from oc_nav.tui.state import UIState


def test_uistate_initial_state():
    state = UIState()

    assert state.last_result is None
    assert state.details is None
    assert state.last_pod is None
    assert state.last_project is None
    assert state.session_history == []


def test_uistate_remember_ignores_unknown():
    state = UIState()

    state.remember(unknown_attr="value", last_pod="web-1")
    assert state.last_pod == "web-1"
    assert not hasattr(state, "unknown_attr")


def test_uistate_history_collapses_repeats():
    state = UIState()

    for title in ["Navigation", "Navigation", "Workloads", "Navigation"]:
        state.add_to_history(title)

    assert state.session_history == ["Navigation", "Workloads", "Navigation"]


def test_uistate_clear_output():
    state = UIState()
    state.remember(
        last_result=ExecutionResult(command_line="oc whoami", argv=("oc", "whoami"), output="me", succeeded=True),
        details=MenuNode(name="About"),
        error="Invalid command",
    )

    state.clear_output()
    assert state.last_result is None
    assert state.details is None
    assert state.error is None
