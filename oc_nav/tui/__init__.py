"""TUI (Terminal User Interface) module for oc_nav.

Provides the menu tree, navigation stack, dispatcher, command execution
and status bar used by the interactive navigator.
"""
from .catalog import MenuNode, build_catalog
from .dispatcher import DispatchOutcome, SelectionDispatcher
from .executor import ExecutionResult, SubprocessExecutor, ThreadedExecutor
from .history import HistoryEntry, HistoryLog
from .navigator import NavigationFrame, NavigationStack
from .router import Router
from .state import UIState
from .status import StatusNotifier

__all__ = [
    "DispatchOutcome",
    "ExecutionResult",
    "HistoryEntry",
    "HistoryLog",
    "MenuNode",
    "NavigationFrame",
    "NavigationStack",
    "Router",
    "SelectionDispatcher",
    "StatusNotifier",
    "SubprocessExecutor",
    "ThreadedExecutor",
    "UIState",
    "build_catalog",
]
