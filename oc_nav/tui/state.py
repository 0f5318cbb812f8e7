"""Session state for remembering user choices across menu levels."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog import MenuNode
    from .executor import ExecutionResult


@dataclass
class UIState:
    """UI session state - what the shell shows and the user's last inputs.

    Lives for one TUI session; the prompts use the remembered values as
    defaults.
    """

    # Output pane
    last_result: ExecutionResult | None = None

    # Details pane (leaf with no command and no action)
    details: MenuNode | None = None

    # Error pane (rejected input of the last action)
    error: str | None = None

    # Last entered values (smart defaults)
    last_pod: str | None = None
    last_project: str | None = None

    # Menu levels visited, for debugging
    session_history: list[str] = field(default_factory=list)

    def remember(self, **kwargs) -> None:
        """Update state with new values; unknown names are ignored.

        Example:
            state.remember(last_pod="web-1")
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def add_to_history(self, title: str) -> None:
        """Record a visited menu level.

        Consecutive repeats of the same level are collapsed.
        """
        if not self.session_history or self.session_history[-1] != title:
            self.session_history.append(title)

    def clear_output(self) -> None:
        self.last_result = None
        self.details = None
        self.error = None
