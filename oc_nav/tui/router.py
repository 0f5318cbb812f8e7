"""Main loop of the TUI: render, prompt, dispatch."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from rich.markup import escape

from .catalog import COMMAND_HISTORY, CUSTOM_COMMANDS
from .components import (
    MenuPrompt,
    render_breadcrumbs,
    render_command_output,
    render_error,
    render_item_details,
)
from .dispatcher import ACTION, CANCELLED, DESCEND, DETAILS, EXECUTE, INVALID
from .history import to_command_line
from .status import format_baseline

if TYPE_CHECKING:
    from rich.console import Console

    from ..settings import Settings
    from .dispatcher import DispatchOutcome, SelectionDispatcher
    from .environment import ClusterContext
    from .executor import CommandExecutor, ExecutionResult
    from .history import Command
    from .navigator import NavigationStack
    from .state import UIState
    from .status import StatusNotifier

logger = logging.getLogger(__name__)


class StatusReportingExecutor:
    """Executor wrapper that reports progress on the status bar.

    Still blocking: the spinner only marks that the UI is waiting on the
    child process.
    """

    def __init__(self, inner: CommandExecutor, status: StatusNotifier, console: Console):
        self.inner = inner
        self.status = status
        self.console = console

    def execute(self, command: Command) -> ExecutionResult:
        label = escape(to_command_line(command))
        self.status.flash(f"[yellow]Executing: {label}[/yellow]")
        with self.console.status(f"[cyan]Executing: {label}[/cyan]"):
            result = self.inner.execute(command)
        if result.succeeded:
            self.status.flash("[green]Command completed[/green]")
        else:
            self.status.flash("[red]Command failed[/red]")
        return result


class Router:
    """Main navigation loop.

    Renders the current level, reads one choice and hands it to the
    dispatcher until the user exits (Exit, Esc at the root, Ctrl+C).

    The prompt is called as ``prompt(stack, status_text)`` and draws the
    status bar itself. If it has an ``invalidate`` method, every status
    change (flash, expiry, new baseline) triggers a repaint.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        state: UIState,
        stack: NavigationStack,
        dispatcher: SelectionDispatcher,
        status: StatusNotifier,
        cluster: ClusterContext,
        prompt: Callable[[NavigationStack, Callable[[], str]], int | str | None] | None = None,
    ):
        self.console = console
        self.settings = settings
        self.state = state
        self.stack = stack
        self.dispatcher = dispatcher
        self.status = status
        self.cluster = cluster
        self.prompt = prompt if prompt is not None else MenuPrompt()
        self.status.on_change = self._on_status_change

    def run(self) -> None:
        """Run until an exit command is received."""
        try:
            while True:
                self.state.add_to_history(self.stack.title)
                self.render()

                try:
                    choice = self.prompt(self.stack, self._status_text)
                except KeyboardInterrupt:
                    choice = "exit"

                command = self._normalize_nav_result(choice)

                if command == "exit":
                    break
                if command == "back":
                    if not self.stack.ascend():
                        break
                    self.state.remember(details=None, error=None)
                elif command == "refresh":
                    self.refresh_environment()
                    self.status.flash("Context refreshed")
                elif command == "history":
                    self._dispatch(lambda: self.dispatcher.run_action(COMMAND_HISTORY))
                elif command == "custom":
                    self._dispatch(lambda: self.dispatcher.run_action(CUSTOM_COMMANDS))
                elif isinstance(command, int):
                    index = command
                    self._dispatch(lambda: self.dispatcher.activate(index))
                # Anything else: stay on the current level
        finally:
            self.status.close()
        self.console.print("\n[dim]👋 Goodbye![/]")

    def render(self) -> None:
        self.console.clear()
        render_breadcrumbs(self.console, self.stack)
        if self.state.error is not None:
            render_error(
                self.console,
                "Invalid input",
                self.state.error,
                "Nothing was run. Select the item again to retry.",
            )
        if self.state.details is not None:
            render_item_details(self.console, self.state.details)
        if self.state.last_result is not None:
            render_command_output(self.console, self.state.last_result)

    def _status_text(self) -> str:
        return self.status.displayed

    def _on_status_change(self, text: str) -> None:
        # Runs on the status timer thread as well
        invalidate = getattr(self.prompt, "invalidate", None)
        if invalidate is not None:
            invalidate()

    def refresh_environment(self) -> None:
        """Re-read context and project from the CLI and update the baseline."""
        self.cluster.refresh(self.settings.OC_NAV_BINARY)
        logger.info("Context=%s project=%s", self.cluster.context, self.cluster.project)
        self.status.set_baseline(format_baseline(self.cluster.context, self.cluster.project))

    def _dispatch(self, fn: Callable[[], DispatchOutcome]) -> None:
        try:
            outcome = fn()
        except KeyboardInterrupt:
            self.status.flash("[yellow]Interrupted[/yellow]")
            return
        self._apply(outcome)

    def _apply(self, outcome: DispatchOutcome) -> None:
        self.state.error = None
        if outcome.kind == DESCEND:
            self.state.details = None
        elif outcome.kind in (EXECUTE, ACTION):
            self.state.remember(last_result=outcome.result, details=None)
        elif outcome.kind == DETAILS:
            self.state.details = outcome.node
        elif outcome.kind == INVALID:
            self.state.error = outcome.message or ""
            self.status.flash(f"[red]{escape(outcome.message or '')}[/red]")
        elif outcome.kind == CANCELLED:
            self.status.flash("Cancelled")

    @staticmethod
    def _normalize_nav_result(result: int | str | None) -> int | str | None:
        """Normalize prompt results to canonical commands.

        Row indexes pass through; rendered labels such as "← Back" map to
        their internal value. An aborted prompt (None) means exit.
        """
        if result is None:
            return "exit"
        if isinstance(result, int):
            return result
        s = str(result).strip().lower()
        if not s:
            return None
        if s in {"back", "← back", "< back", "go back", "previous", "prev", "b", "esc", "escape"}:
            return "back"
        if s in {"exit", "quit", "q"}:
            return "exit"
        if s in {"refresh", "history", "custom"}:
            return s
        return None
