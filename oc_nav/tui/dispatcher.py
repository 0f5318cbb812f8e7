"""Turn an activated menu row into navigation, a command run, or an action."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .actions import ACTIONS, ActionContext, ActionInputError, NamedAction
from .history import HistoryEntry

if TYPE_CHECKING:
    from .actions import Prompts
    from .catalog import MenuNode
    from .executor import CommandExecutor, ExecutionResult
    from .history import HistoryLog
    from .navigator import NavigationStack
    from .state import UIState

logger = logging.getLogger(__name__)

DESCEND = "descend"
EXECUTE = "execute"
ACTION = "action"
CANCELLED = "cancelled"
INVALID = "invalid"
DETAILS = "details"
IGNORED = "ignored"


@dataclass(frozen=True)
class DispatchOutcome:
    """What an activation did, for the shell to render."""

    kind: str
    node: MenuNode | None = None
    result: ExecutionResult | None = None
    message: str | None = None


class SelectionDispatcher:
    """Decide what activating a row means.

    Decision order, first match wins:
      1. group node -> descend
      2. executable leaf -> run its command as-is
      3. leaf named in the action registry -> interactive flow
      4. anything else -> show its description
    """

    def __init__(
        self,
        stack: NavigationStack,
        executor: CommandExecutor,
        history: HistoryLog,
        prompts: Prompts,
        state: UIState,
        binary: str = "oc",
        actions: dict[str, NamedAction] | None = None,
        on_environment_change: Callable[[], None] | None = None,
    ):
        self.stack = stack
        self.executor = executor
        self.history = history
        self.prompts = prompts
        self.state = state
        self.binary = binary
        self.actions = ACTIONS if actions is None else actions
        self.on_environment_change = on_environment_change

    def activate(self, index: int) -> DispatchOutcome:
        node = self.stack.node_at(index)
        if node is None:
            return DispatchOutcome(kind=IGNORED)
        self.stack.select(index)

        if node.is_group:
            self.stack.descend(node)
            return DispatchOutcome(kind=DESCEND, node=node)

        if node.is_executable:
            result = self.executor.execute(node.command)
            return DispatchOutcome(kind=EXECUTE, node=node, result=result)

        action = self.actions.get(node.name)
        if action is not None:
            return self._run(action, node)

        return DispatchOutcome(kind=DETAILS, node=node)

    def run_action(self, name: str) -> DispatchOutcome:
        """Run a registered action without going through the menu."""
        action = self.actions.get(name)
        if action is None:
            raise KeyError(name)
        return self._run(action, None)

    def _run(self, action: NamedAction, node: MenuNode | None) -> DispatchOutcome:
        ctx = ActionContext(
            prompts=self.prompts,
            binary=self.binary,
            history=self.history,
            state=self.state,
        )
        try:
            request = action.flow(ctx)
        except ActionInputError as e:
            logger.info("Action %r rejected input: %s", action.name, e)
            return DispatchOutcome(kind=INVALID, node=node, message=str(e))

        if request is None:
            return DispatchOutcome(kind=CANCELLED, node=node)

        if isinstance(request, HistoryEntry):
            result = self.history.reexecute(request, self.executor)
        else:
            result = self.executor.execute(list(request))

        if action.refreshes_project and self.on_environment_change is not None:
            self.on_environment_change()

        return DispatchOutcome(kind=ACTION, node=node, result=result)
