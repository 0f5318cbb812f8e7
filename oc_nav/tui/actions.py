"""Named interactive actions for leaves that have no fixed command.

Each action collects a few values through ``Prompts`` and returns an
argument list (or a history entry to replay). Nothing here formats
command strings: values with spaces stay single arguments.
"""
from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, Sequence, Union

from .catalog import COMMAND_HISTORY, CUSTOM_COMMANDS
from .history import HistoryEntry

if TYPE_CHECKING:
    from .history import HistoryLog
    from .state import UIState


PROJECT_NAME_MAX = 50
DESCRIPTION_MAX = 100
POD_NAME_MAX = 100

ActionResult = Union[Sequence[str], HistoryEntry, None]


class ActionInputError(ValueError):
    """User input could not be turned into a command."""


class Prompts(Protocol):
    """Interactive collaborator used by action flows."""

    def ask_text(self, label: str, default: str | None = None, max_length: int | None = None) -> str | None: ...

    def confirm(self, message: str) -> bool: ...

    def choose_entry(self, entries: list[HistoryEntry]) -> HistoryEntry | None: ...

    def show_message(self, text: str) -> None: ...


@dataclass
class ActionContext:
    prompts: Prompts
    binary: str
    history: HistoryLog
    state: UIState


@dataclass(frozen=True)
class NamedAction:
    name: str
    flow: Callable[[ActionContext], ActionResult]
    refreshes_project: bool = False


# Action registry - maps menu node names to flows
ACTIONS: dict[str, NamedAction] = {}


def register_action(name: str, refreshes_project: bool = False):
    """Decorator to register an action flow under a menu node name.

    Usage:
        @register_action("Pod logs")
        def pod_logs(ctx: ActionContext) -> ActionResult:
            ...
    """
    def decorator(fn: Callable[[ActionContext], ActionResult]):
        ACTIONS[name] = NamedAction(name=name, flow=fn, refreshes_project=refreshes_project)
        return fn
    return decorator


def _ask(ctx: ActionContext, label: str, default: str | None = None, max_length: int | None = None) -> str | None:
    value = ctx.prompts.ask_text(label, default=default, max_length=max_length)
    if value is None:
        return None
    value = value.strip()
    return value or None


@register_action("Switch project", refreshes_project=True)
def switch_project(ctx: ActionContext) -> ActionResult:
    name = _ask(ctx, "Enter project name:", default=ctx.state.last_project, max_length=PROJECT_NAME_MAX)
    if name is None:
        return None
    ctx.state.remember(last_project=name)
    return [ctx.binary, "project", name]


@register_action("Create new project", refreshes_project=True)
def create_project(ctx: ActionContext) -> ActionResult:
    name = _ask(ctx, "Project name:", max_length=PROJECT_NAME_MAX)
    if name is None:
        return None
    description = _ask(ctx, "Description (optional):", max_length=DESCRIPTION_MAX)
    argv = [ctx.binary, "new-project", name]
    if description:
        argv.append(f"--description={description}")
    ctx.state.remember(last_project=name)
    return argv


@register_action("Delete project", refreshes_project=True)
def delete_project(ctx: ActionContext) -> ActionResult:
    name = _ask(ctx, "Enter project name to delete:", max_length=PROJECT_NAME_MAX)
    if name is None:
        return None
    if not ctx.prompts.confirm(
        f"Are you sure you want to delete project '{name}'? This action cannot be undone!"
    ):
        return None
    return [ctx.binary, "delete", "project", name]


@register_action("Pod logs")
def pod_logs(ctx: ActionContext) -> ActionResult:
    pod = _ask(ctx, "Enter pod name:", default=ctx.state.last_pod, max_length=POD_NAME_MAX)
    if pod is None:
        return None
    ctx.state.remember(last_pod=pod)
    return [ctx.binary, "logs", pod]


@register_action("Follow logs")
def follow_logs(ctx: ActionContext) -> ActionResult:
    # Runs until the pod stops logging or the user interrupts oc.
    pod = _ask(ctx, "Enter pod name:", default=ctx.state.last_pod, max_length=POD_NAME_MAX)
    if pod is None:
        return None
    ctx.state.remember(last_pod=pod)
    return [ctx.binary, "logs", "-f", pod]


@register_action(CUSTOM_COMMANDS)
def custom_command(ctx: ActionContext) -> ActionResult:
    raw = _ask(ctx, f"Enter {ctx.binary} command:")
    if raw is None:
        return None
    try:
        argv = shlex.split(raw)
    except ValueError as e:
        raise ActionInputError(f"Invalid command: {e}") from e
    if not argv:
        return None
    if argv[0] != ctx.binary:
        argv.insert(0, ctx.binary)
    return argv


@register_action(COMMAND_HISTORY)
def command_history(ctx: ActionContext) -> ActionResult:
    entries = ctx.history.entries(newest_first=True)
    if not entries:
        ctx.prompts.show_message("No commands in history")
        return None
    return ctx.prompts.choose_entry(entries)
