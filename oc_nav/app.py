from __future__ import annotations

from rich.console import Console

from .settings import Settings
from .tui.catalog import build_catalog
from .tui.components import QuestionaryPrompts
from .tui.dispatcher import SelectionDispatcher
from .tui.environment import ClusterContext
from .tui.executor import SubprocessExecutor
from .tui.history import HistoryLog
from .tui.navigator import NavigationStack
from .tui.router import Router, StatusReportingExecutor
from .tui.state import UIState
from .tui.status import StatusNotifier, format_baseline


def build_router(settings: Settings, console: Console | None = None) -> Router:
    """Wire the navigator for one interactive session."""
    console = console or Console()
    binary = settings.OC_NAV_BINARY

    cluster = ClusterContext.detect(binary)
    status = StatusNotifier(
        baseline=format_baseline(cluster.context, cluster.project),
        default_duration=settings.OC_NAV_FLASH_SECONDS,
    )
    history = HistoryLog()
    executor = StatusReportingExecutor(SubprocessExecutor(history), status, console)
    state = UIState()
    stack = NavigationStack(build_catalog(binary))
    dispatcher = SelectionDispatcher(
        stack=stack,
        executor=executor,
        history=history,
        prompts=QuestionaryPrompts(console),
        state=state,
        binary=binary,
    )
    router = Router(
        console=console,
        settings=settings,
        state=state,
        stack=stack,
        dispatcher=dispatcher,
        status=status,
        cluster=cluster,
    )
    dispatcher.on_environment_change = router.refresh_environment
    return router
