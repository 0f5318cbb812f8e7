from __future__ import annotations

import logging
import subprocess
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from . import __version__
from .settings import load_settings
from .tui.environment import EnvironmentUnavailableError, ClusterContext, require_binary

app = typer.Typer(
    add_completion=False,
    help="oc_nav: interactive menu navigator for the OpenShift CLI",
    rich_markup_mode="rich",
)
console = Console()
logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _run_passthrough(argv: list[str]) -> int:
    """Run a command with the terminal's stdio and return its exit status."""
    console.print(f"[dim]Executing: {' '.join(argv)}[/dim]")
    logger.info("Passthrough: %s", argv)
    try:
        return subprocess.run(argv, check=False).returncode
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 127


def _require_binary_or_exit(binary: str) -> None:
    try:
        require_binary(binary)
    except EnvironmentUnavailableError:
        console.print(f"[red]Error:[/red] '{binary}' command not found. Please install OpenShift CLI.")
        raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"oc_nav {__version__}")
        raise typer.Exit()


def _interactive_menu() -> None:
    """Launch the menu navigator."""
    from .app import build_router

    settings = load_settings()
    router = build_router(settings, console)
    router.run()


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    project: Optional[str] = typer.Option(
        None,
        "--project",
        help="Switch to the specified project before starting the UI",
    ),
    create_project: Optional[str] = typer.Option(
        None,
        "--create-project",
        help="Create a new project with the given name and exit",
    ),
    delete_project: Optional[str] = typer.Option(
        None,
        "--delete-project",
        help="Delete the project with the given name and exit",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    [bold]oc_nav[/bold]: browse and run OpenShift CLI commands from a menu.

    [dim]Run without arguments to launch the interactive menu.[/dim]

    [bold]Keys:[/bold]
      Esc       Back (exit at the top level)
      Ctrl+C    Quit
      Ctrl+H    Command history
      Ctrl+X    Custom command
      Ctrl+R    Refresh context and project
    """
    from .logging import setup_logging

    settings = load_settings()
    setup_logging(settings)
    binary = settings.OC_NAV_BINARY

    _require_binary_or_exit(binary)

    if ctx.invoked_subcommand is not None:
        return

    if create_project:
        console.print(f"Attempting to create project: {create_project}")
        code = _run_passthrough([binary, "new-project", create_project])
        if code != 0:
            console.print(f"[red]Error creating project '{create_project}':[/red] exit status {code}")
            raise typer.Exit(code=1)
        console.print(
            f"Project '{create_project}' creation command executed. "
            f"Check '{binary} projects' to verify."
        )
        raise typer.Exit(code=0)

    if delete_project:
        console.print(f"Attempting to delete project: {delete_project}")
        code = _run_passthrough([binary, "delete", "project", delete_project])
        if code != 0:
            console.print(f"[red]Error deleting project '{delete_project}':[/red] exit status {code}")
            raise typer.Exit(code=1)
        console.print(
            f"Project '{delete_project}' deletion command executed. "
            f"Check '{binary} projects' to verify."
        )
        raise typer.Exit(code=0)

    if project:
        console.print(f"Attempting to switch to project: {project}")
        code = _run_passthrough([binary, "project", project])
        if code != 0:
            console.print(f"[yellow]Error switching to project '{project}':[/yellow] exit status {code}.")
            console.print("Starting TUI with current project.")
        else:
            console.print(f"Successfully switched to project '{project}'.")

    _interactive_menu()
    raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("status", help="[bold cyan]S[/bold cyan]how the current context and project")
def status():
    """Show which cluster context and project commands will run against."""
    s = load_settings()
    cluster = ClusterContext.detect(s.OC_NAV_BINARY)
    console.print(Panel.fit(
        "\n".join([
            f"[bold]CLI:[/bold]      {require_binary(s.OC_NAV_BINARY)}",
            f"[bold]Context:[/bold]  [cyan]{cluster.context}[/cyan]",
            f"[bold]Project:[/bold]  [green]{cluster.project}[/green]",
        ]),
        title="[bold]oc_nav[/bold]",
    ))
