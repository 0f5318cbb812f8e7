"""Reusable UI components for the TUI."""
from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Callable

import questionary
from prompt_toolkit.filters import is_done
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.layout import ConditionalContainer, FormattedTextControl, HSplit, Layout, Window
from questionary import Choice, Separator
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.text import Text

if TYPE_CHECKING:
    from prompt_toolkit.application import Application

    from .catalog import MenuNode
    from .executor import ExecutionResult
    from .history import HistoryEntry
    from .navigator import NavigationStack


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#ee0000 bold"),          # OpenShift red
    ("question", "bold"),
    ("answer", "fg:#f0ab00 bold"),
    ("highlighted", "fg:#ee0000 bold"),
    ("pointer", "fg:#ee0000 bold"),
    ("selected", "fg:#f0ab00"),
    ("instruction", "fg:#8a8d90"),
    ("status", "bg:#303030"),
])

# Global shortcuts on the menu prompt: key -> navigation command
MENU_SHORTCUTS = {
    "escape": "back",
    "c-c": "exit",
    "c-r": "refresh",
    "c-h": "history",
    "c-x": "custom",
}


# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def nav_choices(at_root: bool, include_separator: bool = True) -> list:
    """Back (or Exit at the root) choice appended to every menu level."""
    choices: list = []
    if include_separator:
        choices.append(Separator())
    if at_root:
        choices.append(Choice(title="Exit", value="exit"))
    else:
        choices.append(Choice(title="← Back", value="back"))
    return choices


def menu_choices(nodes: tuple[MenuNode, ...], at_root: bool) -> list:
    choices: list = [
        Choice(title=node.name, value=index, description=node.description or None)
        for index, node in enumerate(nodes)
    ]
    return choices + nav_choices(at_root)


def _bind_shortcuts(question: questionary.Question, shortcuts: dict[str, str]) -> None:
    kb = KeyBindings()

    def _exit_with(result: str) -> Callable:
        def _handler(event):
            event.app.exit(result=result)
        return _handler

    for key, result in shortcuts.items():
        kb.add(key, eager=True)(_exit_with(result))

    app = question.application
    app.key_bindings = merge_key_bindings([b for b in (app.key_bindings, kb) if b is not None])


def status_line_text(text: str) -> ANSI:
    """Convert rich markup into prompt_toolkit formatted text (one line)."""
    buffer = StringIO()
    Console(file=buffer, force_terminal=True, color_system="standard", width=1000).print(
        text, end="", highlight=False, soft_wrap=True
    )
    return ANSI(buffer.getvalue())


def _attach_status_line(question: questionary.Question, status_text: Callable[[], str]) -> None:
    """Add a status line under the choices, re-read on every repaint."""
    app = question.application
    line = Window(
        FormattedTextControl(lambda: status_line_text(status_text())),
        height=1,
        style="class:status",
    )
    app.layout = Layout(HSplit([app.layout.container, ConditionalContainer(line, filter=~is_done)]))


class MenuPrompt:
    """Prompt for a row of the current level, with the status bar below it.

    The status line is re-read whenever the prompt repaints. ``invalidate``
    is thread safe and forces such a repaint, so an overlay that expires
    while the user is idle disappears from the screen.
    """

    def __init__(self):
        self._application: Application | None = None

    def __call__(self, stack: NavigationStack, status_text: Callable[[], str]) -> int | str | None:
        """
        Returns:
            Row index, a navigation command from ``MENU_SHORTCUTS`` / the nav
            choices, or None if the prompt was aborted
        """
        at_root = stack.depth() == 0
        question = questionary.select(
            f"{stack.title}",
            choices=menu_choices(stack.nodes, at_root),
            default=stack.selected_index if stack.nodes else None,
            style=BRAND_STYLE,
            instruction="(↑/↓ move, Enter select)",
        )
        _bind_shortcuts(question, MENU_SHORTCUTS)
        _attach_status_line(question, status_text)

        self._application = question.application
        try:
            return question.ask()
        finally:
            self._application = None

    def invalidate(self) -> None:
        app = self._application
        if app is not None:
            app.invalidate()


# ═══════════════════════════════════════════════════════════════════════════════
# PANELS
# ═══════════════════════════════════════════════════════════════════════════════

def render_breadcrumbs(console: Console, stack: NavigationStack) -> None:
    console.print(f"[dim]{stack.breadcrumbs()}[/dim]\n")


def render_item_details(console: Console, node: MenuNode) -> None:
    """Render name, description, command and children of a node."""
    content = Text()
    content.append(f"{node.name}\n\n", style="bold yellow")
    content.append(f"{node.description}\n")

    if node.command:
        content.append("\nCommand: ", style="cyan")
        content.append(f"{node.command}\n")

    if node.children:
        content.append("\nSubmenu items:\n", style="green")
        for child in node.children:
            content.append(f"• {child.name}\n")

    if node.is_executable:
        content.append("\nPress Enter to execute", style="green")

    console.print(Panel(content, title="Details", title_align="left"))


def render_command_output(console: Console, result: ExecutionResult) -> None:
    """Render the captured output of the last command.

    Output is shown as plain text; markup characters coming from the
    child process are not interpreted.
    """
    body = Text()
    body.append(f"$ {result.command_line}\n\n", style="yellow")
    output = result.output
    if not result.succeeded and output.startswith("Error: "):
        first, _, rest = output.partition("\n")
        body.append(first, style="red")
        body.append(f"\n{rest}" if rest else "")
    else:
        body.append(output)
    console.print(
        Panel(
            body,
            title="Command Output",
            title_align="left",
            border_style="green" if result.succeeded else "red",
        )
    )


def render_error(console: Console, title: str, cause: str, hint: str | None = None) -> None:
    """Render an error panel above the menu.

    ``cause`` usually echoes user input, so it is shown as plain text.
    """
    body = Text()
    body.append(f"✗ {title}\n\n", style="bold red")
    body.append("Cause: ", style="yellow")
    body.append(cause)
    if hint:
        body.append(f"\n\n→ {hint}", style="dim")
    console.print(Panel(body, title="Error", title_align="left", border_style="red"))


def confirm_destructive_action(message: str, default: bool = False, console: Console | None = None) -> bool:
    """Confirm a destructive action with explicit warning.

    Returns:
        True if confirmed, False otherwise
    """
    return Confirm.ask(f"[yellow]⚠[/yellow]  {message}", default=default, console=console)


# ═══════════════════════════════════════════════════════════════════════════════
# PROMPTS (used by interactive actions)
# ═══════════════════════════════════════════════════════════════════════════════

class QuestionaryPrompts:
    """``Prompts`` implementation backed by questionary and rich."""

    def __init__(self, console: Console):
        self.console = console

    def ask_text(self, label: str, default: str | None = None, max_length: int | None = None) -> str | None:
        def _validate(value: str) -> bool | str:
            if max_length is not None and len(value) > max_length:
                return f"At most {max_length} characters"
            return True

        return questionary.text(
            label,
            default=default or "",
            validate=_validate,
            style=BRAND_STYLE,
        ).ask()

    def confirm(self, message: str) -> bool:
        return confirm_destructive_action(message, default=False, console=self.console)

    def choose_entry(self, entries: list[HistoryEntry]) -> HistoryEntry | None:
        by_sequence = {entry.sequence: entry for entry in entries}
        choice = questionary.select(
            "Command History (Enter to run again)",
            choices=[
                *[Choice(title=f"{e.sequence}. {e.command_line}", value=e.sequence) for e in entries],
                Separator(),
                Choice(title="Close", value="close"),
            ],
            style=BRAND_STYLE,
        ).ask()
        return by_sequence.get(choice)

    def show_message(self, text: str) -> None:
        self.console.print(Panel.fit(text, border_style="cyan"))
        questionary.press_any_key_to_continue().ask()
