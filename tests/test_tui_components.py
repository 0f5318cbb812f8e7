from __future__ import annotations

from io import StringIO

from prompt_toolkit.formatted_text import fragment_list_to_text, to_formatted_text
from questionary import Choice, Separator
from rich.console import Console

from oc_nav.tui.catalog import build_catalog
from oc_nav.tui.components import (
    menu_choices,
    render_command_output,
    render_error,
    render_item_details,
    status_line_text,
)
from oc_nav.tui.executor import ExecutionResult


def _console():
    return Console(file=StringIO(), width=100)


def test_menu_choices_use_row_indexes_and_nav_entry():
    nodes = build_catalog()[:2]

    root = menu_choices(nodes, at_root=True)
    assert [c.value for c in root if not isinstance(c, Separator)] == [0, 1, "exit"]
    assert all(isinstance(c, Choice) for c in root)
    assert isinstance(root[2], Separator)

    nested = menu_choices(nodes, at_root=False)
    assert nested[-1].value == "back"


def test_command_output_is_not_parsed_as_markup():
    console = _console()
    result = ExecutionResult(
        command_line="oc get pods",
        argv=("oc", "get", "pods"),
        output="NAME [bold]web[/bold]\n",
        succeeded=True,
        returncode=0,
    )

    render_command_output(console, result)
    text = console.file.getvalue()
    assert "$ oc get pods" in text
    assert "[bold]web[/bold]" in text


def test_failed_output_keeps_error_line():
    console = _console()
    result = ExecutionResult(
        command_line="false",
        argv=("false",),
        output="Error: exit status 1\n\n",
        succeeded=False,
        returncode=1,
    )

    render_command_output(console, result)
    assert "Error: exit status 1" in console.file.getvalue()


def test_item_details_lists_children():
    console = _console()
    workloads = build_catalog()[1]

    render_item_details(console, workloads)
    text = console.file.getvalue()
    assert "Workloads" in text
    assert "• Pods" in text


def test_error_pane_shows_cause_verbatim():
    console = _console()

    render_error(console, "Invalid input", "Invalid command: No closing quotation [red]", "Select it again")
    text = console.file.getvalue()
    assert "✗ Invalid input" in text
    assert "Cause: Invalid command: No closing quotation [red]" in text
    assert "→ Select it again" in text


def test_status_line_strips_markup_into_plain_text():
    fragments = to_formatted_text(status_line_text("[green]Command completed[/green] | ok"))

    assert fragment_list_to_text(fragments) == "Command completed | ok"
