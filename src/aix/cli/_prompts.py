"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from aix._types import Extra, ProjectType

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _multi_select(question: str, options: list[T], labels: list[str]) -> list[T]:
    """Display a clack-style checkbox prompt. Nothing selected yields an empty list."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
        multi_select=True,
        multi_select_empty_ok=True,
        multi_select_select_on_accept=False,
        show_multi_select_hint=True,
    )
    raw_indices = menu.show()
    indices = sorted(int(i) for i in raw_indices or ())
    selected = [options[i] for i in indices]

    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    if selected:
        for i in indices:
            _console.print(f"[dim]│[/]  [bold green]●[/] {labels[i]}")
    else:
        _console.print("[dim]│[/]  None")
    _print_bar()

    return selected


def prompt_project_type() -> ProjectType:
    """Prompt user to choose a project layout."""
    types = list(ProjectType)
    labels = [t.label for t in types]
    return _select("Choose a project layout", types, labels)


def prompt_extras() -> list[Extra]:
    """Prompt user to pick any number of extras."""
    extras = list(Extra)
    labels = [f"{e.label} — {e.description}" for e in extras]
    return _multi_select("Add extras?", extras, labels)
