"""Typer CLI application for aix."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import aix
from aix._types import Extra, ProjectType
from aix.cli._prompts import prompt_extras, prompt_project_type
from aix.errors import GenerationError, UnknownExtraError, WriteError
from aix.generator import GenerationRequest, generate, validate_project_name
from aix.log import setup_logging

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"aix {aix.__version__}")
        raise Exit()


@app.callback()
def main(
    verbose: Annotated[
        int,
        Option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug)."),
    ] = 0,
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """aix — scaffolding tool for Rust + Actix web projects."""
    setup_logging(verbose)


def _print_extras() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available extras")
    _console.print("[dim]│[/]")
    for e in Extra:
        _console.print(f"[dim]│[/]  [bold cyan]{e.value:<10}[/] [bold]{e.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 10} [dim]{e.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_extras_callback(value: bool) -> None:
    if value:
        _print_extras()
        raise Exit()


def _fail(err: GenerationError) -> Exit:
    _console.print(f"[bold red]Error:[/] {escape(str(err))}")
    if isinstance(err, UnknownExtraError):
        _print_extras()
    elif isinstance(err, WriteError):
        if err.removed:
            _console.print("[dim]The partially generated project was removed.[/]")
        elif err.written:
            _console.print("[dim]Written before the failure:[/]")
            for name in err.written:
                _console.print(f"[dim]│[/]  {escape(name)}")
        else:
            _console.print("[dim]No files were written.[/]")
    return Exit(code=err.exit_code)


def _is_interactive() -> bool:
    return sys.stdin.isatty()


@app.command()
def new(
    project_name: Annotated[str, Argument(help="Name of the project, also used as crate name")],
    directory: Annotated[
        Path | None,
        Option(
            "--dir",
            "-d",
            help="Directory to generate the project in. Defaults to ./PROJECT_NAME.",
            show_default=False,
        ),
    ] = None,
    project_type: Annotated[
        ProjectType | None,
        Option("--type", "-t", help="Project layout.", show_default=False),
    ] = None,
    docker: Annotated[bool, Option("--docker", help="Add a Dockerfile and .dockerignore.")] = False,
    ci: Annotated[bool, Option("--ci", help="Add GitHub Actions workflows.")] = False,
    extras: Annotated[
        list[str] | None,
        Option(
            "--extra",
            "-e",
            help="Extra to add, repeatable. Run with --list-extras / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    force: Annotated[
        bool, Option("--force", "-f", help="Generate into a non-empty directory.")
    ] = False,
    list_extras: Annotated[
        bool,
        Option(
            "--list-extras",
            "-l",
            help="List all available extras and exit.",
            callback=_list_extras_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Rust + Actix project."""
    try:
        validate_project_name(project_name)
    except GenerationError as err:
        raise _fail(err) from None

    selected = set(extras or [])
    if docker:
        selected.add(Extra.DOCKER.value)
    if ci:
        selected.add(Extra.CI.value)

    interactive = _is_interactive()
    destination = directory if directory is not None else Path(project_name)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  aix v{aix.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if project_type is None and interactive:
        project_type = prompt_project_type()
    else:
        project_type = project_type or ProjectType.STANDALONE
        _console.print("[bold green]◇[/]  Choose a project layout")
        _console.print(f"[dim]│[/]  {project_type.label}")
        _console.print("[dim]│[/]")

    if not selected and interactive:
        selected = {e.value for e in prompt_extras()}
    else:
        display = ", ".join(sorted(selected)) or "None"
        _console.print("[bold green]◇[/]  Add extras?")
        _console.print(f"[dim]│[/]  {escape(display)}")
        _console.print("[dim]│[/]")

    request = GenerationRequest(
        destination=destination,
        project_name=project_name,
        extras=frozenset(selected),
        project_type=project_type,
        overwrite=force,
    )
    logger.debug("Generation request: %s", request)

    _console.print(f"[bold green]◇[/]  Creating {escape(str(destination))}/...")

    try:
        result = generate(request)
    except GenerationError as err:
        raise _fail(err) from err

    for name in result.written:
        _console.print(f"[dim]│[/]  [green]ADD[/] {escape(name)}")

    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! cd {escape(str(destination))} && cargo run")
    _console.print()
