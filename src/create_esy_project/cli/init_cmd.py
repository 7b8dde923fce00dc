"""create-esy-project CLI command.

Creates a new esy project directory with a generated package.json and
the jbuilder stub tree. Interactive by default; ``--yes`` accepts every
default without prompting.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from create_esy_project import __version__
from create_esy_project.models.config import (
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE,
    DEFAULT_OCAML_VERSION,
    InitConfig,
)
from create_esy_project.scaffold.errors import ProjectConflictError, ScaffoldError
from create_esy_project.scaffold.init import create_project

PROGRAM_NAME = "create-esy-project"
ISSUES_URL = "https://github.com/esy-ocaml/create-esy-project/issues/new"

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit()


def _print_missing_name() -> None:
    err_console.print("Please specify the project directory:")
    err_console.print(f"  [cyan]{PROGRAM_NAME}[/cyan] [green]<project-directory>[/green]")
    err_console.print()
    err_console.print("For example:")
    err_console.print(f"  [cyan]{PROGRAM_NAME}[/cyan] [green]my-esy-project[/green]")
    err_console.print()
    err_console.print(f"Run [cyan]{PROGRAM_NAME} --help[/cyan] to see all options.")


def _print_conflicts(name: str, error: ProjectConflictError) -> None:
    err_console.print(
        f"The directory [green]{name}[/green] contains files that could conflict:"
    )
    err_console.print()
    for path in error.conflicting_files:
        err_console.print(f"  {path}", markup=False)
    err_console.print()
    err_console.print(
        "Either try using a new directory name, or remove the files listed above."
    )


def init(
    project_name: Optional[str] = typer.Argument(
        None, metavar="<project-name>", help="Directory to create the project in"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Disable interactivity and use defaults"
    ),
    description: str = typer.Option(
        DEFAULT_DESCRIPTION, "--description", help="Project description"
    ),
    license: str = typer.Option(DEFAULT_LICENSE, "--license", help="License"),
    ocaml_version: str = typer.Option(
        DEFAULT_OCAML_VERSION, "--ocaml-version", help="OCaml version"
    ),
    check: bool = typer.Option(
        True,
        "--check/--no-check",
        help="Refuse to create the project in a directory with conflicting files",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Print additional logs"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new OCaml project managed by esy.

    Only <project-name> is required.
    """
    if not project_name:
        _print_missing_name()
        raise typer.Exit(code=1)

    config = InitConfig(
        project_name=project_name,
        yes=yes,
        description=description,
        license=license,
        ocaml_version=ocaml_version,
        check_conflicts=check,
        verbose=verbose,
    )

    try:
        asyncio.run(create_project(config))
    except ProjectConflictError as e:
        _print_conflicts(project_name, e)
        raise typer.Exit(code=1)
    except (OSError, EOFError, KeyboardInterrupt, ScaffoldError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
