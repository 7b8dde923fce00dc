"""create-esy-project CLI entry point."""

import typer

from create_esy_project.cli.init_cmd import ISSUES_URL, PROGRAM_NAME, init

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Create a new OCaml project managed by esy",
    add_completion=False,
)

app.command(
    epilog=f"If you have any problems, do not hesitate to file an issue: {ISSUES_URL}",
)(init)
