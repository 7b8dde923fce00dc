"""Project creation for `create-esy-project`.

Creates the project directory, writes package.json from the collected
options, and copies the jbuilder stub tree with the project name
substituted into paths and file contents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from create_esy_project.models.config import InitConfig
from create_esy_project.models.manifest import MANIFEST_FILENAME, EsyManifest, write_manifest
from create_esy_project.models.options import ProjectOptions
from create_esy_project.scaffold.conflicts import ensure_safe_directory
from create_esy_project.scaffold.copier import copy_template, default_template_dir
from create_esy_project.scaffold.options import get_project_options
from create_esy_project.scaffold.placeholders import build_placeholders

console = Console()

# Suggested commands: (command, explanation)
_NEXT_STEPS: list[tuple[str, str]] = [
    ("esy install", "Installs all the dependencies."),
    ("esy build", "Builds the project and its dependencies."),
    ("esy x hello", "Runs the example executable."),
]


@dataclass
class ProjectResult:
    """Outcome of a successful project creation."""

    root: Path
    app_name: str
    options: ProjectOptions
    created: list[str] = field(default_factory=list)


async def create_project(config: InitConfig, out: Console | None = None) -> ProjectResult:
    """Create a new esy project as described by config.

    Steps run strictly in order and the first failure propagates. The
    conflict check, when enabled, happens before anything is written.
    A failed run may leave a partially populated directory behind.

    Args:
        config: Parsed run configuration.
        out: Console for prompts and the summary. Defaults to stdout.

    Returns:
        ProjectResult with the resolved root and written files.

    Raises:
        ProjectConflictError: If conflict checking is on and the
            directory holds unexpected entries.
        OSError: On any filesystem failure.
        EOFError: If an interactive prompt gets no input.
    """
    out = out or console
    root = config.root
    app_name = config.app_name

    root.mkdir(parents=True, exist_ok=True)

    if config.check_conflicts:
        ensure_safe_directory(root)

    out.print()
    out.print(f"Creating a new esy project in [green]{root}[/green].")
    out.print()

    options = await get_project_options(root, config, console=out)

    manifest = EsyManifest.from_options(options)
    write_manifest(manifest, root, overwrite=config.overwrite)
    created = [MANIFEST_FILENAME]

    placeholders = build_placeholders(app_name)
    template_dir = config.template_dir or default_template_dir()
    created.extend(
        copy_template(template_dir, root, placeholders, overwrite=config.overwrite)
    )

    if config.verbose:
        for path in created:
            out.print(f"  [green]✓[/green] {path}")

    render_summary(out, root, app_name)

    return ProjectResult(root=root, app_name=app_name, options=options, created=created)


def render_summary(out: Console, root: Path, app_name: str) -> None:
    """Print the success message and suggested next commands."""
    out.print()
    out.print(f"[green][bold]Success![/bold][/green] Created {app_name} at {root}")
    out.print("Inside that directory, you can run several commands:")
    out.print()
    for command, explanation in _NEXT_STEPS:
        out.print(f"  [cyan]{command}[/cyan]")
        out.print(f"    {explanation}")
        out.print()
    out.print("We suggest that you begin by typing:")
    out.print()
    out.print(f"  [cyan]cd[/cyan] {app_name}")
    out.print("  [cyan]esy install[/cyan]")
    out.print("  [cyan]esy build[/cyan]")
    out.print()
    out.print("Happy hacking!")
