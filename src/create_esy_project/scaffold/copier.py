"""Recursive template copy with placeholder substitution.

Every path segment and every file body under the template directory is
passed through placeholder substitution on its way to the destination.
"""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path

from create_esy_project.scaffold.placeholders import substitute, substitute_bytes


def _get_templates_dir() -> Path:
    """Return the path to the bundled stub templates."""
    return Path(__file__).parent / "stubs"


def default_template_dir() -> Path:
    """Return the stub tree used for new projects."""
    return _get_templates_dir() / "jbuilder"


def destination_for(relative: Path, dest: Path, placeholders: Mapping[str, str]) -> Path:
    """Compute the destination path, substituting each segment of relative."""
    target = dest
    for part in relative.parts:
        target = target / substitute(part, placeholders)
    return target


def copy_template(
    src: Path,
    dest: Path,
    placeholders: Mapping[str, str],
    overwrite: bool = True,
) -> list[str]:
    """Copy the template tree at src into dest.

    Hidden entries are included. The first filesystem error stops the walk
    and propagates; files already written stay in place.

    Args:
        src: Template root directory.
        dest: Destination directory, created if missing.
        placeholders: Token to replacement map.
        overwrite: If False, raise FileExistsError instead of replacing
            an existing destination file.

    Returns:
        Written file paths relative to dest, in posix form.

    Raises:
        FileNotFoundError: If src is not a directory.
        FileExistsError: If a destination file exists and overwrite is False.
    """
    if not src.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src}")

    dest.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for entry in sorted(src.rglob("*")):
        relative = entry.relative_to(src)
        target = destination_for(relative, dest, placeholders)

        if entry.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            continue

        if target.exists() and not overwrite:
            raise FileExistsError(f"Refusing to overwrite existing file: {target}")

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(substitute_bytes(entry.read_bytes(), placeholders))
        shutil.copymode(entry, target)
        written.append(target.relative_to(dest).as_posix())

    return written
