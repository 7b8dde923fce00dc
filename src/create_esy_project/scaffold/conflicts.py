"""Pre-flight check for files that could conflict with a new project."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from create_esy_project.scaffold.errors import ProjectConflictError

# Entries that may already exist in the target without blocking creation
VALID_FILES: frozenset[str] = frozenset(
    {
        ".DS_Store",
        "Thumbs.db",
        ".git",
        ".gitignore",
        ".idea",
        "README.md",
        "LICENSE",
        "web.iml",
        ".hg",
        ".hgignore",
        ".hgcheck",
    }
)


def find_conflicts(directory: Path, allowed: Collection[str] = VALID_FILES) -> list[str]:
    """Return the names of entries in directory that are not in allowed.

    Only immediate children are inspected. OSError from listing the
    directory propagates.
    """
    return sorted(entry.name for entry in directory.iterdir() if entry.name not in allowed)


def ensure_safe_directory(directory: Path, allowed: Collection[str] = VALID_FILES) -> None:
    """Raise ProjectConflictError if directory holds unexpected entries."""
    conflicts = find_conflicts(directory, allowed)
    if conflicts:
        raise ProjectConflictError(conflicts, directory=directory)
