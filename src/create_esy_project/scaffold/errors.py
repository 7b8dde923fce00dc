"""Exceptions raised while creating a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for project creation failures."""


class ProjectConflictError(ScaffoldError):
    """Raised when the target directory holds files that could conflict."""

    def __init__(self, conflicting_files: list[str], directory: Path | None = None) -> None:
        self.conflicting_files = conflicting_files
        self.directory = directory
        files_str = ", ".join(conflicting_files)
        super().__init__(f"Directory contains files that could conflict: {files_str}")


class CommandError(ScaffoldError):
    """Raised when a helper command exits with a non-zero status."""

    def __init__(
        self,
        program: str,
        args: tuple[str, ...] = (),
        exit_code: int | None = None,
        output: str = "",
        cwd: Path | None = None,
    ) -> None:
        self.program = program
        self.args_list = list(args)
        self.exit_code = exit_code
        self.output = output
        self.cwd = cwd or Path.cwd()
        super().__init__(
            "\n".join(
                [
                    "Command failed.",
                    f"Exit code: {exit_code}",
                    f"Command: {program}",
                    f"Arguments: {' '.join(args)}",
                    f"Directory: {self.cwd}",
                    f"Output:\n{output}",
                ]
            )
        )


class CommandNotFoundError(ScaffoldError):
    """Raised when the helper binary is not installed."""

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Couldn't find the binary {program}")
