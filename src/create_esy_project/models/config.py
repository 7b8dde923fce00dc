"""Run configuration for create-esy-project.

Captures the parsed command-line flags as an immutable model that is
passed explicitly to the project initializer.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DESCRIPTION = "OCaml workflow with Esy"
DEFAULT_LICENSE = "MIT"
DEFAULT_OCAML_VERSION = "~4.6.000"
DEFAULT_VERSION = "0.1.0"


class InitConfig(BaseModel):
    """Settings for a single project creation run.

    ``yes`` disables prompting and accepts every default.
    ``check_conflicts`` refuses to write into a directory that already
    holds files outside the allow-list. ``template_dir`` overrides the
    bundled stub tree.
    """

    model_config = {"extra": "forbid", "frozen": True}

    project_name: str = Field(min_length=1)
    yes: bool = False
    description: str = DEFAULT_DESCRIPTION
    license: str = DEFAULT_LICENSE
    ocaml_version: str = DEFAULT_OCAML_VERSION
    check_conflicts: bool = True
    overwrite: bool = True
    verbose: bool = False
    template_dir: Path | None = None

    @property
    def root(self) -> Path:
        """Absolute path of the project directory."""
        return Path(self.project_name).resolve()

    @property
    def app_name(self) -> str:
        """Short project name: the final segment of the resolved path."""
        return self.root.name
