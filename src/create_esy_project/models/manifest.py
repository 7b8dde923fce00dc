"""Generated package.json manifest for a new esy project."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from create_esy_project.models.options import ProjectOptions

MANIFEST_FILENAME = "package.json"

# Fixed dependency set of the jbuilder template
DEFAULT_DEPENDENCIES: dict[str, str] = {
    "@esy-ocaml/esy-installer": "^0.0.0",
    "@opam/jbuilder": "^1.0.0-beta16",
    "@opam/lambda-term": "^1.11.0",
    "@opam/lwt": "^3.1.0",
}

DEFAULT_DEV_TOOLING: dict[str, str] = {
    "@opam/merlin": "^3.0.5",
}


class EsyBuildConfig(BaseModel):
    """The ``esy`` section: build and install commands."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    build: list[str] = Field(default_factory=lambda: ["jbuilder build"])
    install: list[str] = Field(default_factory=lambda: ["esy-installer"])
    builds_in_source: str = Field(default="_build", alias="buildsInSource")


class EsyManifest(BaseModel):
    """package.json contents, serialized with npm-style camelCase keys."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    name: str
    version: str
    description: str
    author: str
    license: str
    esy: EsyBuildConfig = Field(default_factory=EsyBuildConfig)
    dependencies: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DEPENDENCIES)
    )
    peer_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="peerDependencies"
    )
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )
    private: bool = True

    @classmethod
    def from_options(cls, options: ProjectOptions) -> EsyManifest:
        """Build the manifest from collected project options.

        The OCaml version is pinned both as a peer dependency and as a
        dev dependency next to merlin.
        """
        return cls(
            name=options.name,
            version=options.version,
            description=options.description,
            author=options.author,
            license=options.license,
            peer_dependencies={"ocaml": options.ocaml},
            dev_dependencies={**DEFAULT_DEV_TOOLING, "ocaml": options.ocaml},
        )

    def to_json(self) -> str:
        """Serialize to 2-space indented JSON using the camelCase keys."""
        data = self.model_dump(mode="json", by_alias=True)
        return json.dumps(data, indent=2, ensure_ascii=False)


def write_manifest(manifest: EsyManifest, root: Path, overwrite: bool = True) -> Path:
    """Write the manifest to ``root/package.json`` and return its path.

    Raises:
        FileExistsError: If package.json exists and overwrite is False.
    """
    path = root / MANIFEST_FILENAME
    if path.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {path}")
    path.write_text(manifest.to_json() + "\n", encoding="utf-8")
    return path
