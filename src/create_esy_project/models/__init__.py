"""create-esy-project data models - re-exports all public model classes."""

from create_esy_project.models.config import InitConfig
from create_esy_project.models.manifest import EsyBuildConfig, EsyManifest
from create_esy_project.models.options import ProjectOptions, Question

__all__ = [
    "EsyBuildConfig",
    "EsyManifest",
    "InitConfig",
    "ProjectOptions",
    "Question",
]
