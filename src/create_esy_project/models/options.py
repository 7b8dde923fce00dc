"""Question descriptors and the resolved project options."""

from __future__ import annotations

from pydantic import BaseModel


class Question(BaseModel):
    """A single prompt: option key, prompt text, and default answer."""

    model_config = {"frozen": True}

    name: str
    message: str
    default: str = ""


class ProjectOptions(BaseModel):
    """Answers for every question, one entry per option key."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str
    description: str
    version: str
    license: str
    author: str
    ocaml: str
