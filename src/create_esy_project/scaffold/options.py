"""Project option collection, interactive or from defaults.

Builds the fixed list of questions for a new project and resolves each
one either from its default (``--yes``) or by prompting on the console.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from create_esy_project.models.config import DEFAULT_VERSION, InitConfig
from create_esy_project.models.options import ProjectOptions, Question
from create_esy_project.scaffold.credentials import get_git_author


def build_questions(root: Path, config: InitConfig, author: str) -> list[Question]:
    """Return the ordered questions asked for every new project.

    Args:
        root: Absolute project directory; its name is the default package name.
        config: Run configuration supplying CLI defaults.
        author: Default author string (may be empty).
    """
    return [
        Question(name="name", message="Package name", default=root.name),
        Question(name="description", message="Project description", default=config.description),
        Question(name="version", message="Version", default=DEFAULT_VERSION),
        Question(name="license", message="License", default=config.license),
        Question(name="author", message="Author", default=author),
        Question(name="ocaml", message="OCaml version", default=config.ocaml_version),
    ]


def collect_options(
    questions: list[Question],
    interactive: bool,
    console: Console | None = None,
) -> ProjectOptions:
    """Resolve every question to a value.

    Non-interactive collection takes each default without any I/O.
    Interactive collection prompts once per question, in order; an empty
    answer keeps the default. Prompt failures (EOF, interrupt) propagate.
    """
    if not interactive:
        return ProjectOptions.model_validate({q.name: q.default for q in questions})

    console = console or Console()
    answers: dict[str, str] = {}
    for question in questions:
        answers[question.name] = Prompt.ask(
            question.message,
            console=console,
            default=question.default,
            show_default=bool(question.default),
        )
    return ProjectOptions.model_validate(answers)


async def get_project_options(
    root: Path,
    config: InitConfig,
    console: Console | None = None,
) -> ProjectOptions:
    """Look up the git author, then collect options for root."""
    author = await get_git_author()
    questions = build_questions(root, config, author)
    return collect_options(questions, interactive=not config.yes, console=console)
