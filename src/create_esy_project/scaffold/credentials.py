"""Author defaults read from the local git configuration."""

from __future__ import annotations

import asyncio

from create_esy_project.scaffold.errors import CommandError, CommandNotFoundError


async def run_command(program: str, *args: str) -> str:
    """Run a command and return its combined output, stripped.

    Raises:
        CommandNotFoundError: If program is not on PATH.
        CommandError: If the command exits with a non-zero status.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except FileNotFoundError as exc:
        raise CommandNotFoundError(program) from exc

    stdout_bytes, _ = await process.communicate()
    output = stdout_bytes.decode("utf-8", errors="replace").strip()

    if process.returncode != 0:
        raise CommandError(program, args, exit_code=process.returncode, output=output)

    return output


async def get_git_config(key: str, git: str = "git") -> str:
    """Return ``git config <key>``, or an empty string if unavailable.

    A missing git binary or an unset key are both treated as "no value".
    """
    try:
        return await run_command(git, "config", key)
    except (CommandError, CommandNotFoundError):
        return ""


def stringify_person(name: str = "", email: str = "", url: str = "") -> str:
    """Format a person as ``Name <email> (url)``, skipping empty parts."""
    parts: list[str] = []
    if name:
        parts.append(name)
    if email:
        parts.append(f"<{email}>")
    if url:
        parts.append(f"({url})")
    return " ".join(parts)


async def get_git_author(git: str = "git") -> str:
    """Build the default author string from user.name and user.email."""
    name = await get_git_config("user.name", git=git)
    email = await get_git_config("user.email", git=git)
    return stringify_person(name, email)
