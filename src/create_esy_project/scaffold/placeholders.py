"""Placeholder substitution for template paths and file contents.

Tokens have the form ``%identifier%``. Known tokens are replaced from a
placeholder map; unknown tokens are left untouched.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

PROJECT_NAME_TOKEN = "%project_name%"

PLACEHOLDER_PATTERN = re.compile(r"%\w+%")
_PLACEHOLDER_PATTERN_BYTES = re.compile(rb"%\w+%")


def build_placeholders(project_name: str) -> dict[str, str]:
    """Return the placeholder map for a project short name."""
    return {PROJECT_NAME_TOKEN: project_name}


def replace_placeholder(token: str, placeholders: Mapping[str, str]) -> str:
    """Map a single token to its replacement, or return it unchanged."""
    return placeholders.get(token, token)


def substitute(text: str, placeholders: Mapping[str, str]) -> str:
    """Replace every known token in text."""
    return PLACEHOLDER_PATTERN.sub(
        lambda m: replace_placeholder(m.group(0), placeholders), text
    )


def substitute_bytes(data: bytes, placeholders: Mapping[str, str]) -> bytes:
    """Replace every known token in raw file content.

    Matching happens on bytes so content that is not valid UTF-8 passes
    through intact. Replacements are encoded as UTF-8.
    """

    def _replace(match: re.Match[bytes]) -> bytes:
        token = match.group(0).decode("ascii")
        if token not in placeholders:
            return match.group(0)
        return placeholders[token].encode("utf-8")

    return _PLACEHOLDER_PATTERN_BYTES.sub(_replace, data)
