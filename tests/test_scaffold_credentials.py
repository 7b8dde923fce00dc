"""Tests for create_esy_project.scaffold.credentials."""

from __future__ import annotations

import sys
from unittest.mock import AsyncMock, patch

import pytest

from create_esy_project.scaffold.credentials import (
    get_git_author,
    get_git_config,
    run_command,
    stringify_person,
)
from create_esy_project.scaffold.errors import CommandError, CommandNotFoundError


class TestRunCommand:
    """Tests for run_command()."""

    @pytest.mark.asyncio
    async def test_returns_stripped_output(self):
        """Captured stdout is returned with surrounding whitespace removed."""
        output = await run_command(sys.executable, "-c", "print('Jane Doe   ')")
        assert output == "Jane Doe"

    @pytest.mark.asyncio
    async def test_non_zero_exit_raises_command_error(self):
        """A failing command raises CommandError with the exit code and output."""
        with pytest.raises(CommandError) as exc_info:
            await run_command(
                sys.executable, "-c", "import sys; print('boom'); sys.exit(3)"
            )
        assert exc_info.value.exit_code == 3
        assert exc_info.value.output == "boom"
        assert "Exit code: 3" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_missing_binary_raises_not_found(self):
        """An unknown program raises CommandNotFoundError."""
        with pytest.raises(CommandNotFoundError, match="Couldn't find the binary"):
            await run_command("create-esy-project-no-such-binary")


class TestGetGitConfig:
    """Tests for get_git_config() soft-fail behavior."""

    @pytest.mark.asyncio
    async def test_missing_binary_returns_empty_string(self):
        """No git installed means an empty value, not an error."""
        assert await get_git_config("user.name", git="create-esy-project-no-such-git") == ""

    @pytest.mark.asyncio
    async def test_non_zero_exit_returns_empty_string(self):
        """An unset key (non-zero exit) yields an empty string."""
        with patch(
            "create_esy_project.scaffold.credentials.run_command",
            new=AsyncMock(side_effect=CommandError("git", ("config", "x"), exit_code=1)),
        ):
            assert await get_git_config("x") == ""

    @pytest.mark.asyncio
    async def test_returns_value_on_success(self):
        """A configured key is returned as-is."""
        with patch(
            "create_esy_project.scaffold.credentials.run_command",
            new=AsyncMock(return_value="Jane Doe"),
        ) as mock_run:
            assert await get_git_config("user.name") == "Jane Doe"
        mock_run.assert_awaited_once_with("git", "config", "user.name")


class TestStringifyPerson:
    """Tests for stringify_person()."""

    def test_name_and_email(self):
        """Name and email render as 'Name <email>'."""
        assert stringify_person("Jane Doe", "jane@example.com") == "Jane Doe <jane@example.com>"

    def test_all_parts(self):
        """A URL is appended in parentheses."""
        result = stringify_person("Jane", "j@example.com", "https://example.com")
        assert result == "Jane <j@example.com> (https://example.com)"

    def test_empty_parts_skipped(self):
        """Missing parts are omitted without stray separators."""
        assert stringify_person("", "j@example.com") == "<j@example.com>"
        assert stringify_person() == ""


class TestGetGitAuthor:
    """Tests for get_git_author()."""

    @pytest.mark.asyncio
    async def test_combines_name_and_email(self):
        """user.name and user.email are combined into one author string."""
        values = {"user.name": "Jane Doe", "user.email": "jane@example.com"}

        async def fake_config(key: str, git: str = "git") -> str:
            return values[key]

        with patch("create_esy_project.scaffold.credentials.get_git_config", new=fake_config):
            assert await get_git_author() == "Jane Doe <jane@example.com>"

    @pytest.mark.asyncio
    async def test_no_git_gives_empty_author(self):
        """Without git the author default is empty."""
        assert await get_git_author(git="create-esy-project-no-such-git") == ""
