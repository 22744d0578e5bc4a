from __future__ import annotations

import io

import pytest

from conftest import PRIVATE_KEY
from soc2_bootstrap.prompts import TerminalCredentialProvider


def test_terminal_provider_reads_in_order() -> None:
    stdin = io.StringIO("Jane Smith\njane@example.com\n" + PRIVATE_KEY)
    stdout = io.StringIO()
    p = TerminalCredentialProvider(stdin=stdin, stdout=stdout)

    assert p.commit_name() == "Jane Smith"
    assert p.commit_email() == "jane@example.com"
    assert p.private_key(repository_label="SOC2 repository") == PRIVATE_KEY

    out = stdout.getvalue()
    assert "Please enter the name to use for Git commits" in out
    assert "Press Ctrl+D on a new line when finished" in out


def test_repository_url_prompt_shows_example() -> None:
    stdout = io.StringIO()
    p = TerminalCredentialProvider(stdin=io.StringIO("  git@github.com:org/repo.git  \n"), stdout=stdout)

    assert p.repository_url(example="git@github.com:GetDATS/X.git") == "git@github.com:org/repo.git"
    assert "Example: git@github.com:GetDATS/X.git" in stdout.getvalue()


def test_closed_stdin_on_line_prompt() -> None:
    p = TerminalCredentialProvider(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(EOFError):
        p.commit_name()
