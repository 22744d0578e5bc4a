"""Operator input.

Steps never read the terminal directly; they ask a CredentialProvider.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class CredentialProvider(Protocol):
    def commit_name(self) -> str:
        ...

    def commit_email(self) -> str:
        ...

    def private_key(self, *, repository_label: str) -> str:
        """Return key material verbatim (read until end-of-input)."""
        ...

    def repository_url(self, *, example: str) -> str:
        ...


class TerminalCredentialProvider:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._out)
        self._out.flush()

    def _line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("no input available")
        return line.rstrip("\n")

    def commit_name(self) -> str:
        self._say("", "Please enter the name to use for Git commits (e.g., 'Jane Smith'):")
        return self._line().strip()

    def commit_email(self) -> str:
        self._say("Please enter the email to use for Git commits (e.g., 'jane.smith@company.com'):")
        return self._line().strip()

    def private_key(self, *, repository_label: str) -> str:
        self._say(
            "",
            f"Please paste your GitHub deploy key (private key) for the {repository_label}:",
            "Press Ctrl+D on a new line when finished",
            "",
        )
        return self._in.read()

    def repository_url(self, *, example: str) -> str:
        self._say(
            "",
            "Please enter your GitHub repository URL (in SSH format):",
            f"Example: {example}",
        )
        return self._line().strip()
