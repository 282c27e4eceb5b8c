# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Structured error system for commitme.

Operational failures (a broken config file, no ``git`` on ``PATH``, a
missing commit-message file) are raised as :class:`CommitMeError`. Each
carries a unique ``CM-NAMED-KEY`` code, a message and an optional hint.

Non-compliant commit messages are *not* errors in this sense: they are
ordinary data and are reported as :class:`~commitme.diagnostics.Diagnostic`
values by the validator.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorCode           │ A unique named ID like "CM-CONFIG-INVALID-KEY" │
    │                     │ for each operational failure.                  │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorInfo           │ Code + message + hint, bundled together.       │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ CommitMeError       │ The exception you raise. Renderers read its    │
    │                     │ ErrorInfo to print a readable message.         │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ explain()           │ Looks up a code and returns the long form.     │
    └─────────────────────┴────────────────────────────────────────────────┘

Code categories::

    CM-CONFIG-*       Configuration file errors
    CM-SOURCE-*       Commit source errors (git, message files)

Usage::

    from commitme.errors import CommitMeError, E

    raise CommitMeError(
        code=E.CONFIG_INVALID_KEY,
        message="Unknown key 'tpyes' in commitme.toml",
        hint="Did you mean 'types'?",
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all commitme error codes."""

    # Configuration
    CONFIG_INVALID_KEY = 'CM-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CM-CONFIG-INVALID-VALUE'
    CONFIG_PARSE_ERROR = 'CM-CONFIG-PARSE-ERROR'
    CONFIG_NOT_FOUND = 'CM-CONFIG-NOT-FOUND'

    # Commit sources
    SOURCE_GIT_UNAVAILABLE = 'CM-SOURCE-GIT-UNAVAILABLE'
    SOURCE_GIT_FAILED = 'CM-SOURCE-GIT-FAILED'
    SOURCE_FILE_NOT_FOUND = 'CM-SOURCE-FILE-NOT-FOUND'


E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CM-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class CommitMeError(Exception):
    """Base exception for all commitme operational errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='commitme.toml contains a key commitme does not recognize.',
        hint='Valid keys are: base_branch, scopes, types.',
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='A value in commitme.toml has the wrong type.',
        hint="'types' and 'scopes' are lists of strings; 'base_branch' is a string.",
    ),
    E.CONFIG_PARSE_ERROR: ErrorInfo(
        code=E.CONFIG_PARSE_ERROR,
        message='commitme.toml is not valid TOML.',
        hint='Fix the syntax error reported in the message.',
    ),
    E.CONFIG_NOT_FOUND: ErrorInfo(
        code=E.CONFIG_NOT_FOUND,
        message='The configuration file passed with --config does not exist.',
        hint='Check the path, or omit --config to use ./commitme.toml.',
    ),
    E.SOURCE_GIT_UNAVAILABLE: ErrorInfo(
        code=E.SOURCE_GIT_UNAVAILABLE,
        message='The git executable could not be found.',
        hint='Install git and make sure it is on PATH.',
    ),
    E.SOURCE_GIT_FAILED: ErrorInfo(
        code=E.SOURCE_GIT_FAILED,
        message='git log failed for the requested revision range.',
        hint="Check that the base branch exists locally, e.g. 'git fetch origin main:main'.",
    ),
    E.SOURCE_FILE_NOT_FOUND: ErrorInfo(
        code=E.SOURCE_FILE_NOT_FOUND,
        message='The commit message file does not exist.',
        hint='The commit-msg hook passes the path as its first argument.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CM-CONFIG-INVALID-KEY"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def render_error(exc: CommitMeError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style.

    Output format::

        error[CM-CONFIG-INVALID-KEY]: Unknown key 'tpyes' in commitme.toml
          |
          = hint: Did you mean 'types'?

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    info = exc.info
    out = file or sys.stderr
    if out.isatty():
        console = Console(file=out, highlight=False)
        msg = rich_escape(info.message)
        console.print(
            f'[bold red]error\\[{info.code.value}][/bold red][bold]: {msg}[/bold]',
        )
        if info.hint:
            hint = rich_escape(info.hint)
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {hint}')
        console.print()
    else:
        print(f'error[{info.code.value}]: {info.message}', file=out)  # noqa: T201 - CLI output
        if info.hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {info.hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


__all__ = [
    'E',
    'ERRORS',
    'CommitMeError',
    'ErrorCode',
    'ErrorInfo',
    'explain',
    'render_error',
]
