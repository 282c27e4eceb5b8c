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

"""Positioned diagnostics and their text rendering.

A :class:`Diagnostic` records one rule violation: which rule, where in
the commit message, and which clauses of the rule's canonical
description were violated. :func:`format_diagnostic` renders it in a
compiler-like, greppable form::

    0a0b0c0d:1:4: error: Commits MUST be prefixed with a type, ...
      feat (scope): space between type and scope
          ^

Plain output wraps each highlighted clause in ``**``; color output
renders it bold cyan through `rich <https://rich.readthedocs.io/>`_.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.text import Text

HIGHLIGHT_STYLE = 'bold cyan'
_SEVERITY_STYLES = {'error': 'bold red', 'warning': 'bold yellow'}


class Severity(str, Enum):
    """How serious a diagnostic is. Only errors fail validation."""

    ERROR = 'error'
    WARNING = 'warning'


@dataclass(frozen=True)
class Diagnostic:
    """A single positioned rule violation.

    Attributes:
        rule_id: Identifier of the rule that produced it, e.g. ``CC-01``.
        severity: :attr:`Severity.ERROR` or :attr:`Severity.WARNING`.
        source_id: Commit hash or pull request reference.
        line: 1-based line of the commit message.
        column: 0-based character offset into that line.
        message: The rule's canonical description.
        highlights: Clauses of ``message`` that were violated.
        source_line: The text of the offending line.
        underline: ``(start, length)`` of the offending span, or ``None``.
    """

    rule_id: str
    severity: Severity
    source_id: str
    line: int
    column: int
    message: str
    highlights: tuple[str, ...] = ()
    source_line: str = ''
    underline: tuple[int, int] | None = None

    @property
    def is_error(self) -> bool:
        """Whether this diagnostic fails validation."""
        return self.severity is Severity.ERROR

    @property
    def highlighted_message(self) -> str:
        """The message with each highlighted clause wrapped in ``**``."""
        return _mark_clauses(self.message, self.highlights)


def _clause_spans(message: str, highlights: Iterable[str]) -> list[tuple[int, int]]:
    """Locate the first occurrence of each clause, dropping overlaps."""
    spans: list[tuple[int, int]] = []
    for clause in highlights:
        start = message.find(clause) if clause else -1
        if start == -1:
            continue
        end = start + len(clause)
        if any(start < other_end and other_start < end for other_start, other_end in spans):
            continue
        spans.append((start, end))
    return sorted(spans)


def _mark_clauses(message: str, highlights: Iterable[str]) -> str:
    parts: list[str] = []
    cursor = 0
    for start, end in _clause_spans(message, highlights):
        parts.append(message[cursor:start])
        parts.append(f'**{message[start:end]}**')
        cursor = end
    parts.append(message[cursor:])
    return ''.join(parts)


def caret_line(column: int, length: int) -> str:
    """Return the underline for a span: spaces, a caret, then dashes.

    >>> caret_line(4, 3)
    '    ^--'
    >>> caret_line(0, 0)
    '^'
    """
    return ' ' * column + '^' + '-' * max(length - 1, 0)


def _ansi(text: Text) -> str:
    console = Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system='standard',
        highlight=False,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(text, end='')
    return capture.get()


def _header_text(diagnostic: Diagnostic) -> Text:
    severity = diagnostic.severity.value
    text = Text(f'{diagnostic.source_id}:{diagnostic.line}:{diagnostic.column}: ')
    text.append(severity, style=_SEVERITY_STYLES[severity])
    text.append(': ')
    message = Text(diagnostic.message, style='bold')
    for start, end in _clause_spans(diagnostic.message, diagnostic.highlights):
        message.stylize(HIGHLIGHT_STYLE, start, end)
    text.append_text(message)
    return text


def format_diagnostic(diagnostic: Diagnostic, *, color: bool = False) -> str:
    """Render a diagnostic as text.

    Args:
        diagnostic: The diagnostic to render.
        color: Emit ANSI escapes instead of ``**`` clause markers.

    Returns:
        The header line, the indented source line and, when the
        diagnostic has an underline, the caret line, joined by newlines.
    """
    if color:
        header = _ansi(_header_text(diagnostic))
    else:
        header = (
            f'{diagnostic.source_id}:{diagnostic.line}:{diagnostic.column}: '
            f'{diagnostic.severity.value}: {diagnostic.highlighted_message}'
        )
    lines = [header, f'  {diagnostic.source_line}']
    if diagnostic.underline is not None:
        start, length = diagnostic.underline
        lines.append(f'  {caret_line(start, length)}')
    return '\n'.join(lines)


def render_diagnostics(diagnostics: Iterable[Diagnostic], *, file: TextIO | None = None) -> None:
    """Print formatted diagnostics, in color when ``file`` is a terminal.

    Args:
        diagnostics: The diagnostics to print, in order.
        file: Output stream (defaults to ``sys.stdout``).
    """
    out = file or sys.stdout
    color = out.isatty()
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic, color=color), file=out)  # noqa: T201 - CLI output


__all__ = [
    'HIGHLIGHT_STYLE',
    'Diagnostic',
    'Severity',
    'caret_line',
    'format_diagnostic',
    'render_diagnostics',
]
