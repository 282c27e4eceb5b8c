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

"""Single-pass scanner for Conventional Commits subject lines.

The scanner walks the subject once with a cursor and emits each element
at the cursor position it was found at. It never fails: any string,
including an empty one, decomposes into six elements, some of which may
be absent. Deciding whether the decomposition is *acceptable* is the job
of :mod:`commitme.requirements`.

Grammar (left to right)::

    type        everything up to the first '(', '!' or ':'
    scope       '(' up to and including the first ')', if type stops at '('
    breaking    optional whitespace, then '!'
    separator   optional whitespace, then ':'
    spacing     whitespace run
    description rest of the line

``breaking`` and ``separator`` only consume their leading whitespace when
the marker character follows it, so ``feat(x) description`` leaves the
space to ``spacing``.
"""

from __future__ import annotations

from commitme.commit_parsing._footer import has_breaking_footer
from commitme.commit_parsing._types import (
    ConventionalCommit,
    ParsedCommit,
    ParsedElement,
    RawCommit,
    SubjectElements,
)

_TYPE_TERMINATORS = frozenset('(!:')


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _type_end(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] not in _TYPE_TERMINATORS:
        pos += 1
    return pos


def _scope_end(text: str, pos: int) -> int:
    if pos >= len(text) or text[pos] != '(':
        return pos
    close = text.find(')', pos)
    return close + 1 if close != -1 else pos


def _marker_end(text: str, pos: int, marker: str) -> int:
    after_space = _skip_space(text, pos)
    if after_space < len(text) and text[after_space] == marker:
        return after_space + 1
    return pos


def parse_subject(subject: str) -> SubjectElements:
    """Decompose a subject line into its six grammar elements.

    Args:
        subject: The first line of a commit message.

    Returns:
        The contiguous :class:`SubjectElements` of ``subject``.
    """
    assert subject is not None, 'subject must be a string'

    pos = 0

    def take(stop: int) -> ParsedElement:
        nonlocal pos
        element = ParsedElement.span(subject, pos, stop)
        pos = stop
        return element

    type_ = take(_type_end(subject, pos))
    scope = take(_scope_end(subject, pos))
    breaking = take(_marker_end(subject, pos, '!'))
    separator = take(_marker_end(subject, pos, ':'))
    spacing = take(_skip_space(subject, pos))
    description = take(len(subject))

    return SubjectElements(
        type=type_,
        scope=scope,
        breaking=breaking,
        separator=separator,
        spacing=spacing,
        description=description,
    )


def parse_commit(raw: RawCommit) -> ParsedCommit:
    """Parse the subject line of ``raw``."""
    assert raw is not None, 'raw commit must not be None'
    return ParsedCommit(raw=raw, elements=parse_subject(raw.subject))


def derive_commit(parsed: ParsedCommit) -> ConventionalCommit:
    """Build the :class:`ConventionalCommit` view of a parsed commit.

    Callers must only do this after the structural and semantic checks
    passed; an absent type or description is a programming error here.

    Args:
        parsed: A parsed commit with a well-formed subject.

    Returns:
        The derived :class:`ConventionalCommit`.
    """
    elements = parsed.elements
    assert elements.type.value, 'derived commits need a type'
    assert elements.description.value, 'derived commits need a description'

    scope = elements.scope.value
    return ConventionalCommit(
        type=elements.type.value,
        description=elements.description.value,
        scope=scope[1:-1] if scope else None,
        breaking=elements.breaking.present or has_breaking_footer(parsed.body),
        parsed=parsed,
    )


__all__ = [
    'derive_commit',
    'parse_commit',
    'parse_subject',
]
