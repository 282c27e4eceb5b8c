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

"""Pure types for commit message parsing.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass: no I/O, no logging, no side effects.
Parsed values are built once and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# Names of the six subject-line elements, in left-to-right order.
ELEMENT_NAMES: tuple[str, ...] = (
    'type',
    'scope',
    'breaking',
    'separator',
    'spacing',
    'description',
)


@dataclass(frozen=True)
class RawCommit:
    """A commit (or pull request) as supplied by a commit source.

    Attributes:
        id: The commit hash, or ``#<number>`` for a pull request.
        subject: The first line of the message.
        body: Everything after the blank line that follows the subject.
        body_line: 1-based line of the message the body starts on.
            ``git log`` drops the blank separator, so the default
            assumes there was one.
    """

    id: str
    subject: str
    body: str = ''
    body_line: int = field(default=3, compare=False)

    @classmethod
    def from_message(cls, id: str, message: str) -> RawCommit:  # noqa: A002 - mirrors the field name
        """Split a full commit message into subject and body.

        The subject is the first line. The body starts after the
        first line, skipping the conventional blank separator line when
        there is one.

        Args:
            id: The commit hash or pull request reference.
            message: The complete commit message.

        Returns:
            A new :class:`RawCommit`.
        """
        lines = message.split('\n')
        subject = lines[0]
        rest = lines[1:]
        body_line = 2
        if rest and not rest[0].strip():
            rest = rest[1:]
            body_line = 3
        return cls(id=id, subject=subject, body='\n'.join(rest).rstrip('\n'), body_line=body_line)


@dataclass(frozen=True)
class ParsedElement:
    """One grammar slot of a subject line.

    Attributes:
        offset: Index of the first character of the element.
        length: Number of characters the element spans.
        value: The element text, or ``None`` when the element is absent.
    """

    offset: int
    length: int = 0
    value: str | None = None

    @classmethod
    def span(cls, text: str, start: int, stop: int) -> ParsedElement:
        """Build the element covering ``text[start:stop]``."""
        value = text[start:stop]
        return cls(offset=start, length=stop - start, value=value or None)

    @property
    def present(self) -> bool:
        """Whether the element has any characters."""
        return self.value is not None

    @property
    def end(self) -> int:
        """Index just past the element."""
        return self.offset + self.length


@dataclass(frozen=True)
class SubjectElements:
    """The six contiguous elements of a subject line."""

    type: ParsedElement
    scope: ParsedElement
    breaking: ParsedElement
    separator: ParsedElement
    spacing: ParsedElement
    description: ParsedElement

    def __iter__(self) -> Iterator[ParsedElement]:
        """Iterate over the elements from left to right."""
        return (getattr(self, name) for name in ELEMENT_NAMES)

    def get(self, name: str) -> ParsedElement:
        """Return the element called ``name``."""
        if name not in ELEMENT_NAMES:
            raise KeyError(name)
        return getattr(self, name)


@dataclass(frozen=True)
class ParsedCommit:
    """A raw commit together with the elements of its subject line."""

    raw: RawCommit
    elements: SubjectElements

    @property
    def id(self) -> str:
        """The commit hash or pull request reference."""
        return self.raw.id

    @property
    def subject(self) -> str:
        """The subject line the elements were parsed from."""
        return self.raw.subject

    @property
    def body(self) -> str:
        """The unparsed commit body."""
        return self.raw.body


@dataclass(frozen=True)
class ConventionalCommit:
    """A commit that follows the Conventional Commits grammar.

    Only derived from a :class:`ParsedCommit` whose subject passed the
    structural and semantic checks, so ``type`` and ``description`` are
    always non-empty.

    Attributes:
        type: The commit type (e.g. ``"feat"``, ``"fix"``).
        description: The text after ``": "``.
        scope: The scope without its parentheses, or ``None``.
        breaking: ``True`` when the subject carries ``!`` or the final
            body paragraph has a breaking-change footer.
        parsed: The parsed commit this value was derived from.
    """

    type: str
    description: str
    scope: str | None = None
    breaking: bool = False
    parsed: ParsedCommit | None = field(default=None, compare=False, repr=False)

    @property
    def id(self) -> str:
        """The commit hash, or an empty string for hand-built values."""
        return self.parsed.id if self.parsed is not None else ''


__all__ = [
    'ELEMENT_NAMES',
    'ConventionalCommit',
    'ParsedCommit',
    'ParsedElement',
    'RawCommit',
    'SubjectElements',
]
