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

"""Requirement protocol and the shared diagnostic builder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from commitme.commit_parsing import ParsedCommit
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic, Severity


@runtime_checkable
class CommitRequirement(Protocol):
    """A named check applied to a parsed commit.

    Implementations are stateless: everything a rule depends on arrives
    through :meth:`validate`. A rule may return several diagnostics, one
    per violated clause of its description.

    Attributes:
        id: Short identifier, e.g. ``CC-01``.
        blocks_derivation: Whether a violation means the commit cannot
            be read as a Conventional Commit at all.
    """

    id: str
    blocks_derivation: bool

    def describe(self, config: CommitMeConfig) -> str:
        """Return the canonical description of the requirement."""
        ...

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Check ``parsed`` and return its violations (possibly none)."""
        ...


def subject_diagnostic(
    rule_id: str,
    description: str,
    parsed: ParsedCommit,
    element: str,
    highlights: str | Sequence[str],
    *,
    column: int | None = None,
    length: int | None = None,
    severity: Severity = Severity.ERROR,
) -> Diagnostic:
    """Build a diagnostic anchored at an element of the subject line.

    Args:
        rule_id: The id of the reporting rule.
        description: The rule's canonical description.
        parsed: The commit the violation was found in.
        element: Name of the element to anchor at.
        highlights: Violated clause(s) of ``description``.
        column: Override for the anchor column.
        length: Override for the underline length.
        severity: Diagnostic severity.

    Returns:
        A :class:`Diagnostic` on line 1.
    """
    anchor = parsed.elements.get(element)
    start = anchor.offset if column is None else column
    span = anchor.length if length is None else length
    if isinstance(highlights, str):
        highlights = (highlights,)
    return Diagnostic(
        rule_id=rule_id,
        severity=severity,
        source_id=parsed.id,
        line=1,
        column=start,
        message=description,
        highlights=tuple(highlights),
        source_line=parsed.subject,
        underline=(start, span),
    )


__all__ = [
    'CommitRequirement',
    'subject_diagnostic',
]
