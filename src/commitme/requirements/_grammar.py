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

"""Grammar requirements taken from the Conventional Commits 1.0.0 text.

``CC-01`` is structural (the ``type(scope)!: `` prefix), ``CC-04`` and
``CC-05`` are semantic (scope and description content). A violation of
any of them means the subject cannot be read as a Conventional Commit.

Rule numbers follow the numbered items of
https://www.conventionalcommits.org/en/v1.0.0/#specification.
"""

from __future__ import annotations

import re

from commitme.commit_parsing import ParsedCommit, ParsedElement, SubjectElements
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic
from commitme.requirements._base import subject_diagnostic

_NON_LETTER = re.compile(r'[^a-z]', re.IGNORECASE)

_SCOPE_CLAUSE = ('followed by the OPTIONAL scope',)
_BREAKING_CLAUSE = ('followed by the', 'OPTIONAL !')
_SEPARATOR_CLAUSE = ('followed by the', 'REQUIRED terminal colon')
_SPACING_CLAUSE = ('followed by the', 'REQUIRED', 'space')

_PADDING_CLAUSES: dict[str, tuple[str, ...]] = {
    'scope': _SCOPE_CLAUSE,
    'breaking': _BREAKING_CLAUSE,
    'separator': _SEPARATOR_CLAUSE,
}


def _is_padded(element: ParsedElement) -> bool:
    return element.value is not None and element.value.strip() != element.value


def _padding_span(element: ParsedElement) -> tuple[int, int]:
    """Return ``(column, length)`` of the trailing, else leading, whitespace."""
    value = element.value or ''
    trimmed = value.rstrip()
    if len(trimmed) < len(value):
        return element.offset + len(trimmed), len(value) - len(trimmed)
    leading = len(value) - len(value.lstrip())
    return element.offset, leading


def _clause_after_type(elements: SubjectElements) -> tuple[str, ...]:
    if elements.scope.present:
        return _SCOPE_CLAUSE
    if elements.breaking.present:
        return _BREAKING_CLAUSE
    return _SEPARATOR_CLAUSE


class StructuralPrefix:
    """CC-01: ``type``, optional ``(scope)``, optional ``!``, then ``": "``."""

    id = 'CC-01'
    blocks_derivation = True
    description = (
        'Commits MUST be prefixed with a type, which consists of a noun, feat, fix, etc., '
        'followed by the OPTIONAL scope, OPTIONAL !, and REQUIRED terminal colon and space.'
    )

    def describe(self, config: CommitMeConfig) -> str:
        """Return the canonical description."""
        return self.description

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Report every violated clause of the prefix grammar."""
        elements = parsed.elements
        found: list[Diagnostic] = []

        def report(element: str, clause: str | tuple[str, ...], **anchor: int) -> None:
            found.append(subject_diagnostic(self.id, self.description, parsed, element, clause, **anchor))

        kind = elements.type.value
        if not kind or not kind.strip():
            report('type', 'MUST be prefixed with a type')
        else:
            if _NON_LETTER.search(kind.strip()):
                report('type', 'which consists of a noun')
            if _is_padded(elements.type):
                column, length = _padding_span(elements.type)
                report('type', _clause_after_type(elements), column=column, length=length)
            for name, clause in _PADDING_CLAUSES.items():
                if _is_padded(elements.get(name)):
                    report(name, clause)

        if not elements.separator.present:
            report('separator', _SEPARATOR_CLAUSE)
        elif elements.spacing.length != 1:
            report('spacing', _SPACING_CLAUSE)

        return found


class ScopeNoun:
    """CC-04: a scope is a noun in parentheses."""

    id = 'CC-04'
    blocks_derivation = True
    description = (
        'A scope MAY be provided after a type. A scope MUST consist of a noun describing '
        'a section of the codebase surrounded by parenthesis, e.g., fix(parser):'
    )

    def describe(self, config: CommitMeConfig) -> str:
        """Return the canonical description."""
        return self.description

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Reject empty scopes and scopes that are not a single word."""
        scope = parsed.elements.scope.value
        if scope is None:
            return []
        if any(char.isspace() for char in scope) or scope == '()' or _NON_LETTER.search(scope[1:-1]):
            return [subject_diagnostic(self.id, self.description, parsed, 'scope', 'A scope MUST consist of a noun')]
        return []


class DescriptionRequired:
    """CC-05: a description follows exactly one space after the colon."""

    id = 'CC-05'
    blocks_derivation = True
    description = (
        'A description MUST immediately follow the colon and space after the type/scope prefix. '
        'The description is a short summary of the code changes, e.g., fix: array parsing issue '
        'when multiple spaces were contained in string.'
    )

    def describe(self, config: CommitMeConfig) -> str:
        """Return the canonical description."""
        return self.description

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Check the text after the separator; CC-01 covers a missing colon."""
        elements = parsed.elements
        if not elements.separator.present:
            return []
        if elements.spacing.length != 1 or not elements.description.present:
            return [
                subject_diagnostic(
                    self.id,
                    self.description,
                    parsed,
                    'description',
                    'A description MUST immediately follow the colon and space',
                )
            ]
        return []


__all__ = [
    'DescriptionRequired',
    'ScopeNoun',
    'StructuralPrefix',
]
