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

"""Compliance façade: parse, run every rule, return a result value.

Malformed commit text is ordinary input here, never an exception. Each
call returns a :data:`ValidationResult`, which is either :class:`Valid`
(carrying the derived :class:`ConventionalCommit`) or :class:`Invalid`
(carrying the error diagnostics, and the derived commit when only a
policy rule failed).

Usage::

    from commitme.commit_parsing import RawCommit
    from commitme.config import CommitMeConfig
    from commitme.validator import validate_commits

    results = validate_commits(raw_commits, CommitMeConfig(types=('feat', 'fix')))
    failed = [r for r in results if not r.ok]
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from commitme.commit_parsing import (
    ConventionalCommit,
    RawCommit,
    derive_commit,
    parse_commit,
)
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic
from commitme.logging import get_logger
from commitme.requirements import ADVISORY_RULES, COMMIT_RULES, compare_precedence

logger = get_logger(__name__)

# Subjects git and hosting platforms generate; they are never validated.
_EXCLUDED_SUBJECT = re.compile(
    r'^\s*(?:fixup!\s|merge\s+pull\s+request\b|merge\s+branch\b|merged\s+in\b)',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Valid:
    """A commit that passed every rule.

    Attributes:
        raw: The commit that was validated.
        commit: Its Conventional Commit view.
        warnings: Advisory findings, if any.
    """

    raw: RawCommit
    commit: ConventionalCommit
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """Always ``True``."""
        return True

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Always empty."""
        return ()


@dataclass(frozen=True)
class Invalid:
    """A commit that violated at least one rule.

    Attributes:
        raw: The commit that was validated.
        errors: Error diagnostics, in rule order. Never empty.
        warnings: Advisory findings, if any.
        commit: The Conventional Commit view when only policy rules
            failed, otherwise ``None``.
    """

    raw: RawCommit
    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...] = ()
    commit: ConventionalCommit | None = None

    @property
    def ok(self) -> bool:
        """Always ``False``."""
        return False


ValidationResult = Valid | Invalid


def is_excluded(subject: str) -> bool:
    """Whether ``subject`` is a fixup or merge commit that is skipped.

    >>> is_excluded('fixup! feat: add new feature')
    True
    >>> is_excluded("Merge branch 'ci/some-branch' into 'main'")
    True
    >>> is_excluded('feat: merge branch handling')
    False
    """
    return _EXCLUDED_SUBJECT.match(subject) is not None


def validate_commit(raw: RawCommit, config: CommitMeConfig) -> ValidationResult:
    """Validate a single commit against every commit rule.

    Args:
        raw: The commit to validate.
        config: Allow-lists to apply.

    Returns:
        :class:`Valid` or :class:`Invalid`.
    """
    parsed = parse_commit(raw)

    errors: list[Diagnostic] = []
    derivable = True
    for rule in COMMIT_RULES:
        found = rule.validate(parsed, config)
        errors.extend(found)
        if found and rule.blocks_derivation:
            derivable = False

    warnings: list[Diagnostic] = []
    for rule in ADVISORY_RULES:
        warnings.extend(rule.validate(parsed, config))

    commit = derive_commit(parsed) if derivable else None
    logger.debug(
        'commit_validated',
        id=raw.id,
        errors=len(errors),
        warnings=len(warnings),
        derived=commit is not None,
    )

    if errors:
        return Invalid(raw=raw, errors=tuple(errors), warnings=tuple(warnings), commit=commit)
    assert commit is not None
    return Valid(raw=raw, commit=commit, warnings=tuple(warnings))


def validate_commits(raws: Iterable[RawCommit], config: CommitMeConfig) -> list[ValidationResult]:
    """Validate commits in order, skipping fixup and merge commits.

    Args:
        raws: The commits to validate.
        config: Allow-lists to apply.

    Returns:
        One result per validated commit, in input order.
    """
    results: list[ValidationResult] = []
    for raw in raws:
        if is_excluded(raw.subject):
            logger.debug('commit_excluded', id=raw.id, subject=raw.subject)
            continue
        results.append(validate_commit(raw, config))
    return results


def validate_pull_request(
    raw_pr: RawCommit,
    commits: Sequence[ConventionalCommit],
    config: CommitMeConfig,
) -> ValidationResult:
    """Validate a pull request title/body and its precedence.

    The precedence rule only runs when the title could be read as a
    Conventional Commit; a malformed title gets its grammar errors only.

    Args:
        raw_pr: The pull request, with its title as subject.
        commits: Derived commits of the pull request.
        config: Allow-lists to apply.

    Returns:
        :class:`Valid` or :class:`Invalid`.
    """
    result = validate_commit(raw_pr, config)
    if result.commit is None:
        return result

    precedence = compare_precedence(result.commit, commits)
    if precedence is None:
        return result
    return Invalid(
        raw=raw_pr,
        errors=(*result.errors, precedence),
        warnings=result.warnings,
        commit=result.commit,
    )


def conventional_commits(results: Iterable[ValidationResult]) -> list[ConventionalCommit]:
    """Return the derived commits of ``results``, in order."""
    return [result.commit for result in results if result.commit is not None]


__all__ = [
    'Invalid',
    'Valid',
    'ValidationResult',
    'conventional_commits',
    'is_excluded',
    'validate_commit',
    'validate_commits',
    'validate_pull_request',
]
