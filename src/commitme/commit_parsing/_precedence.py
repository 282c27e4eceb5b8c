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

"""Semantic-version precedence of commits and pull requests."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from commitme.commit_parsing._types import ConventionalCommit


class PrecedenceLevel(IntEnum):
    """Version bump implied by a commit, ordered by precedence.

    ``BREAKING`` maps to a MAJOR bump, ``FEAT`` to MINOR and ``FIX`` to
    PATCH. Anything else implies no release.
    """

    NONE = 0
    FIX = 1
    FEAT = 2
    BREAKING = 3


def level(commit: ConventionalCommit) -> PrecedenceLevel:
    """Return the precedence of a commit or pull request.

    >>> level(ConventionalCommit(type='feat', description='x'))
    <PrecedenceLevel.FEAT: 2>
    >>> level(ConventionalCommit(type='docs', description='x', breaking=True))
    <PrecedenceLevel.BREAKING: 3>
    """
    if commit.breaking:
        return PrecedenceLevel.BREAKING
    kind = commit.type.lower()
    if kind == 'feat':
        return PrecedenceLevel.FEAT
    if kind == 'fix':
        return PrecedenceLevel.FIX
    return PrecedenceLevel.NONE


def max_level(commits: Iterable[ConventionalCommit]) -> PrecedenceLevel:
    """Return the highest precedence among ``commits``, or ``NONE``."""
    return max((level(commit) for commit in commits), default=PrecedenceLevel.NONE)


__all__ = [
    'PrecedenceLevel',
    'level',
    'max_level',
]
