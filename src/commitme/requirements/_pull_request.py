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

"""Pull request requirements.

``PR-01`` compares the version bump a pull request title implies with
the bumps implied by its commits. Squash-merging a ``fix:`` pull request
that contains a ``feat:`` commit would otherwise lose the MINOR bump.
"""

from __future__ import annotations

from collections.abc import Sequence

from commitme.commit_parsing import ConventionalCommit, level, max_level
from commitme.diagnostics import Diagnostic
from commitme.logging import get_logger
from commitme.requirements._base import subject_diagnostic

logger = get_logger(__name__)


class PullRequestPrecedence:
    """PR-01: the title bump is at least the highest commit bump."""

    id = 'PR-01'
    description = (
        'A Pull Request title MUST correlate with a Semantic Versioning identifier '
        '(`MAJOR`, `MINOR`, or `PATCH`) with the same or higher precedence than its associated commits.'
    )
    highlights = (
        'title MUST correlate with a Semantic Versioning identifier',
        'with the same or higher precedence than its associated commits',
    )

    def validate(self, pull_request: ConventionalCommit, commits: Sequence[ConventionalCommit]) -> list[Diagnostic]:
        """Compare the pull request against its commits.

        Args:
            pull_request: The derived pull request title.
            commits: Derived commits of the pull request. Commits that
                could not be derived must not be passed.

        Returns:
            A single diagnostic anchored at the title type, or nothing.
        """
        assert pull_request.parsed is not None, 'pull request must come from a parsed title'
        pr_level = level(pull_request)
        commits_level = max_level(commits)
        logger.debug(
            'precedence_compared',
            id=pull_request.id,
            pull_request=pr_level.name,
            commits=commits_level.name,
        )
        if pr_level >= commits_level:
            return []
        return [subject_diagnostic(self.id, self.description, pull_request.parsed, 'type', self.highlights)]


_PR01 = PullRequestPrecedence()


def compare_precedence(
    pull_request: ConventionalCommit,
    commits: Sequence[ConventionalCommit],
) -> Diagnostic | None:
    """Return the precedence diagnostic for a pull request, if any."""
    found = _PR01.validate(pull_request, commits)
    return found[0] if found else None


__all__ = [
    'PullRequestPrecedence',
    'compare_precedence',
]
