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

"""Commits of the current branch, read from the local git repository."""

from __future__ import annotations

from pathlib import Path

from commitme.commit_parsing import RawCommit
from commitme.errors import E, CommitMeError
from commitme.logging import get_logger
from commitme.sources._run import CommandResult, TimeoutExpired, run_command

log = get_logger(__name__)

# Unit and record separators keep multi-line bodies intact.
_FIELD_SEP = '\x1f'
_RECORD_SEP = '\x1e'
_LOG_FORMAT = '%H%x1f%s%x1f%b%x1e'


class GitCommitSource:
    """Reads ``git log <base_branch>..HEAD``, oldest commit first.

    Args:
        root: Any directory inside the repository.
        base_branch: The branch the current branch will merge into.
    """

    def __init__(self, root: Path, base_branch: str = 'main') -> None:
        """Initialize with the repository root and the base branch."""
        self._root = root
        self._base_branch = base_branch

    @property
    def revision_range(self) -> str:
        """The ``git log`` revision range."""
        return f'{self._base_branch}..HEAD'

    def _git(self, *args: str) -> CommandResult:
        try:
            return run_command(['git', *args], cwd=self._root)
        except FileNotFoundError as exc:
            raise CommitMeError(
                code=E.SOURCE_GIT_UNAVAILABLE,
                message=f'Could not run git: {exc}',
            ) from exc
        except TimeoutExpired as exc:
            raise CommitMeError(
                code=E.SOURCE_GIT_FAILED,
                message=f"'git {' '.join(args)}' timed out",
            ) from exc

    def commits(self) -> list[RawCommit]:
        """Return the commits on ``HEAD`` that are not on the base branch.

        Raises:
            CommitMeError: If git is missing or the range is invalid.
        """
        result = self._git('log', '--reverse', f'--format={_LOG_FORMAT}', self.revision_range)
        if not result.ok:
            raise CommitMeError(
                code=E.SOURCE_GIT_FAILED,
                message=f"'{result.command_str}' failed: {result.stderr.strip()}",
                hint=f"Make sure '{self._base_branch}' exists locally, e.g. 'git fetch origin {self._base_branch}'.",
            )
        commits = parse_log(result.stdout)
        log.debug('git_commits_loaded', range=self.revision_range, count=len(commits))
        return commits


def parse_log(output: str) -> list[RawCommit]:
    """Parse ``git log`` output produced with the commitme format.

    Args:
        output: Records of ``hash, subject, body`` fields.

    Returns:
        One :class:`RawCommit` per record, in output order.
    """
    commits: list[RawCommit] = []
    for record in output.split(_RECORD_SEP):
        record = record.strip('\n')
        if not record:
            continue
        sha, subject, body = (record.split(_FIELD_SEP, 2) + ['', ''])[:3]
        commits.append(RawCommit(id=sha.strip(), subject=subject, body=body.strip('\n')))
    return commits


__all__ = [
    'GitCommitSource',
    'parse_log',
]
