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

"""Commit sources: where raw commit text comes from.

A source produces a fully materialized list of
:class:`~commitme.commit_parsing.RawCommit` values before validation
starts. Sources are the only part of commitme that touches the
filesystem or runs ``git``.

Built-in sources:

- :class:`GitCommitSource`: ``git log <base>..HEAD`` of a local clone.
- :class:`FileCommitSource`: a commit message file (``commit-msg`` hook).
"""

from typing import Protocol, runtime_checkable

from commitme.commit_parsing import RawCommit
from commitme.sources._file import FileCommitSource, clean_message
from commitme.sources._git import GitCommitSource, parse_log
from commitme.sources._run import CommandResult, run_command


@runtime_checkable
class CommitSource(Protocol):
    """Protocol for anything that supplies commits to validate."""

    def commits(self) -> list[RawCommit]:
        """Return the commits, oldest first."""
        ...


__all__ = [
    'CommandResult',
    'CommitSource',
    'FileCommitSource',
    'GitCommitSource',
    'clean_message',
    'parse_log',
    'run_command',
]
