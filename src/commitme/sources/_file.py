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

"""A commit message file, as handed to a ``commit-msg`` hook."""

from __future__ import annotations

from pathlib import Path

from commitme.commit_parsing import RawCommit
from commitme.errors import E, CommitMeError
from commitme.logging import get_logger

log = get_logger(__name__)

# Everything below this line is dropped by ``git commit --verbose``.
_SCISSORS = '# ------------------------ >8 ------------------------'


def clean_message(text: str) -> str:
    """Strip what git strips before recording a message.

    Comment lines (starting with ``#``) and everything after the
    scissors line are removed, as are leading and trailing blank lines.

    >>> clean_message('feat: x\\n# Please enter the commit message\\n')
    'feat: x'
    """
    kept: list[str] = []
    for line in text.splitlines():
        if line.startswith(_SCISSORS):
            break
        if line.startswith('#'):
            continue
        kept.append(line.rstrip())
    return '\n'.join(kept).strip('\n')


class FileCommitSource:
    """Reads a single commit message from a file.

    Args:
        path: The message file, e.g. ``.git/COMMIT_EDITMSG``.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with the message file path."""
        self._path = path

    def commits(self) -> list[RawCommit]:
        """Return the message as a one-element list.

        Raises:
            CommitMeError: If the file cannot be read.
        """
        try:
            text = self._path.read_text(encoding='utf-8')
        except FileNotFoundError as exc:
            raise CommitMeError(
                code=E.SOURCE_FILE_NOT_FOUND,
                message=f'Commit message file {self._path} does not exist',
            ) from exc
        except OSError as exc:
            raise CommitMeError(
                code=E.SOURCE_FILE_NOT_FOUND,
                message=f'Failed to read {self._path}: {exc}',
            ) from exc

        commit = RawCommit.from_message(self._path.name, clean_message(text))
        log.debug('message_file_loaded', path=str(self._path))
        return [commit]


__all__ = [
    'FileCommitSource',
    'clean_message',
]
