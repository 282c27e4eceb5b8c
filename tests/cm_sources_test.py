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

"""Tests for commitme.sources."""

from __future__ import annotations

import subprocess  # noqa: S404 - building fake results
from pathlib import Path

import pytest
from commitme.commit_parsing import RawCommit
from commitme.errors import E, CommitMeError
from commitme.logging import configure_logging
from commitme.sources import (
    CommandResult,
    CommitSource,
    FileCommitSource,
    GitCommitSource,
    clean_message,
    parse_log,
    run_command,
)
from commitme.sources import _git

configure_logging(quiet=True)


class TestCommandResult:
    """Tests for CommandResult."""

    def test_ok(self) -> None:
        """Exit code 0 is success."""
        assert CommandResult(command=['git', 'log'], return_code=0).ok
        assert not CommandResult(command=['git', 'log'], return_code=128).ok

    def test_command_str(self) -> None:
        """The command joins with spaces."""
        assert CommandResult(command=['git', 'log', 'main..HEAD'], return_code=0).command_str == 'git log main..HEAD'


class TestRunCommand:
    """Tests for run_command."""

    def test_captures_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """stdout, stderr and the exit code are returned."""

        def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
            assert kwargs['capture_output'] is True
            return subprocess.CompletedProcess(cmd, 3, stdout='out', stderr='err')

        monkeypatch.setattr(subprocess, 'run', fake_run)
        result = run_command(['git', 'status'])
        assert result.return_code == 3
        assert result.stdout == 'out'
        assert result.stderr == 'err'

    def test_cwd_and_timeout(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The working directory and timeout reach subprocess.run."""
        seen: dict[str, object] = {}

        def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
            seen.update(kwargs)
            return subprocess.CompletedProcess(cmd, 0, stdout='', stderr='')

        monkeypatch.setattr(subprocess, 'run', fake_run)
        run_command(['git', 'log'], cwd=tmp_path, timeout=5)
        assert seen['cwd'] == tmp_path
        assert seen['timeout'] == 5

    def test_timeout_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A timeout is logged and re-raised."""

        def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
            raise subprocess.TimeoutExpired(cmd, 1)

        monkeypatch.setattr(subprocess, 'run', fake_run)
        with pytest.raises(subprocess.TimeoutExpired):
            run_command(['git', 'log'], timeout=1)


class TestParseLog:
    """Tests for parse_log."""

    def test_records(self) -> None:
        """Hash, subject and multi-line body are split per record."""
        output = 'aaa\x1ffeat: one\x1f\x1e\nbbb\x1ffix: two\x1fLine 1\n\nBREAKING CHANGE: x\n\x1e\n'
        assert parse_log(output) == [
            RawCommit(id='aaa', subject='feat: one', body=''),
            RawCommit(id='bbb', subject='fix: two', body='Line 1\n\nBREAKING CHANGE: x'),
        ]

    def test_empty(self) -> None:
        """No output means no commits."""
        assert parse_log('') == []


class TestGitCommitSource:
    """Tests for GitCommitSource with a faked run_command."""

    def test_protocol(self, tmp_path: Path) -> None:
        """GitCommitSource is a CommitSource."""
        assert isinstance(GitCommitSource(tmp_path), CommitSource)

    def test_commits(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """git log is asked for base..HEAD, oldest first."""
        calls: list[list[str]] = []

        def fake_run(cmd: list[str], **kwargs: object) -> CommandResult:
            calls.append(cmd)
            return CommandResult(command=cmd, return_code=0, stdout='aaa\x1ffeat: one\x1f\x1e\n')

        monkeypatch.setattr(_git, 'run_command', fake_run)
        source = GitCommitSource(tmp_path, base_branch='develop')
        assert source.commits() == [RawCommit(id='aaa', subject='feat: one')]
        assert calls[0][:3] == ['git', 'log', '--reverse']
        assert calls[0][-1] == 'develop..HEAD'

    def test_bad_range(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A failing git log raises CM-SOURCE-GIT-FAILED."""

        def fake_run(cmd: list[str], **kwargs: object) -> CommandResult:
            return CommandResult(command=cmd, return_code=128, stderr="fatal: bad revision 'nope..HEAD'")

        monkeypatch.setattr(_git, 'run_command', fake_run)
        with pytest.raises(CommitMeError) as exc_info:
            GitCommitSource(tmp_path, base_branch='nope').commits()
        assert exc_info.value.code == E.SOURCE_GIT_FAILED
        assert 'bad revision' in str(exc_info.value)

    def test_git_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing git executable raises CM-SOURCE-GIT-UNAVAILABLE."""

        def fake_run(cmd: list[str], **kwargs: object) -> CommandResult:
            raise FileNotFoundError(2, 'No such file or directory', 'git')

        monkeypatch.setattr(_git, 'run_command', fake_run)
        with pytest.raises(CommitMeError) as exc_info:
            GitCommitSource(tmp_path).commits()
        assert exc_info.value.code == E.SOURCE_GIT_UNAVAILABLE


class TestCleanMessage:
    """Tests for clean_message."""

    def test_comments_removed(self) -> None:
        """Lines starting with '#' are dropped."""
        text = 'feat: x\n\nBody\n# Please enter the commit message\n#\n'
        assert clean_message(text) == 'feat: x\n\nBody'

    def test_scissors(self) -> None:
        """Everything after the scissors line is dropped."""
        text = 'fix: y\n# ------------------------ >8 ------------------------\ndiff --git a/x b/x\n'
        assert clean_message(text) == 'fix: y'


class TestFileCommitSource:
    """Tests for FileCommitSource."""

    def test_reads_message(self, tmp_path: Path) -> None:
        """Subject and body are split; comments are dropped."""
        path = tmp_path / 'COMMIT_EDITMSG'
        path.write_text('feat: add x\n\nDetails here.\n# comment\n', encoding='utf-8')
        (commit,) = FileCommitSource(path).commits()
        assert commit == RawCommit(id='COMMIT_EDITMSG', subject='feat: add x', body='Details here.')

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises CM-SOURCE-FILE-NOT-FOUND."""
        with pytest.raises(CommitMeError) as exc_info:
            FileCommitSource(tmp_path / 'missing').commits()
        assert exc_info.value.code == E.SOURCE_FILE_NOT_FOUND
