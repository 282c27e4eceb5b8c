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

"""Tests for commitme.logging module."""

from __future__ import annotations

import json
import logging

import pytest
from commitme.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet takes precedence when both are given."""
        configure_logging(verbose=True, quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode writes one timestamped object per event to stderr."""
        configure_logging(json_log=True)
        get_logger('commitme.test').info('test_json', key='value')
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record['event'] == 'test_json'
        assert record['key'] == 'value'
        assert record['level'] == 'info'
        assert record['logger'] == 'commitme.test'
        assert 'timestamp' in record

    def test_console_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console mode writes the event and its key/value context to stderr."""
        configure_logging()
        get_logger('commitme.test').warning('console_event', count=2)
        err = capsys.readouterr().err
        assert 'console_event' in err
        assert 'count=2' in err
        assert 'timestamp' not in err


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_usable_logger(self) -> None:
        """The logger accepts key/value events."""
        configure_logging(quiet=True)
        log = get_logger('commitme.test')
        log.debug('hidden_event', count=1)
        log.warning('shown_event', count=2)
