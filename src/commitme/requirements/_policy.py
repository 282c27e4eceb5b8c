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

"""Project policy: allow-lists for types and scopes.

Both rules are inactive while their allow-list is empty. A violation
fails validation but the commit can still be read as a Conventional
Commit, so it keeps counting towards pull request precedence.
"""

from __future__ import annotations

import re

from commitme.commit_parsing import ParsedCommit
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic
from commitme.requirements._base import subject_diagnostic

_PARENS = re.compile(r'[()]+')


class ScopeAllowlist:
    """EC-01: the scope is required and must be one of ``config.scopes``."""

    id = 'EC-01'
    blocks_derivation = False

    def describe(self, config: CommitMeConfig) -> str:
        """Return the description listing the configured scopes."""
        return f'The scope is REQUIRED and the value MUST be one of the configured values ({", ".join(config.scopes)}).'

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Check the scope against the allow-list."""
        if not config.scopes:
            return []
        scope = parsed.elements.scope.value
        if scope is not None and _PARENS.sub('', scope) in config.scopes:
            return []
        return [
            subject_diagnostic(
                self.id,
                self.describe(config),
                parsed,
                'scope',
                ('scope is REQUIRED', 'and', 'MUST be one of the configured values'),
            )
        ]


class TypeAllowlist:
    """EC-02: the type must be one of ``config.types``."""

    id = 'EC-02'
    blocks_derivation = False

    def describe(self, config: CommitMeConfig) -> str:
        """Return the description listing the configured types."""
        return f'The type MUST be one of the configured values ({", ".join(config.types)}).'

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Check the type against the allow-list."""
        if not config.types:
            return []
        if parsed.elements.type.value in config.types:
            return []
        return [
            subject_diagnostic(
                self.id,
                self.describe(config),
                parsed,
                'type',
                'type MUST be one of the configured values',
            )
        ]


__all__ = [
    'ScopeAllowlist',
    'TypeAllowlist',
]
