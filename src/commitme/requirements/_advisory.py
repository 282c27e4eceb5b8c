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

"""Advisory checks. They produce warnings, never errors."""

from __future__ import annotations

from commitme.commit_parsing import ParsedCommit, find_breaking_footers
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic, Severity


class BreakingFooterPosition:
    """FT-01: a breaking-change footer belongs in the last paragraph."""

    id = 'FT-01'
    blocks_derivation = False
    description = (
        'A BREAKING CHANGE footer MUST be placed in the last paragraph of the commit body; '
        'when followed by another paragraph it is ignored.'
    )

    def describe(self, config: CommitMeConfig) -> str:
        """Return the canonical description."""
        return self.description

    def validate(self, parsed: ParsedCommit, config: CommitMeConfig) -> list[Diagnostic]:
        """Warn about breaking-change tokens outside the final paragraph."""
        return [
            Diagnostic(
                rule_id=self.id,
                severity=Severity.WARNING,
                source_id=parsed.id,
                line=parsed.raw.body_line + footer.line_index,
                column=0,
                message=self.description,
                highlights=('MUST be placed in the last paragraph',),
                source_line=footer.line,
                underline=(0, len(footer.token)),
            )
            for footer in find_breaking_footers(parsed.body)
            if not footer.in_final_paragraph
        ]


__all__ = [
    'BreakingFooterPosition',
]
