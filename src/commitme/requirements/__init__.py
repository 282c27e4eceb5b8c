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

"""Compliance rules for commit messages and pull requests.

Rules run in a fixed order and all of them run: a commit with three
problems gets three (or more) diagnostics, not one. Adding a rule means
implementing :class:`CommitRequirement` and appending an instance to
:data:`COMMIT_RULES` or :data:`ADVISORY_RULES`.

============  =========================  =================
Rule          Checks                     Blocks derivation
============  =========================  =================
CC-01         ``type(scope)!: `` form    yes
CC-04         scope is a noun            yes
CC-05         description present        yes
EC-01         scope allow-list           no
EC-02         type allow-list            no
FT-01         footer position            no (warning)
PR-01         pull request precedence    n/a (pull requests only)
============  =========================  =================
"""

from commitme.requirements._advisory import BreakingFooterPosition
from commitme.requirements._base import CommitRequirement, subject_diagnostic
from commitme.requirements._grammar import DescriptionRequired, ScopeNoun, StructuralPrefix
from commitme.requirements._policy import ScopeAllowlist, TypeAllowlist
from commitme.requirements._pull_request import PullRequestPrecedence, compare_precedence

COMMIT_RULES: tuple[CommitRequirement, ...] = (
    StructuralPrefix(),
    ScopeNoun(),
    DescriptionRequired(),
    ScopeAllowlist(),
    TypeAllowlist(),
)

ADVISORY_RULES: tuple[CommitRequirement, ...] = (BreakingFooterPosition(),)

__all__ = [
    'ADVISORY_RULES',
    'COMMIT_RULES',
    'BreakingFooterPosition',
    'CommitRequirement',
    'DescriptionRequired',
    'PullRequestPrecedence',
    'ScopeAllowlist',
    'ScopeNoun',
    'StructuralPrefix',
    'TypeAllowlist',
    'compare_precedence',
    'subject_diagnostic',
]
