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

"""Conventional Commits subject parsing.

This subpackage turns raw commit text into positioned grammar elements
and, once a subject has been accepted, into a :class:`ConventionalCommit`
view with a semantic-version :class:`PrecedenceLevel`.

Usage::

    from commitme.commit_parsing import RawCommit, parse_commit, parse_subject

    elements = parse_subject('feat(parser)!: drop legacy syntax')
    assert elements.scope.value == '(parser)'
    assert elements.breaking.offset == 12

    parsed = parse_commit(RawCommit(id='0a0b0c0d', subject='fix: typo'))
"""

from commitme.commit_parsing._footer import (
    BREAKING_TOKENS,
    FooterToken,
    find_breaking_footers,
    has_breaking_footer,
)
from commitme.commit_parsing._parser import derive_commit, parse_commit, parse_subject
from commitme.commit_parsing._precedence import PrecedenceLevel, level, max_level
from commitme.commit_parsing._types import (
    ELEMENT_NAMES,
    ConventionalCommit,
    ParsedCommit,
    ParsedElement,
    RawCommit,
    SubjectElements,
)

__all__ = [
    'BREAKING_TOKENS',
    'ELEMENT_NAMES',
    'ConventionalCommit',
    'FooterToken',
    'ParsedCommit',
    'ParsedElement',
    'PrecedenceLevel',
    'RawCommit',
    'SubjectElements',
    'derive_commit',
    'find_breaking_footers',
    'has_breaking_footer',
    'level',
    'max_level',
    'parse_commit',
    'parse_subject',
]
