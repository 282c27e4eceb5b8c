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

"""Pull request label classification.

Maps the strongest change in a set of commits to one of three labels.
Applying the label on a hosting platform is left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from commitme.commit_parsing import ConventionalCommit, PrecedenceLevel, max_level

Label = Literal['breaking', 'feature', 'fix']

_LABELS: dict[PrecedenceLevel, Label] = {
    PrecedenceLevel.BREAKING: 'breaking',
    PrecedenceLevel.FEAT: 'feature',
    PrecedenceLevel.FIX: 'fix',
}


def determine_label(commits: Iterable[ConventionalCommit]) -> Label | None:
    """Return the label for the strongest change in ``commits``.

    >>> determine_label([ConventionalCommit(type='fix', description='x')])
    'fix'
    >>> determine_label([ConventionalCommit(type='docs', description='x')]) is None
    True
    """
    return _LABELS.get(max_level(commits))


__all__ = [
    'Label',
    'determine_label',
]
