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

"""Breaking-change footer detection.

Only one footer matters here: a line starting with ``BREAKING CHANGE:``
or ``BREAKING-CHANGE:``. Git trailers live in the last paragraph of the
body, so a token in any earlier paragraph is not a footer and is
reported separately so callers can warn about it.
"""

from __future__ import annotations

from dataclasses import dataclass

BREAKING_TOKENS: tuple[str, ...] = ('BREAKING CHANGE:', 'BREAKING-CHANGE:')


@dataclass(frozen=True)
class FooterToken:
    """A breaking-change token found at the start of a body line.

    Attributes:
        line_index: 0-based index of the line within the body.
        token: The matched token text.
        line: The full body line.
        in_final_paragraph: Whether the line belongs to the last
            paragraph of the body.
    """

    line_index: int
    token: str
    line: str
    in_final_paragraph: bool


def _final_paragraph_start(lines: list[str]) -> int:
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    start = end
    while start > 0 and lines[start - 1].strip():
        start -= 1
    return start


def find_breaking_footers(body: str) -> list[FooterToken]:
    """Return every breaking-change token that starts a body line.

    Args:
        body: The commit body (without the subject line).

    Returns:
        The tokens in body order.
    """
    lines = body.split('\n')
    final_start = _final_paragraph_start(lines)
    found: list[FooterToken] = []
    for index, line in enumerate(lines):
        for token in BREAKING_TOKENS:
            if line.startswith(token):
                found.append(
                    FooterToken(
                        line_index=index,
                        token=token,
                        line=line,
                        in_final_paragraph=index >= final_start,
                    )
                )
                break
    return found


def has_breaking_footer(body: str) -> bool:
    """Whether the final body paragraph carries a breaking-change footer."""
    return any(token.in_final_paragraph for token in find_breaking_footers(body))


__all__ = [
    'BREAKING_TOKENS',
    'FooterToken',
    'find_breaking_footers',
    'has_breaking_footer',
]
