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

"""Tests for commitme.requirements rules."""

from __future__ import annotations

import pytest
from commitme.commit_parsing import ConventionalCommit, RawCommit, derive_commit, parse_commit
from commitme.config import CommitMeConfig
from commitme.diagnostics import Diagnostic, Severity
from commitme.requirements import (
    ADVISORY_RULES,
    COMMIT_RULES,
    BreakingFooterPosition,
    CommitRequirement,
    DescriptionRequired,
    PullRequestPrecedence,
    ScopeAllowlist,
    ScopeNoun,
    StructuralPrefix,
    TypeAllowlist,
    compare_precedence,
)

NO_POLICY = CommitMeConfig()
POLICY = CommitMeConfig(types=('feat', 'fix'), scopes=('action', 'cli'))


def _check(rule: CommitRequirement, subject: str, config: CommitMeConfig = NO_POLICY) -> list[Diagnostic]:
    return rule.validate(parse_commit(RawCommit(id='0a0b0c0d', subject=subject)), config)


class TestRuleOrder:
    """The rule list is fixed."""

    def test_commit_rule_ids(self) -> None:
        """Grammar rules run before policy rules."""
        assert [rule.id for rule in COMMIT_RULES] == ['CC-01', 'CC-04', 'CC-05', 'EC-01', 'EC-02']

    def test_protocol(self) -> None:
        """Every rule satisfies the CommitRequirement protocol."""
        for rule in (*COMMIT_RULES, *ADVISORY_RULES):
            assert isinstance(rule, CommitRequirement)

    def test_blocking_rules(self) -> None:
        """Only grammar rules block derivation."""
        assert [rule.id for rule in COMMIT_RULES if rule.blocks_derivation] == ['CC-01', 'CC-04', 'CC-05']


class TestStructuralPrefix:
    """Tests for CC-01."""

    @pytest.mark.parametrize(
        'subject',
        [
            'feat: add new feature',
            'fix!: fix bug with breaking change',
            'style(format): update style with scope',
            'test(unit)!: update unit tests which leads to a breaking change',
        ],
    )
    def test_valid(self, subject: str) -> None:
        """Well-formed prefixes produce nothing."""
        assert _check(StructuralPrefix(), subject) == []

    @pytest.mark.parametrize(
        'subject',
        [
            '(scope): missing type',
            ': missing type',
            '!: missing type',
            ' !: missing type',
            'feat foot(scope)!: whatabout a noun',
            'feat123(scope)!: numbers arent nouns',
            'feat?#(scope): special characters arent nouns',
            'feat missing semicolon',
            'feat:missing space after semicolon',
            'feat : space before semicolon',
            'feat:   too many spaces after semicolon',
            'feat (scope): space between type and scope',
            'feat(scope) : space between scope and semicolon',
            'feat !: space between type and breaking change',
            'feat! : space between breaking change and semicolon',
            'feat foot (scope) ! :incorrect spaces everywhere',
        ],
    )
    def test_invalid(self, subject: str) -> None:
        """Every malformed prefix is reported."""
        found = _check(StructuralPrefix(), subject)
        assert found
        assert {d.rule_id for d in found} == {'CC-01'}

    def test_missing_type_clause(self) -> None:
        """A missing type highlights the type clause at column 0."""
        (found,) = _check(StructuralPrefix(), '(scope): missing type')
        assert found.highlights == ('MUST be prefixed with a type',)
        assert found.column == 0

    def test_not_a_noun(self) -> None:
        """Digits in the type are not a noun."""
        (found,) = _check(StructuralPrefix(), 'feat123: numbers')
        assert found.highlights == ('which consists of a noun',)
        assert found.underline == (0, 7)

    def test_space_between_type_and_scope(self) -> None:
        """The diagnostic points at the space itself."""
        (found,) = _check(StructuralPrefix(), 'feat (scope): space between type and scope')
        assert found.column == 4
        assert found.underline == (4, 1)
        assert found.highlights == ('followed by the OPTIONAL scope',)

    def test_space_before_breaking(self) -> None:
        """A padded type followed by '!' highlights the breaking clause."""
        (found,) = _check(StructuralPrefix(), 'feat  !: two spaces')
        assert found.underline == (4, 2)
        assert found.highlights == ('followed by the', 'OPTIONAL !')

    def test_space_before_separator(self) -> None:
        """A padded separator is anchored where its whitespace starts."""
        (found,) = _check(StructuralPrefix(), 'feat(scope) : text')
        assert found.column == 11
        assert found.highlights == ('followed by the', 'REQUIRED terminal colon')

    def test_missing_separator(self) -> None:
        """No colon highlights the terminal colon clause."""
        found = _check(StructuralPrefix(), 'feat missing semicolon')
        assert [d.highlights for d in found] == [
            ('which consists of a noun',),
            ('followed by the', 'REQUIRED terminal colon'),
        ]
        assert found[-1].underline == (22, 0)

    def test_bad_spacing(self) -> None:
        """Too many spaces after the colon highlight the space clause."""
        (found,) = _check(StructuralPrefix(), 'feat:   too many')
        assert found.highlights == ('followed by the', 'REQUIRED', 'space')
        assert found.column == 5
        assert found.underline == (5, 3)

    def test_one_diagnostic_per_clause(self) -> None:
        """Several violations yield several diagnostics."""
        found = _check(StructuralPrefix(), 'feat foot (scope) ! :incorrect spaces everywhere')
        assert len(found) == 5

    def test_ignores_allowlists(self) -> None:
        """CC-01 does not look at the configuration."""
        assert _check(StructuralPrefix(), 'docs: update', POLICY) == []


class TestScopeNoun:
    """Tests for CC-04."""

    @pytest.mark.parametrize(
        'subject',
        [
            'feat(): empty scope',
            'feat(a noun): scope with spacing',
            'feat(1234): numbers arent nouns',
            'feat(?!): special characters arent nouns',
            'feat (?!) : special characters arent nouns',
        ],
    )
    def test_invalid(self, subject: str) -> None:
        """Scopes that are not a single word are reported once."""
        (found,) = _check(ScopeNoun(), subject)
        assert found.rule_id == 'CC-04'
        assert found.highlights == ('A scope MUST consist of a noun',)

    def test_anchor(self) -> None:
        """The whole scope is underlined."""
        (found,) = _check(ScopeNoun(), 'feat(1234): numbers arent nouns')
        assert found.underline == (4, 6)

    def test_no_scope(self) -> None:
        """Without a scope there is nothing to check."""
        assert _check(ScopeNoun(), 'feat: add thing') == []

    def test_valid_scope(self) -> None:
        """A single word is a noun."""
        assert _check(ScopeNoun(), 'feat(parser): add thing') == []


class TestDescriptionRequired:
    """Tests for CC-05."""

    @pytest.mark.parametrize(
        'subject',
        ['feat:', 'feat: ', 'feat:    ', 'feat:   too many spaces after terminal colon'],
    )
    def test_invalid(self, subject: str) -> None:
        """A missing or badly spaced description is reported."""
        (found,) = _check(DescriptionRequired(), subject)
        assert found.rule_id == 'CC-05'
        assert found.highlights == ('A description MUST immediately follow the colon and space',)

    def test_no_separator(self) -> None:
        """Without a colon CC-01 reports the problem, not CC-05."""
        assert _check(DescriptionRequired(), 'feat missing semicolon') == []

    def test_anchor_at_description(self) -> None:
        """An absent description is anchored at the end of the subject."""
        (found,) = _check(DescriptionRequired(), 'feat: ')
        assert found.column == 6
        assert found.underline == (6, 0)


class TestScopeAllowlist:
    """Tests for EC-01."""

    def test_inactive_without_scopes(self) -> None:
        """An empty allow-list allows any scope."""
        assert _check(ScopeAllowlist(), 'feat(wrong): x') == []

    def test_allowed(self) -> None:
        """A listed scope passes."""
        assert _check(ScopeAllowlist(), 'feat(cli): x', POLICY) == []

    def test_unknown_scope(self) -> None:
        """An unlisted scope is reported with the allowed values."""
        (found,) = _check(ScopeAllowlist(), 'feat(wrong): unknown scope', POLICY)
        assert found.rule_id == 'EC-01'
        assert found.message == 'The scope is REQUIRED and the value MUST be one of the configured values (action, cli).'
        assert found.highlights == ('scope is REQUIRED', 'and', 'MUST be one of the configured values')
        assert found.underline == (4, 7)

    def test_missing_scope(self) -> None:
        """A configured allow-list makes the scope required."""
        (found,) = _check(ScopeAllowlist(), 'feat: no scope', POLICY)
        assert found.column == 4


class TestTypeAllowlist:
    """Tests for EC-02."""

    def test_inactive_without_types(self) -> None:
        """An empty allow-list allows any type."""
        assert _check(TypeAllowlist(), 'chore: x') == []

    def test_unknown_type(self) -> None:
        """An unlisted type is reported at the type."""
        (found,) = _check(TypeAllowlist(), 'chore: unknown type', POLICY)
        assert found.rule_id == 'EC-02'
        assert found.message == 'The type MUST be one of the configured values (feat, fix).'
        assert found.underline == (0, 5)

    def test_case_sensitive(self) -> None:
        """Type membership is an exact match."""
        assert len(_check(TypeAllowlist(), 'Feat: x', POLICY)) == 1


class TestBreakingFooterPosition:
    """Tests for FT-01."""

    def test_warns_about_ignored_footer(self) -> None:
        """A footer followed by another paragraph is a warning on its line."""
        raw = RawCommit.from_message(
            '0a0b0c0d',
            'feat: Add new feature\n\nBREAKING CHANGE: this will be ignored\n\n... as it is followed by a new paragraph',
        )
        (found,) = BreakingFooterPosition().validate(parse_commit(raw), NO_POLICY)
        assert found.severity is Severity.WARNING
        assert found.line == 3
        assert found.column == 0
        assert found.source_line == 'BREAKING CHANGE: this will be ignored'
        assert found.underline == (0, len('BREAKING CHANGE:'))

    def test_line_follows_body_start(self) -> None:
        """Without a separator line the footer is reported on line 2."""
        raw = RawCommit.from_message('0a0b0c0d', 'fix: x\nBREAKING CHANGE: y\n\nmore')
        (found,) = BreakingFooterPosition().validate(parse_commit(raw), NO_POLICY)
        assert found.line == 2
        assert found.source_line == 'BREAKING CHANGE: y'

    def test_footer_in_final_paragraph(self) -> None:
        """A footer in the last paragraph is fine."""
        raw = RawCommit.from_message('0a0b0c0d', 'feat: x\n\nText.\n\nBREAKING-CHANGE: gone')
        assert BreakingFooterPosition().validate(parse_commit(raw), NO_POLICY) == []


class TestPullRequestPrecedence:
    """Tests for PR-01."""

    def _pull_request(self, subject: str, body: str = '') -> ConventionalCommit:
        return derive_commit(parse_commit(RawCommit(id='#12', subject=subject, body=body)))

    def test_lower_precedence(self) -> None:
        """A fix title with a feat commit is reported at the title type."""
        found = compare_precedence(
            self._pull_request('fix: a bug'),
            [ConventionalCommit(type='feat', description='x')],
        )
        assert found is not None
        assert found.rule_id == 'PR-01'
        assert found.source_id == '#12'
        assert found.underline == (0, 3)
        assert found.highlights == PullRequestPrecedence.highlights

    def test_same_precedence(self) -> None:
        """Equal precedence is fine."""
        found = compare_precedence(
            self._pull_request('feat: a feature'),
            [ConventionalCommit(type='feat', description='x'), ConventionalCommit(type='fix', description='y')],
        )
        assert found is None

    def test_no_commits(self) -> None:
        """Without commits any title is fine."""
        assert compare_precedence(self._pull_request('docs: readme'), []) is None

    def test_breaking_footer_in_body(self) -> None:
        """A BREAKING-CHANGE footer in the body raises the title to MAJOR."""
        pull_request = self._pull_request('fix: a bug', body='BREAKING-CHANGE: removes the old API')
        found = compare_precedence(pull_request, [ConventionalCommit(type='feat', description='x', breaking=True)])
        assert found is None
