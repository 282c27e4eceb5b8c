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

"""Command-line interface for commitme.

Subcommands::

    commitme check [--base-branch B]     validate commits on this branch
    commitme hook FILE                   validate a commit message file
    commitme pr --title T [--body B]     validate a pull request
    commitme explain CODE                explain a CM-* error code

Exit codes: ``0`` compliant, ``1`` compliance errors or an operational
error, ``2`` usage error, ``130`` interrupted.

Install as a ``commit-msg`` hook::

    #!/bin/sh
    exec commitme hook "$1"
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich_argparse import RichHelpFormatter

from commitme import __version__
from commitme.commit_parsing import RawCommit
from commitme.config import CommitMeConfig, load_config, merge_overrides
from commitme.diagnostics import render_diagnostics
from commitme.errors import CommitMeError, explain, render_error
from commitme.labels import determine_label
from commitme.logging import configure_logging, get_logger
from commitme.sources import FileCommitSource, GitCommitSource
from commitme.validator import (
    ValidationResult,
    conventional_commits,
    validate_commits,
    validate_pull_request,
)

logger = get_logger(__name__)


def _print_results(results: Sequence[ValidationResult]) -> None:
    """Print a status line per result followed by its diagnostics."""
    for result in results:
        mark = '✅' if result.ok else '❌'
        print(f'{mark} {result.raw.id[:12]} {result.raw.subject}')  # noqa: T201 - CLI output
        render_diagnostics([*result.errors, *result.warnings])


def _summary(results: Sequence[ValidationResult]) -> int:
    failed = sum(1 for result in results if not result.ok)
    warnings = sum(len(result.warnings) for result in results)
    print(  # noqa: T201 - CLI output
        f'\n{len(results)} checked, {failed} non-compliant, {warnings} warning(s).',
    )
    return 1 if failed else 0


def _resolve_config(args: argparse.Namespace) -> CommitMeConfig:
    config_path = Path(args.config) if args.config else None
    config = load_config(Path.cwd(), path=config_path)
    return merge_overrides(
        config,
        types=args.type,
        scopes=args.scope,
        base_branch=getattr(args, 'base_branch', None),
    )


def _cmd_check(args: argparse.Namespace, config: CommitMeConfig) -> int:
    """Handle the ``check`` subcommand."""
    source = GitCommitSource(Path.cwd(), config.base_branch)
    results = validate_commits(source.commits(), config)
    if not results:
        print(f'No commits to check in {source.revision_range}.')  # noqa: T201 - CLI output
        return 0
    _print_results(results)
    return _summary(results)


def _cmd_hook(args: argparse.Namespace, config: CommitMeConfig) -> int:
    """Handle the ``hook`` subcommand."""
    source = FileCommitSource(Path(args.file))
    results = validate_commits(source.commits(), config)
    for result in results:
        render_diagnostics([*result.errors, *result.warnings], file=sys.stderr)
    return 0 if all(result.ok for result in results) else 1


def _cmd_pr(args: argparse.Namespace, config: CommitMeConfig) -> int:
    """Handle the ``pr`` subcommand."""
    pr_id = f'#{args.number}' if args.number is not None else '#PR'
    raw_pr = RawCommit(id=pr_id, subject=args.title, body=args.body or '')

    commit_results: list[ValidationResult] = []
    if not args.no_commits:
        source = GitCommitSource(Path.cwd(), config.base_branch)
        commit_results = validate_commits(source.commits(), config)

    pr_result = validate_pull_request(raw_pr, conventional_commits(commit_results), config)
    results = [*commit_results, pr_result]
    _print_results(results)

    if pr_result.commit is not None:
        label = determine_label([pr_result.commit])
        print(f'Suggested label: {label}' if label else 'No label applies.')  # noqa: T201 - CLI output
    return _summary(results)


def _cmd_explain(args: argparse.Namespace) -> int:
    """Handle the ``explain`` subcommand."""
    result = explain(args.code)
    if result is None:
        print(f'Unknown error code: {args.code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='commitme',
        description='Conventional Commits compliance for commits and pull requests.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Show debug logging.',
    )
    parser.add_argument(
        '--quiet',
        '-q',
        action='store_true',
        help='Only log warnings and errors.',
    )
    parser.add_argument(
        '--json-log',
        action='store_true',
        help='Write log events to stderr as JSON lines.',
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='Configuration file (default: ./commitme.toml if present).',
    )
    parser.add_argument(
        '--type',
        metavar='TYPE',
        action='append',
        default=None,
        help='Allowed commit type; repeat for more. Overrides "types" in the config file.',
    )
    parser.add_argument(
        '--scope',
        metavar='SCOPE',
        action='append',
        default=None,
        help='Allowed scope; repeat for more. Overrides "scopes" in the config file.',
    )

    subparsers = parser.add_subparsers(dest='command')

    check_parser = subparsers.add_parser(
        'check',
        help='Validate the commits of the current branch.',
        formatter_class=RichHelpFormatter,
    )
    check_parser.add_argument(
        '--base-branch',
        metavar='BRANCH',
        default=None,
        help='Branch to compare HEAD against (default: main).',
    )

    hook_parser = subparsers.add_parser(
        'hook',
        help='Validate a commit message file (commit-msg hook).',
        formatter_class=RichHelpFormatter,
    )
    hook_parser.add_argument(
        'file',
        metavar='FILE',
        help='Path of the commit message file.',
    )

    pr_parser = subparsers.add_parser(
        'pr',
        help='Validate a pull request title against its commits.',
        formatter_class=RichHelpFormatter,
    )
    pr_parser.add_argument(
        '--title',
        required=True,
        help='Pull request title.',
    )
    pr_parser.add_argument(
        '--body',
        default='',
        help='Pull request description.',
    )
    pr_parser.add_argument(
        '--number',
        type=int,
        default=None,
        help='Pull request number, used in diagnostics.',
    )
    pr_parser.add_argument(
        '--base-branch',
        metavar='BRANCH',
        default=None,
        help='Branch the pull request targets (default: main).',
    )
    pr_parser.add_argument(
        '--no-commits',
        action='store_true',
        help='Only validate the title and body, not the local commits.',
    )

    explain_parser = subparsers.add_parser(
        'explain',
        help='Explain a commitme error code.',
        formatter_class=RichHelpFormatter,
    )
    explain_parser.add_argument(
        'code',
        help='Error code, e.g. CM-CONFIG-INVALID-KEY.',
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        command = args.command
        if command == 'explain':
            return _cmd_explain(args)
        if command in ('check', 'hook', 'pr'):
            config = _resolve_config(args)
            logger.debug('command_started', command=command, base_branch=config.base_branch)
            if command == 'check':
                return _cmd_check(args, config)
            if command == 'hook':
                return _cmd_hook(args, config)
            return _cmd_pr(args, config)

        parser.print_help()  # noqa: T201 - CLI output
        print(  # noqa: T201 - CLI output
            f'\n{parser.prog}: error: please provide a command',
            file=sys.stderr,
        )
        return 2

    except CommitMeError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Wrapper for pyproject.toml [project.scripts] entry point."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
]
