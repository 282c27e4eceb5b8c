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

"""Configuration reader for commitme.

Reads ``commitme.toml`` from the repository root. The file is optional:
without it every type and scope is allowed and the base branch is
``main``.

All keys are top level::

    types = ["feat", "fix", "docs", "chore"]
    scopes = ["cli", "parser"]
    base_branch = "main"

Empty ``types`` or ``scopes`` lists mean "no restriction", not "forbid
everything". Command-line flags override file values through
:func:`merge_overrides`; the result is an immutable
:class:`CommitMeConfig` that is passed explicitly into every validation
call.

Usage::

    from commitme.config import load_config, merge_overrides

    config = load_config(Path('.'))
    config = merge_overrides(config, scopes=['cli'])
"""

from __future__ import annotations

import difflib
from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitme.errors import E, CommitMeError
from commitme.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = 'commitme.toml'

VALID_KEYS: frozenset[str] = frozenset({'types', 'scopes', 'base_branch'})

_TYPE_MAP: dict[str, type | tuple[type, ...]] = {
    'types': list,
    'scopes': list,
    'base_branch': str,
}


@dataclass(frozen=True)
class CommitMeConfig:
    """Validated, immutable commitme configuration.

    Attributes:
        types: Allowed commit types, in configured order. Empty allows
            any type.
        scopes: Allowed scopes, in configured order. Empty allows any
            scope, including none.
        base_branch: Branch that ``check`` and ``pr`` compare ``HEAD``
            against.
        config_path: The file this configuration was read from, or
            ``None`` when built from defaults.
    """

    types: tuple[str, ...] = ()
    scopes: tuple[str, ...] = ()
    base_branch: str = 'main'
    config_path: Path | None = None


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_value_type(key: str, value: Any, *, context: str) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    if not isinstance(value, expected):
        type_name = expected.__name__ if isinstance(expected, type) else str(expected)
        raise CommitMeError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {type_name}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {context}.',
        )


def _validate_string_list(key: str, items: list[object], *, context: str) -> tuple[str, ...]:
    """Raise if any item in a list is not a non-empty string."""
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise CommitMeError(
                code=E.CONFIG_INVALID_VALUE,
                message=f"'{key}' items must be non-empty strings, got {type(item).__name__}: {item!r}",
                hint=f'Each {key} entry should be a plain word in {context}.',
            )
    return tuple(str(item) for item in items)


def _read_document(config_path: Path) -> dict[str, Any]:  # noqa: ANN401
    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise CommitMeError(
            code=E.CONFIG_NOT_FOUND,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitMeError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    return doc.unwrap()


def load_config(root: Path, *, path: Path | None = None) -> CommitMeConfig:
    """Load and validate configuration from ``commitme.toml``.

    Args:
        root: Directory that holds ``commitme.toml``.
        path: Explicit configuration file. Unlike the default location,
            it must exist.

    Returns:
        A validated :class:`CommitMeConfig`.

    Raises:
        CommitMeError: If the file cannot be read or parsed, or contains
            an unknown key or a value of the wrong type.
    """
    if path is not None:
        config_path = path
        if not config_path.is_file():
            raise CommitMeError(
                code=E.CONFIG_NOT_FOUND,
                message=f'Configuration file {config_path} does not exist',
                hint='Check the path passed to --config.',
            )
    else:
        config_path = root / CONFIG_FILENAME
        if not config_path.is_file():
            logger.debug('no_commitme_config', path=str(config_path))
            return CommitMeConfig()

    raw = _read_document(config_path)
    context = config_path.name

    for key in raw:
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            hint = f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys are: {", ".join(sorted(VALID_KEYS))}.'
            raise CommitMeError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in {context}",
                hint=hint,
            )

    for key, value in raw.items():
        _validate_value_type(key, value, context=context)

    kwargs: dict[str, Any] = {}  # noqa: ANN401
    for key in ('types', 'scopes'):
        if key in raw:
            kwargs[key] = _validate_string_list(key, raw[key], context=context)
    if 'base_branch' in raw:
        kwargs['base_branch'] = raw['base_branch']

    config = CommitMeConfig(**kwargs, config_path=config_path)
    logger.debug(
        'config_loaded',
        path=str(config_path),
        types=len(config.types),
        scopes=len(config.scopes),
    )
    return config


def merge_overrides(
    config: CommitMeConfig,
    *,
    types: Sequence[str] | None = None,
    scopes: Sequence[str] | None = None,
    base_branch: str | None = None,
) -> CommitMeConfig:
    """Return ``config`` with command-line overrides applied.

    ``None`` (or an empty sequence) leaves the file value in place.
    """
    changes: dict[str, Any] = {}  # noqa: ANN401
    if types:
        changes['types'] = tuple(types)
    if scopes:
        changes['scopes'] = tuple(scopes)
    if base_branch:
        changes['base_branch'] = base_branch
    return replace(config, **changes) if changes else config


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'CommitMeConfig',
    'load_config',
    'merge_overrides',
]
