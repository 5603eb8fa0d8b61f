# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 code-enforcer Contributors
#
# This file is part of code-enforcer.
#
# code-enforcer is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# code-enforcer is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from code_enforcer.core.errors import ConfigurationError

DEFAULT_CONFIG_FILE = ".code-enforcer.json"


@dataclass(frozen=True, slots=True)
class GlobSpec:
    """Include/exclude pattern pair selecting one class of files."""

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class EnforcerConfig:
    """
    Resolved options for one run.

    Every field has a value; `from_mapping` merges user values over these
    defaults one top-level key at a time.
    """

    code_files: GlobSpec = field(
        default_factory=lambda: GlobSpec(
            include=("src/**/*.js",),
            exclude=("node_modules/**", "**/node_modules/**"),
        )
    )
    data_files: GlobSpec = field(
        default_factory=lambda: GlobSpec(
            include=("*.json", "src/**/*.json"),
            exclude=("node_modules/**", "**/node_modules/**", "package-lock.json"),
        )
    )
    disable_rules: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    todo_tags: tuple[str, ...] = ("TODO", "FIXME")
    esdoc_ignore: tuple[str, ...] = ()
    import_extensions: tuple[str, ...] = ("js",)
    import_extension_exceptions: tuple[str, ...] = ("bignumber",)
    manifest_file: str = "package.json"
    esdoc_config: str = ".esdoc.json"
    esdoc_command: tuple[str, ...] = ("node_modules/.bin/esdoc",)
    eslint_command: tuple[str, ...] = ("node_modules/.bin/eslint",)

    def suppressions_for(self, rule_id: str) -> tuple[str, ...]:
        return tuple(self.disable_rules.get(rule_id, ()))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "EnforcerConfig":
        if not isinstance(raw, Mapping):
            raise ConfigurationError(code="invalid_config", message="Configuration root must be an object.")

        overrides: dict[str, Any] = {}

        if "jsFiles" in raw:
            overrides["code_files"] = _parse_glob_spec(raw["jsFiles"], key="jsFiles")
        if "jsonFiles" in raw:
            overrides["data_files"] = _parse_glob_spec(raw["jsonFiles"], key="jsonFiles")
        if "disableRules" in raw:
            overrides["disable_rules"] = _parse_disable_rules(raw["disableRules"])

        for key, attr in _LIST_FIELDS.items():
            if key in raw:
                overrides[attr] = _string_tuple(raw[key], key=key)
        if "ESDocIgnore" in raw:
            overrides["esdoc_ignore"] = _regex_tuple(raw["ESDocIgnore"], key="ESDocIgnore")

        for key, attr in _STR_FIELDS.items():
            if key in raw:
                value = raw[key]
                if not isinstance(value, str) or not value.strip():
                    raise ConfigurationError(code="invalid_field", message=f"'{key}' must be a non-empty string.")
                overrides[attr] = value

        for key, attr in _COMMAND_FIELDS.items():
            if key in raw:
                value = raw[key]
                if isinstance(value, str):
                    value = value.split()
                command = _string_tuple(value, key=key)
                if not command:
                    raise ConfigurationError(code="invalid_field", message=f"'{key}' must not be empty.")
                overrides[attr] = command

        return replace(cls(), **overrides)


_LIST_FIELDS = {
    "todoTags": "todo_tags",
    "importExtensions": "import_extensions",
    "importExtensionExceptions": "import_extension_exceptions",
}

_STR_FIELDS = {
    "manifestFile": "manifest_file",
    "esdocConfig": "esdoc_config",
}

_COMMAND_FIELDS = {
    "esdocCommand": "esdoc_command",
    "eslintCommand": "eslint_command",
}


def load_config(path: str | Path) -> EnforcerConfig:
    """
    Load a configuration file (.json, .yaml or .yml).

    Raises:
        ConfigurationError if the file is missing, unreadable or malformed.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(
            code="config_not_found",
            message=f"Config file does not exist: {config_path}",
            details={"path": str(config_path)},
        )

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            code="config_read_error",
            message=f"Failed to read config file: {config_path}",
            details={"path": str(config_path), "error": str(e)},
        ) from e

    try:
        if config_path.suffix.lower() in (".yaml", ".yml"):
            raw = yaml.safe_load(raw_text)
        else:
            raw = json.loads(raw_text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(
            code="config_parse_error",
            message=f"Failed to parse config file: {e}",
            file=str(config_path),
        ) from e

    if raw is None:
        raw = {}
    return EnforcerConfig.from_mapping(raw)


def _string_tuple(value: Any, *, key: str) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(code="invalid_field", message=f"'{key}' must be a list of strings.")
    return tuple(str(v) for v in value)


def _parse_glob_spec(value: Any, *, key: str) -> GlobSpec:
    if not isinstance(value, Mapping):
        raise ConfigurationError(code="invalid_glob_spec", message=f"'{key}' must be an object.")

    include = _string_tuple(value.get("include", []), key=f"{key}.include")
    # "ignore" is the older spelling of "exclude"
    exclude_raw = value.get("exclude", value.get("ignore", []))
    exclude = _string_tuple(exclude_raw, key=f"{key}.exclude")
    return GlobSpec(include=include, exclude=exclude)


def _parse_disable_rules(value: Any) -> dict[str, tuple[str, ...]]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(code="invalid_disable_rules", message="'disableRules' must be an object.")

    out: dict[str, tuple[str, ...]] = {}
    for rule_id, patterns in value.items():
        if isinstance(patterns, str):
            patterns = [patterns]
        out[str(rule_id)] = _regex_tuple(patterns, key=f"disableRules.{rule_id}")
    return out


def _regex_tuple(value: Any, *, key: str) -> tuple[str, ...]:
    patterns = _string_tuple(value, key=key)
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(
                code="invalid_pattern",
                message=f"'{key}' contains an invalid regular expression {pattern!r}: {e}",
                details={"pattern": pattern},
            ) from e
    return patterns
