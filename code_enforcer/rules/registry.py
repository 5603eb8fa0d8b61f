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

import logging
from collections.abc import Iterable, Iterator, Mapping
from importlib.metadata import entry_points
from types import ModuleType
from typing import Any, Final

from code_enforcer.core.errors import RuleLoadError
from code_enforcer.rules.types import RulePlugin

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP: Final[str] = "code_enforcer.rules"


def rule_id_for(module: ModuleType) -> str:
    """Rule id = last segment of the module name, underscores as dashes."""
    return module.__name__.rsplit(".", 1)[-1].replace("_", "-")


def plugin_from_module(module: Any, *, rule_id: str | None = None, source: str = "builtin") -> RulePlugin:
    """
    Bind a rule module (or any object with the same attributes).

    Raises:
        RuleLoadError if FILENAME_PATTERN or a callable check is missing.
    """
    if rule_id is None:
        rule_id = rule_id_for(module)

    missing: list[str] = []
    pattern = getattr(module, "FILENAME_PATTERN", None)
    if not isinstance(pattern, str):
        missing.append("FILENAME_PATTERN")
    check = getattr(module, "check", None)
    if not callable(check):
        missing.append("check")

    if missing:
        raise RuleLoadError(
            code="rule_missing_export",
            message=f"Rule '{rule_id}' is missing required export(s): {', '.join(missing)}",
            details={"rule": rule_id, "source": source, "missing": missing},
        )

    return RulePlugin(id=rule_id, filename_pattern=pattern, check=check, source=source)


class RuleRegistry:
    """
    Holds the rules of a run, indexed by id, in registration order.

    Typical lifecycle:
      reg = RuleRegistry()
      reg.load()
      for rule in reg: ...

    Unlike analyzer discovery in other tools, every failure here is fatal:
    a broken rule is a configuration error.
    """

    def __init__(self) -> None:
        self._rules: dict[str, RulePlugin] = {}
        self._loaded = False

    def load(self, modules: Iterable[ModuleType] | None = None, *, include_entrypoints: bool = True) -> None:
        """
        Register the built-in rule modules, then rules published by other
        distributions under the 'code_enforcer.rules' entry-point group.

        Calling load() again does nothing.
        """
        if self._loaded:
            return

        if modules is None:
            from code_enforcer.rules.builtin import BUILTIN_RULES

            modules = BUILTIN_RULES

        for module in modules:
            self.register(plugin_from_module(module))

        if include_entrypoints:
            self._load_entrypoints()

        self._loaded = True
        logger.debug("loaded %d rule(s): %s", len(self._rules), ", ".join(self._rules))

    def _load_entrypoints(self) -> None:
        for ep in entry_points(group=ENTRYPOINT_GROUP):
            source = f"{ep.module}:{ep.attr}" if ep.attr else ep.module
            try:
                loaded = ep.load()
            except Exception as e:
                raise RuleLoadError(
                    code="rule_import_error",
                    message=f"Failed to import rule '{ep.name}' from {source}",
                    details={"rule": ep.name, "source": source, "error": repr(e)},
                ) from e
            self.register(plugin_from_module(loaded, rule_id=ep.name, source=source))

    def register(self, plugin: RulePlugin) -> None:
        if plugin.id in self._rules:
            raise RuleLoadError(
                code="rule_duplicate_id",
                message=f"Rule id '{plugin.id}' is registered twice",
                details={"rule": plugin.id, "source": plugin.source, "first": self._rules[plugin.id].source},
            )
        self._rules[plugin.id] = plugin

    def get(self, rule_id: str) -> RulePlugin | None:
        return self._rules.get(rule_id)

    def mapping(self) -> Mapping[str, RulePlugin]:
        return dict(self._rules)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def __iter__(self) -> Iterator[RulePlugin]:
        return iter(tuple(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)
