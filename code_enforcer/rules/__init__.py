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

from code_enforcer.rules.registry import ENTRYPOINT_GROUP, RuleRegistry, plugin_from_module, rule_id_for
from code_enforcer.rules.types import CheckFn, RulePlugin

__all__ = [
    "CheckFn",
    "RulePlugin",
    "RuleRegistry",
    "ENTRYPOINT_GROUP",
    "plugin_from_module",
    "rule_id_for",
]
