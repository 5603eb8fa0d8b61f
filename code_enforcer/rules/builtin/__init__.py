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

"""
Built-in rules.

Each module exports FILENAME_PATTERN and check(file, config, sink); the
rule id is the module name with dashes. Adding a rule means adding a
module here and listing it in BUILTIN_RULES.
"""

from types import ModuleType

from code_enforcer.rules.builtin import (
    ascii_only,
    console_style_calls,
    no_extension_imports,
    no_index_imports,
    no_todo_tags,
)

BUILTIN_RULES: tuple[ModuleType, ...] = (
    ascii_only,
    console_style_calls,
    no_index_imports,
    no_extension_imports,
    no_todo_tags,
)

__all__ = ["BUILTIN_RULES"]
