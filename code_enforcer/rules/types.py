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

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from code_enforcer.reporting.types import DiagnosticSink
from code_enforcer.source.types import SourceFile

if TYPE_CHECKING:
    from code_enforcer.core.config import EnforcerConfig

CheckFn = Callable[[SourceFile, "EnforcerConfig", DiagnosticSink], None]


@dataclass(frozen=True, slots=True)
class RulePlugin:
    """
    A text-pattern rule bound to a filename predicate.

    Stateless: one instance serves every file of the run. `check` appends
    diagnostics to the sink and returns nothing.
    """

    id: str
    filename_pattern: str
    check: CheckFn
    source: str = "builtin"

    def applies_to(self, name: str) -> bool:
        return re.search(self.filename_pattern, name) is not None

    def is_suppressed(self, name: str, config: "EnforcerConfig") -> bool:
        return any(re.search(p, name) for p in config.suppressions_for(self.id))
