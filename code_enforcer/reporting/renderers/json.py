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
from collections.abc import Sequence

from code_enforcer.reporting.types import Diagnostic
from code_enforcer.source.position import resolve


class JsonReportRenderer:
    """Machine-readable output: every diagnostic plus its resolved line."""

    def render(self, diagnostics: Sequence[Diagnostic]) -> str:
        items = []
        for d in diagnostics:
            item = d.to_dict()
            ctx = resolve(d)
            item["line"] = ctx.line_number
            item["line_text"] = ctx.line_text
            items.append(item)
        return json.dumps({"count": len(items), "diagnostics": items}, indent=2, ensure_ascii=False) + "\n"
