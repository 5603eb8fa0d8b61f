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

from collections.abc import Sequence

from code_enforcer.reporting.types import Diagnostic
from code_enforcer.source.position import resolve

# Source lines are quoted with this prefix; offset carets include the same indent.
LINE_PREFIX = "  "


class TextReportRenderer:
    """
    Human-readable CLI output. Pure rendering: does not sort or mutate.

    Nothing is rendered when there are no diagnostics.
    """

    def __init__(self, show_solutions: bool = False):
        self.show_solutions = show_solutions

    def render(self, diagnostics: Sequence[Diagnostic]) -> str:
        if not diagnostics:
            return ""

        lines: list[str] = ["Errors:"]
        for d in diagnostics:
            lines.extend(self._render_diagnostic(d))
        lines.append(f"Errors: {len(diagnostics)}")
        return "\n".join(lines) + "\n"

    def _render_diagnostic(self, d: Diagnostic) -> list[str]:
        ctx = resolve(d)
        line_number = "" if ctx.line_number is None else str(ctx.line_number)

        header = f"{d.file.name}: {line_number}: {d.problem}"
        if self.show_solutions and d.solution:
            header += f" ({d.solution})"

        out = [header]
        if ctx.line_text is not None:
            out.append(LINE_PREFIX + ctx.line_text)
        if ctx.caret is not None:
            out.append(ctx.caret)
        out.append("")
        return out
