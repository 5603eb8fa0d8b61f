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
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from code_enforcer.reporting.types import Diagnostic

# One match per line, terminators excluded.
_LINE_RE = re.compile(r"^[^\r\n]*", re.MULTILINE)

# Width of the indent the text renderer puts before a quoted source line.
CARET_INDENT = 2


@dataclass(frozen=True, slots=True)
class LineContext:
    """
    Human-readable position of a diagnostic.

    All fields are None when the position could not be resolved.
    """

    line_number: int | None = None
    line_text: str | None = None
    caret: str | None = None

    @property
    def resolved(self) -> bool:
        return self.line_text is not None


def iter_lines(content: str) -> Iterator[tuple[int, str]]:
    """Yield (start offset, line text) for every line of `content`."""
    for match in _LINE_RE.finditer(content):
        yield match.start(), match.group(0)


def resolve_by_offset(content: str, offset: int) -> LineContext:
    """
    Map a character offset to its line number, line text and caret marker.

    The caret is indented by the distance from the line start plus
    CARET_INDENT so it lines up under the indented source line.
    """
    if offset < 0 or offset >= len(content):
        return LineContext()

    line_number = 0
    line_start = 0
    line_text: str | None = None
    for start, text in iter_lines(content):
        if start > offset:
            break
        line_number += 1
        line_start = start
        line_text = text

    if line_text is None:
        return LineContext()

    caret = " " * (offset - line_start + CARET_INDENT) + "^"
    return LineContext(line_number=line_number, line_text=line_text, caret=caret)


def resolve_by_line_number(content: str, number: int) -> LineContext:
    """Return the text of the 1-based line `number` with a bare caret."""
    if number < 1:
        return LineContext(line_number=number)

    count = 0
    for _, text in iter_lines(content):
        count += 1
        if count == number:
            return LineContext(line_number=number, line_text=text, caret="^")

    return LineContext(line_number=number)


def resolve(diagnostic: "Diagnostic") -> LineContext:
    """
    Offset wins over line number when a diagnostic carries both; the line
    number is used only if the offset lies outside the content.
    """
    content = diagnostic.file.content
    if diagnostic.offset is not None:
        ctx = resolve_by_offset(content, diagnostic.offset)
        if ctx.resolved or diagnostic.line_number is None:
            return ctx
    if diagnostic.line_number is not None:
        return resolve_by_line_number(content, diagnostic.line_number)
    return LineContext()
