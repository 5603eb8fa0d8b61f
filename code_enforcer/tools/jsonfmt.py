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
from dataclasses import dataclass
from typing import Any

from code_enforcer.core.errors import JsonParseError

# String literals are matched first so constants inside them are skipped.
_CONSTANT_RE = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')

# JavaScript switches to exponent notation from 1e21 on.
_JS_EXPONENT_LIMIT = 1e21


class _NonFiniteConstant(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise _NonFiniteConstant(name)


def _constant_offset(text: str) -> int | None:
    for match in _CONSTANT_RE.finditer(text):
        if match.group(1) is not None:
            return match.start(1)
    return None


def _integral_floats_as_int(value: Any) -> Any:
    """Rewrite floats such as 1.0 or 1e5 the way JSON.stringify prints them."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _JS_EXPONENT_LIMIT:
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: _integral_floats_as_int(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_int(v) for v in value]
    return value


@dataclass(frozen=True, slots=True)
class DefaultJsonFormatter:
    """
    Strict JSON parsing plus the canonical two-space layout.

    NaN and Infinity are rejected like any other syntax error. Non-ASCII
    characters are written as-is and integral numbers lose their fraction,
    matching what JavaScript's JSON.stringify produces for the same data.
    """

    indent: int = 2

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise JsonParseError(
                code="json_parse_error",
                message=str(e),
                line=e.lineno,
                column=e.colno,
                offset=e.pos,
            ) from e
        except _NonFiniteConstant as e:
            offset = _constant_offset(text)
            line = column = None
            if offset is not None:
                line = text.count("\n", 0, offset) + 1
                column = offset - text.rfind("\n", 0, offset)
            raise JsonParseError(
                code="json_parse_error",
                message=f"Unexpected token {e.args[0]!r} is not valid JSON",
                line=line,
                column=column,
                offset=offset,
            ) from e

    def canonical(self, value: Any) -> str:
        return json.dumps(_integral_floats_as_int(value), indent=self.indent, ensure_ascii=False)
