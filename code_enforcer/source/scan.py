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


def compile_pattern(pattern: str | re.Pattern[str], flags: int = 0) -> re.Pattern[str]:
    """
    Compile a string pattern in multi-line mode.

    Already compiled patterns are returned untouched so callers keep
    control over their own flags.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.MULTILINE | flags)


def scan(content: str, pattern: str | re.Pattern[str]) -> Iterator[int]:
    """
    Yield the start offset of every non-overlapping match, left to right.

    `^` and `$` match at line boundaries. Each call scans from the start
    of `content`.
    """
    regex = compile_pattern(pattern)
    for match in regex.finditer(content):
        yield match.start()
