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
Comments must not carry TODO-style tags.

Comments are found with a pattern, not a lexer: block comments, or `//`
to the end of the line when not preceded by `:` (so URLs are skipped) or
a backslash. Tags are searched case-insensitively inside each comment,
optionally prefixed with `@`.
"""

import re

from code_enforcer.core.config import EnforcerConfig
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.types import SourceFile

FILENAME_PATTERN = r".*\.js"

COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|([^\\:]|^)//.*$", re.MULTILINE)


def tag_pattern(tag: str) -> re.Pattern[str]:
    return re.compile("@?" + re.escape(tag) + ".*$", re.IGNORECASE | re.MULTILINE)


def check(file: SourceFile, config: EnforcerConfig, sink: DiagnosticSink) -> None:
    tags = config.todo_tags
    if not tags:
        return

    problem = "don't use " + ",".join(tags) + " tags"
    patterns = [tag_pattern(t) for t in tags]

    for comment in COMMENT_RE.finditer(file.content):
        body = comment.group(0)
        for pattern in patterns:
            for tag_match in pattern.finditer(body):
                sink.add(
                    Diagnostic(
                        problem=problem,
                        solution="create tickets in your tracker",
                        file=file,
                        offset=comment.start() + tag_match.start(),
                        source="no-todo-tags",
                    )
                )
