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

from collections.abc import Callable, Sequence

from code_enforcer.plugins.interfaces import LintMessage, LintResult
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.types import SourceFile


def lint_problem(message: LintMessage) -> str:
    # ESLint messages end with a period; the rule id follows instead.
    return f"{message.message[:-1]} - {message.rule_id or 'eslint'}"


def check_lint_results(
    results: Sequence[LintResult],
    *,
    source_for: Callable[[str], SourceFile],
    sink: DiagnosticSink,
) -> None:
    for result in results:
        if not result.messages:
            continue
        file = source_for(result.file_path)
        for message in result.messages:
            sink.add(
                Diagnostic(
                    problem=lint_problem(message),
                    solution="run eslint --fix",
                    file=file,
                    line_number=message.line,
                    column_number=message.column,
                    source="eslint",
                )
            )
