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

import logging
import re
from collections.abc import Callable, Sequence

from code_enforcer.plugins.interfaces import DocReport
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.types import SourceFile

logger = logging.getLogger(__name__)


def is_ignored(name: str, patterns: Sequence[str]) -> bool:
    return any(re.search(p, name) for p in patterns)


def check_doc_report(
    report: DocReport,
    *,
    ignore: Sequence[str],
    source_for: Callable[[str], SourceFile],
    sink: DiagnosticSink,
) -> None:
    """
    Turn ESDoc output into diagnostics.

    A file below full coverage yields one diagnostic per undocumented line
    unless its path matches an ignore pattern. Every doc-lint record yields
    one diagnostic on the line after the one ESDoc reports (ESDoc counts
    from zero).
    """
    for name, coverage in report.coverage.items():
        if is_ignored(name, ignore):
            logger.debug("documentation coverage ignored for %s", name)
            continue
        if coverage.complete:
            continue

        file = source_for(name)
        for line_number in coverage.undocumented_lines:
            sink.add(
                Diagnostic(
                    problem="not documented",
                    solution="add documentation comments: /** */",
                    file=file,
                    line_number=line_number,
                    source="esdoc",
                )
            )

    for record in report.lint:
        params = ",".join([*record.code_params, *record.doc_params])
        sink.add(
            Diagnostic(
                problem=f"doc linting error for {params}",
                solution="fix the documentation (parameters, return types)",
                file=source_for(record.file_path),
                line_number=record.line_number + 1,
                source="esdoc",
            )
        )
