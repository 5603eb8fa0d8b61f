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

from collections.abc import Iterable

from code_enforcer.core.errors import JsonParseError
from code_enforcer.plugins.interfaces import JsonFormatter
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.types import SourceFile


def check_json_file(file: SourceFile, formatter: JsonFormatter, sink: DiagnosticSink) -> None:
    """
    Validate one data file.

    A parse failure is reported and ends the check for this file, since
    there is no canonical form to compare against. Otherwise the canonical
    form must equal the file content, ignoring surrounding whitespace.
    """
    try:
        value = formatter.parse(file.content)
    except JsonParseError as e:
        sink.add(
            Diagnostic(
                problem=f"json file failed to parse: {e.message}",
                solution="fix formatting errors",
                file=file,
                offset=e.offset,
                line_number=e.line,
                source="jsonlint",
            )
        )
        return

    if formatter.canonical(value).strip() != file.content.strip():
        sink.add(
            Diagnostic(
                problem="json file needs proper formatting",
                solution="run jsonlint --in-place",
                file=file,
                source="jsonlint",
            )
        )


def check_json_files(files: Iterable[SourceFile], formatter: JsonFormatter, sink: DiagnosticSink) -> None:
    for file in files:
        check_json_file(file, formatter, sink)
