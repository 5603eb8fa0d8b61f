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

from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.scan import scan
from code_enforcer.source.types import SourceFile

# "^1.2.3" lets the package manager pick any later minor or patch release.
CARET_VERSION = r'"\^(\d+)\.(\d+)\.(\d+)"'


def check_manifest(file: SourceFile, sink: DiagnosticSink) -> None:
    for offset in scan(file.content, CARET_VERSION):
        sink.add(
            Diagnostic(
                problem=f"versions in {file.name} should be fixed",
                solution="remove ^",
                file=file,
                offset=offset,
                source="manifest",
            )
        )
