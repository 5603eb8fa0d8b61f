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

from code_enforcer.core.config import EnforcerConfig
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.scan import scan
from code_enforcer.source.types import SourceFile

FILENAME_PATTERN = r".*\.js"

PATTERN = r"import +.* +from '.*/index'"


def check(file: SourceFile, config: EnforcerConfig, sink: DiagnosticSink) -> None:
    for offset in scan(file.content, PATTERN):
        sink.add(
            Diagnostic(
                problem="no /index import",
                solution="remove /index",
                file=file,
                offset=offset,
                source="no-index-imports",
            )
        )
