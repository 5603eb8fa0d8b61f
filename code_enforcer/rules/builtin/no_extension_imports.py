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
Imports must not spell out the file extension.

The module resolver adds the extension itself. Some packages publish a
module whose name ends in ".js" (bignumber.js); those are listed in
`import_extension_exceptions` and exempted through a negative lookahead.
"""

import re
from collections.abc import Sequence

from code_enforcer.core.config import EnforcerConfig
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.scan import scan
from code_enforcer.source.types import SourceFile

FILENAME_PATTERN = r".*\.js"


def build_pattern(extensions: Sequence[str], exceptions: Sequence[str]) -> str:
    ext = "|".join(re.escape(e.lstrip(".")) for e in extensions)
    pattern = "import .* from '"
    if exceptions:
        pattern += "(?!(" + "|".join(re.escape(e) for e in exceptions) + "))"
    return pattern + r".*\.(" + ext + ")'"


def check(file: SourceFile, config: EnforcerConfig, sink: DiagnosticSink) -> None:
    if not config.import_extensions:
        return

    shown = ", ".join("." + e.lstrip(".") for e in config.import_extensions)
    pattern = build_pattern(config.import_extensions, config.import_extension_exceptions)
    for offset in scan(file.content, pattern):
        sink.add(
            Diagnostic(
                problem=f"no {shown} import",
                solution=f"remove {shown}",
                file=file,
                offset=offset,
                source="no-extension-imports",
            )
        )
