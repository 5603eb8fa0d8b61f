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

from code_enforcer.reporting.renderers.json import JsonReportRenderer
from code_enforcer.reporting.renderers.text import TextReportRenderer
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "JsonReportRenderer",
    "TextReportRenderer",
]
