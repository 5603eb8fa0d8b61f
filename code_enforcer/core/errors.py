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

from collections.abc import Mapping
from typing import Any


class EnforcerError(Exception):
    """
    Base class for all run-level errors.

    Problems found in the checked sources are never raised; they are
    collected as diagnostics. These errors describe the run itself:
    a broken configuration, a broken rule, an unreadable file or a
    failing external tool.
    """

    code: str
    message: str
    file: str | None = None
    line: int | None = None
    column: int | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "enforcer_error",
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        self.details = details

    def __str__(self) -> str:
        loc = ""
        if self.file:
            loc = self.file
            if self.line is not None:
                loc += f":{self.line}"
                if self.column is not None:
                    loc += f":{self.column}"
            loc += ": "
        return f"{loc}{self.message}"


class ConfigurationError(EnforcerError):
    """Raised when the configuration file is missing, malformed or has wrong shapes."""

    pass


class RuleLoadError(EnforcerError):
    """Raised when a rule plugin cannot be bound. Aborts the run."""

    pass


class FileSystemError(EnforcerError):
    """Raised when a selected file cannot be read. Aborts the run."""

    pass


class JsonParseError(EnforcerError):
    """Raised by the JSON grammar handler; turned into a diagnostic by the engine."""

    offset: int | None = None

    def __init__(self, message: str, *, offset: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.offset = offset


class ExternalToolError(EnforcerError):
    """Raised when ESLint or ESDoc cannot be run or returns unusable output."""

    pass
