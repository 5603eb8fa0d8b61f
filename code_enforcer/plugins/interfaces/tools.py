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

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

# ESLint


@dataclass(frozen=True, slots=True)
class LintMessage:
    message: str
    rule_id: str | None
    line: int | None
    column: int | None = None


@dataclass(frozen=True, slots=True)
class LintResult:
    """Messages reported for one file (file_path as returned by the engine)."""

    file_path: str
    messages: tuple[LintMessage, ...] = field(default_factory=tuple)


class LintEngine(Protocol):
    """
    External static-analysis engine.

    Given file paths (relative to the project root), returns one result per
    linted file. Crashes and malformed output must raise ExternalToolError.
    """

    def lint(self, root: Path, paths: Sequence[str]) -> Sequence[LintResult]:
        raise NotImplementedError()


# ESDoc


@dataclass(frozen=True, slots=True)
class FileCoverage:
    actual_count: int
    expect_count: int
    undocumented_lines: tuple[int, ...] = field(default_factory=tuple)

    @property
    def complete(self) -> bool:
        return self.actual_count == self.expect_count


@dataclass(frozen=True, slots=True)
class DocLintRecord:
    """
    One documentation mismatch. `line_number` is 0-based as written by ESDoc.
    """

    file_path: str
    line_number: int
    code_params: tuple[str, ...] = field(default_factory=tuple)
    doc_params: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class DocReport:
    coverage: Mapping[str, FileCoverage] = field(default_factory=dict)
    lint: tuple[DocLintRecord, ...] = field(default_factory=tuple)


class DocCoverageTool(Protocol):
    """
    External documentation-coverage tool, run as a separate process.

    run() must not return before the process has exited and both of its
    output artifacts have been read.
    """

    async def run(self, root: Path) -> DocReport:
        raise NotImplementedError()


# JSON grammar


class JsonFormatter(Protocol):
    def parse(self, text: str) -> Any:
        """Parse text; raises JsonParseError on invalid input."""
        raise NotImplementedError()

    def canonical(self, value: Any) -> str:
        """Deterministic re-serialization used to detect formatting drift."""
        raise NotImplementedError()
