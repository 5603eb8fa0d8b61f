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

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from code_enforcer.core.errors import ExternalToolError
from code_enforcer.plugins.interfaces import DocLintRecord, DocReport, FileCoverage

logger = logging.getLogger(__name__)

COVERAGE_FILE = "coverage.json"
LINT_FILE = "lint.json"


@dataclass(frozen=True, slots=True)
class EsdocTool:
    """
    Runs ESDoc as a subprocess and reads back its two artifacts.

    ESDoc takes no arguments; it reads .esdoc.json and writes coverage.json
    and lint.json into the configured destination directory. No timeout is
    applied: a hung ESDoc process hangs the run.
    """

    command: tuple[str, ...] = ("node_modules/.bin/esdoc",)
    config_file: str = ".esdoc.json"

    async def run(self, root: Path) -> DocReport:
        logger.debug("running %s", " ".join(self.command))
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command,
                cwd=str(root),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ExternalToolError(
                code="esdoc_not_runnable",
                message=f"Failed to start ESDoc: {self.command[0]}",
                details={"command": list(self.command), "error": str(e)},
            ) from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            raise ExternalToolError(
                code="esdoc_failed",
                message=f"ESDoc exited with code {process.returncode}",
                details={"stderr": stderr.decode("utf-8", errors="replace").strip()},
            )

        destination = self.destination(root)
        coverage = parse_coverage(_read_json(destination / COVERAGE_FILE))
        lint = parse_doc_lint(_read_json(destination / LINT_FILE))
        return DocReport(coverage=coverage, lint=lint)

    def destination(self, root: Path) -> Path:
        config = _read_json(root / self.config_file)
        dest = config.get("destination") if isinstance(config, dict) else None
        if not isinstance(dest, str) or not dest:
            raise ExternalToolError(
                code="esdoc_bad_config",
                message=f"'destination' is missing in {self.config_file}",
                file=self.config_file,
            )
        return (root / dest).resolve()


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ExternalToolError(
            code="esdoc_artifact_missing",
            message=f"Failed to read ESDoc file: {path}",
            details={"path": str(path), "error": str(e)},
        ) from e
    except json.JSONDecodeError as e:
        raise ExternalToolError(
            code="esdoc_bad_output",
            message=f"ESDoc file is not valid JSON: {path}",
            details={"path": str(path), "error": str(e)},
        ) from e


def parse_coverage(raw: Any) -> dict[str, FileCoverage]:
    files = raw.get("files") if isinstance(raw, Mapping) else None
    if not isinstance(files, Mapping):
        raise ExternalToolError(code="esdoc_bad_output", message="ESDoc coverage must contain a 'files' object.")

    out: dict[str, FileCoverage] = {}
    for name, data in files.items():
        try:
            out[str(name)] = FileCoverage(
                actual_count=int(data["actualCount"]),
                expect_count=int(data["expectCount"]),
                undocumented_lines=tuple(int(n) for n in data.get("undocumentLines") or ()),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ExternalToolError(
                code="esdoc_bad_output",
                message=f"Malformed coverage entry for {name}",
                details={"error": repr(e)},
            ) from e
    return out


def parse_doc_lint(raw: Any) -> tuple[DocLintRecord, ...]:
    if not isinstance(raw, list):
        raise ExternalToolError(code="esdoc_bad_output", message="ESDoc lint output must be a list.")

    records: list[DocLintRecord] = []
    for item in raw:
        try:
            records.append(
                DocLintRecord(
                    file_path=str(item["filePath"]),
                    line_number=int(item["lines"][0]["lineNumber"]),
                    code_params=tuple(str(p) for p in item.get("codeParams") or ()),
                    doc_params=tuple(str(p) for p in item.get("docParams") or ()),
                )
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise ExternalToolError(
                code="esdoc_bad_output",
                message="Malformed ESDoc lint record",
                details={"error": repr(e)},
            ) from e
    return tuple(records)
