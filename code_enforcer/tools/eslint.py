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

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from code_enforcer.core.errors import ExternalToolError
from code_enforcer.plugins.interfaces import LintMessage, LintResult

logger = logging.getLogger(__name__)

# ESLint exits 1 when it reports problems and 2 on a configuration or internal error.
_OK_EXIT_CODES = (0, 1)


@dataclass(frozen=True, slots=True)
class EslintEngine:
    """
    Runs the project's ESLint with the JSON formatter.

    ESLint picks up the project's own .eslintrc, so rules are configured
    where the developers already configure them.
    """

    command: tuple[str, ...] = ("node_modules/.bin/eslint",)

    def lint(self, root: Path, paths: Sequence[str]) -> list[LintResult]:
        if not paths:
            return []

        args = [*self.command, "--format", "json", *paths]
        logger.debug("running %s on %d file(s)", self.command[0], len(paths))
        try:
            result = subprocess.run(
                args,
                cwd=str(root),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ExternalToolError(
                code="eslint_not_runnable",
                message=f"Failed to start ESLint: {self.command[0]}",
                details={"command": list(self.command), "error": str(e)},
            ) from e

        if result.returncode not in _OK_EXIT_CODES:
            raise ExternalToolError(
                code="eslint_failed",
                message=f"ESLint exited with code {result.returncode}",
                details={"stderr": result.stderr.strip()},
            )

        return parse_eslint_output(result.stdout)


def parse_eslint_output(text: str) -> list[LintResult]:
    """Translate ESLint's JSON formatter output into LintResult records."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ExternalToolError(
            code="eslint_bad_output",
            message=f"ESLint output is not valid JSON: {e}",
        ) from e

    if not isinstance(raw, list):
        raise ExternalToolError(code="eslint_bad_output", message="ESLint output must be a list of results.")

    results: list[LintResult] = []
    for item in raw:
        if not isinstance(item, dict) or not isinstance(item.get("filePath"), str):
            raise ExternalToolError(code="eslint_bad_output", message="ESLint result is missing 'filePath'.")
        messages = tuple(_parse_message(m) for m in item.get("messages") or ())
        results.append(LintResult(file_path=item["filePath"], messages=messages))
    return results


def _parse_message(raw: Any) -> LintMessage:
    if not isinstance(raw, dict) or not isinstance(raw.get("message"), str):
        raise ExternalToolError(code="eslint_bad_output", message="ESLint message is missing 'message'.")
    return LintMessage(
        message=raw["message"],
        rule_id=raw.get("ruleId"),
        line=raw.get("line"),
        column=raw.get("column"),
    )
