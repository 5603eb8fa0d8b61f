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

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from code_enforcer.source.types import SourceFile


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    One compliance problem, normalized across rules and external tools.

    Position is either a character `offset` into `file.content` or a
    1-based `line_number` (with an optional column). When both are set the
    offset wins.
    """

    problem: str
    solution: str
    file: SourceFile
    offset: int | None = None
    line_number: int | None = None
    column_number: int | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file.name,
            "problem": self.problem,
            "solution": self.solution,
            "offset": self.offset,
            "line": self.line_number,
            "column": self.column_number,
            "source": self.source,
        }


class DiagnosticSink:
    """
    Append-only collector shared by every stage of a run.

    Diagnostics keep insertion order. Once frozen the sink rejects new
    entries.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []
        self._frozen = False

    def add(self, diagnostic: Diagnostic) -> None:
        if self._frozen:
            raise RuntimeError("Diagnostic sink is frozen; the run is already finished.")
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        for d in diagnostics:
            self.add(d)

    def freeze(self) -> tuple[Diagnostic, ...]:
        self._frozen = True
        return tuple(self._items)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._items))
