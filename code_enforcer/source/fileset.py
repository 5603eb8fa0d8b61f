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

import glob
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from code_enforcer.core.config import GlobSpec
from code_enforcer.core.errors import FileSystemError
from code_enforcer.source.types import SourceFile

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _posix(name: str) -> str:
    return name.replace("\\", "/")


def glob_names(root: Path, pattern: str) -> list[str]:
    """Expand one pattern relative to `root`; `*` stays within a directory, `**` crosses them."""
    return sorted(_posix(name) for name in glob.glob(pattern, root_dir=root, recursive=True))


def excluded_names(root: Path, patterns: Iterable[str]) -> set[str]:
    """Every path under `root` matched by at least one exclude pattern."""
    names: set[str] = set()
    for pattern in patterns:
        names.update(glob_names(root, pattern))
    return names


def read_source(root: Path, name: str) -> SourceFile:
    """
    Read one file exactly as it is on disk.

    Newline translation is disabled so offsets computed on the content
    match the file bytes. Any failure is fatal for the run.
    """
    path = root / name
    try:
        with path.open("r", encoding=ENCODING, newline="") as handle:
            content = handle.read()
    except UnicodeDecodeError as e:
        raise FileSystemError(
            code="file_encoding_error",
            message=f"Failed to decode file (expected {ENCODING}): {name}",
            file=name,
            details={"path": str(path), "error": str(e)},
        ) from e
    except OSError as e:
        raise FileSystemError(
            code="file_read_error",
            message=f"Failed to read file: {name}",
            file=name,
            details={"path": str(path), "error": str(e)},
        ) from e
    return SourceFile(name=name, content=content)


@dataclass(frozen=True, slots=True)
class FileSetBuilder:
    """
    Expands glob specs into loaded source files.

    Include patterns are expanded independently and in order. Matches of
    one pattern are sorted; a file matched by two patterns appears twice.
    """

    root: Path

    def expand(self, spec: GlobSpec) -> list[str]:
        excluded = excluded_names(self.root, spec.exclude)
        names: list[str] = []
        for pattern in spec.include:
            for name in glob_names(self.root, pattern):
                if name in excluded:
                    continue
                if (self.root / name).is_dir():
                    continue
                names.append(name)
        return names

    def build(self, specs: Sequence[GlobSpec]) -> tuple[SourceFile, ...]:
        files: list[SourceFile] = []
        for spec in specs:
            names = self.expand(spec)
            logger.debug("glob %s selected %d file(s)", list(spec.include), len(names))
            files.extend(read_source(self.root, name) for name in names)
        return tuple(files)
