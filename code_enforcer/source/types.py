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

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceFile:
    """
    Snapshot of one file taken when the file set was built.

    `name` is the path as it was selected (relative to the project root for
    globbed files) and doubles as the identity of the file. `content` is the
    full text at load time; it is never refreshed during a run.
    """

    name: str
    content: str

    def __str__(self) -> str:
        return self.name
