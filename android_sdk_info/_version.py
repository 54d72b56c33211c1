# SPDX-License-Identifier: MIT
"""Dotted version numbers as they appear in SDK directory names."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Final, Optional, Tuple

_VERSION_RE: Final = re.compile(r"\d+(?:\.\d+)*", re.ASCII)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Ordered tuple of non-negative ints; missing trailing parts count as 0."""

    components: Tuple[int, ...]

    def _key(self) -> Tuple[int, ...]:
        key = self.components
        while key and key[-1] == 0:
            key = key[:-1]
        return key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        a, b = self.components, other.components
        width = max(len(a), len(b))
        return a + (0,) * (width - len(a)) < b + (0,) * (width - len(b))

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return ".".join(map(str, self.components))


def try_parse_version(name: str) -> Optional[Version]:
    """
    Parse ``name`` as ``N[.N...]``.

    Anything else (empty, non-numeric segment, leading or trailing dot)
    returns ``None`` rather than raising; such names are "preview" entries.
    """
    if not name or not _VERSION_RE.fullmatch(name):
        return None
    return Version(tuple(int(part) for part in name.split(".")))
