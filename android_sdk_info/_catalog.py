# SPDX-License-Identifier: MIT
"""API level <-> platform id mapping consumed by the platform resolver."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, Tuple, Union


class VersionCatalog(Protocol):
    """What the resolver needs from a catalog of Android releases."""

    @property
    def installed_binding_versions(self) -> Sequence["AndroidVersion"]: ...

    def get_id_from_api_level(self, id_or_api_level: Union[str, int]) -> Optional[str]: ...

    def get_api_level_from_id(self, id: str) -> Optional[int]: ...


@dataclass(frozen=True, slots=True)
class AndroidVersion:
    api_level: int
    id: str
    code_name: Optional[str] = None
    os_version: Optional[str] = None
    framework_version: Optional[str] = None
    stable: bool = True
    alternate_ids: Tuple[str, ...] = ()

    def matches_id(self, id: str) -> bool:
        return id == self.id or id in self.alternate_ids


def _as_int(value: Union[str, int]) -> Optional[int]:
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError:
        return None


class AndroidVersions:
    """In-memory catalog over a fixed list of :class:`AndroidVersion` records."""

    __slots__ = ("_versions",)

    def __init__(self, versions: Iterable[AndroidVersion]) -> None:
        self._versions: Tuple[AndroidVersion, ...] = tuple(versions)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<AndroidVersions {[v.id for v in self._versions]!r}>"

    @property
    def installed_binding_versions(self) -> Tuple[AndroidVersion, ...]:
        return self._versions

    @property
    def max_stable_version(self) -> AndroidVersion | None:
        return max((v for v in self._versions if v.stable), key=lambda v: v.api_level, default=None)

    @property
    def min_stable_version(self) -> AndroidVersion | None:
        return min((v for v in self._versions if v.stable), key=lambda v: v.api_level, default=None)

    def get_id_from_api_level(self, id_or_api_level: Union[str, int]) -> Optional[str]:
        level = _as_int(id_or_api_level)
        if level is not None:
            match = next((v for v in self._versions if v.api_level == level), None)
        else:
            match = next((v for v in self._versions if v.matches_id(id_or_api_level)), None)
        return match.id if match else None

    def get_api_level_from_id(self, id: str) -> Optional[int]:
        match = next((v for v in self._versions if v.matches_id(id)), None)
        if match:
            return match.api_level
        return _as_int(id)
