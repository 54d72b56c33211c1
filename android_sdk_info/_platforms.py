# SPDX-License-Identifier: MIT
"""Locating ``platforms/android-*`` directories."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from ._catalog import AndroidVersion, VersionCatalog

logger = logging.getLogger(__name__)


def platform_directory_from_id(root: Path, id: str) -> Path:
    return Path(root) / "platforms" / f"android-{id}"


def platform_directory(root: Path, api_level: int) -> Path:
    """``<root>/platforms/android-<api_level>``; never touches the disk."""
    return platform_directory_from_id(root, str(api_level))


def try_get_platform_directory(
    root: Path, id_or_api_level: Union[str, int], versions: VersionCatalog
) -> Optional[Path]:
    """
    Resolve an installed platform directory through ``versions``.

    Platform dirs are named either by id (``android-Tiramisu``,
    ``android-33-ext4``) or by plain API level, so the id-named directory is
    tried first and the level-named one second.
    """
    id = versions.get_id_from_api_level(id_or_api_level)
    if id is None:
        logger.debug("No platform id known for %r", id_or_api_level)
        return None

    candidate = platform_directory_from_id(root, id)
    if candidate.is_dir():
        return candidate

    level = versions.get_api_level_from_id(id)
    if level is not None:
        candidate = platform_directory(root, level)
        if candidate.is_dir():
            return candidate
    return None


def iter_installed_platform_versions(
    root: Path, versions: VersionCatalog
) -> Iterator[AndroidVersion]:
    if versions is None:
        raise ValueError("versions must not be None")
    return (
        v for v in versions.installed_binding_versions
        if try_get_platform_directory(root, v.id, versions) is not None
    )


def is_platform_installed(root: Path, api_level: int) -> bool:
    # 0 means "unspecified"
    return api_level != 0 and platform_directory(root, api_level).is_dir()
