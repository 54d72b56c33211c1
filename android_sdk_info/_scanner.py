# SPDX-License-Identifier: MIT
"""
Ordering of version-named subdirectories.

Every call enumerates the directory afresh; install trees change under us
and nothing here is cached.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from ._version import Version, try_parse_version

logger = logging.getLogger(__name__)


def _partition(root: Path) -> Tuple[List[Tuple[Version, Path]], List[Path]]:
    versioned: List[Tuple[Version, Path]] = []
    preview: List[Path] = []
    if not root.is_dir():
        return versioned, preview
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        version = try_parse_version(entry.name)
        if version is None:
            preview.append(entry)
        else:
            versioned.append((version, entry))
    # reverse=True keeps equal versions in enumeration order
    versioned.sort(key=lambda pair: pair[0], reverse=True)
    logger.debug(
        "%s: %d versioned, %d preview subdirectories",
        root, len(versioned), len(preview),
    )
    return versioned, preview


def iter_subdirectories_by_version(root: Path) -> Iterator[Path]:
    """
    Yield every immediate subdirectory of ``root``.

    Versioned names come first, newest first, followed by the names that
    don't parse as versions in enumeration order. A missing ``root`` yields
    nothing.
    """
    versioned, preview = _partition(Path(root))
    for _, path in versioned:
        yield path
    yield from preview
