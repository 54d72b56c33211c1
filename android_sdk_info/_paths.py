# SPDX-License-Identifier: MIT
"""
Candidate lists for build-tools and command-line tools.

Search order (first entry is the best match):

build-tools
  1. ``build-tools/<preferred>`` when requested and present
  2. ``build-tools/*`` newest version first, then unversioned "preview" dirs
  3. ``platform-tools``

cmdline-tools
  1. ``cmdline-tools/<preferred>`` when requested and present
  2. ``cmdline-tools/latest``
  3. ``cmdline-tools/*`` newest version first, then unversioned dirs
  4. ``tools`` (legacy, pre-cmdline-tools SDKs)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ._scanner import iter_subdirectories_by_version

logger = logging.getLogger(__name__)

LATEST: str = "latest"


def _prefer(
    category_dir: Path, preferred: Optional[str], default: Iterable[Path]
) -> Iterator[Path]:
    if preferred:
        preferred_dir = category_dir / preferred
        if preferred_dir.is_dir():
            yield preferred_dir
            yield from (p for p in default if p != preferred_dir)
            return
        logger.debug("Preferred %s not found; using default order", preferred_dir)
    yield from default


def _default_build_tools_paths(root: Path) -> Iterator[Path]:
    yield from iter_subdirectories_by_version(root / "build-tools")
    platform_tools = root / "platform-tools"
    if platform_tools.is_dir():
        yield platform_tools


def build_tools_paths(root: Path, preferred: Optional[str] = None) -> Iterator[Path]:
    """Yield build-tools candidates under the SDK ``root``."""
    root = Path(root)
    return _prefer(root / "build-tools", preferred, _default_build_tools_paths(root))


def _default_command_line_tools_paths(root: Path) -> Iterator[Path]:
    cmdline_tools = root / "cmdline-tools"
    latest = cmdline_tools / LATEST
    if latest.is_dir():
        yield latest
    # unversioned names other than latest are kept, after the versioned ones
    for d in iter_subdirectories_by_version(cmdline_tools):
        if d.name == LATEST:
            continue
        yield d
    tools = root / "tools"
    if tools.is_dir():
        yield tools


def command_line_tools_paths(
    root: Path, preferred: Optional[str] = None
) -> Iterator[Path]:
    """
    Yield cmdline-tools candidates under the SDK ``root``.

    ``latest`` leads the default order, but an existing ``preferred``
    directory outranks it.
    """
    root = Path(root)
    return _prefer(
        root / "cmdline-tools", preferred, _default_command_line_tools_paths(root)
    )


def first_command_line_tools_path(root: Path) -> Optional[Path]:
    """Best cmdline-tools directory, or ``None`` when none is installed."""
    return next(command_line_tools_paths(root, LATEST), None)
