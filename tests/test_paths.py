# SPDX-License-Identifier: MIT
"""
Ordering of build-tools / cmdline-tools candidates
--------------------------------------------------

Every test builds a real SDK tree under ``tmp_path`` — no filesystem mocks.
"""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from android_sdk_info import (
    build_tools_paths,
    command_line_tools_paths,
    first_command_line_tools_path,
    iter_subdirectories_by_version,
)


# ---------------------------------------------------------------- helpers
def _mkdirs(root: Path, *names: str) -> Path:
    for name in names:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def sdk(tmp_path) -> Path:
    return _mkdirs(
        tmp_path / "sdk",
        "build-tools/28.0.3",
        "build-tools/29.0.2",
        "build-tools/30.0.3",
        "build-tools/preview",
        "platform-tools",
    )


# ---------------------------------------------------------------- scanner
def test_scan_missing_root_is_empty(tmp_path):
    assert list(iter_subdirectories_by_version(tmp_path / "nope")) == []


def test_scan_versions_descending_then_previews(tmp_path):
    root = _mkdirs(tmp_path, "9.0.0", "10.0.0", "canary", "1.a.0", "2")
    (tmp_path / "README").write_text("not a directory")

    names = [p.name for p in iter_subdirectories_by_version(tmp_path)]

    assert names[:3] == ["10.0.0", "9.0.0", "2"]
    assert sorted(names[3:]) == ["1.a.0", "canary"]
    assert all(p.parent == root for p in iter_subdirectories_by_version(root))


def test_scan_equal_versions_keep_enumeration_order(tmp_path):
    _mkdirs(tmp_path, "1.0", "1.0.0", "1", "2")
    listed = [n for n in os.listdir(tmp_path) if n != "2"]

    names = [p.name for p in iter_subdirectories_by_version(tmp_path)]

    assert names[0] == "2"
    assert names[1:] == listed


def test_scan_is_fresh_per_call(tmp_path):
    _mkdirs(tmp_path, "1.0")
    assert [p.name for p in iter_subdirectories_by_version(tmp_path)] == ["1.0"]
    _mkdirs(tmp_path, "2.0")
    assert [p.name for p in iter_subdirectories_by_version(tmp_path)] == ["2.0", "1.0"]


# ---------------------------------------------------------------- build-tools
def test_build_tools_default_order(sdk):
    names = [p.name for p in build_tools_paths(sdk)]
    assert names == ["30.0.3", "29.0.2", "28.0.3", "preview", "platform-tools"]


def test_build_tools_preferred_first_without_duplicate(sdk):
    paths = list(build_tools_paths(sdk, "28.0.3"))
    assert paths[0] == sdk / "build-tools" / "28.0.3"
    assert [p.name for p in paths] == [
        "28.0.3", "30.0.3", "29.0.2", "preview", "platform-tools",
    ]


def test_build_tools_preferred_preview(sdk):
    names = [p.name for p in build_tools_paths(sdk, "preview")]
    assert names == ["preview", "30.0.3", "29.0.2", "28.0.3", "platform-tools"]


@pytest.mark.parametrize("preferred", [None, "", "99.9.9"])
def test_build_tools_fallback_to_default(sdk, preferred):
    assert list(build_tools_paths(sdk, preferred)) == list(build_tools_paths(sdk))


def test_build_tools_only_platform_tools(tmp_path):
    root = _mkdirs(tmp_path, "platform-tools")
    assert list(build_tools_paths(root)) == [root / "platform-tools"]


def test_build_tools_empty_sdk(tmp_path):
    assert list(build_tools_paths(tmp_path)) == []


def test_build_tools_ignores_platform_tools_file(tmp_path):
    root = _mkdirs(tmp_path, "build-tools/30.0.3")
    (root / "platform-tools").write_text("")
    assert [p.name for p in build_tools_paths(root)] == ["30.0.3"]


# ---------------------------------------------------------------- cmdline-tools
def test_cmdline_tools_latest_first(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/latest", "cmdline-tools/6.0", "cmdline-tools/5.0")
    names = [p.name for p in command_line_tools_paths(root)]
    assert names == ["latest", "6.0", "5.0"]


def test_cmdline_tools_legacy_tools_last(tmp_path):
    root = _mkdirs(
        tmp_path, "cmdline-tools/latest", "cmdline-tools/6.0", "cmdline-tools/5.0", "tools"
    )
    paths = list(command_line_tools_paths(root, ""))
    assert [p.name for p in paths] == ["latest", "6.0", "5.0", "tools"]
    assert paths[-1] == root / "tools"


def test_cmdline_tools_unversioned_after_versions(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/2.1", "cmdline-tools/beta", "cmdline-tools/11.0")
    names = [p.name for p in command_line_tools_paths(root)]
    assert names == ["11.0", "2.1", "beta"]


def test_cmdline_tools_preferred_outranks_latest(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/latest", "cmdline-tools/6.0", "cmdline-tools/5.0")
    names = [p.name for p in command_line_tools_paths(root, "5.0")]
    assert names == ["5.0", "latest", "6.0"]


def test_cmdline_tools_missing_preferred_keeps_latest_first(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/latest", "cmdline-tools/6.0")
    names = [p.name for p in command_line_tools_paths(root, "1.0")]
    assert names == ["latest", "6.0"]


def test_cmdline_tools_latest_emitted_once(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/latest", "cmdline-tools/6.0")
    paths = list(command_line_tools_paths(root, "latest"))
    assert paths == [root / "cmdline-tools" / "latest", root / "cmdline-tools" / "6.0"]


def test_first_cmdline_tools_path(tmp_path):
    root = _mkdirs(tmp_path, "cmdline-tools/6.0", "cmdline-tools/7.0")
    assert first_command_line_tools_path(root) == root / "cmdline-tools" / "7.0"

    _mkdirs(root, "cmdline-tools/latest")
    assert first_command_line_tools_path(root) == root / "cmdline-tools" / "latest"


def test_first_cmdline_tools_path_falls_back_to_tools(tmp_path):
    root = _mkdirs(tmp_path, "tools")
    assert first_command_line_tools_path(root) == root / "tools"


def test_first_cmdline_tools_path_absent(tmp_path):
    assert first_command_line_tools_path(tmp_path) is None
