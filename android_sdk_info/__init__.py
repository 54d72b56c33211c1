# SPDX-License-Identifier: MIT
"""
android_sdk_info
================

Locate installed components (build-tools, cmdline-tools, platforms) inside
an Android SDK tree, picking the right version-named directory.

Usage
-----
>>> from android_sdk_info import AndroidSdkInfo
>>> sdk = AndroidSdkInfo(android_sdk_path="~/Android/Sdk", java_sdk_path="/usr/lib/jvm/default")
>>> next(sdk.get_build_tools_paths("34.0.0"))
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Re-export public API
# ---------------------------------------------------------------------------
from ._android_sdk_info import (
    AndroidSdkInfo,
    JdkNotFoundError,
    SdkConfigurationError,
    UnsupportedPlatformError,
    detect_and_set_preferred_java_sdk_path_to_latest,
    set_preferred_android_ndk_path,
    set_preferred_android_sdk_path,
    set_preferred_java_sdk_path,
)
from ._catalog import AndroidVersion, AndroidVersions, VersionCatalog
from ._paths import build_tools_paths, command_line_tools_paths, first_command_line_tools_path
from ._platforms import (
    is_platform_installed,
    iter_installed_platform_versions,
    platform_directory,
    platform_directory_from_id,
    try_get_platform_directory,
)
from ._providers import (
    EnvironmentSdkRootProvider,
    HostPlatform,
    SdkRootProvider,
    create_sdk_root_provider,
    current_host_platform,
)
from ._scanner import iter_subdirectories_by_version
from ._version import Version, try_parse_version

__all__: list[str] = [
    # facade
    "AndroidSdkInfo",
    "set_preferred_android_sdk_path",
    "set_preferred_android_ndk_path",
    "set_preferred_java_sdk_path",
    "detect_and_set_preferred_java_sdk_path_to_latest",
    # resolvers
    "Version",
    "try_parse_version",
    "iter_subdirectories_by_version",
    "build_tools_paths",
    "command_line_tools_paths",
    "first_command_line_tools_path",
    "platform_directory",
    "platform_directory_from_id",
    "try_get_platform_directory",
    "iter_installed_platform_versions",
    "is_platform_installed",
    # catalog & roots
    "AndroidVersion",
    "AndroidVersions",
    "VersionCatalog",
    "SdkRootProvider",
    "EnvironmentSdkRootProvider",
    "HostPlatform",
    "create_sdk_root_provider",
    "current_host_platform",
    # exceptions
    "SdkConfigurationError",
    "UnsupportedPlatformError",
    "JdkNotFoundError",
]

# ---------------------------------------------------------------------------
# Version & logging
# ---------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:  # running from a checkout
    __version__ = "0.0.0.dev0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
