# SPDX-License-Identifier: MIT
"""
:class:`AndroidSdkInfo` ties an :class:`SdkRootProvider` to the directory
resolvers, plus the module-level helpers that record preferred roots.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Protocol, Tuple, Union

from ._catalog import AndroidVersion, VersionCatalog
from ._paths import build_tools_paths, command_line_tools_paths, first_command_line_tools_path
from ._platforms import (
    is_platform_installed,
    iter_installed_platform_versions,
    platform_directory,
    platform_directory_from_id,
    try_get_platform_directory,
)
from ._providers import (
    HostPlatform,
    LogFunc,
    SdkRootProvider,
    create_sdk_root_provider,
    current_host_platform,
)

logger = logging.getLogger(__name__)


###############################################################################
# Exceptions
###############################################################################
class SdkConfigurationError(RuntimeError):
    """Raised when the Android SDK or Java SDK location cannot be determined."""


class UnsupportedPlatformError(NotImplementedError):
    """Raised when an operation is not available on the current host."""


class JdkNotFoundError(RuntimeError):
    """Raised when no supported JDK installation could be found."""


###############################################################################
# Facade
###############################################################################
class AndroidSdkInfo:
    """
    Query surface over one Android SDK installation.

    Nothing is cached: each call re-reads the SDK tree, so results follow
    installs and removals made by other processes.
    """

    __slots__ = ("_sdk", "_log")

    def __init__(
        self,
        log: LogFunc | None = None,
        android_sdk_path: Optional[os.PathLike | str] = None,
        android_ndk_path: Optional[os.PathLike | str] = None,
        java_sdk_path: Optional[os.PathLike | str] = None,
        *,
        provider: SdkRootProvider | None = None,
    ) -> None:
        self._log: LogFunc = log or logger.log
        self._sdk = provider or create_sdk_root_provider(self._log)
        self._sdk.initialize(android_sdk_path, android_ndk_path, java_sdk_path)

        if not self._sdk.android_sdk_path:
            raise SdkConfigurationError(
                "Could not determine Android SDK location. Please provide `android_sdk_path`."
            )
        if not self._sdk.java_sdk_path:
            raise SdkConfigurationError(
                "Could not determine Java SDK location. Please provide `java_sdk_path`."
            )

    def __repr__(self) -> str:  # pragma: no cover
        return f"<AndroidSdkInfo {str(self.android_sdk_path)!r}>"

    # ---------------------------------------------------------------- roots
    @property
    def android_sdk_path(self) -> Path:
        return self._sdk.android_sdk_path  # type: ignore[return-value]

    @property
    def android_ndk_path(self) -> Optional[Path]:
        return self._sdk.android_ndk_path

    @property
    def java_sdk_path(self) -> Path:
        return self._sdk.java_sdk_path  # type: ignore[return-value]

    @property
    def all_android_sdk_paths(self) -> Tuple[Path, ...]:
        return tuple(self._sdk.all_android_sdk_paths or ())

    @property
    def android_ndk_host_platform(self) -> str:
        return self._sdk.ndk_host_platform

    # ---------------------------------------------------------------- tools
    def get_build_tools_paths(self, preferred_build_tools_version: str | None = None) -> Iterator[Path]:
        return build_tools_paths(self.android_sdk_path, preferred_build_tools_version)

    def get_command_line_tools_paths(
        self, preferred_command_line_tools_version: str | None = None
    ) -> Iterator[Path]:
        return command_line_tools_paths(self.android_sdk_path, preferred_command_line_tools_version)

    def try_get_command_line_tools_path(self) -> Optional[Path]:
        return first_command_line_tools_path(self.android_sdk_path)

    # ---------------------------------------------------------------- platforms
    def get_platform_directory(self, api_level: int) -> Path:
        return platform_directory(self.android_sdk_path, api_level)

    def get_platform_directory_from_id(self, id: str) -> Path:
        return platform_directory_from_id(self.android_sdk_path, id)

    def try_get_platform_directory_from_api_level(
        self, id_or_api_level: Union[str, int], versions: VersionCatalog
    ) -> Optional[Path]:
        return try_get_platform_directory(self.android_sdk_path, id_or_api_level, versions)

    def get_installed_platform_versions(self, versions: VersionCatalog) -> Iterator[AndroidVersion]:
        return iter_installed_platform_versions(self.android_sdk_path, versions)

    def is_platform_installed(self, api_level: int) -> bool:
        return is_platform_installed(self.android_sdk_path, api_level)


###############################################################################
# Preferred-root sinks
###############################################################################
def set_preferred_android_sdk_path(path: os.PathLike | str, *, provider: SdkRootProvider) -> None:
    provider.set_preferred_android_sdk_path(path)


def set_preferred_android_ndk_path(path: os.PathLike | str, *, provider: SdkRootProvider) -> None:
    provider.set_preferred_android_ndk_path(path)


def set_preferred_java_sdk_path(path: os.PathLike | str, *, provider: SdkRootProvider) -> None:
    provider.set_preferred_java_sdk_path(path)


class JdkInfo(Protocol):
    home_path: os.PathLike | str


def detect_and_set_preferred_java_sdk_path_to_latest(
    jdk_locator: Callable[[LogFunc], Iterable[JdkInfo]],
    log: LogFunc | None = None,
    *,
    provider: SdkRootProvider,
    host: HostPlatform | None = None,
) -> Path:
    """
    Record the best JDK reported by ``jdk_locator`` as the preferred Java SDK.

    ``jdk_locator`` returns supported JDKs ranked best first.
    """
    host = host or current_host_platform()
    if host.is_windows:
        raise UnsupportedPlatformError("Windows is not supported at this time.")
    latest = next(iter(jdk_locator(log or logger.log)), None)
    if latest is None:
        raise JdkNotFoundError(
            "No supported JDK could be found. Install one or specify the JDK path manually."
        )

    home = Path(latest.home_path)
    provider.set_preferred_java_sdk_path(home)
    return home
