# SPDX-License-Identifier: MIT
"""
Where the SDK, NDK and JDK live on this machine.

Search order for each root (first existing directory wins):
  1. Explicit argument to :meth:`SdkRootProvider.initialize`
  2. A path recorded through ``set_preferred_*``
  3. Environment variables (``ANDROID_SDK_ROOT`` / ``ANDROID_HOME``,
     ``ANDROID_NDK_ROOT`` / ``ANDROID_NDK_HOME`` / ``ANDROID_NDK``,
     ``JAVA_HOME``)
  4. ``ANDROID_SDK_EXTRA_DIRS`` (comma-separated, SDK only)
  5. Typical default locations for the host platform
"""
from __future__ import annotations

import logging
import os
import re
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Final, Iterable, Iterator, List, Optional, Protocol, Tuple

from ._scanner import iter_subdirectories_by_version

logger = logging.getLogger(__name__)

LogFunc = Callable[[int, str], None]

SDK_ENV_VARS: Tuple[str, ...] = ("ANDROID_SDK_ROOT", "ANDROID_HOME")
NDK_ENV_VARS: Tuple[str, ...] = ("ANDROID_NDK_ROOT", "ANDROID_NDK_HOME", "ANDROID_NDK")
EXTRA_DIRS_ENV_VAR = "ANDROID_SDK_EXTRA_DIRS"


class SdkRootProvider(Protocol):
    android_sdk_path: Optional[Path]
    android_ndk_path: Optional[Path]
    java_sdk_path: Optional[Path]
    all_android_sdk_paths: Tuple[Path, ...]

    @property
    def ndk_host_platform(self) -> str: ...

    def initialize(
        self,
        android_sdk_path: Optional[os.PathLike | str] = None,
        android_ndk_path: Optional[os.PathLike | str] = None,
        java_sdk_path: Optional[os.PathLike | str] = None,
    ) -> None: ...

    def set_preferred_android_sdk_path(self, path: os.PathLike | str) -> None: ...

    def set_preferred_android_ndk_path(self, path: os.PathLike | str) -> None: ...

    def set_preferred_java_sdk_path(self, path: os.PathLike | str) -> None: ...


# ---------- Host strategies ---------------------------------------------------
@dataclass(frozen=True)
class HostPlatform:
    name: str
    ndk_host_tag: str
    exe_suffix: str = ""
    default_sdk_roots: Callable[[], List[Path]] = field(default=lambda: [], repr=False)
    default_jdk_roots: Callable[[], List[Path]] = field(default=lambda: [], repr=False)

    @property
    def is_windows(self) -> bool:
        return self.name == "windows"


_DIGITS: Final = re.compile(r"\d+", re.ASCII)


def _numeric_key(name: str) -> Tuple[int, ...]:
    return tuple(int(g) for g in _DIGITS.findall(name))


def _glob_dirs(base: Path, pattern: str) -> List[Path]:
    """Directories matching ``pattern`` under ``base``, highest numbered first."""
    if not base.is_dir():
        return []
    # rank by the first component below base: "jdk-17.0.2", not "Contents/Home"
    return sorted(
        (p for p in base.glob(pattern) if p.is_dir()),
        key=lambda p: _numeric_key(p.relative_to(base).parts[0]),
        reverse=True,
    )


def _macos_sdk_roots() -> List[Path]:
    return [Path("~/Library/Android/sdk").expanduser(), Path.home() / "Android" / "Sdk"]


def _macos_jdk_roots() -> List[Path]:
    return _glob_dirs(Path("/Library/Java/JavaVirtualMachines"), "*/Contents/Home")


def _windows_sdk_roots() -> List[Path]:
    return [
        Path(os.environ.get("LOCALAPPDATA", "")) / "Android" / "Sdk",
        Path.home() / "AppData" / "Local" / "Android" / "Sdk",
        Path(os.environ.get("ProgramFiles(x86)", r"C:\Program Files (x86)")) / "Android" / "android-sdk",
    ]


def _windows_jdk_roots() -> List[Path]:
    program_files = Path(os.environ.get("ProgramFiles", r"C:\Program Files"))
    return (
        _glob_dirs(program_files / "Microsoft", "jdk-*")
        + _glob_dirs(program_files / "Java", "jdk*")
        + _glob_dirs(program_files / "Android" / "openjdk", "*")
    )


def _linux_sdk_roots() -> List[Path]:
    return [Path.home() / "Android" / "Sdk", Path("/opt/android-sdk")]


def _linux_jdk_roots() -> List[Path]:
    return _glob_dirs(Path("/usr/lib/jvm"), "*")


MACOS = HostPlatform("darwin", "darwin-x86_64", "", _macos_sdk_roots, _macos_jdk_roots)
WINDOWS = HostPlatform("windows", "windows-x86_64", ".exe", _windows_sdk_roots, _windows_jdk_roots)
LINUX = HostPlatform("linux", "linux-x86_64", "", _linux_sdk_roots, _linux_jdk_roots)


def current_host_platform(platform: str | None = None) -> HostPlatform:
    platform = platform or sys.platform
    if platform.startswith("darwin"):
        return MACOS
    if platform.startswith("win") or platform == "cygwin":
        return WINDOWS
    return LINUX


# ---------- Environment-driven provider --------------------------------------
def _dedupe(paths: Iterable[Path]) -> Iterator[Path]:
    seen = set()
    for p in paths:
        if p in seen:
            continue
        seen.add(p)
        yield p


class EnvironmentSdkRootProvider:
    """Resolve SDK roots from arguments, preferences, environment and defaults."""

    def __init__(self, host: HostPlatform | None = None, log: LogFunc | None = None) -> None:
        self.host = host or current_host_platform()
        self._log: LogFunc = log or logger.log
        self._preferred: Dict[str, Path] = {}
        self.android_sdk_path: Optional[Path] = None
        self.android_ndk_path: Optional[Path] = None
        self.java_sdk_path: Optional[Path] = None
        self.all_android_sdk_paths: Tuple[Path, ...] = ()

    def __repr__(self) -> str:  # pragma: no cover
        return f"<EnvironmentSdkRootProvider {self.host.name} sdk={self.android_sdk_path}>"

    @property
    def ndk_host_platform(self) -> str:
        return self.host.ndk_host_tag

    # ---------------------------------------------------------------- preferences
    def set_preferred_android_sdk_path(self, path: os.PathLike | str) -> None:
        self._set_preferred("sdk", path)

    def set_preferred_android_ndk_path(self, path: os.PathLike | str) -> None:
        self._set_preferred("ndk", path)

    def set_preferred_java_sdk_path(self, path: os.PathLike | str) -> None:
        self._set_preferred("jdk", path)

    def _set_preferred(self, kind: str, path: os.PathLike | str) -> None:
        self._preferred[kind] = Path(path).expanduser()
        self._log(logging.INFO, f"Preferred {kind} path set to {self._preferred[kind]}")

    # ---------------------------------------------------------------- discovery
    def initialize(
        self,
        android_sdk_path: Optional[os.PathLike | str] = None,
        android_ndk_path: Optional[os.PathLike | str] = None,
        java_sdk_path: Optional[os.PathLike | str] = None,
    ) -> None:
        self.all_android_sdk_paths = tuple(_dedupe(self._sdk_candidates()))
        self.android_sdk_path = self._pick("Android SDK", android_sdk_path, self.all_android_sdk_paths)
        self.android_ndk_path = self._pick("Android NDK", android_ndk_path, self._ndk_candidates())
        self.java_sdk_path = self._pick("Java SDK", java_sdk_path, self._jdk_candidates())

    def _pick(
        self, what: str, explicit: Optional[os.PathLike | str], candidates: Iterable[Path]
    ) -> Optional[Path]:
        if explicit:
            path = Path(explicit).expanduser()
            if path.is_dir():
                return path
            self._log(logging.WARNING, f"Ignoring {what} path {path}: not a directory")
        hit = next(iter(candidates), None)
        if hit is None:
            self._log(logging.DEBUG, f"No {what} location found")
        else:
            self._log(logging.DEBUG, f"Using {what} at {hit}")
        return hit

    def _env_paths(self, names: Iterable[str]) -> List[Path]:
        return [Path(v).expanduser() for v in map(os.getenv, names) if v]

    def _preferred_paths(self, kind: str) -> List[Path]:
        return [self._preferred[kind]] if kind in self._preferred else []

    def _sdk_candidates(self) -> Iterator[Path]:
        extra = [
            Path(root).expanduser()
            for root in map(str.strip, os.getenv(EXTRA_DIRS_ENV_VAR, "").split(","))
            if root
        ]
        for p in (
            self._preferred_paths("sdk")
            + self._env_paths(SDK_ENV_VARS)
            + extra
            + self.host.default_sdk_roots()
        ):
            if p.is_dir():
                yield p

    def _ndk_candidates(self) -> Iterator[Path]:
        for p in self._preferred_paths("ndk") + self._env_paths(NDK_ENV_VARS):
            if p.is_dir():
                yield p
        chosen = [self.android_sdk_path] if self.android_sdk_path else []
        for sdk in _dedupe(chosen + list(self.all_android_sdk_paths)):
            # side-by-side NDKs, newest first, then the legacy bundle
            yield from iter_subdirectories_by_version(sdk / "ndk")
            bundle = sdk / "ndk-bundle"
            if bundle.is_dir():
                yield bundle

    def _jdk_candidates(self) -> Iterator[Path]:
        for p in self._preferred_paths("jdk") + self._env_paths(("JAVA_HOME",)):
            if p.is_dir():
                yield p
        java = shutil.which("java")
        if java:
            home = Path(java).resolve().parent.parent
            if home.is_dir():
                yield home
        for p in self.host.default_jdk_roots():
            if (p / "bin" / f"java{self.host.exe_suffix}").is_file():
                yield p


def create_sdk_root_provider(log: LogFunc | None = None) -> EnvironmentSdkRootProvider:
    """Pick the host strategy once and return a fresh provider for it."""
    return EnvironmentSdkRootProvider(current_host_platform(), log)
