"""Operating system "known folder" accessors.

The resolver never asks the OS for a directory directly; it goes through a
FolderProvider. SystemFolders is the real implementation, tests substitute a
fake so every platform profile can be exercised on any host.

Windows folders come from shell32/kernel32 via ctypes, macOS Library folders
from platformdirs, and the macOS per-user temp directory from libc confstr().
"""

import ctypes
import ctypes.util
import os
import sys
import uuid
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import Protocol

from loguru import logger
from platformdirs.macos import MacOS

from .errors import PlatformApiUnavailable

FOLDERID_SAVED_GAMES = uuid.UUID("4C5C32FF-BB9D-43B0-B5B4-2D72E54EAAA4")
CS_DARWIN_USER_TEMP_DIR = 65537


class KnownFolder(StrEnum):
    """Semantically named folders that only the OS can locate."""

    HOME = "home"
    SAVED_GAMES = "saved_games"
    APPLICATION_SUPPORT = "application_support"
    LOGS = "logs"
    TEMP = "temp"


class FolderProvider(Protocol):
    def get(self, folder: KnownFolder) -> str | os.PathLike[str]:
        """Return the folder's location or raise PlatformApiUnavailable."""
        ...


class _GUID(ctypes.Structure):
    _fields_ = [
        ("Data1", ctypes.c_uint32),
        ("Data2", ctypes.c_uint16),
        ("Data3", ctypes.c_uint16),
        ("Data4", ctypes.c_ubyte * 8),
    ]

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "_GUID":
        return cls(value.time_low, value.time_mid, value.time_hi_version, (ctypes.c_ubyte * 8)(*value.bytes[8:]))


def _home() -> str:
    return str(Path.home())


def _windows_known_folder(folder_id: uuid.UUID) -> str:
    """SHGetKnownFolderPath; the returned buffer is owned by the caller."""
    windll = ctypes.windll  # type: ignore[attr-defined]
    guid = _GUID.from_uuid(folder_id)
    buffer = ctypes.c_wchar_p()
    result = windll.shell32.SHGetKnownFolderPath(ctypes.byref(guid), 0, None, ctypes.byref(buffer))
    try:
        if result != 0:
            raise OSError(f"SHGetKnownFolderPath returned HRESULT 0x{result & 0xFFFFFFFF:08x}")
        return buffer.value or ""
    finally:
        windll.ole32.CoTaskMemFree(buffer)


def _windows_saved_games() -> str:
    return _windows_known_folder(FOLDERID_SAVED_GAMES)


def _windows_temp() -> str:
    """GetTempPathW, which checks TMP, TEMP and USERPROFILE before the Windows directory."""
    windll = ctypes.windll  # type: ignore[attr-defined]
    buffer = ctypes.create_unicode_buffer(1024)
    length = windll.kernel32.GetTempPathW(len(buffer), buffer)
    if length == 0 or length > len(buffer):
        raise OSError("GetTempPathW failed")
    return buffer.value


def _macos_application_support() -> str:
    return MacOS().user_data_dir


def _macos_logs() -> str:
    return MacOS().user_log_dir


def _macos_temp() -> str:
    """Per-user temp directory (the one NSTemporaryDirectory() returns)."""
    libc = ctypes.CDLL(ctypes.util.find_library("c"))
    size = libc.confstr(CS_DARWIN_USER_TEMP_DIR, None, 0)
    if size <= 0:
        raise OSError("confstr(_CS_DARWIN_USER_TEMP_DIR) is not available")
    buffer = ctypes.create_string_buffer(size)
    libc.confstr(CS_DARWIN_USER_TEMP_DIR, buffer, size)
    return os.fsdecode(buffer.value)


def _accessors(platform: str) -> dict[KnownFolder, Callable[[], str]]:
    accessors: dict[KnownFolder, Callable[[], str]] = {KnownFolder.HOME: _home}
    if platform == "win32":
        accessors[KnownFolder.SAVED_GAMES] = _windows_saved_games
        accessors[KnownFolder.TEMP] = _windows_temp
    elif platform == "darwin":
        accessors[KnownFolder.APPLICATION_SUPPORT] = _macos_application_support
        accessors[KnownFolder.LOGS] = _macos_logs
        accessors[KnownFolder.TEMP] = _macos_temp
    return accessors


class SystemFolders:
    """FolderProvider backed by the running operating system.

    Lookups are not cached; every get() asks the OS again.
    """

    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform or sys.platform
        self._accessors = _accessors(self.platform)

    def get(self, folder: KnownFolder) -> str:
        accessor = self._accessors.get(folder)
        if accessor is None:
            raise PlatformApiUnavailable(folder, f"no accessor on {self.platform}")
        try:
            value = accessor()
        except (OSError, AttributeError, RuntimeError, KeyError) as e:
            raise PlatformApiUnavailable(folder, str(e) or type(e).__name__) from e
        if not value:
            raise PlatformApiUnavailable(folder, "empty result")
        logger.debug(f"Known folder {folder}: {value}")
        return value
