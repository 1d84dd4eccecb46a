import pytest
from loguru import logger

import base_dirs.config
from base_dirs import KnownFolder, PlatformApiUnavailable

ENV_VARS = [
    "XDG_CONFIG_HOME",
    "XDG_DATA_HOME",
    "XDG_STATE_HOME",
    "TMPDIR",
    "LOCALAPPDATA",
    "TEMP",
    "TMP",
    "BASE_DIRS_SAVE_LAYOUT",
    "BASE_DIRS_LOWERCASE",
]


class FakeFolders:
    """FolderProvider returning canned locations and recording every lookup."""

    def __init__(self, folders: dict) -> None:
        self.folders = dict(folders)
        self.calls: list[KnownFolder] = []

    def get(self, folder):
        self.calls.append(folder)
        if folder not in self.folders:
            raise PlatformApiUnavailable(folder, "not provided by fake")
        value = self.folders[folder]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove every variable the resolver or settings read."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset module-level SETTINGS around each test."""
    base_dirs.config.SETTINGS = None
    yield
    base_dirs.config.SETTINGS = None


@pytest.fixture
def no_folders():
    return FakeFolders({})


@pytest.fixture
def linux_folders():
    return FakeFolders({KnownFolder.HOME: "/home/tester"})


@pytest.fixture
def mac_folders():
    return FakeFolders(
        {
            KnownFolder.HOME: "/Users/tester",
            KnownFolder.APPLICATION_SUPPORT: "/Users/tester/Library/Application Support",
            KnownFolder.LOGS: "/Users/tester/Library/Logs",
            KnownFolder.TEMP: "/var/folders/xy/abc123/T/",
        }
    )


@pytest.fixture
def windows_folders():
    return FakeFolders(
        {
            KnownFolder.HOME: "C:\\Users\\tester",
            KnownFolder.SAVED_GAMES: "C:\\Users\\tester\\Saved Games",
            KnownFolder.TEMP: "C:\\Users\\tester\\AppData\\Local\\Temp\\",
        }
    )


@pytest.fixture
def log_messages():
    """Enable the package logger and collect formatted records."""
    messages: list[str] = []
    logger.enable("base_dirs")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("base_dirs")
