"""Platform profiles: the per-OS table of directory rules.

Each profile maps every Category to a Rule. A rule's root is either an
environment variable with a literal fallback (EnvRoot) or an OS known folder
(FolderRoot); its suffix is a tuple of segment templates filled from the
Identity ("{organization}", "{application}", "{bundle_id}") or literal names.

Windows: config and logs under %LOCALAPPDATA%/org/app (logs adds "logs"), save data under
    Saved Games/org/app, temp from GetTempPathW.
macOS: config under Application Support/<bundle>/settings, save data under Application Support/<bundle>,
    logs under Logs/<bundle>, temp from the per-user temp directory.
Linux: $XDG_CONFIG_HOME, $XDG_DATA_HOME and $XDG_STATE_HOME (logs adds "logs") plus org/app, temp from $TMPDIR.

The profile for the running host is selected once per process by current_profile().
"""

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cache
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import NamedTuple

from .config import SaveLayout
from .folders import KnownFolder
from .models import Category

APP = ("{organization}", "{application}")
BUNDLE = ("{bundle_id}",)


class EnvRoot(NamedTuple):
    """Root read from an environment variable, with a fallback when it is unset or blank.

    A fallback starting with "~" is relative to the home folder.
    """

    variable: str
    fallback: str


class FolderRoot(NamedTuple):
    """Root located by an OS accessor."""

    folder: KnownFolder


class Rule(NamedTuple):
    root: EnvRoot | FolderRoot
    suffix: tuple[str, ...] = ()


@dataclass(frozen=True, eq=False)
class Profile:
    """How one operating system lays out application directories."""

    name: str
    flavor: type[PurePath]
    rules: Mapping[Category, Rule]
    requires_bundle_id: bool = False
    save_layouts: Mapping[SaveLayout, tuple[str, ...]] = field(default_factory=dict)

    def rule(self, category: Category, layout: SaveLayout = SaveLayout.BUNDLE) -> Rule:
        """Look up the rule for category, applying the save layout where this profile has one."""
        rule = self.rules[category]
        if category is Category.SAVE_DATA and layout in self.save_layouts:
            return rule._replace(suffix=self.save_layouts[layout])
        return rule

    def __str__(self) -> str:
        return self.name


WINDOWS = Profile(
    name="windows",
    flavor=PureWindowsPath,
    rules={
        Category.CONFIG: Rule(EnvRoot("LOCALAPPDATA", "~/AppData/Local"), APP),
        Category.SAVE_DATA: Rule(FolderRoot(KnownFolder.SAVED_GAMES), APP),
        Category.LOGS: Rule(EnvRoot("LOCALAPPDATA", "~/AppData/Local"), APP + ("logs",)),
        Category.TEMP: Rule(FolderRoot(KnownFolder.TEMP)),
    },
)

MACOS = Profile(
    name="macos",
    flavor=PurePosixPath,
    rules={
        Category.CONFIG: Rule(FolderRoot(KnownFolder.APPLICATION_SUPPORT), BUNDLE + ("settings",)),
        Category.SAVE_DATA: Rule(FolderRoot(KnownFolder.APPLICATION_SUPPORT), BUNDLE),
        Category.LOGS: Rule(FolderRoot(KnownFolder.LOGS), BUNDLE),
        Category.TEMP: Rule(FolderRoot(KnownFolder.TEMP)),
    },
    requires_bundle_id=True,
    save_layouts={SaveLayout.BUNDLE: BUNDLE, SaveLayout.COMPANY: APP},
)

LINUX = Profile(
    name="linux",
    flavor=PurePosixPath,
    rules={
        Category.CONFIG: Rule(EnvRoot("XDG_CONFIG_HOME", "~/.config"), APP),
        Category.SAVE_DATA: Rule(EnvRoot("XDG_DATA_HOME", "~/.local/share"), APP),
        Category.LOGS: Rule(EnvRoot("XDG_STATE_HOME", "~/.local/state"), APP + ("logs",)),
        Category.TEMP: Rule(EnvRoot("TMPDIR", "/tmp")),
    },
)

PROFILES = {p.name: p for p in (WINDOWS, MACOS, LINUX)}


def profile_for(platform: str) -> Profile:
    """Map a sys.platform string to its profile. Every other host, Cygwin included, uses the Linux profile."""
    if platform == "win32":
        return WINDOWS
    if platform == "darwin":
        return MACOS
    return LINUX


@cache
def current_profile() -> Profile:
    """Profile for the running host, selected once per process."""
    return profile_for(sys.platform)
