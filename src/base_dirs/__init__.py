"""Cross-platform base directories for application config, save data, logs and temp files.

    from base_dirs import Category, resolve

    resolve(Category.CONFIG, "Acme", "Blaster", bundle_id="com.acme.blaster")

Windows and Linux key directories by organization/application, macOS by bundle id.
The library logs through loguru but starts disabled; call logger.enable("base_dirs") to see its records.
"""

from loguru import logger

from .config import SaveLayout, Settings, get_settings, load_settings
from .dirs import BaseDirs
from .errors import BaseDirsError, InvalidIdentity, PlatformApiUnavailable, UnsupportedCategory
from .folders import FolderProvider, KnownFolder, SystemFolders
from .models import Category, Identity
from .profiles import LINUX, MACOS, WINDOWS, Profile, current_profile, profile_for
from .resolver import Resolver, resolve, resolve_all

logger.disable("base_dirs")

__all__ = [
    "LINUX",
    "MACOS",
    "WINDOWS",
    "BaseDirs",
    "BaseDirsError",
    "Category",
    "FolderProvider",
    "Identity",
    "InvalidIdentity",
    "KnownFolder",
    "PlatformApiUnavailable",
    "Profile",
    "Resolver",
    "SaveLayout",
    "Settings",
    "SystemFolders",
    "UnsupportedCategory",
    "current_profile",
    "get_settings",
    "load_settings",
    "profile_for",
    "resolve",
    "resolve_all",
]
