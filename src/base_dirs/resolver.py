"""Resolve base directories for an Identity on a platform profile.

Resolver looks up the profile rule for a category, locates the root (environment
variable with fallback, or OS known folder), fills the suffix templates from the
Identity and returns a normalized absolute path. Nothing is cached and nothing
on disk is touched; environment variables are read again on every call.
"""

import ntpath
import os
import posixpath
from collections.abc import Mapping
from pathlib import Path, PurePath, PureWindowsPath

from loguru import logger

from .config import Settings, get_settings
from .errors import BaseDirsError, InvalidIdentity, PlatformApiUnavailable
from .folders import FolderProvider, KnownFolder, SystemFolders
from .models import Category, Identity
from .profiles import EnvRoot, FolderRoot, Profile, current_profile

_NATIVE_FLAVOR = type(PurePath())


class Resolver:
    """Computes directories for one platform profile.

    Args:
        profile: Platform profile (defaults to the running host's)
        folders: Known folder accessor (defaults to SystemFolders)
        settings: Policy switches (defaults to get_settings())
        environ: Environment mapping (defaults to the live os.environ)
    """

    def __init__(
        self,
        profile: Profile | None = None,
        folders: FolderProvider | None = None,
        settings: Settings | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.profile = profile if profile is not None else current_profile()
        self.folders = folders if folders is not None else SystemFolders()
        self.settings = settings if settings is not None else get_settings()
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def resolve(self, category: Category | str, identity: Identity) -> PurePath:
        """Return the directory for category.

        Raises:
            UnsupportedCategory: category is not one of Category
            InvalidIdentity: identity is unusable on this profile
            PlatformApiUnavailable: an OS folder accessor failed
        """
        category = Category.parse(category)
        try:
            path = self._resolve(category, identity)
        except BaseDirsError as e:
            if e.category is None:
                e.category = category
            raise
        logger.debug(f"{self.profile}/{category}: {path}")
        return path

    def resolve_all(self, identity: Identity) -> dict[Category, PurePath]:
        """Resolve every category. The first failure propagates with its category set."""
        return {category: self.resolve(category, identity) for category in Category}

    def _resolve(self, category: Category, identity: Identity) -> PurePath:
        if not isinstance(identity, Identity):
            raise InvalidIdentity("identity", identity, "expected an Identity")
        if self.profile.requires_bundle_id and identity.bundle_id is None:
            raise InvalidIdentity("bundle_id", identity.bundle_id, f"required on {self.profile}")

        rule = self.profile.rule(category, self.settings.save_layout)
        root = self._folder(rule.root.folder) if isinstance(rule.root, FolderRoot) else self._env_root(rule.root)
        fields = identity.segments(self.settings.lowercase)
        path = self._normalize(root.joinpath(*self._segments(rule.suffix, fields)))
        if self.profile.flavor is _NATIVE_FLAVOR:
            return Path(path)
        return path

    def _env_root(self, root: EnvRoot) -> PurePath:
        """Environment variable root; blank or relative values fall back."""
        value = self.environ.get(root.variable, "")
        if value.strip():
            path = self._expand(value)
            if path.is_absolute():
                return path
            logger.debug(f"${root.variable}={value!r} is not absolute, using {root.fallback}")
        else:
            logger.debug(f"${root.variable} is unset, using {root.fallback}")
        return self._expand(root.fallback)

    def _segments(self, suffix: tuple[str, ...], fields: dict[str, str]) -> list[str]:
        """Fill suffix templates; each result must stay one plain segment on this profile (no drive, no root)."""
        segments = []
        for template in suffix:
            segment = template.format(**fields)
            parsed = self.profile.flavor(segment)
            if parsed.drive or parsed.root or len(parsed.parts) != 1:
                raise InvalidIdentity(template.strip("{}"), segment, f"not a single path segment on {self.profile}")
            segments.append(segment)
        return segments

    def _expand(self, value: str) -> PurePath:
        """Expand a leading ~ against the home folder."""
        path = self.profile.flavor(value)
        if path.parts and path.parts[0] == "~":
            return self._folder(KnownFolder.HOME).joinpath(*path.parts[1:])
        return path

    def _folder(self, folder: KnownFolder) -> PurePath:
        try:
            value = self.folders.get(folder)
        except PlatformApiUnavailable:
            raise
        except OSError as e:
            raise PlatformApiUnavailable(folder, str(e)) from e
        value = os.fspath(value) if value else ""
        if not value.strip():
            raise PlatformApiUnavailable(folder, "empty result")
        path = self.profile.flavor(value)
        if not path.is_absolute():
            raise PlatformApiUnavailable(folder, f"relative path {value!r}")
        return path

    def _normalize(self, path: PurePath) -> PurePath:
        """Collapse redundant separators and up-level references without touching the filesystem."""
        pathmod = ntpath if issubclass(self.profile.flavor, PureWindowsPath) else posixpath
        return self.profile.flavor(pathmod.normpath(str(path)))


def resolve(category: Category | str, organization: str, application: str, bundle_id: str | None = None) -> PurePath:
    """Resolve one directory on the running host."""
    return Resolver().resolve(category, Identity(organization, application, bundle_id))


def resolve_all(organization: str, application: str, bundle_id: str | None = None) -> dict[Category, PurePath]:
    """Resolve config, save_data, logs and temp on the running host."""
    return Resolver().resolve_all(Identity(organization, application, bundle_id))
