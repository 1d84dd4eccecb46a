"""Per-application directory helpers built on the resolver.

BaseDirs binds an Identity to a Resolver and adds the filesystem side the
resolver deliberately leaves out: joining file names and creating directories.

Usage:
    dirs = BaseDirs("Acme", "Blaster", bundle_id="com.acme.blaster")
    settings_file = dirs.config_path("settings.toml")
    dirs.ensure_parent(settings_file)
"""

from pathlib import Path, PurePath

from loguru import logger

from .models import Category, Identity, check_segment
from .resolver import Resolver


class BaseDirs:
    """Directories for one application. Every property resolves again on access."""

    def __init__(
        self, organization: str, application: str, bundle_id: str | None = None, resolver: Resolver | None = None
    ) -> None:
        self.identity = Identity(organization, application, bundle_id)
        self.resolver = resolver or Resolver()

    def __repr__(self) -> str:
        return f"BaseDirs({self.identity.organization!r}, {self.identity.application!r}, bundle_id={self.identity.bundle_id!r})"

    def dir(self, category: Category | str) -> PurePath:
        """Directory for any category."""
        return self.resolver.resolve(category, self.identity)

    @property
    def config_dir(self) -> PurePath:
        """Device-local settings."""
        return self.dir(Category.CONFIG)

    @property
    def save_dir(self) -> PurePath:
        """Save data, synced or backed up by the OS where it supports that."""
        return self.dir(Category.SAVE_DATA)

    @property
    def logs_dir(self) -> PurePath:
        """Logs and debug output, never synced."""
        return self.dir(Category.LOGS)

    @property
    def temp_dir(self) -> PurePath:
        """Shared temp root; create uniquely named entries inside it."""
        return self.dir(Category.TEMP)

    def config_path(self, name: str) -> PurePath:
        """File inside the config directory."""
        return self.config_dir / check_segment("name", name)

    def save_path(self, name: str) -> PurePath:
        """File inside the save data directory."""
        return self.save_dir / check_segment("name", name)

    def logs_path(self, name: str) -> PurePath:
        """File inside the logs directory."""
        return self.logs_dir / check_segment("name", name)

    def ensure(self, category: Category | str) -> Path:
        """Create the category's directory (and parents) if missing and return it."""
        path = Path(self.dir(category))
        if not path.is_dir():
            logger.debug(f"Creating {path}")
        path.mkdir(parents=True, exist_ok=True)
        return path

    def ensure_config_dir(self) -> Path:
        """Create the config directory if missing."""
        return self.ensure(Category.CONFIG)

    def ensure_save_dir(self) -> Path:
        """Create the save data directory if missing."""
        return self.ensure(Category.SAVE_DATA)

    def ensure_logs_dir(self) -> Path:
        """Create the logs directory if missing."""
        return self.ensure(Category.LOGS)

    @staticmethod
    def ensure_parent(path: str | PurePath) -> None:
        """Create the parent directory of a file path."""
        Path(path).parent.mkdir(parents=True, exist_ok=True)
