"""Value types for directory resolution.

Category: the four kinds of application data, each with its own sync and lifetime semantics.
Identity: caller-supplied organization, application and optional bundle id.
"""

from dataclasses import dataclass
from enum import StrEnum

from .errors import InvalidIdentity, UnsupportedCategory

_SEPARATORS = ("/", "\\", "\0")


class Category(StrEnum):
    """Kind of application data."""

    CONFIG = "config"  # Device-local settings
    SAVE_DATA = "save_data"  # Synced / backed up
    LOGS = "logs"  # Local only, may grow large
    TEMP = "temp"  # Ephemeral

    @classmethod
    def parse(cls, value: object) -> "Category":
        """Coerce a Category or its string value, raising UnsupportedCategory otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedCategory(value) from None


def check_segment(field: str, value: object) -> str:
    """Validate that value can be used verbatim as one path segment."""
    if not isinstance(value, str):
        raise InvalidIdentity(field, value, "expected a string")
    if not value.strip():
        raise InvalidIdentity(field, value, "must not be empty")
    if any(sep in value for sep in _SEPARATORS):
        raise InvalidIdentity(field, value, "must not contain path separators")
    if value in (".", ".."):
        raise InvalidIdentity(field, value, "must not be a relative path marker")
    return value


@dataclass(frozen=True)
class Identity:
    """Who the directories belong to.

    organization and application become path segments on Windows and Linux.
    bundle_id (reverse-DNS, e.g. com.acme.blaster) is the single segment used on macOS.
    """

    organization: str
    application: str
    bundle_id: str | None = None

    def __post_init__(self) -> None:
        check_segment("organization", self.organization)
        check_segment("application", self.application)
        if isinstance(self.bundle_id, str) and not self.bundle_id.strip():
            object.__setattr__(self, "bundle_id", None)
        if self.bundle_id is not None:
            check_segment("bundle_id", self.bundle_id)

    def segments(self, lowercase: bool = False) -> dict[str, str]:
        """Fields available to path templates."""
        fields = {
            "organization": self.organization,
            "application": self.application,
            "bundle_id": self.bundle_id or "",
        }
        if lowercase:
            return {k: v.lower() for k, v in fields.items()}
        return fields
