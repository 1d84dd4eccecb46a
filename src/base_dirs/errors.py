"""Exception types raised while resolving base directories.

Every failure is raised to the immediate caller; the only non-error fallback
is an unset or blank environment variable, which the resolver replaces with
the profile's default root.
"""


class BaseDirsError(Exception):
    """Base class for resolution failures.

    `category` is filled in when the failure belongs to one category, e.g. when
    resolve_all() stops on the first failing directory.
    """

    def __init__(self, message: str, category: str | None = None) -> None:
        super().__init__(message)
        self.category = category

    def __str__(self) -> str:
        message = super().__str__()
        if self.category is None:
            return message
        return f"{self.category}: {message}"


class InvalidIdentity(BaseDirsError, ValueError):
    """Raised when organization, application or bundle id cannot be used as a path segment."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {field} {value!r}: {reason}")
        self.field = field


class UnsupportedCategory(BaseDirsError, ValueError):
    """Raised for a category outside config, save_data, logs and temp."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported category {value!r}")
        self.value = value


class PlatformApiUnavailable(BaseDirsError, OSError):
    """Raised when an OS folder accessor fails or returns nothing usable."""

    def __init__(self, folder: str, reason: str) -> None:
        super().__init__(f"Cannot locate {folder} folder: {reason}")
        self.folder = folder
