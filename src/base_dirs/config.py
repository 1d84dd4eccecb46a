"""Resolution settings.

Provides Settings dataclass and load_settings() to read policy switches from
environment variables, falling back to defaults.

Environment variables:
- BASE_DIRS_SAVE_LAYOUT: "bundle" (default) or "company", how macOS save data is laid out
- BASE_DIRS_LOWERCASE: "1"/"true"/"yes"/"on" to lowercase identity-derived path segments

Precedence: Settings passed to a Resolver > env var > default
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class SaveLayout(StrEnum):
    """How save data is keyed under macOS Application Support."""

    BUNDLE = "bundle"  # <Application Support>/<bundle_id>
    COMPANY = "company"  # <Application Support>/<organization>/<application>


@dataclass(frozen=True)
class Settings:
    """Policy switches applied on top of the platform profile."""

    save_layout: SaveLayout = SaveLayout.BUNDLE
    lowercase: bool = False


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from the environment, or defaults.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ValueError: If a variable holds an unrecognized value
    """
    if environ is None:
        environ = os.environ

    layout = SaveLayout.BUNDLE
    env_layout = environ.get("BASE_DIRS_SAVE_LAYOUT", "").strip().lower()
    if env_layout:
        try:
            layout = SaveLayout(env_layout)
        except ValueError:
            choices = ", ".join(SaveLayout)
            raise ValueError(f"BASE_DIRS_SAVE_LAYOUT must be one of {choices}, got {env_layout!r}") from None

    lowercase = _parse_bool("BASE_DIRS_LOWERCASE", environ.get("BASE_DIRS_LOWERCASE", ""))

    return Settings(save_layout=layout, lowercase=lowercase)


SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Returns the global SETTINGS instance, loading it from the environment on first use."""
    global SETTINGS
    if SETTINGS is None:
        SETTINGS = load_settings()
    return SETTINGS
