"""Application settings read from the environment.

Same shape as the per-vertical domain configs: a frozen dataclass with
sensible defaults and a ``from_env`` constructor. Database settings live
next to the engine in ``core.database``.
"""

import os
from dataclasses import dataclass, field

from core.access.navigation import MenuMode


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _menu_mode(value: str) -> str:
    try:
        return MenuMode(value.strip().lower()).value
    except ValueError:
        allowed = ", ".join(m.value for m in MenuMode)
        raise ValueError(
            f"DEFAULT_MENU_MODE must be one of {allowed}, got {value!r}"
        ) from None


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for the dashboard API.

    Usage::

        settings = Settings.from_env()
        setup_logging(settings.log_level)
    """

    app_name: str = "ReceptionAI"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(
        default=("http://localhost:3000", "http://localhost:5173")
    )
    # "omit" or "locked", used when a menu request does not say which
    default_menu_mode: str = "locked"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Example: LOG_LEVEL=DEBUG CORS_ORIGINS=https://app.receptionai.fr
        """
        overrides = {}

        if name := os.getenv("APP_NAME"):
            overrides["app_name"] = name
        if version := os.getenv("APP_VERSION"):
            overrides["app_version"] = version
        if debug := os.getenv("DEBUG"):
            overrides["debug"] = debug.lower() == "true"
        if level := os.getenv("LOG_LEVEL"):
            overrides["log_level"] = level.upper()
        if origins := os.getenv("CORS_ORIGINS"):
            overrides["cors_origins"] = _split_csv(origins)
        if mode := os.getenv("DEFAULT_MENU_MODE"):
            overrides["default_menu_mode"] = _menu_mode(mode)

        return cls(**overrides)


settings = Settings.from_env()
