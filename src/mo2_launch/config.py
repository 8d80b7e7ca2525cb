"""Runtime configuration for MO2 launches."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True)
class Settings:
    """Launch defaults, normally read from the environment."""

    mo2_path: str | None = None
    xedit_path: str | None = None
    game_flag: str | None = None
    log_level: str = "WARNING"
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from ``MO2_LAUNCH_*`` environment variables."""

        return cls(
            mo2_path=_env_str("MO2_LAUNCH_MO2_PATH"),
            xedit_path=_env_str("MO2_LAUNCH_XEDIT_PATH"),
            game_flag=_env_str("MO2_LAUNCH_GAME_FLAG"),
            log_level=_env_log_level("MO2_LAUNCH_LOG_LEVEL", default="WARNING"),
            dry_run=_env_bool("MO2_LAUNCH_DRY_RUN", default=False),
        )

    def resolve_mo2_path(self, override: str | None = None) -> str:
        """Return the effective ModOrganizer.exe path or raise ``ValueError``."""

        value = override if _blank_to_none(override) is not None else self.mo2_path
        if not value:
            raise ValueError(
                "ModOrganizer.exe path is required. "
                "Set MO2_LAUNCH_MO2_PATH or pass --mo2-path.",
            )
        return value

    def resolve_xedit_path(self, override: str | None = None) -> str:
        """Return the effective xEdit path or raise ``ValueError``."""

        value = override if _blank_to_none(override) is not None else self.xedit_path
        if not value:
            raise ValueError(
                "xEdit path is required. Set MO2_LAUNCH_XEDIT_PATH or pass --xedit-path.",
            )
        return value

    def resolve_dry_run(self, override: bool | None = None) -> bool:
        """Return the CLI dry-run choice, falling back to the environment."""

        return self.dry_run if override is None else override

    def validate_for_launch(
        self,
        mo2_path_override: str | None = None,
        target_override: str | None = None,
    ) -> None:
        """Raise configuration error if launcher or target path is missing."""

        self.resolve_mo2_path(mo2_path_override)
        if _blank_to_none(target_override) is None:
            raise ValueError("Target program path must not be empty.")


def parse_log_level(value: str) -> int:
    """Translate a level name into a ``logging`` constant."""

    normalized = value.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {value!r}. Expected one of {', '.join(_LOG_LEVELS)}.",
        )
    return logging.getLevelName(normalized)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _env_str(name: str) -> str | None:
    return _blank_to_none(os.getenv(name))


def _env_log_level(name: str, default: str) -> str:
    value = _env_str(name)
    if value is None:
        return default
    parse_log_level(value)
    return value.strip().upper()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
