# cutlog/config/settings.py
# Configuration management for the cutlog CLI: shop timezone, idle presets, display & timer paths

from __future__ import annotations

import os
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Optional, cast
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer

from ..core.constants import DEFAULT_IDLE_PRESETS
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..cutlog_io.generics import read_json_safe, write_json_safe

# environment override for the shop timezone
TIMEZONE_ENV_VAR = "CUTLOG_TIMEZONE"


# * Default settings dataclass for cutlog
@dataclass
class CutlogSettings:
    # shop wall-clock zone used for "now" timestamps
    timezone: str = "Asia/Kolkata"

    # idle type -> minutes added when selected
    idle_presets: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_IDLE_PRESETS))

    # display
    currency_symbol: str = "₹"

    # live timer
    tick_interval: float = 1.0
    base_dir: str = ".cutlog"
    timer_state_filename: str = "timer.json"

    # dev mode setting (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            raise SettingsValidationError(
                f"timezone must be an IANA zone name, got {self.timezone!r}",
                "timezone",
                self.timezone,
            )

        if not isinstance(self.idle_presets, dict):
            raise SettingsValidationError(
                "idle_presets must be an object of name -> minutes",
                "idle_presets",
                self.idle_presets,
            )
        for name, minutes in self.idle_presets.items():
            if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
                raise SettingsValidationError(
                    f"idle preset {name!r} must be a non-negative integer, got {minutes!r}",
                    "idle_presets",
                    self.idle_presets,
                )

        # tick_interval validation (must be >= 0.1 seconds)
        if (
            isinstance(self.tick_interval, bool)
            or not isinstance(self.tick_interval, (int, float))
            or self.tick_interval < 0.1
        ):
            raise SettingsValidationError(
                f"tick_interval must be >= 0.1 seconds, got {self.tick_interval}",
                "tick_interval",
                self.tick_interval,
            )

        # dev_mode strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise SettingsValidationError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}",
                "dev_mode",
                self.dev_mode,
            )

    @property
    def cutlog_dir(self) -> Path:
        return Path(self.base_dir)

    @property
    def timer_state_path(self) -> Path:
        return self.cutlog_dir / self.timer_state_filename

    # timezone after applying the environment override
    @property
    def effective_timezone(self) -> str:
        return os.environ.get(TIMEZONE_ENV_VAR) or self.timezone


# * Settings management w/ JSON persistence for loading, saving & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".cutlog" / "config.json"
        self._settings: Optional[CutlogSettings] = None

    # load settings from file or return defaults
    def load(self) -> CutlogSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = CutlogSettings(**data)
            except (JSONParsingError, SettingsValidationError, TypeError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = CutlogSettings()
        else:
            self._settings = CutlogSettings()

        return self._settings

    # save settings to file
    def save(self, settings: CutlogSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole settings object
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        data = asdict(settings)
        data[key] = value
        self.save(CutlogSettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(CutlogSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[CutlogSettings] = None
) -> CutlogSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for CutlogSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, CutlogSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
