"""Settings with YAML overlays and a process-wide current value."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from straitjacket.core.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_MISSING_CONTINUATION_POLICY,
    MISSING_CONTINUATION_POLICIES,
)
from straitjacket.core.exceptions import ConfigError


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def check_policy(policy: str) -> str:
    if policy not in MISSING_CONTINUATION_POLICIES:
        raise ConfigError(
            f"Unknown on_missing_continuation policy: {policy!r} "
            f"(expected one of {', '.join(MISSING_CONTINUATION_POLICIES)})"
        )
    return policy


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


@dataclass
class Settings:
    on_missing_continuation: str = DEFAULT_MISSING_CONTINUATION_POLICY
    log_invocations: bool = True
    logging: dict = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Settings":
        """Load defaults, then the env-named overlay, then the explicit file."""
        config_data: dict[str, Any] = {}

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            config_data = deep_merge(config_data, _read_yaml(Path(env_path)))

        if config_path:
            config_data = deep_merge(config_data, _read_yaml(Path(config_path)))

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        known = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        }
        settings = cls(**known)
        check_policy(settings.on_missing_continuation)
        return settings


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Current settings, loaded through Settings.load() on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def configure(settings: Settings) -> Optional[Settings]:
    """Replace the process-wide settings.

    Returns the previous value, or None if nothing was loaded yet.
    """
    global _settings
    check_policy(settings.on_missing_continuation)
    previous, _settings = _settings, settings
    return previous


def reset_settings() -> None:
    """Forget the current settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
