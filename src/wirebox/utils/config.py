"""Configuration management for wirebox."""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Container configuration."""

    # Locking
    thread_safe: bool = True

    # Raise CyclicResolutionError when a key re-enters its own resolution
    detect_cycles: bool = True

    log_level: str = "WARNING"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        config_dir = Path.home() / ".wirebox"
        config_dir.mkdir(exist_ok=True)
        return config_dir / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from disk."""
        config_path = path or cls.get_config_path()
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return cls(**_coerce_fields(cls, data))
            except (json.JSONDecodeError, OSError):
                pass
        return cls()

    @classmethod
    def from_env(cls, path: Path | None = None) -> "Config":
        """Load configuration from disk, then apply WIREBOX_* environment overrides."""
        config = cls.load(path)
        thread_safe = _parse_bool(os.environ.get("WIREBOX_THREAD_SAFE"))
        if thread_safe is not None:
            config.thread_safe = thread_safe
        detect_cycles = _parse_bool(os.environ.get("WIREBOX_DETECT_CYCLES"))
        if detect_cycles is not None:
            config.detect_cycles = detect_cycles
        log_level = os.environ.get("WIREBOX_LOG_LEVEL")
        if log_level:
            config.log_level = log_level.upper()
        return config

    def save(self, path: Path | None = None) -> None:
        """Save configuration to disk."""
        config_path = path or self.get_config_path()
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)


def _coerce_fields(cls: type, data: dict) -> dict:
    """Keep known fields whose values fit the field type; drop the rest."""
    values = {}
    for name, field in cls.__dataclass_fields__.items():
        if name not in data:
            continue
        value = data[name]
        if field.type is bool:
            if isinstance(value, str):
                value = _parse_bool(value)
            if not isinstance(value, bool):
                continue
        elif field.type is str and not isinstance(value, str):
            continue
        values[name] = value
    return values


def _parse_bool(raw: str | None) -> bool | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None
