"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import LICENSE_CHOICES, README_FILENAME
from .models import AnswerSet
from .prompts import validate_email
from .renderer import LAYOUTS, LEGACY_LAYOUT

CONFIG_FILENAME = ".readmegen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed or is invalid."""


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    output: str = README_FILENAME
    layout: str = LEGACY_LAYOUT
    defaults: Dict[str, str] = field(default_factory=dict)
    log_file: Optional[Path] = None

    @property
    def output_path(self) -> Path:
        return self.root / self.output


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from a directory or a .readmegen.yml path."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return ReadmeGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = _as_str(data.get("output")) or README_FILENAME
    if Path(output).name != output:
        raise ConfigError(f"output must be a file name, not a path: {output!r}")

    layout = _as_str(data.get("layout")) or LEGACY_LAYOUT
    if layout not in LAYOUTS:
        raise ConfigError(f"layout must be one of {', '.join(LAYOUTS)}, got {layout!r}")

    log_file_str = _as_str(data.get("log_file"))
    log_file = root / log_file_str if log_file_str else None
    if log_file is not None and not log_file.parent.is_dir():
        raise ConfigError(f"log_file directory does not exist: {log_file.parent}")

    return ReadmeGenConfig(
        root=root,
        output=output,
        layout=layout,
        defaults=_parse_defaults(data.get("defaults")),
        log_file=log_file,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _parse_defaults(value: Any) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("defaults must be a mapping of answer names to values")

    known = AnswerSet.field_names()
    defaults: Dict[str, str] = {}
    for key, raw in value.items():
        name = str(key)
        if name not in known:
            raise ConfigError(f"Unknown default {name!r}; expected one of {', '.join(known)}")
        text = _as_str(raw)
        if text is None:
            continue
        defaults[name] = text.strip()

    license_default = defaults.get("license")
    if license_default and license_default not in LICENSE_CHOICES:
        raise ConfigError(
            f"Default license {license_default!r} is not one of {', '.join(LICENSE_CHOICES)}"
        )

    email_default = defaults.get("email")
    if email_default and validate_email(email_default):
        raise ConfigError(f"Default email {email_default!r} is not a valid email address")
    return defaults


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ReadmeGenConfig", "load_config"]
