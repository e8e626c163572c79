"""Run configuration and the optional ``.themecheck.yml`` file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .utils import read_yaml_file

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".themecheck.yml"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for a single check run."""

    root: Path = Path(".")
    fix: bool = False
    styles_dir: str = "scss"
    scripts_dir: str = "javascripts"
    important_threshold: int = 10
    tool_timeout: float = 300.0
    skip_tools: Tuple[str, ...] = ()

    @property
    def styles_path(self) -> Path:
        return self.root / self.styles_dir

    @property
    def scripts_path(self) -> Path:
        return self.root / self.scripts_dir


_FILE_KEYS = {
    "styles_dir": str,
    "scripts_dir": str,
    "important_threshold": int,
    "tool_timeout": (int, float),
    "skip_tools": list,
}


def _validate(raw: Dict[str, Any], source: Path) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        expected = _FILE_KEYS.get(key)
        if expected is None:
            raise ConfigError(f"{source}: unknown setting '{key}'")
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(f"{source}: setting '{key}' has invalid value {value!r}")
        if key == "skip_tools":
            value = tuple(str(name) for name in value)
        values[key] = value
    if values.get("important_threshold", 0) < 0:
        raise ConfigError(f"{source}: 'important_threshold' must not be negative")
    if values.get("tool_timeout", 1) <= 0:
        raise ConfigError(f"{source}: 'tool_timeout' must be positive")
    return values


def load_config(
    root: Path,
    *,
    fix: bool = False,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RunConfig:
    """Build a ``RunConfig`` from the config file (if any) and CLI overrides."""

    root = Path(root)
    path = Path(config_path) if config_path else root / CONFIG_FILENAME
    if config_path and not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML ({exc})") from exc

    values: Dict[str, Any] = {}
    if raw is not None:
        if not isinstance(raw, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")
        values = _validate(raw, path)
        logger.debug("Loaded settings from %s: %s", path, values)

    config = RunConfig(root=root, fix=fix, **values)
    if overrides:
        known = {item.name for item in fields(RunConfig)}
        config = replace(config, **{k: v for k, v in overrides.items() if k in known and v is not None})
    return config
