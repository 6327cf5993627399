"""
Configuration loading and validation.

Provides:
 - `load_config`: raw YAML mapping from disk
 - `load_settings`: validated, frozen `Settings` for the command line
 - `resolve_config_path`: explicit path or the conventional configs/config.yaml
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .base.file_io import read_yaml
from .base.logging import DEFAULT_FILE_PREFIX, normalize_level
from .file_helper import DEFAULT_TEMP_PREFIX

DEFAULT_CONFIG_RELATIVE = Path("configs") / "config.yaml"

LOGGING_SECTION_KEY = "logging"
DEFAULTS_SECTION_KEY = "defaults"

LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
DEFAULTS_ALLOWED_KEYS = {"temp_prefix", "extension", "progress"}
SECTION_KEYS = {LOGGING_SECTION_KEY: LOGGING_ALLOWED_KEYS, DEFAULTS_SECTION_KEY: DEFAULTS_ALLOWED_KEYS}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}
AUTO_VALUES = {"auto", "default", ""}


@dataclass(frozen=True)
class Settings:
    level: str = "INFO"
    use_rich: Optional[bool] = None
    log_dir: Optional[Path] = None
    file_prefix: str = DEFAULT_FILE_PREFIX
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    extension: str = ""
    progress: bool = True


def load_config(path: str | Path | None) -> Dict[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")
    return dict(data)


def resolve_config_path(explicit: Optional[str | Path], cwd: Optional[Path] = None) -> Optional[Path]:
    """Return the explicit config path, else ``configs/config.yaml`` under ``cwd`` if present."""
    if explicit:
        return Path(explicit).expanduser().resolve()
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_RELATIVE
    return candidate if candidate.exists() else None


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, str)):
        lowered = str(value).strip().lower()
        if lowered in YES_VALUES:
            return True
        if lowered in NO_VALUES:
            return False
    raise ValueError(f"'{key}' must be a boolean (got {value!r})")


def _parse_use_rich(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in AUTO_VALUES:
        return None
    return _parse_bool(value, "use_rich")


def _parse_str(value: Any, key: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string (got {value!r})")
    return value


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{name}' section must be a mapping")
    unknown = set(section) - SECTION_KEYS[name]
    if unknown:
        raise ValueError(f"Unknown keys in '{name}' section: {', '.join(sorted(map(str, unknown)))}")
    return section


def build_settings(raw: Mapping[str, Any], base_dir: Optional[Path] = None) -> Settings:
    """
    Validate a raw config mapping into `Settings`.

    Relative ``log_dir`` values resolve against ``base_dir`` (the directory of
    the config file) when one is given.
    """
    unknown_sections = set(raw) - set(SECTION_KEYS)
    if unknown_sections:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(map(str, unknown_sections)))}")

    logging_cfg = _section(raw, LOGGING_SECTION_KEY)
    defaults_cfg = _section(raw, DEFAULTS_SECTION_KEY)

    log_dir: Optional[Path] = None
    if logging_cfg.get("log_dir"):
        log_dir = Path(str(logging_cfg["log_dir"])).expanduser()
        if base_dir is not None and not log_dir.is_absolute():
            log_dir = (base_dir / log_dir).resolve()

    progress = defaults_cfg.get("progress")
    return Settings(
        level=normalize_level(logging_cfg.get("level")),
        use_rich=_parse_use_rich(logging_cfg.get("use_rich")),
        log_dir=log_dir,
        file_prefix=_parse_str(logging_cfg.get("file_prefix"), "file_prefix", DEFAULT_FILE_PREFIX),
        temp_prefix=_parse_str(defaults_cfg.get("temp_prefix"), "temp_prefix", DEFAULT_TEMP_PREFIX),
        extension=_parse_str(defaults_cfg.get("extension"), "extension", ""),
        progress=True if progress is None else _parse_bool(progress, "progress"),
    )


def load_settings(path: str | Path | None) -> Settings:
    """Load and validate settings; ``None`` yields the built-in defaults."""
    if not path:
        return Settings()
    cfg_path = Path(path).expanduser()
    return build_settings(load_config(cfg_path), base_dir=cfg_path.resolve().parent)
