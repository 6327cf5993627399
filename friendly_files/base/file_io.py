"""Utility helpers for reading configuration files with consistent defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


DEFAULT_ENCODING = "utf-8"


def _to_path(path: Path | str) -> Path:
    return Path(path).expanduser()


def read_text(path: Path | str, encoding: str = DEFAULT_ENCODING) -> str:
    return _to_path(path).read_text(encoding=encoding)


def read_yaml(path: Path | str) -> Any:
    """Parse a YAML document; an empty file yields ``None``."""
    return yaml.safe_load(read_text(path))
