"""Config file discovery and loading.

Walk-up finder locates designdemos.toml, similar to how git finds .git/.
Supports the DESIGNDEMOS_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from designdemos.config.models import DemoConfig

CONFIG_FILENAME = "designdemos.toml"
CONFIG_ENV_VAR = "DESIGNDEMOS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for designdemos.toml.

    Returns the path to the config file, or None if not found.
    Checks DESIGNDEMOS_CONFIG first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> DemoConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns the default DemoConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return DemoConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return DemoConfig.model_validate(data)
