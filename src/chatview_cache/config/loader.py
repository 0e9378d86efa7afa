from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "CHATVIEW_CONFIG"
SECTION = "chatview"


def config_path() -> Path:
    """Return the config file location, honouring ``CHATVIEW_CONFIG``."""
    override = os.getenv(CONFIG_PATH_ENV)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the ``[chatview]`` table from the config file.

    A missing file or a file without a ``[chatview]`` table yields an empty
    dict so the section classes fall back to environment variables.
    """
    target = Path(path) if path is not None else config_path()
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle).get(SECTION, {})


__all__ = ["load_raw_config", "config_path", "CONFIG_PATH_ENV", "DEFAULT_CONFIG_PATH"]
