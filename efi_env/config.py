from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .lib.env import PATHS
from .lib.hwdetect import host_arch

logger = logging.getLogger(__name__)

BOOL_KEYS = ("secure_boot", "sev", "cca")
STR_KEYS = ("arch", "firmware_dir", "log_path")


def _validate(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ValueError(f"Config key {key!r} must be true/false, got {data[key]!r}")
    for key in STR_KEYS:
        if data.get(key) is not None and not isinstance(data[key], str):
            raise ValueError(f"Config key {key!r} must be a string, got {data[key]!r}")
    return data


def load_config(path: str) -> Dict[str, Any]:
    """Load an efi-env config file; .yaml/.yml is YAML, anything else JSON."""

    p = Path(path)
    if not p.exists():
        logger.debug("Config %s not found, using defaults", path)
        return {}

    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        import yaml

        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    return _validate(data)


def ensure_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Fill arch and firmware_dir without overriding user values."""

    if not cfg.get("arch"):
        cfg["arch"] = host_arch()
    if not cfg.get("firmware_dir"):
        cfg["firmware_dir"] = PATHS.firmware_dir
    return cfg
