"""Unified configuration layer for the network package.

Sources merge in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) named by EXPLORER_CONFIG_FILE
    3. Environment variables (EXPLORER_MAIN_BASE_URL, EXPLORER_SEARCH_BASE_URL,
       EXPLORER_SEARCH_PATH, EXPLORER_DEBUG)
    4. In-code overrides passed to :func:`get_network_config`

External config file example::

    main_base_url: https://xkcd.com/
    search_base_url: https://search.example.org/api/
    debug: true

YAML is only read when PyYAML is installed; JSON always works.

Public API
----------
* get_network_config(overrides: dict | None = None) -> dict
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..base.logging import get_logger, log_event
from .defaults import (
    DEBUG_DEFAULT,
    MAIN_DEFAULT_BASE_URL,
    SEARCH_DEFAULT_BASE_URL,
    SEARCH_DEFAULT_PATH,
)

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Any] = {
    "main_base_url": MAIN_DEFAULT_BASE_URL,
    "search_base_url": SEARCH_DEFAULT_BASE_URL,
    "search_path": SEARCH_DEFAULT_PATH,
    "debug": DEBUG_DEFAULT,
}

ENV_FIELD_MAP = {
    "main_base_url": "EXPLORER_MAIN_BASE_URL",
    "search_base_url": "EXPLORER_SEARCH_BASE_URL",
    "search_path": "EXPLORER_SEARCH_PATH",
    "debug": "EXPLORER_DEBUG",
}

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def _unreadable(path: Path, reason: str) -> Dict[str, Any]:
    log_event(
        get_logger("explorer_network.config"),
        "config.unreadable",
        level=logging.WARNING,
        path=str(path),
        reason=reason,
    )
    return {}


def _load_external_config() -> Dict[str, Any]:
    """Read the file named by EXPLORER_CONFIG_FILE.

    A missing file yields ``{}`` silently. A file that cannot be parsed, or
    whose top level is not a mapping, yields ``{}`` and logs a
    ``config.unreadable`` warning.
    """
    path = os.getenv("EXPLORER_CONFIG_FILE")
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data: Any = json.loads(text)
    except ValueError as json_exc:
        if yaml is None:
            return _unreadable(p, f"invalid JSON and PyYAML is not installed: {json_exc}")
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as yaml_exc:
            return _unreadable(p, f"invalid JSON or YAML: {yaml_exc}")
    if not isinstance(data, dict):
        return _unreadable(p, f"top level is {type(data).__name__}, expected a mapping")
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, var in ENV_FIELD_MAP.items():
        val = os.getenv(var)
        if val is not None:
            out[field] = val
    return out


def get_network_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged network configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    cfg["debug"] = _as_bool(cfg.get("debug"))
    return cfg


__all__ = [
    "get_network_config",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
