"""Configuration loading for the supply chain runtime."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "graph": {"allow_duplicate_flows": True},
    "logging": {"level": "INFO"},
    "audit": {"enabled": True},
    "paths": {"audit_log_path": "logs/audit.jsonl"},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path) -> dict[str, Any]:
    """Built-in defaults, then config/default.yaml, then config/local.yaml."""
    config_dir = root / "config"
    merged = merge_dicts(DEFAULT_CONFIG, load_yaml(config_dir / "default.yaml"))
    return merge_dicts(merged, load_yaml(config_dir / "local.yaml"))


def resolve_audit_log_path(root: Path, config: dict[str, Any]) -> Path:
    paths_cfg = config.get("paths", {})
    return (root / paths_cfg.get("audit_log_path", "logs/audit.jsonl")).resolve()


def configure_logging(config: dict[str, Any]) -> None:
    """Apply the configured level to the ``sc`` logger tree."""
    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.getLogger("sc").setLevel(level)
