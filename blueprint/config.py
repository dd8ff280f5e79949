"""
Load and expose app config (YAML). Used by the generator, the server and the scripts.
"""
import os
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _apply_env(_defaults())
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a YAML mapping, got {type(data).__name__}")
    return _apply_env(_merge(_defaults(), data))


def _defaults() -> dict[str, Any]:
    return {
        "generator": {"min_length": 10, "brief_excerpt_chars": 160},
        "server": {"host": "127.0.0.1", "port": 8080},
        "logging": {"level": "INFO"},
        "api_base": "http://127.0.0.1:8080",
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """One level deep: section dicts are merged key by key, scalars replaced."""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


def _apply_env(config: dict[str, Any]) -> dict[str, Any]:
    """Deployment overrides: BLUEPRINT_HOST, BLUEPRINT_PORT, API_BASE, LOG_LEVEL."""
    server = dict(config.get("server", {}))
    if os.environ.get("BLUEPRINT_HOST"):
        server["host"] = os.environ["BLUEPRINT_HOST"].strip()
    if os.environ.get("BLUEPRINT_PORT"):
        try:
            server["port"] = int(os.environ["BLUEPRINT_PORT"])
        except ValueError:
            raise ValueError(f"BLUEPRINT_PORT must be an integer, got {os.environ['BLUEPRINT_PORT']!r}") from None
    config["server"] = server
    if os.environ.get("API_BASE"):
        config["api_base"] = os.environ["API_BASE"].strip()
    if os.environ.get("LOG_LEVEL"):
        config["logging"] = {**config.get("logging", {}), "level": os.environ["LOG_LEVEL"].strip().upper()}
    return config


def get_generator_config(config: dict[str, Any] | None) -> tuple[int, int]:
    """Resolve (min_length, brief_excerpt_chars) for the plan generator. Null values fall back to defaults."""
    defaults = _defaults()["generator"]
    gen = (config or {}).get("generator") or {}
    resolved = []
    for key in ("min_length", "brief_excerpt_chars"):
        value = gen.get(key)
        if value is None:
            value = defaults[key]
        try:
            resolved.append(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"generator.{key} must be an integer, got {value!r}") from None
    return resolved[0], resolved[1]


def get_log_level(config: dict[str, Any] | None) -> str:
    return str(((config or {}).get("logging") or {}).get("level", "INFO")).upper()
