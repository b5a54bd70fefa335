#!/usr/bin/env python3
"""
Configuration loading for mwgateway tools.

Settings come from three layers, later ones winning:
1. DEFAULTS below
2. A JSON config file (explicit path, or the MW_CONFIG env var)
3. Environment variables (MW_URL, MW_WIKI_NAME, MW_USER_AGENT,
   MW_LOG_LEVEL, LOG_DIR)

Example config.json:
    {
        "url": "https://wiki.example.com",
        "api_path": "/w/api.php",
        "article_path": "/wiki",
        "wiki_name": "ExampleWiki"
    }
"""

import json
import os
from pathlib import Path
from typing import Mapping, Optional

DEFAULTS = {
    "url": None,
    "api_path": "/api.php",
    "article_path": "/wiki",
    "wiki_name": "Wiki",
    "user_agent": None,
    "article": None,
    "summary": None,
    "log_dir": None,
    "log_level": "INFO",
}

ENV_KEYS = {
    "MW_URL": "url",
    "MW_WIKI_NAME": "wiki_name",
    "MW_USER_AGENT": "user_agent",
    "MW_LOG_LEVEL": "log_level",
    "LOG_DIR": "log_dir",
}


class ConfigError(Exception):
    """Raised when configuration is missing or malformed."""


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> dict:
    """
    Build the effective configuration.

    Args:
        path: JSON config file (default: MW_CONFIG env var, or no file)
        environ: Environment mapping (default: os.environ)

    Returns:
        Dict with every key from DEFAULTS

    Raises:
        ConfigError: If the config file is missing, unparsable or has unknown keys
    """
    if environ is None:
        environ = os.environ

    config = dict(DEFAULTS)

    if path is None:
        path = environ.get("MW_CONFIG")
    if path:
        config.update(_read_config_file(Path(path)))

    for env_name, key in ENV_KEYS.items():
        value = environ.get(env_name)
        if value:
            config[key] = value

    return config


def _read_config_file(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return data


def _require_url(config: Mapping) -> str:
    url = config.get("url")
    if not url:
        raise ConfigError("No wiki URL configured (set 'url' or MW_URL)")
    return url.rstrip("/")


def api_url(config: Mapping) -> str:
    """Full API endpoint, e.g. https://wiki.example.com/api.php"""
    return _require_url(config) + "/" + config.get("api_path", DEFAULTS["api_path"]).lstrip("/")


def article_url(config: Mapping) -> str:
    """Base URL that page titles are appended to, e.g. https://wiki.example.com/wiki"""
    path = config.get("article_path", DEFAULTS["article_path"]).strip("/")
    base = _require_url(config)
    return f"{base}/{path}" if path else base

