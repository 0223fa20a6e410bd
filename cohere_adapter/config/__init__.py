"""Unified configuration layer.

Merge order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``PROVIDERS_CONFIG_FILE``
    3. Environment variables (``COHERE_MODEL``, ``COHERE_BASE_URL``, ...)
    4. API key from the credential env vars (``COHERE_API_KEY``, alias
       ``CO_API_KEY``) when still unset
    5. In-code overrides passed to :func:`get_provider_config` (``None``
       values ignored)

A ``.env`` file (path from ``DOTENV_FILE``, default ``.env``) is read once
before the environment is consulted; it never clobbers real values already
present in the environment.

External config file example::

    cohere:
      model: command-r
      base_url: https://api.cohere.ai
      embedding_model: embed-multilingual-v3.0
      input_type: search_query
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    COHERE_API_BASE_URL,
    COHERE_DEFAULT_EMBEDDING_MODEL,
    COHERE_DEFAULT_INPUT_TYPE,
    COHERE_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "cohere": {
        "model": COHERE_DEFAULT_MODEL,
        "base_url": COHERE_API_BASE_URL,
        "embedding_model": COHERE_DEFAULT_EMBEDDING_MODEL,
        "input_type": COHERE_DEFAULT_INPUT_TYPE,
    },
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "embedding_model": "EMBEDDING_MODEL",
    "input_type": "INPUT_TYPE",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse ``KEY=VALUE`` lines from the dotenv file into ``os.environ``.

    Existing variables are only replaced when they hold placeholder values.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the ``PROVIDERS_CONFIG_FILE`` document (JSON, then YAML)."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars ->
    credential aliases -> overrides.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if not cfg.get("api_key") or is_placeholder(cfg.get("api_key")):
        key, _ = resolve_provider_key(name)
        if key:
            cfg["api_key"] = key
        else:
            cfg.pop("api_key", None)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
