from __future__ import annotations

"""
Configuration Domain Management.

Handles runtime settings for the HTTP service and the command frontends:
defaults, a JSON file in the user data directory, environment overrides
and validation. Only settings are persisted; the namespace is not.
"""

import json
import logging
import os
from typing import Any, Dict, List, Tuple

from dirspace.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

ENV_OVERRIDES: Dict[str, str] = {
    "DIRSPACE_HOST": "host",
    "DIRSPACE_PORT": "port",
    "DIRSPACE_API_URL": "api_url",
    "DIRSPACE_LOG_LEVEL": "log_level",
}

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_path() -> str:
    """Resolve the absolute path of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # HTTP service
        "host": "127.0.0.1",
        "port": 8000,

        # Remote frontends
        "api_url": "http://127.0.0.1:8000",
        "request_timeout": 10.0,

        # Diagnostics
        "log_level": "INFO",
        "log_to_file": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load configuration from disk merged over the defaults.

    Unknown keys are ignored; a missing or corrupted file yields defaults.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist configuration to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    path = get_config_path()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the configuration with DIRSPACE_* variables applied."""
    out = dict(config)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None and value.strip():
            out[key] = value.strip()
    return out

# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_config(config: Any, *, strict: bool = False) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Converts untrusted inputs (file, environment, CLI) into typed values and
    fills missing keys with defaults.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("host", "api_url"):
        merged[field] = _as_str(merged[field], defaults[field], field, warnings, strict)

    merged["port"] = _as_port(merged["port"], defaults["port"], warnings, strict)
    merged["request_timeout"] = _as_positive_float(
        merged["request_timeout"], defaults["request_timeout"], "request_timeout", warnings, strict
    )
    merged["log_to_file"] = _as_bool(merged["log_to_file"], defaults["log_to_file"], "log_to_file", warnings, strict)

    level = str(merged["log_level"] or "").strip().upper()
    if level not in _VALID_LOG_LEVELS:
        msg = f"Invalid field 'log_level': '{merged['log_level']}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        level = defaults["log_level"]
    merged["log_level"] = level

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    msg = f"Invalid field '{field}': expected non-empty str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_port(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        port = -1
    if isinstance(value, bool) or not 0 < port < 65536:
        msg = f"Invalid field 'port': '{value}' is not a TCP port."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return port


def _as_positive_float(value: Any, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0.0
    if isinstance(value, bool) or number <= 0:
        msg = f"Invalid field '{field}': expected a positive number, received '{value}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return number


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value

    if not strict and isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes", "y", "on"):
            warnings.append(f"Field '{field}' converted from '{value}' to True.")
            return True
        if s in ("false", "0", "no", "n", "off"):
            warnings.append(f"Field '{field}' converted from '{value}' to False.")
            return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
