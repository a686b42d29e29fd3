"""
Central configuration for config file locations.

YAML defaults for compatibility weights and moderation settings live in
zawaj/defaults/ and ship as package data. Point ZAWAJ_CONFIG_DIR elsewhere
to use a deployment-specific copy.
"""

import os
from pathlib import Path

WEIGHTS_FILENAME = "compatibility_weights.yaml"
MODERATION_FILENAME = "moderation.yaml"
DEFAULTS_DIRNAME = "defaults"


def get_config_dir() -> Path:
    """
    Get the directory holding the YAML config files.

    Uses ZAWAJ_CONFIG_DIR environment variable if set, otherwise defaults
    to the defaults/ directory inside the zawaj package.

    Returns:
        Path to config directory
    """
    env_path = os.environ.get("ZAWAJ_CONFIG_DIR")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path(__file__).parent / DEFAULTS_DIRNAME


def get_weights_path() -> Path:
    """Get the compatibility weights file path."""
    return get_config_dir() / WEIGHTS_FILENAME


def get_moderation_path() -> Path:
    """Get the moderation settings file path."""
    return get_config_dir() / MODERATION_FILENAME


def get_log_level(default: str = "INFO") -> str:
    """Log level from ZAWAJ_LOG_LEVEL, falling back to default."""
    return os.environ.get("ZAWAJ_LOG_LEVEL", default).upper()
