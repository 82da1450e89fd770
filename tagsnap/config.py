#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("tagsnap")

# Environment variables that point at the two repositories
SOURCE_REPO_ENV = 'GEMINI_REPO_PATH'
TRACKING_REPO_ENV = 'COLLECTION_REPO_PATH'

LEDGER_BACKENDS = ('history', 'file')


def get_config_path():
    """Get the path to an optional configuration file.

    Only TAGSNAP_CONFIG is consulted; without it tagsnap runs on defaults
    and environment overrides alone.
    """
    if 'TAGSNAP_CONFIG' in os.environ:
        return Path(os.environ['TAGSNAP_CONFIG']).expanduser()
    return None


def get_default_config():
    """Get default configuration."""
    return {
        "source_repo_path": "~/src/gemini-cli",
        "tracking_repo_path": "~/src/gemini-prompts",
        "ledger": {
            "backend": "history",
            "path": "~/.tagsnap/processed.json"
        },
        "logging": {
            "level": "INFO"
        }
    }


def merge_configs(base, override):
    """Recursively merge two configuration dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def _read_config_file(config_path):
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    if suffix in ('.yaml', '.yml'):
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    with open(config_path, 'r') as f:
        return json.load(f)


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.

    GEMINI_REPO_PATH and COLLECTION_REPO_PATH select the two repositories,
    TAGSNAP_LEDGER picks the ledger backend and TAGSNAP_LOG_LEVEL the
    logging level.
    """
    if os.environ.get(SOURCE_REPO_ENV):
        config["source_repo_path"] = os.environ[SOURCE_REPO_ENV]
    if os.environ.get(TRACKING_REPO_ENV):
        config["tracking_repo_path"] = os.environ[TRACKING_REPO_ENV]
    if os.environ.get('TAGSNAP_LEDGER'):
        config.setdefault("ledger", {})["backend"] = os.environ['TAGSNAP_LEDGER'].lower()
    if os.environ.get('TAGSNAP_LOG_LEVEL'):
        config.setdefault("logging", {})["level"] = os.environ['TAGSNAP_LOG_LEVEL'].upper()
    return config


def validate_config(config):
    """Raise ConfigError for values tagsnap cannot work with."""
    backend = config.get("ledger", {}).get("backend")
    if backend not in LEDGER_BACKENDS:
        raise ConfigError(
            f"Unknown ledger backend {backend!r} (expected one of: {', '.join(LEDGER_BACKENDS)})"
        )
    for key in ("source_repo_path", "tracking_repo_path"):
        if not config.get(key):
            raise ConfigError(f"Missing required setting: {key}")
    return config


def load_config():
    """Load configuration: defaults, then config file, then environment."""
    config = get_default_config()

    config_path = get_config_path()
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            file_config = _read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        config = merge_configs(config, file_config)
        logger.debug(f"Loaded config from {config_path}")

    config = apply_env_overrides(config)
    return validate_config(config)


def configure_logging(config):
    """Apply the configured log level to the tagsnap logger tree."""
    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {level_name!r}, using INFO")
        level = logging.INFO
    logger.setLevel(level)


def source_repo_path(config) -> Path:
    return Path(config["source_repo_path"]).expanduser()


def tracking_repo_path(config) -> Path:
    return Path(config["tracking_repo_path"]).expanduser()
