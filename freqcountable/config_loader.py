"""Configuration loader that merges YAML settings with environment variables."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

_config = None

DEFAULT_LOG_LEVEL_ENV = "FREQCOUNT_LOG_LEVEL"


def get_project_root() -> Path:
    """Return the absolute path to the project root directory."""
    return Path(__file__).resolve().parent.parent


def load_config(config_path: str = None) -> dict:
    """
    Load configuration from YAML and environment variables.

    The log level can be overridden by the env var named in
    ``logging.level_env`` (FREQCOUNT_LOG_LEVEL by default).
    All relative paths are resolved to absolute paths based on project root.
    The result is cached after the first call.
    """
    global _config
    if _config is not None:
        return _config

    project_root = get_project_root()

    # Load .env file
    dotenv_path = project_root / ".env"
    load_dotenv(dotenv_path)

    # Load YAML
    if config_path is None:
        config_path = project_root / "config" / "config.yaml"

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    # Resolve paths to absolute
    paths = config.setdefault("paths", {})
    for key in ["output_dir", "logs_dir"]:
        if paths.get(key):
            paths[key] = str(project_root / paths[key])

    # Resolve log level from env var
    log_cfg = config.setdefault("logging", {})
    level_env = log_cfg.get("level_env", DEFAULT_LOG_LEVEL_ENV)
    log_cfg["level"] = os.environ.get(level_env, log_cfg.get("level", "INFO")).upper()

    config.setdefault("counting", {})

    _config = config
    return config


def reset_config():
    """Reset cached config (useful for testing)."""
    global _config
    _config = None
