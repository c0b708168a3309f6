# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/18/2026 - Created with JSON config, env overrides and logging setup
# ============================================================================
"""
Configuration module for the iMessage AppleScript MCP server.

Handles path resolution, logging setup, and configuration loading.
Paths are resolved relative to PROJECT_ROOT so the server behaves the same
regardless of the working directory the host starts it from.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Optional

# MCP hosts start servers from arbitrary working directories
PROJECT_ROOT = Path(__file__).parent.parent

CONFIG_PATH = PROJECT_ROOT / "config" / "mcp_server.json"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_CONFIG = {
    "server_name": "iMessage-AppleScript-Server",
    "version": "0.1.0",
    "applescript": {
        "osascript_path": "osascript",
        "timeout_seconds": 30,
        "max_concurrent": 4,
    },
    "search": {
        "require_query": True,
    },
    "logging": {
        "level": "INFO",
        "log_dir": None,
    },
}

logger = logging.getLogger(__name__)


def resolve_path(path_str: str) -> str:
    """
    Resolve a config path relative to PROJECT_ROOT or expand ~.

    Args:
        path_str: Path string from configuration

    Returns:
        Resolved absolute path as string
    """
    path = Path(path_str)
    if path_str.startswith("~"):
        return str(path.expanduser())
    elif path.is_absolute():
        return str(path)
    else:
        return str(PROJECT_ROOT / path)


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(config: dict) -> dict:
    timeout = os.getenv("IMESSAGE_MCP_TIMEOUT")
    if timeout:
        config["applescript"]["timeout_seconds"] = float(timeout)

    max_concurrent = os.getenv("IMESSAGE_MCP_MAX_CONCURRENT")
    if max_concurrent:
        config["applescript"]["max_concurrent"] = int(max_concurrent)

    log_level = os.getenv("IMESSAGE_MCP_LOG_LEVEL")
    if log_level:
        config["logging"]["level"] = log_level.upper()

    log_dir = os.getenv("IMESSAGE_MCP_LOG_DIR")
    if log_dir:
        config["logging"]["log_dir"] = log_dir

    return config


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load server configuration.

    Defaults are overlaid with the JSON config file (if present) and then
    with IMESSAGE_MCP_* environment variables.

    Args:
        config_path: Explicit config file path. Falls back to the
            IMESSAGE_MCP_CONFIG environment variable, then CONFIG_PATH.

    Returns:
        Configuration dictionary
    """
    path_str = config_path or os.getenv("IMESSAGE_MCP_CONFIG")
    path = Path(resolve_path(path_str)) if path_str else CONFIG_PATH

    config = copy.deepcopy(DEFAULT_CONFIG)
    if path.exists():
        with open(path) as f:
            config = _merge(config, json.load(f))
    elif path_str:
        # An explicitly requested file must exist
        raise FileNotFoundError(f"Config file not found: {path}")

    return _apply_env_overrides(config)


def setup_logging(config: dict) -> None:
    """
    Configure root logging for the server process.

    Logs go to stderr (stdout carries the MCP stdio channel) and, when
    logging.log_dir is set, to mcp_server.log in that directory.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir = config["logging"].get("log_dir")
    if log_dir:
        log_path = Path(resolve_path(log_dir))
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path / 'mcp_server.log'))

    logging.basicConfig(
        level=config["logging"].get("level", "INFO"),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
