"""
Configuration settings for the Forever Box bot.
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

# Load environment variables (safe - just reads .env file)
load_dotenv()

# Track initialization state for config.yaml loading
_initialized = False

# Discord Configuration
TOKEN = os.getenv("TOKEN")

# Command surface
COMMAND_PREFIX = "f!"
PRESENCE_TEXT = "Go to the forever box"
PING_REPLY = "Pong!"

# Project Paths
BASE_DIR = Path(__file__).parent.parent
CONFIG_YAML_PATH = BASE_DIR / "config.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "prefix": COMMAND_PREFIX,
    "presence": PRESENCE_TEXT,
}

# Overrides loaded from the `bot:` section of config.yaml
BOT_SETTINGS: Dict[str, Any] = {}


def init_config() -> None:
    """Initialize configuration by loading config.yaml.

    This function should be called once at application startup.
    It's safe to call multiple times.
    """
    global _initialized

    if _initialized:
        return

    if CONFIG_YAML_PATH.exists():
        try:
            with open(CONFIG_YAML_PATH, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            section = data.get("bot") if isinstance(data, dict) else None
            if isinstance(section, dict):
                BOT_SETTINGS.update(
                    {k: v for k, v in section.items() if k in DEFAULT_SETTINGS}
                )
        except (OSError, yaml.YAMLError):
            pass  # Startup checks report a broken config.yaml; defaults apply

    _initialized = True


def get_setting(name: str) -> Any:
    """Get a bot setting, falling back to the built-in default.

    Args:
        name: Setting name (e.g., 'prefix', 'presence')

    Returns:
        The configured value, or the default (None for unknown names).
    """
    return BOT_SETTINGS.get(name, DEFAULT_SETTINGS.get(name))


def is_initialized() -> bool:
    """Check if configuration has been initialized."""
    return _initialized
