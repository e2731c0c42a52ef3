"""Settings management - saves and loads user preferences."""
import json
import logging
from pathlib import Path
from typing import Tuple

from .constants import DEFAULT_TURN_TIME, RESULT_DISPLAY_TIME, TICK_INTERVAL

logger = logging.getLogger(__name__)

# Settings file location (in user's home directory)
SETTINGS_DIR = Path.home() / ".skirmish"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

# Default settings
DEFAULT_SETTINGS = {
    "resolution": [1280, 720],
    "language": "ru",
    "sound_enabled": True,
    "turn_time_seconds": DEFAULT_TURN_TIME,
    "result_display_seconds": RESULT_DISPLAY_TIME,
    "tick_interval": TICK_INTERVAL,
}


def ensure_settings_dir():
    """Create settings directory if it doesn't exist."""
    SETTINGS_DIR.mkdir(parents=True, exist_ok=True)


def load_settings() -> dict:
    """Load settings from file, or return defaults if file doesn't exist."""
    try:
        if SETTINGS_FILE.exists():
            with open(SETTINGS_FILE, 'r', encoding='utf-8') as f:
                saved = json.load(f)
                # Merge with defaults (in case new settings were added)
                settings = DEFAULT_SETTINGS.copy()
                settings.update(saved)
                logger.debug(f"Settings loaded from {SETTINGS_FILE}")
                return settings
        else:
            logger.debug(f"Settings file not found at {SETTINGS_FILE}, using defaults")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings: {e}")
    return DEFAULT_SETTINGS.copy()


def save_settings(settings: dict):
    """Save settings to file."""
    try:
        ensure_settings_dir()
        with open(SETTINGS_FILE, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved to {SETTINGS_FILE}")
    except (OSError, TypeError) as e:
        logger.warning(f"Failed to save settings: {e}")


def _set(key: str, value):
    settings = load_settings()
    settings[key] = value
    save_settings(settings)


def get_resolution() -> Tuple[int, int]:
    """Get saved resolution as tuple."""
    res = load_settings().get("resolution", DEFAULT_SETTINGS["resolution"])
    return (res[0], res[1])


def set_resolution(width: int, height: int):
    _set("resolution", [width, height])


def get_language() -> str:
    return load_settings().get("language", DEFAULT_SETTINGS["language"])


def set_language(language: str):
    _set("language", language)


def get_sound_enabled() -> bool:
    return bool(load_settings().get("sound_enabled", True))


def set_sound_enabled(enabled: bool):
    _set("sound_enabled", enabled)


def get_turn_time() -> int:
    return int(load_settings().get("turn_time_seconds", DEFAULT_TURN_TIME))


def get_result_display_time() -> float:
    return float(load_settings().get("result_display_seconds", RESULT_DISPLAY_TIME))


def get_tick_interval() -> float:
    return float(load_settings().get("tick_interval", TICK_INTERVAL))
