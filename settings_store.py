import json
import os
from pathlib import Path

from caselib.constants import CAMEL, CASE_STYLES
from caselib.logger import LOG_LEVELS, log, logError

APP_DIR_NAME = 'case_converter'
SETTINGS_FILENAME = 'settings.json'

DEFAULT_SETTINGS = {
    'style': CAMEL,
    'logLevel': LOG_LEVELS.BASIC.name,
}


def get_config_dir() -> str:
    base = os.environ.get('XDG_CONFIG_HOME') or os.path.expanduser('~/.config')
    cfg = os.path.join(base, APP_DIR_NAME)
    Path(cfg).mkdir(parents=True, exist_ok=True)
    return cfg


def settings_path() -> str:
    return os.path.join(get_config_dir(), SETTINGS_FILENAME)


def load_settings() -> dict:
    """Defaults overlaid with whatever valid values the settings file holds."""
    settings = dict(DEFAULT_SETTINGS)
    try:
        path = settings_path()
    except OSError as err:
        logError(f"Could not open the settings directory: {err}")
        return settings
    if not os.path.exists(path):
        return settings
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            stored = json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as err:
        logError(f"Could not read settings from {path}: {err}")
        return settings

    if not isinstance(stored, dict):
        logError(f"Ignoring settings in {path}: expected an object")
        return settings

    if stored.get('style') in CASE_STYLES:
        settings['style'] = stored['style']
    if stored.get('logLevel') in LOG_LEVELS.__members__:
        settings['logLevel'] = stored['logLevel']

    log(f"Loaded settings from {path}", LOG_LEVELS.COMPLEX)
    return settings


def save_settings(settings: dict, *, overwrite: bool = True) -> bool:
    """Save the settings. If overwrite is False and file exists, do not overwrite and return False."""
    path = settings_path()
    if os.path.exists(path) and not overwrite:
        return False
    with open(path, 'w', encoding='utf-8') as fh:
        json.dump(settings, fh, indent=2)
    log(f"Saved settings to {path}", LOG_LEVELS.SIMPLE)
    return True
