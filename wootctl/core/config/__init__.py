from .defaults import DEFAULTS
from .paths import config_dir, device_config_path, preferences_file_path
from .preferences import Preferences, load_preferences, save_preferences

__all__ = [
    "DEFAULTS",
    "Preferences",
    "config_dir",
    "device_config_path",
    "load_preferences",
    "preferences_file_path",
    "save_preferences",
]
