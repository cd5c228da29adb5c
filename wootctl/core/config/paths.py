"""Config path helpers.

Two locations matter here: wootctl's own preferences, and the device file that
Wooting Profile Switcher keeps next to Wootility. The latter is read-only for us.
"""

from __future__ import annotations

import os
from pathlib import Path


DEVICE_CONFIG_DIRNAME = "WootingProfileSwitcher"


def config_dir() -> Path:
    """Return the directory used for wootctl configuration.

    Priority:
    - WOOTCTL_CONFIG_DIR
    - XDG_CONFIG_HOME/wootctl
    - ~/.config/wootctl
    """

    p = os.environ.get("WOOTCTL_CONFIG_DIR")
    if p:
        return Path(p)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wootctl"

    return Path.home() / ".config" / "wootctl"


def preferences_file_path() -> Path:
    """Return the preferences.json path.

    Priority:
    - WOOTCTL_PREFERENCES_PATH (explicit file override)
    - config_dir()/preferences.json
    """

    p = os.environ.get("WOOTCTL_PREFERENCES_PATH")
    if p:
        return Path(p)
    return config_dir() / "preferences.json"


def device_config_path() -> Path:
    """Return the Profile Switcher device config path.

    Priority:
    - WOOTCTL_DEVICE_CONFIG
    - %APPDATA%/WootingProfileSwitcher/config.json
    - ~/WootingProfileSwitcher/config.json
    """

    p = os.environ.get("WOOTCTL_DEVICE_CONFIG")
    if p:
        return Path(p)

    appdata = os.environ.get("APPDATA")
    base = Path(appdata) if appdata else Path.home()
    return base / DEVICE_CONFIG_DIRNAME / "config.json"
