from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

from .defaults import DEFAULTS
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import preferences_file_path

logger = logging.getLogger(__name__)


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "on"}:
            return True
        if v in {"0", "false", "no", "off"}:
            return False
    return default


@dataclass(frozen=True)
class Preferences:
    """User preferences, loaded once per command invocation."""

    wootility_path: Optional[str] = None
    enable_notifications: bool = True
    default_profile: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Preferences":
        return cls(
            wootility_path=_as_optional_str(raw.get("wootility_path")),
            enable_notifications=_as_bool(raw.get("enable_notifications"), bool(DEFAULTS["enable_notifications"])),
            default_profile=_as_optional_str(raw.get("default_profile")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_preferences(path: Optional[Path] = None) -> Preferences:
    """Load preferences, falling back to defaults when the file is unreadable."""

    config_file = path if path is not None else preferences_file_path()
    raw = load_config_settings(config_file=config_file, defaults=DEFAULTS, logger=logger)
    if raw is None:
        return Preferences.from_dict(DEFAULTS)
    return Preferences.from_dict(raw)


def save_preferences(prefs: Preferences, path: Optional[Path] = None) -> bool:
    config_file = path if path is not None else preferences_file_path()
    return save_config_settings_atomic(config_file=config_file, settings=prefs.to_dict(), logger=logger)
