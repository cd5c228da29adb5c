from __future__ import annotations

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Any


# Preference names as exported by the Raycast extension.
_LEGACY_KEY_ALIASES: dict[str, str] = {
    "wootilityPath": "wootility_path",
    "enableNotifications": "enable_notifications",
    "defaultProfile": "default_profile",
}


def _normalize_keys(loaded: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in loaded.items():
        new_key = _LEGACY_KEY_ALIASES.get(key, key)
        # Snake-case keys win over their legacy spelling.
        if new_key in out and new_key != key:
            continue
        out[new_key] = value
    return out


def load_config_settings(
    *,
    config_file: Path,
    defaults: dict[str, Any],
    retries: int = 3,
    retry_delay: float = 0.02,
    logger,
) -> dict[str, Any] | None:
    """Load settings JSON with retries for transient partial writes.

    Returns a merged dict of `{**defaults, **loaded}` when successful.
    Returns a copy of `defaults` when the file does not exist.
    Returns None when loading fails after retries.
    """

    if not config_file.exists():
        return dict(defaults)

    last_error: Exception | None = None
    for _ in range(max(1, retries)):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                loaded = {}
            return {**defaults, **_normalize_keys(loaded)}
        except json.JSONDecodeError as e:
            last_error = e
            time.sleep(retry_delay)
        except Exception as e:
            last_error = e
            break

    logger.warning("Failed to load settings from %s: %s", config_file, last_error)
    return None


def save_config_settings_atomic(*, config_file: Path, settings: dict[str, Any], logger) -> bool:
    """Save settings JSON atomically (write temp file then replace).

    Returns False (after logging) when the write fails.
    """

    config_dir = config_file.parent
    try:
        config_dir.mkdir(parents=True, exist_ok=True)

        tmp_fd, tmp_path = tempfile.mkstemp(prefix="preferences.", suffix=".tmp", dir=str(config_dir))
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, config_file)
        finally:
            try:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
            except OSError as exc:
                logger.debug("Failed to remove temp settings file %s: %s", tmp_path, exc)

    except Exception as e:
        logger.warning("Failed to save settings to %s: %s", config_file, e)
        return False

    return True
