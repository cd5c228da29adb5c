"""Read the Wooting Profile Switcher device file.

Shape: `{"devices": {"<serial>": {"model_name": str, "profiles": [str, ...]}}}`.
Missing fields are filled with defaults. The file carries no liveness or
active-profile signal, so every entry is reported connected on profile 0.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .models import WootingDevice

logger = logging.getLogger(__name__)


DEFAULT_MODEL_NAME = "Unknown Wooting Device"
DEFAULT_PROFILE_NAMES: tuple[str, ...] = ("Default", "Gaming", "Typing", "Custom")


@dataclass(frozen=True)
class DeviceConfigLoad:
    """Tagged result of reading the device file: loaded, or unavailable with a reason."""

    path: Path
    loaded: bool
    data: dict[str, Any] = field(default_factory=dict)
    reason: str = ""

    @classmethod
    def ok(cls, path: Path, data: dict[str, Any]) -> "DeviceConfigLoad":
        return cls(path=path, loaded=True, data=data)

    @classmethod
    def unavailable(cls, path: Path, reason: str) -> "DeviceConfigLoad":
        return cls(path=path, loaded=False, reason=reason)


def load_device_config(path: Path) -> DeviceConfigLoad:
    if not path.exists():
        return DeviceConfigLoad.unavailable(path, f"{path} does not exist")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return DeviceConfigLoad.unavailable(path, f"could not read {path}: {exc}")

    if not isinstance(raw, dict):
        return DeviceConfigLoad.unavailable(path, f"{path} is not a JSON object")

    return DeviceConfigLoad.ok(path, raw)


def _profile_names(value: Any) -> list[str]:
    if not isinstance(value, list) or not value:
        return list(DEFAULT_PROFILE_NAMES)
    return [str(name) for name in value]


def devices_from_config(data: dict[str, Any]) -> list[WootingDevice]:
    entries = data.get("devices")
    if not isinstance(entries, dict):
        return []

    out: list[WootingDevice] = []
    for serial, entry in entries.items():
        entry = entry if isinstance(entry, dict) else {}
        model: Optional[str] = entry.get("model_name")
        out.append(
            WootingDevice(
                serial=str(serial),
                model_name=str(model) if model else DEFAULT_MODEL_NAME,
                connected=True,
                profiles=_profile_names(entry.get("profiles")),
                current_profile=0,
                rgb_enabled=True,
            )
        )
    return out


def mock_devices() -> list[WootingDevice]:
    return [
        WootingDevice(
            serial="WK001",
            model_name="Wooting One",
            connected=True,
            profiles=["Default", "Gaming", "Typing", "Custom"],
            current_profile=0,
            rgb_enabled=True,
        ),
        WootingDevice(
            serial="WK002",
            model_name="Wooting Two HE",
            connected=True,
            profiles=["Work", "Gaming", "Streaming", "RGB Show"],
            current_profile=1,
            rgb_enabled=True,
        ),
    ]
