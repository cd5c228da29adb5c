from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional


EffectCategory = Literal["static", "dynamic", "reactive", "off"]


@dataclass(frozen=True)
class WootingDevice:
    """A keyboard as reported by one device query.

    Values are rebuilt on every query; re-query after switching to observe the
    new state.
    """

    serial: str
    model_name: str
    connected: bool
    profiles: list[str] = field(default_factory=list)
    current_profile: int = 0
    rgb_enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "serial": self.serial,
            "model_name": self.model_name,
            "connected": self.connected,
            "profiles": list(self.profiles),
            "current_profile": self.current_profile,
            "rgb_enabled": self.rgb_enabled,
        }


@dataclass(frozen=True)
class WootingProfile:
    id: str
    name: str
    active: bool
    device_serial: str
    profile_index: int
    description: str = ""


@dataclass(frozen=True)
class RGBEffect:
    id: str
    name: str
    description: str
    category: EffectCategory


@dataclass(frozen=True)
class ProfileNumberValidation:
    """Outcome of parsing a user-supplied 1-based profile number.

    `number` is the zero-based profile index when `valid` is True, else 0.
    """

    valid: bool
    number: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class DeviceListing:
    """Devices plus where they came from (`config` or `mock`)."""

    devices: list[WootingDevice]
    source: Literal["config", "mock"]
    reason: str = ""

    @property
    def is_mock(self) -> bool:
        return self.source == "mock"
