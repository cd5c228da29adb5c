"""Data-access client for Wootility-managed keyboards.

This is the single point of contact with the external application. It never
lets an internal fault escape: reads degrade to mock data and actions degrade
to False. The only raising call is `require_available()`, which commands use
to bail out early.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.paths import device_config_path
from ..errors import WootilityUnavailableError
from ..logging_utils import log_throttled
from .catalog import RGB_EFFECTS
from .descriptions import profile_description
from .device_config import devices_from_config, load_device_config, mock_devices
from .models import DeviceListing, ProfileNumberValidation, RGBEffect, WootingDevice, WootingProfile
from .paths import is_mock_path, resolve_wootility_path
from .port import StubWootilityPort, WootilityPort

logger = logging.getLogger(__name__)


MIN_PROFILE_NUMBER = 1
MAX_PROFILE_NUMBER = 4

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def validate_profile_number(text: str) -> ProfileNumberValidation:
    """Validate a 1-based profile number typed by the user.

    Only the leading integer is considered, so "2nd" is read as 2.
    """

    m = _LEADING_INT_RE.match(text or "")
    if not m:
        return ProfileNumberValidation(valid=False, number=0, error="Profile number must be a number")

    num = int(m.group(1))
    if num < MIN_PROFILE_NUMBER or num > MAX_PROFILE_NUMBER:
        return ProfileNumberValidation(
            valid=False,
            number=0,
            error=f"Profile number must be between {MIN_PROFILE_NUMBER} and {MAX_PROFILE_NUMBER}",
        )

    return ProfileNumberValidation(valid=True, number=num - 1)


@dataclass(frozen=True)
class ClientConfig:
    """Construction-time settings for `WootilityClient`.

    `wootility_path`: explicit executable; None probes the usual install paths.
    `device_config_path`: device file; None uses `device_config_path()`.
    `port`: action channel; None uses a stub bound to the resolved path.
    """

    wootility_path: Optional[str] = None
    device_config_path: Optional[Path] = None
    port: Optional[WootilityPort] = None


class WootilityClient:
    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()
        self.wootility_path = resolve_wootility_path(self.config.wootility_path)
        self.device_config_path = self.config.device_config_path or device_config_path()
        self.port: WootilityPort = self.config.port or StubWootilityPort(self.wootility_path)

    @property
    def mock_mode(self) -> bool:
        return is_mock_path(self.wootility_path)

    def is_available(self) -> bool:
        try:
            return os.path.exists(self.wootility_path) or self.mock_mode
        except Exception:
            return True

    def require_available(self) -> None:
        if not self.is_available():
            raise WootilityUnavailableError()

    def list_devices(self) -> DeviceListing:
        """Return devices plus their source, falling back to mock data."""

        try:
            result = load_device_config(self.device_config_path)
            if result.loaded:
                return DeviceListing(devices=devices_from_config(result.data), source="config")
            reason = result.reason
        except Exception as exc:
            logger.error("Error getting devices: %s", exc)
            reason = f"unexpected error: {exc}"

        log_throttled(
            logger,
            "wootility_client.mock_devices",
            interval_s=60,
            level=logging.DEBUG,
            msg="Using sample devices (%s)",
            args=(reason,),
        )
        return DeviceListing(devices=mock_devices(), source="mock", reason=reason)

    def get_devices(self) -> list[WootingDevice]:
        return self.list_devices().devices

    def find_device(self, serial: str) -> Optional[WootingDevice]:
        for device in self.get_devices():
            if device.serial == serial:
                return device
        return None

    def get_current_profile(self, serial: str, *, device: Optional[WootingDevice] = None) -> int:
        """Return the active profile index; 0 when the device is unknown.

        There is no hardware telemetry, so this is whatever the device query
        reported.
        """

        dev = device if device is not None else self.find_device(serial)
        if dev is None:
            return 0
        return dev.current_profile

    def get_profiles(self, serial: str) -> list[WootingProfile]:
        device = self.find_device(serial)
        if device is None:
            return []

        current = self.get_current_profile(serial, device=device)
        return [
            WootingProfile(
                id=f"{serial}-{index}",
                name=name,
                active=index == current,
                device_serial=serial,
                profile_index=index,
                description=profile_description(name, index),
            )
            for index, name in enumerate(device.profiles)
        ]

    def switch_profile(self, serial: str, profile_index: int) -> bool:
        logger.info("Switching device %s to profile %s", serial, profile_index)
        if self.mock_mode:
            return True

        try:
            return bool(self.port.switch_profile(serial, profile_index))
        except Exception as exc:
            logger.error("Error switching profile on %s: %s", serial, exc)
            return False

    def get_rgb_effects(self) -> list[RGBEffect]:
        return list(RGB_EFFECTS)

    def apply_rgb_effect(self, serial: str, effect_id: str) -> bool:
        logger.info("Applying RGB effect %s to device %s", effect_id, serial)
        if self.mock_mode:
            return True

        try:
            return bool(self.port.apply_rgb_effect(serial, effect_id))
        except Exception as exc:
            logger.error("Error applying RGB effect on %s: %s", serial, exc)
            return False

    validate_profile_number = staticmethod(validate_profile_number)
