"""Actions fanned out over several devices.

Devices are processed sequentially; a failure on one never stops the rest.
Skipped devices are tallied apart from failures but still count towards
`total`, so a skip rules out the "all" outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional

from .client import WootilityClient
from .models import WootingDevice

logger = logging.getLogger(__name__)


Outcome = Literal["all", "partial", "none"]


@dataclass
class BulkActionResult:
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed) + len(self.skipped)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def outcome(self) -> Outcome:
        if self.total and self.success_count == self.total:
            return "all"
        if self.success_count > 0:
            return "partial"
        return "none"


def switch_all_devices(
    client: WootilityClient,
    profile_index: int,
    devices: Optional[Iterable[WootingDevice]] = None,
) -> BulkActionResult:
    """Switch every connected device to *profile_index*.

    Devices with too few profile slots are skipped.
    """

    result = BulkActionResult()
    targets = list(devices) if devices is not None else client.get_devices()

    for device in targets:
        if not device.connected:
            continue

        if profile_index >= len(device.profiles):
            logger.warning("Device %s doesn't have Profile %s", device.model_name, profile_index + 1)
            result.skipped.append(device.serial)
            continue

        try:
            ok = client.switch_profile(device.serial, profile_index)
        except Exception as exc:
            logger.error("Error switching profile for device %s: %s", device.serial, exc)
            ok = False

        (result.succeeded if ok else result.failed).append(device.serial)

    return result


def rgb_targets(devices: Iterable[WootingDevice], serial: Optional[str] = None) -> list[WootingDevice]:
    """Return the named device, or every RGB-capable device when *serial* is None."""

    if serial is not None:
        return [d for d in devices if d.serial == serial]
    return [d for d in devices if d.rgb_enabled]


def apply_effect_to_devices(
    client: WootilityClient,
    effect_id: str,
    devices: Optional[Iterable[WootingDevice]] = None,
    *,
    serial: Optional[str] = None,
) -> BulkActionResult:
    result = BulkActionResult()
    pool = list(devices) if devices is not None else client.get_devices()

    for device in rgb_targets(pool, serial):
        try:
            ok = client.apply_rgb_effect(device.serial, effect_id)
        except Exception as exc:
            logger.error("Error applying RGB effect to device %s: %s", device.serial, exc)
            ok = False

        (result.succeeded if ok else result.failed).append(device.serial)

    return result
