from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class WootilityPort(Protocol):
    """Out-of-process channel used to change hardware state.

    Implementations may raise; the client converts failures to False.
    """

    def switch_profile(self, serial: str, profile_index: int) -> bool: ...

    def apply_rgb_effect(self, serial: str, effect_id: str) -> bool: ...


class StubWootilityPort:
    """Port that only logs the request.

    Wootility exposes no scripting interface to drive, so every request
    reports success.
    """

    def __init__(self, wootility_path: str) -> None:
        self.wootility_path = wootility_path

    def switch_profile(self, serial: str, profile_index: int) -> bool:
        logger.info("Stub: switching %s to profile %s via %s", serial, profile_index, self.wootility_path)
        return True

    def apply_rgb_effect(self, serial: str, effect_id: str) -> bool:
        logger.info("Stub: applying RGB effect %s to %s via %s", effect_id, serial, self.wootility_path)
        return True
