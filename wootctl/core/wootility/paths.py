"""Locate the Wootility executable.

Resolution happens once per client and is not re-evaluated afterwards.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)


MOCK_WOOTILITY_PATH = "wootility-mock"


def _windows_candidates(home: Path) -> list[str]:
    return [
        "C:\\Program Files\\WootingUtility\\WootingUtility.exe",
        "C:\\Program Files (x86)\\WootingUtility\\WootingUtility.exe",
        str(home / "AppData" / "Local" / "WootingUtility" / "WootingUtility.exe"),
        "C:\\Program Files\\Wooting\\Wootility\\Wootility.exe",
        "C:\\Program Files (x86)\\Wooting\\Wootility\\Wootility.exe",
    ]


def _macos_candidates(home: Path) -> list[str]:
    return [
        "/Applications/Wootility.app/Contents/MacOS/Wootility",
        str(home / "Applications" / "Wootility.app" / "Contents" / "MacOS" / "Wootility"),
    ]


def _linux_candidates(home: Path) -> list[str]:
    return [
        "/usr/bin/wootility",
        "/opt/Wootility/wootility",
        str(home / ".local" / "bin" / "wootility"),
        str(home / "Applications" / "wootility.AppImage"),
    ]


def candidate_paths(platform: Optional[str] = None, home: Optional[Path] = None) -> list[str]:
    """Return install locations to probe, in priority order, for *platform*."""

    plat = platform if platform is not None else sys.platform
    h = home if home is not None else Path.home()

    if plat.startswith("win"):
        return _windows_candidates(h)
    if plat == "darwin":
        return _macos_candidates(h)
    return _linux_candidates(h)


def resolve_wootility_path(
    explicit: Optional[str] = None,
    *,
    candidates: Optional[Iterable[str]] = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> str:
    """Pick the Wootility executable path.

    Order of precedence:
    - explicit path (preferences / client config)
    - env `WOOTCTL_WOOTILITY_PATH`
    - first existing candidate install path
    - the mock sentinel
    """

    override = (explicit or "").strip() or (os.environ.get("WOOTCTL_WOOTILITY_PATH") or "").strip()
    if override:
        logger.debug("Using configured Wootility path: %s", override)
        return override

    for path in (list(candidates) if candidates is not None else candidate_paths()):
        try:
            if exists(path):
                logger.debug("Found Wootility at %s", path)
                return path
        except OSError:
            continue

    logger.debug("Wootility not found; using mock mode")
    return MOCK_WOOTILITY_PATH


def is_mock_path(path: str) -> bool:
    return path == MOCK_WOOTILITY_PATH
