"""Default preference values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Explicit Wootility executable; None means probe the usual install paths.
    "wootility_path": None,
    # Print success messages after switching profiles / applying effects.
    "enable_notifications": True,
    # Profile number (1-4) used by `wootctl switch` when none is given.
    "default_profile": None,
}
