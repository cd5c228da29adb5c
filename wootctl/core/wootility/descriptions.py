from __future__ import annotations

from typing import Final


_PROFILE_DESCRIPTIONS: Final[dict[str, str]] = {
    "default": "Standard keyboard configuration",
    "gaming": "Optimized for gaming with low latency",
    "typing": "Comfortable for extended typing sessions",
    "custom": "User-customized profile",
    "work": "Professional work environment settings",
    "streaming": "Optimized for content creation",
    "rgb show": "Spectacular RGB lighting effects",
}


def profile_description(name: str, index: int) -> str:
    """Describe a profile by its (case-insensitive) name.

    Unknown names get a positional fallback using the 1-based slot number.
    """

    return _PROFILE_DESCRIPTIONS.get((name or "").lower(), f"Profile {index + 1} configuration")
