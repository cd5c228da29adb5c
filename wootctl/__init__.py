"""wootctl: Wooting keyboard profile and RGB control via Wootility."""

__version__ = "0.3.0"
