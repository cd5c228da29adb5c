"""Canonical RGB effect catalog.

Effects are not device-specific; applying one is a per-device action keyed by
`(serial, effect_id)`. Ordering matters for CLI presentation.
"""

from __future__ import annotations

from typing import Final

from .models import EffectCategory, RGBEffect


RGB_EFFECTS: Final[tuple[RGBEffect, ...]] = (
    RGBEffect(
        id="rainbow-wave",
        name="Rainbow Wave",
        description="Smooth rainbow wave across the keyboard",
        category="dynamic",
    ),
    RGBEffect(
        id="breathing",
        name="Breathing",
        description="Gentle breathing effect with smooth transitions",
        category="dynamic",
    ),
    RGBEffect(
        id="reactive",
        name="Reactive",
        description="Keys light up when pressed",
        category="reactive",
    ),
    RGBEffect(id="static-red", name="Static Red", description="Solid red lighting", category="static"),
    RGBEffect(id="static-blue", name="Static Blue", description="Solid blue lighting", category="static"),
    RGBEffect(id="static-white", name="Static White", description="Solid white lighting", category="static"),
    RGBEffect(id="off", name="Turn Off", description="Disable RGB lighting", category="off"),
)

RGB_EFFECT_IDS: Final[frozenset[str]] = frozenset(e.id for e in RGB_EFFECTS)

CATEGORY_ORDER: Final[tuple[EffectCategory, ...]] = ("dynamic", "reactive", "static", "off")

_CATEGORY_TITLES: Final[dict[str, str]] = {
    "dynamic": "Dynamic Effects",
    "reactive": "Reactive Effects",
    "static": "Static Colors",
    "off": "Lighting Off",
}


def find_effect(effect_id: str) -> RGBEffect | None:
    key = (effect_id or "").strip().lower()
    for effect in RGB_EFFECTS:
        if effect.id == key:
            return effect
    return None


def category_title(category: str) -> str:
    return _CATEGORY_TITLES.get(category, category.title())


def effects_by_category(effects: list[RGBEffect] | tuple[RGBEffect, ...] = RGB_EFFECTS) -> dict[str, list[RGBEffect]]:
    """Group effects by category in presentation order, omitting empty groups."""

    grouped: dict[str, list[RGBEffect]] = {c: [] for c in CATEGORY_ORDER}
    for effect in effects:
        grouped.setdefault(effect.category, []).append(effect)
    return {c: items for c, items in grouped.items() if items}
