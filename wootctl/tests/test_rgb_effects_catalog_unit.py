from __future__ import annotations

from wootctl.core.wootility.catalog import RGB_EFFECTS, effects_by_category, find_effect
from wootctl.core.wootility.client import WootilityClient


EXPECTED_IDS = {"rainbow-wave", "breathing", "reactive", "static-red", "static-blue", "static-white", "off"}


def test_client_returns_fixed_seven_effects() -> None:
    effects = WootilityClient().get_rgb_effects()
    assert len(effects) == 7
    assert {e.id for e in effects} == EXPECTED_IDS


def test_returned_list_is_a_copy() -> None:
    client = WootilityClient()
    effects = client.get_rgb_effects()
    effects.clear()
    assert len(client.get_rgb_effects()) == 7


def test_categories_are_known() -> None:
    assert {e.category for e in RGB_EFFECTS} == {"static", "dynamic", "reactive", "off"}


def test_find_effect_is_case_insensitive() -> None:
    effect = find_effect(" Static-Blue ")
    assert effect is not None
    assert effect.name == "Static Blue"
    assert find_effect("disco") is None


def test_grouping_keeps_presentation_order() -> None:
    grouped = effects_by_category()
    assert list(grouped) == ["dynamic", "reactive", "static", "off"]
    assert [e.id for e in grouped["static"]] == ["static-red", "static-blue", "static-white"]
