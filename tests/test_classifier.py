"""Tests for the card classifier."""

import pytest

from booster_components.card_utils.classifier import (
    alt_art_label,
    is_alt_art,
    is_basic_land,
    is_extended_or_borderless,
    is_showcase_or_borderless,
)
from conftest import make_card


class TestBasicLand:

    @pytest.mark.parametrize("type_line", [
        "Basic Land — Forest",
        "basic land — island",
        "Basic Snow Land — Swamp",
        "Legendary Basic Land",
    ])
    def test_basic_lands(self, type_line) -> None:
        assert is_basic_land(make_card(type_line=type_line))

    @pytest.mark.parametrize("type_line", [
        "Land — Forest Island",
        "Creature — Human Wizard",
        "Snow Land",
        "",
    ])
    def test_not_basic(self, type_line) -> None:
        assert not is_basic_land(make_card(type_line=type_line))

    def test_missing_type_line(self) -> None:
        assert not is_basic_land(make_card(type_line=None))


class TestAltArt:

    def test_standard_frame(self) -> None:
        card = make_card(border_color="black")
        assert not is_alt_art(card)
        assert alt_art_label(card) is None

    @pytest.mark.parametrize("fields, label", [
        ({"frame_effects": ["showcase"]}, "Showcase"),
        ({"frame_effects": ["legendary", "extendedart"]}, "Extended Art"),
        ({"border_color": "borderless"}, "Borderless"),
        ({"full_art": True}, "Full Art"),
    ])
    def test_each_treatment(self, fields, label) -> None:
        card = make_card(**fields)
        assert is_alt_art(card)
        assert alt_art_label(card) == label

    def test_label_priority(self) -> None:
        card = make_card(border_color="borderless", full_art=True,
                         frame_effects=["extendedart", "showcase"])
        assert alt_art_label(card) == "Showcase"

        card = make_card(border_color="borderless", full_art=True)
        assert alt_art_label(card) == "Borderless"

    def test_other_frame_effects_are_not_alt_art(self) -> None:
        assert not is_alt_art(make_card(frame_effects=["legendary", "etched"]))

    def test_special_slot_predicates(self) -> None:
        extended = make_card(frame_effects=["extendedart"])
        showcase = make_card(frame_effects=["showcase"])
        borderless = make_card(border_color="borderless")
        full_art = make_card(full_art=True)

        assert is_extended_or_borderless(extended)
        assert not is_extended_or_borderless(showcase)
        assert is_showcase_or_borderless(showcase)
        assert not is_showcase_or_borderless(extended)
        assert is_extended_or_borderless(borderless) and is_showcase_or_borderless(borderless)
        assert not is_extended_or_borderless(full_art)
        assert not is_showcase_or_borderless(full_art)
