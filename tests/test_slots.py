"""Tests for weighted slot resolution."""

import random
from collections import Counter

import pytest

from booster_components.card_utils.card import Rarity
from booster_components.card_utils.dsl import Slot, SlotEntry, compile_definition
from booster_components.card_utils.slots import get_rng, resolve_slot
from conftest import ScriptedRandom

SLOT = Slot(entries=(
    SlotEntry(Rarity.COMMON, 70),
    SlotEntry(Rarity.UNCOMMON, 20),
    SlotEntry(Rarity.RARE, 10, "neo"),
))


@pytest.mark.parametrize("roll, expected", [
    (0.0, Rarity.COMMON),
    (0.6999, Rarity.COMMON),
    (0.7001, Rarity.UNCOMMON),
    (0.8999, Rarity.UNCOMMON),
    (0.9001, Rarity.RARE),
    (0.9999, Rarity.RARE),
])
def test_half_open_intervals(roll, expected) -> None:
    assert resolve_slot(SLOT, ScriptedRandom([roll])).rarity == expected


def test_set_override_is_returned() -> None:
    entry = resolve_slot(SLOT, ScriptedRandom([0.95]))
    assert entry.set_code == "neo"


def test_single_entry_always_selected() -> None:
    slot = Slot(entries=(SlotEntry(Rarity.MYTHIC, 100),))
    for roll in (0.0, 0.5, 0.999999):
        assert resolve_slot(slot, ScriptedRandom([roll])).rarity == Rarity.MYTHIC


def test_first_entry_when_nothing_matches() -> None:
    slot = Slot(entries=(SlotEntry(Rarity.COMMON, 10), SlotEntry(Rarity.RARE, 10)))
    assert resolve_slot(slot, ScriptedRandom([0.5])).rarity == Rarity.COMMON


def test_distribution_matches_weights() -> None:
    slots, _ = compile_definition("{c,90,u,10}")
    rng = random.Random(1234)
    draws = 100_000
    counts = Counter(resolve_slot(slots[0], rng).rarity for _ in range(draws))
    assert counts[Rarity.COMMON] / draws == pytest.approx(0.90, abs=0.02)
    assert counts[Rarity.UNCOMMON] / draws == pytest.approx(0.10, abs=0.02)


def test_get_rng() -> None:
    rng = random.Random(5)
    assert get_rng(rng) is rng
    assert isinstance(get_rng(None), random.Random)
