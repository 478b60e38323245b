"""Shared fixtures for the pack engine tests."""

import itertools

import pytest

from booster_components.card_utils.card import Card

_ids = itertools.count(1)


def make_card(rarity="common", **fields) -> Card:
    """Build a card with a unique id; extra fields override the defaults."""
    card_id = fields.pop("id", None) or f"card-{next(_ids)}"
    fields.setdefault("name", card_id)
    fields.setdefault("set_code", "tst")
    fields.setdefault("type_line", "Creature — Elf")
    return Card(id=card_id, rarity=rarity, **fields)


def make_cards(count, rarity="common", **fields):
    return [make_card(rarity, **fields) for _ in range(count)]


class ScriptedRandom:
    """Stand-in RNG: ``random()`` replays ``rolls`` (then ``default``),
    ``choice`` always takes the first element."""

    def __init__(self, rolls=(), default=0.5):
        self.rolls = list(rolls)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.rolls.pop(0) if self.rolls else self.default

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def card_factory():
    return make_card


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def full_pool():
    """A set with plenty of every rarity, alt-art printings and basic lands."""
    pool = []
    pool += make_cards(30, "common")
    pool += make_cards(15, "uncommon")
    pool += make_cards(10, "rare")
    pool += make_cards(4, "mythic")
    pool += make_cards(4, "common", frame_effects=["showcase"])
    pool += make_cards(4, "uncommon", border_color="borderless")
    pool += make_cards(3, "rare", frame_effects=["extendedart"])
    pool += make_cards(2, "rare", frame_effects=["showcase"])
    pool += make_cards(2, "mythic", border_color="borderless")
    pool += make_cards(5, "common", type_line="Basic Land — Forest")
    pool += make_cards(2, "common", type_line="Basic Snow Land — Island")
    pool += make_cards(3, "rare", disabled=True)
    return pool


@pytest.fixture
def plain_pool():
    """Only standard frames, no mythics."""
    return make_cards(20, "common") + make_cards(6, "uncommon") + make_cards(3, "rare")
