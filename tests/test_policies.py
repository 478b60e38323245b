"""Tests for built-in policy selection."""

import pytest

from booster_components.card_utils.policies import (
    COLLECTOR_BOOSTER,
    LEGACY_BOOSTER,
    PLAY_BOOSTER,
    policy_key,
    release_year,
)


@pytest.mark.parametrize("date, year", [
    ("2024-02-09", 2024),
    ("1993-08-05", 1993),
    ("2024", 2024),
    (None, 0),
    ("", 0),
    ("TBA", 0),
])
def test_release_year(date, year) -> None:
    assert release_year(date) == year


@pytest.mark.parametrize("name, date, key", [
    ("collector", None, "collector"),
    ("collector", "2015-01-01", "collector"),
    ("play", "2024-02-09", "play"),
    ("play", "2031-01-01", "play"),
    ("play", "2023-12-31", "legacy"),
    ("play", None, "legacy"),
    ("draft", "2024-02-09", "legacy"),
    ("Play", "2024-02-09", "legacy"),
])
def test_policy_key(name, date, key) -> None:
    assert policy_key(name, date) == key


def test_slot_counts() -> None:
    assert sum(r.count for r in COLLECTOR_BOOSTER) == 15
    assert sum(r.count for r in PLAY_BOOSTER) == 14
    assert sum(r.count for r in LEGACY_BOOSTER) == 15
    assert [r.foil for r in PLAY_BOOSTER] == [False, False, False, False, True, False]
