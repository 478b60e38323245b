import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Set

from pydantic import ValidationError

from booster_components.card_utils.card import Card
from booster_components.card_utils.dsl import Slot


def card_from_scryfall(data: Dict[str, Any], disabled: bool = False) -> Card:
    """Build a Card from a Scryfall card object.

    Only the fields the pack engine needs are kept. Missing optional fields
    fall back to the Card defaults.
    """
    return Card(
        id=data["id"],
        name=data.get("name", ""),
        set_code=data.get("set", ""),
        collector_number=data.get("collector_number"),
        rarity=data.get("rarity", ""),
        disabled=bool(data.get("disabled", disabled)),
        type_line=data.get("type_line"),
        border_color=data.get("border_color"),
        full_art=bool(data.get("full_art", False)),
        frame_effects=data.get("frame_effects") or [],
    )


def pool_from_path(path: str) -> List[Card]:
    """
    Load a card pool from a local JSON export.

    The file holds either a plain list of Scryfall card objects or a Scryfall
    list object (``{"object": "list", "data": [...]}``).

    :param path: Path to the JSON file.
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("data", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of cards")

    cards = []
    for index, raw in enumerate(data):
        try:
            cards.append(card_from_scryfall(raw))
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise ValueError(f"{path}: card #{index} is malformed ({e})") from e
    return cards


def pools_by_set(cards: Iterable[Card]) -> Dict[str, List[Card]]:
    pools: Dict[str, List[Card]] = {}
    for card in cards:
        pools.setdefault(card.set_code, []).append(card)
    return pools


def referenced_set_codes(slots: Sequence[Slot], default_set_code: str) -> Set[str]:
    """Set codes a custom pack may pull from: the pack's own set plus every override."""
    codes = {default_set_code}
    for slot in slots:
        for entry in slot.entries:
            if entry.set_code:
                codes.add(entry.set_code)
    return codes


def scan_pool_dir(pool_dir: Path) -> Dict[str, Any]:
    """
    Load every ``*.json`` pool export in ``pool_dir`` and group the cards by set.
    Returns dict with the pools plus the files loaded and the errors met.
    A bad file is reported in ``errors`` and does not stop the scan.
    """
    results: Dict[str, Any] = {
        "pools": {},
        "loaded": [],
        "errors": []
    }

    for json_file in sorted(Path(pool_dir).glob("*.json")):
        try:
            cards = pool_from_path(str(json_file))
        except (OSError, ValueError) as e:
            results["errors"].append(f"{json_file.name}: {e}")
            continue

        for set_code, set_cards in pools_by_set(cards).items():
            results["pools"].setdefault(set_code, []).extend(set_cards)
        results["loaded"].append(json_file.name)

    return results
