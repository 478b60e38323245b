# pool partitioning.
# Pools are small (a few hundred printings per set) so partitions are simply
# rebuilt for every pack instead of being cached.
from typing import Collection, Dict, Iterable, List, Optional

from booster_components.card_utils.card import Card, Rarity
from booster_components.card_utils.classifier import (
    is_alt_art,
    is_basic_land,
    is_extended_or_borderless,
    is_showcase_or_borderless,
)

RARITIES = (Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE, Rarity.MYTHIC)
RARE_OR_MYTHIC = (Rarity.RARE, Rarity.MYTHIC)


def enabled_cards(cards: Iterable[Card]) -> List[Card]:
    return [c for c in cards if not c.disabled]


def cards_of_rarity(cards: Iterable[Card], rarity: str, exclude: Optional[Collection[str]] = None) -> List[Card]:
    """Enabled cards of one rarity, leaving out ids found in ``exclude``."""
    exclude = exclude or ()
    return [c for c in cards if c.rarity == rarity and not c.disabled and c.id not in exclude]


def _by_rarity(cards: List[Card], *rarities) -> List[Card]:
    return [c for c in cards if c.rarity in rarities]


def partition_pool(cards: Iterable[Card]) -> Dict[str, List[Card]]:
    """Split a set's pool into the named partitions used by built-in boosters.

    Disabled cards and basic lands are dropped first. Keys:

    * ``all``, ``normal``, ``alt`` - every card, standard frames, alternate art
    * ``common`` ... ``mythic`` - every card of that rarity
    * ``normal_<rarity>`` / ``alt_<rarity>`` - rarity within one art treatment
    * ``normal_rare_mythic`` / ``alt_rare_mythic``
    * ``extended_rare_mythic`` - extended-art or borderless rares and mythics
    * ``showcase_rare_mythic`` - showcase or borderless rares and mythics
    """
    usable = [c for c in enabled_cards(cards) if not is_basic_land(c)]
    normal = [c for c in usable if not is_alt_art(c)]
    alt = [c for c in usable if is_alt_art(c)]

    partitions = {"all": usable, "normal": normal, "alt": alt}
    for rarity in RARITIES:
        partitions[rarity.value] = _by_rarity(usable, rarity)
        partitions[f"normal_{rarity.value}"] = _by_rarity(normal, rarity)
        partitions[f"alt_{rarity.value}"] = _by_rarity(alt, rarity)

    partitions["normal_rare_mythic"] = _by_rarity(normal, *RARE_OR_MYTHIC)
    partitions["alt_rare_mythic"] = _by_rarity(alt, *RARE_OR_MYTHIC)
    rare_mythic = _by_rarity(usable, *RARE_OR_MYTHIC)
    partitions["extended_rare_mythic"] = [c for c in rare_mythic if is_extended_or_borderless(c)]
    partitions["showcase_rare_mythic"] = [c for c in rare_mythic if is_showcase_or_borderless(c)]
    return partitions


def first_non_empty(partitions: Dict[str, List[Card]], names: Iterable[str]) -> List[Card]:
    """The first named partition that has cards, or an empty list."""
    for name in names:
        pool = partitions.get(name)
        if pool:
            return pool
    return []
