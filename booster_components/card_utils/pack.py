# pack assembly.
# Turns a card pool into the cards of one opened pack, either from a compiled
# custom definition or from one of the built-in policies. A pack tracks the
# ids it has already handed out in a local `used` set so the same printing is
# not pulled twice unless a pool runs out.
from typing import List, Mapping, Optional, Sequence, Set

from booster_components.card_utils.card import Card, DrawnCard
from booster_components.card_utils.classifier import is_alt_art
from booster_components.card_utils.dsl import Slot
from booster_components.card_utils.policies import MYTHIC_CHANCE, POLICIES, SlotRequest, policy_key
from booster_components.card_utils.pool import cards_of_rarity, first_non_empty, partition_pool
from booster_components.card_utils.slots import get_rng, resolve_slot
from booster_logs.loggers import booster_logger


def _draw(card: Card, is_foil: bool) -> DrawnCard:
    return DrawnCard(card=card, is_foil=is_foil, is_alt_art=is_alt_art(card))


def pick_unique(pool: Sequence[Card], used: Set[str], rng) -> Optional[Card]:
    """Pick a card not in ``used``; repeat a used one once the pool is exhausted.

    Returns None only when ``pool`` is empty.
    """
    available = [c for c in pool if c.id not in used]
    if not available:
        return rng.choice(pool) if pool else None
    card = rng.choice(available)
    used.add(card.id)
    return card


def pick_rare_or_mythic(rares: Sequence[Card], mythics: Sequence[Card], mythic_chance: float,
                        used: Set[str], rng) -> Optional[Card]:
    """Pick a mythic with ``mythic_chance``, otherwise a rare.

    Unused cards of the other rarity stand in when one side is used up; once
    both are, any rare or mythic may repeat.
    """
    avail_rares = [c for c in rares if c.id not in used]
    avail_mythics = [c for c in mythics if c.id not in used]

    if avail_mythics and rng.random() < mythic_chance:
        choice_pool = avail_mythics
    elif avail_rares:
        choice_pool = avail_rares
    elif avail_mythics:
        choice_pool = avail_mythics
    else:
        return pick_unique(list(rares) + list(mythics), used, rng)

    card = rng.choice(choice_pool)
    used.add(card.id)
    return card


def assemble_custom_pack(pools_by_set_code: Mapping[str, Sequence[Card]], slots: Sequence[Slot],
                         default_set_code: str, rng=None) -> List[DrawnCard]:
    """Open a pack described by compiled definition slots.

    Each slot pulls from its entry's set override, or ``default_set_code``.
    Custom packs have no foils. A slot whose rarity has no enabled card in
    the chosen set is left out.
    """
    rng = get_rng(rng)
    result = []
    used = set()

    for index, slot in enumerate(slots):
        entry = resolve_slot(slot, rng)
        set_code = entry.set_code or default_set_code
        set_cards = pools_by_set_code.get(set_code) or []

        pool = cards_of_rarity(set_cards, entry.rarity, exclude=used)
        if not pool:
            pool = cards_of_rarity(set_cards, entry.rarity)
        if not pool:
            booster_logger.debug("custom_slot_skipped", slot=index + 1, set_code=set_code,
                                 rarity=str(entry.rarity))
            continue

        card = rng.choice(pool)
        used.add(card.id)
        result.append(_draw(card, False))

    booster_logger.debug("custom_pack_assembled", set_code=default_set_code,
                         slots=len(slots), cards=len(result))
    return result


def _upgraded(request: SlotRequest, rng) -> SlotRequest:
    if request.upgrade is not None and rng.random() < request.upgrade_chance:
        return request.upgrade
    return request


def _pull(request: SlotRequest, partitions, mythic_chance, used, rng) -> Optional[Card]:
    if request.rare_or_mythic:
        return pick_rare_or_mythic(
            first_non_empty(partitions, request.pools),
            first_non_empty(partitions, request.mythics),
            mythic_chance, used, rng,
        )
    return pick_unique(first_non_empty(partitions, request.pools), used, rng)


def assemble_builtin_pack(pool: Sequence[Card], policy_name: str, release_date: Optional[str] = None,
                          rng=None) -> List[DrawnCard]:
    """Open a built-in booster ("play", "collector", anything else is legacy).

    Basic lands and disabled cards never appear. An empty pool gives an empty
    pack; slots that cannot be filled are skipped.
    """
    rng = get_rng(rng)
    key = policy_key(policy_name, release_date)
    partitions = partition_pool(pool)
    mythic_chance = MYTHIC_CHANCE if partitions["mythic"] else 0.0

    result = []
    used = set()
    for request in POLICIES[key]:
        for _ in range(request.count):
            pulled = _upgraded(request, rng)
            card = _pull(pulled, partitions, mythic_chance, used, rng)
            if card is None:
                booster_logger.debug("builtin_slot_skipped", policy=key, pools=list(pulled.pools))
                continue
            result.append(_draw(card, pulled.foil))

    booster_logger.debug("builtin_pack_assembled", policy=key, requested=policy_name,
                         cards=len(result))
    return result
