import random
from typing import Optional

from booster_components.card_utils.dsl import Slot, SlotEntry


def get_rng(rng=None):
    """Return ``rng`` or a fresh ``random.Random``.

    Any object with ``random()`` and ``choice(seq)`` is accepted.
    """
    return rng if rng is not None else random.Random()


def resolve_slot(slot: Slot, rng: Optional[random.Random] = None) -> SlotEntry:
    """Choose one entry of a slot according to its probabilities.

    Walks the cumulative distribution with a roll in [0, 100); an entry is
    chosen when the roll is strictly below its running total.
    """
    rng = get_rng(rng)
    roll = rng.random() * 100
    cumulative = 0
    for entry in slot.entries:
        cumulative += entry.probability
        if roll < cumulative:
            return entry
    # compiled slots always sum to 100, so this only guards hand-built slots
    return slot.entries[0]
