# booster definition language.
# A definition describes a custom booster one slot at a time:
#
#     {r,75,m,25; u,100; c,100; neo:c,50,c,50}
#
# Slots are separated by `;`. A slot is a list of `rarity,probability` pairs
# whose probabilities add up to 100. A rarity may be prefixed with a set code
# (`neo:r`) to pull that slot from another set's pool.
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from booster_components.card_utils.card import Rarity

_PROBABILITY = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class SlotEntry:
    rarity: Rarity
    probability: int
    set_code: Optional[str] = None


@dataclass(frozen=True)
class Slot:
    entries: Tuple[SlotEntry, ...]

    @property
    def total(self) -> int:
        return sum(entry.probability for entry in self.entries)


@dataclass(frozen=True)
class DefinitionReport:
    valid: bool
    errors: List[str]
    slot_count: int


class _SlotError(Exception):
    """Raised inside the slot parser to abandon the current slot only."""


def _strip_wrapper(definition: str) -> str:
    cleaned = definition.strip()
    if cleaned.startswith("{"):
        cleaned = cleaned[1:]
    if cleaned.endswith("}"):
        cleaned = cleaned[:-1]
    return cleaned.strip()


def _parse_probability(token: str, slot_no: int) -> int:
    # at most 3 digits, so int() never sees an oversized string
    if not _PROBABILITY.fullmatch(token) or len(token) > 3 or not 1 <= int(token) <= 100:
        raise _SlotError(f'Slot {slot_no}: invalid probability "{token}". Must be 1-100.')
    return int(token)


def _parse_slot(slot_str: str, slot_no: int) -> List[SlotEntry]:
    tokens = [t.strip().lower() for t in slot_str.split(",")]
    entries = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        set_code = None
        if ":" in token:
            set_code, token = token.split(":", 1)
            set_code = set_code.strip() or None
            token = token.strip()

        rarity = Rarity.from_code(token)
        if rarity is None:
            raise _SlotError(
                f'Slot {slot_no}: unknown rarity "{token}". Use c, u, r, or m. '
                f'(Optional set prefix: setcode:r)'
            )
        i += 1
        if i >= len(tokens):
            raise _SlotError(f'Slot {slot_no}: missing probability after rarity "{token}".')

        probability = _parse_probability(tokens[i], slot_no)
        i += 1
        entries.append(SlotEntry(rarity=rarity, probability=probability, set_code=set_code))
    return entries


def compile_definition(definition: str) -> Tuple[List[Slot], List[str]]:
    """Compile a booster definition into slots.

    Never raises. Returns ``(slots, errors)``; a slot with any error is left
    out of ``slots`` while the remaining slots are still compiled. Slot numbers
    in messages count every `;`-separated piece, blank ones included.
    """
    slots: List[Slot] = []
    errors: List[str] = []

    cleaned = _strip_wrapper(definition)
    if not cleaned:
        errors.append("Empty definition")
        return slots, errors

    for index, raw in enumerate(cleaned.split(";")):
        slot_no = index + 1
        slot_str = raw.strip()
        if not slot_str:
            continue
        try:
            entries = _parse_slot(slot_str, slot_no)
        except _SlotError as e:
            errors.append(str(e))
            continue

        if not entries:
            continue
        slot = Slot(entries=tuple(entries))
        if slot.total != 100:
            errors.append(f"Slot {slot_no}: probabilities sum to {slot.total}%, must be 100%.")
            continue
        slots.append(slot)

    if not slots and not errors:
        errors.append("No valid slots found in definition.")

    return slots, errors


def validate_definition(definition: str) -> DefinitionReport:
    slots, errors = compile_definition(definition)
    return DefinitionReport(valid=not errors, errors=errors, slot_count=len(slots))
