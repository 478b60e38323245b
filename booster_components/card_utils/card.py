# card data classes.
# A Card is one printing from a set's card pool. Only the fields the pack
# engine reads are required: `rarity` drives slot matching, `disabled` removes
# the printing from generation, and the frame/border fields feed the alt-art
# classifier. `type_line` is used to keep basic lands out of boosters.
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rarity(str, Enum):
    """Card rarities recognised by the pack engine, lowest first."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    MYTHIC = "mythic"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["Rarity"]:
        """Map a one-letter definition code (c, u, r, m) to a rarity, or None."""
        return _CODES.get(code.strip().lower())


_CODES = {
    "c": Rarity.COMMON,
    "u": Rarity.UNCOMMON,
    "r": Rarity.RARE,
    "m": Rarity.MYTHIC,
}


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    set_code: str = ""
    collector_number: Optional[str] = None
    rarity: str
    disabled: bool = False
    type_line: Optional[str] = None
    border_color: Optional[str] = None
    full_art: bool = False
    frame_effects: List[str] = Field(default_factory=list)


class DrawnCard(BaseModel):
    """One card pulled from a pack. Built fresh on every open, never stored here."""

    card: Card
    is_foil: bool = False
    is_alt_art: bool = False
