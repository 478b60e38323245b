from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from booster_components.card_utils.card import Card


class DefinitionRequest(BaseModel):
    definition: str


class GenerateTemplateRequest(BaseModel):
    definition: str
    set_code: str
    pools: Dict[str, List[Card]] = Field(default_factory=dict)
    seed: Optional[int] = None


class OpenPackRequest(BaseModel):
    set_code: str
    pack_type: str = "play"
    release_date: Optional[str] = None
    cards: List[Card] = Field(default_factory=list)
    definition: Optional[str] = None  # If set, opens a custom template pack
    extra_pools: Dict[str, List[Card]] = Field(default_factory=dict)
    seed: Optional[int] = None
