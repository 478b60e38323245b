"""Predicates over a single card record.

All functions are total: missing type lines or frame data simply classify as
"not a basic land" / "not alternate art".
"""
from typing import Optional

from booster_components.card_utils.card import Card

# label shown for alternate art, checked in this order
_ALT_ART_LABELS = (
    ("showcase", "Showcase"),
    ("extendedart", "Extended Art"),
    ("borderless", "Borderless"),
    ("fullart", "Full Art"),
)


def is_basic_land(card: Card) -> bool:
    type_line = (card.type_line or "").lower()
    return "basic land" in type_line or type_line.startswith("basic ")


def _is_borderless(card: Card) -> bool:
    return card.border_color == "borderless"


def _alt_art_reasons(card: Card):
    effects = card.frame_effects or []
    return {
        "showcase": "showcase" in effects,
        "extendedart": "extendedart" in effects,
        "borderless": _is_borderless(card),
        "fullart": bool(card.full_art),
    }


def is_alt_art(card: Card) -> bool:
    """True for showcase, extended-art, borderless or full-art printings."""
    return any(_alt_art_reasons(card).values())


def alt_art_label(card: Card) -> Optional[str]:
    reasons = _alt_art_reasons(card)
    for key, label in _ALT_ART_LABELS:
        if reasons[key]:
            return label
    return None


def is_extended_or_borderless(card: Card) -> bool:
    return "extendedart" in (card.frame_effects or []) or _is_borderless(card)


def is_showcase_or_borderless(card: Card) -> bool:
    return "showcase" in (card.frame_effects or []) or _is_borderless(card)
