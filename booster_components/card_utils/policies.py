# built-in booster policies.
# Each policy is a sequence of SlotRequests read top to bottom by
# pack.assemble_builtin_pack. Pool names refer to pool.partition_pool keys.
from dataclasses import dataclass
from typing import Optional, Tuple

MYTHIC_CHANCE = 0.125
PLAY_WILDCARD_ALT_CHANCE = 0.024
PLAY_FOIL_WILDCARD_ALT_CHANCE = 0.015
LEGACY_FOIL_CHANCE = 0.25
PLAY_BOOSTER_FIRST_YEAR = 2024


@dataclass(frozen=True)
class SlotRequest:
    """One or more identical pulls from a pack.

    pools:   fallback chain; the first non-empty partition is drawn from.
    mythics: when set, the pull is a rare/mythic pull and ``pools`` is the
             rare chain.
    upgrade: request used instead of this one with probability
             ``upgrade_chance``, rolled separately for every pull.
    """

    pools: Tuple[str, ...]
    mythics: Tuple[str, ...] = ()
    foil: bool = False
    count: int = 1
    upgrade: Optional["SlotRequest"] = None
    upgrade_chance: float = 0.0

    @property
    def rare_or_mythic(self) -> bool:
        return bool(self.mythics)


def _commons(count, foil=False):
    return SlotRequest(pools=("alt_common", "normal_common"), foil=foil, count=count)


def _uncommons(count, foil=False):
    return SlotRequest(pools=("alt_uncommon", "normal_uncommon"), foil=foil, count=count)


def _collector_rare(count, foil=False):
    return SlotRequest(pools=("alt_rare", "normal_rare"), mythics=("alt_mythic", "normal_mythic"),
                       foil=foil, count=count)


COLLECTOR_BOOSTER = (
    _commons(2, foil=True),
    _uncommons(2, foil=True),
    _uncommons(2),
    _collector_rare(2),
    _collector_rare(2, foil=True),
    SlotRequest(pools=("extended_rare_mythic", "alt_rare_mythic", "normal_rare_mythic")),
    SlotRequest(pools=("showcase_rare_mythic", "alt_rare_mythic", "normal_rare_mythic"), foil=True),
    _commons(3, foil=True),
)


def _wildcard(chance, foil=False):
    return SlotRequest(
        pools=("normal", "all"),
        foil=foil,
        upgrade=SlotRequest(pools=("alt", "normal", "all"), foil=foil),
        upgrade_chance=chance,
    )


PLAY_BOOSTER = (
    SlotRequest(pools=("normal_common", "common"), count=6),
    SlotRequest(pools=("normal_uncommon", "uncommon"), count=3),
    SlotRequest(pools=("normal_rare", "rare"), mythics=("normal_mythic", "mythic")),
    _wildcard(PLAY_WILDCARD_ALT_CHANCE),
    _wildcard(PLAY_FOIL_WILDCARD_ALT_CHANCE, foil=True),
    SlotRequest(pools=("normal_common", "common"), count=2),
)

LEGACY_BOOSTER = (
    SlotRequest(pools=("rare", "common"), mythics=("mythic",)),
    SlotRequest(pools=("uncommon", "common"), count=3),
    SlotRequest(pools=("common",), count=10),
    # the 11th common becomes a foil of any rarity one pack in four
    SlotRequest(
        pools=("common",),
        upgrade=SlotRequest(pools=("all",), foil=True),
        upgrade_chance=LEGACY_FOIL_CHANCE,
    ),
)

POLICIES = {
    "collector": COLLECTOR_BOOSTER,
    "play": PLAY_BOOSTER,
    "legacy": LEGACY_BOOSTER,
}


def release_year(release_date: Optional[str]) -> int:
    """Year from a ``YYYY-MM-DD`` date; 0 when missing or unparsable."""
    if not release_date:
        return 0
    try:
        return int(release_date[:4])
    except ValueError:
        return 0


def policy_key(policy_name: str, release_date: Optional[str] = None) -> str:
    """Which built-in policy opens a pack of this type.

    Play boosters only exist from 2024 on; older sets and unknown pack types
    get the legacy booster.
    """
    if policy_name == "collector":
        return "collector"
    if policy_name == "play" and release_year(release_date) >= PLAY_BOOSTER_FIRST_YEAR:
        return "play"
    return "legacy"
