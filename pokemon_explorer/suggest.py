"""Name suggestions for the search box."""

from __future__ import annotations

from typing import Iterable, List

COMMON_POKEMON = (
    "pikachu", "charizard", "blastoise", "venusaur", "alakazam",
    "machamp", "golem", "gengar", "gyarados", "lapras",
    "eevee", "snorlax", "articuno", "zapdos", "moltres",
    "dragonite", "mewtwo", "mew", "lucario", "garchomp",
)

MIN_PREFIX_LENGTH = 2


def suggest(prefix: str, catalog: Iterable[str] = COMMON_POKEMON, min_length: int = MIN_PREFIX_LENGTH) -> List[str]:
    token = prefix.strip().lower()
    if len(token) < min_length:
        return []
    return [name for name in catalog if name.startswith(token)]
