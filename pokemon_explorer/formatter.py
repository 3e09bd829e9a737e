"""Turns Pokemon records into card values and picks a working image."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from .config import ExplorerSettings
from .models import PokemonCard, PokemonRecord

logger = logging.getLogger("pokemon_explorer.formatter")

NOT_AVAILABLE = "N/A"


def capitalize(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def format_ability_name(name: str) -> str:
    return " ".join(capitalize(word) for word in name.split("-"))


def format_pokemon_id(pokemon_id: int) -> str:
    return f"#{pokemon_id:03d}"


def format_measure(sub_units: int, unit: str) -> str:
    """Render decimeters/hectograms as metres/kilograms with one decimal."""
    return f"{sub_units / 10:.1f} {unit}"


def format_pokemon(record: PokemonRecord) -> PokemonCard:
    base_experience = NOT_AVAILABLE if record.base_experience is None else str(record.base_experience)
    return PokemonCard(
        pokemon_id=record.id,
        name=capitalize(record.name),
        display_id=format_pokemon_id(record.id),
        height=format_measure(record.height, "m"),
        weight=format_measure(record.weight, "kg"),
        base_experience=base_experience,
        types=[capitalize(name) for name in record.type_names],
        type_slugs=list(record.type_names),
        abilities=[format_ability_name(name) for name in record.ability_names],
    )


def image_candidates(record: PokemonRecord, settings: Optional[ExplorerSettings] = None) -> Iterator[str]:
    """Yield image URLs in preference order, skipping the ones PokeAPI left empty.

    Artwork first, then sprites, then the conventional paths in the sprite
    repository keyed by id.
    """
    settings = settings or ExplorerSettings()
    sprites = record.sprites
    other = sprites.other
    official = other.official_artwork if other else None
    dream_world = other.dream_world if other else None
    sprite_base = settings.sprite_base_url.rstrip("/")

    ordered = (
        official.front_default if official else None,
        dream_world.front_default if dream_world else None,
        sprites.front_default,
        sprites.front_shiny,
        f"{sprite_base}/other/official-artwork/{record.id}.png",
        f"{sprite_base}/{record.id}.png",
    )
    for url in ordered:
        if url:
            yield url


def resolve_image(
    record: PokemonRecord,
    verify: Callable[[str], bool],
    settings: Optional[ExplorerSettings] = None,
) -> Optional[str]:
    """Return the first candidate ``verify`` accepts, or ``None`` to hide the image.

    Candidates are checked one at a time; later ones are never touched once a
    candidate loads.
    """
    for index, url in enumerate(image_candidates(record, settings), start=1):
        if verify(url):
            return url
        logger.debug("Failed to load image from source %s: %s", index, url)
    logger.info("No image available for %s (ID: %s)", record.name, record.id)
    return None
