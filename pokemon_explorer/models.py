"""Pydantic models describing PokeAPI records and the explorer's view state."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class NamedResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: Optional[str] = None


class TypeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    slot: int = 1
    type: NamedResource


class AbilitySlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    slot: int = 1
    is_hidden: bool = False
    ability: NamedResource


class ArtworkSprites(BaseModel):
    model_config = ConfigDict(frozen=True)

    front_default: Optional[str] = None


class OtherSprites(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    official_artwork: Optional[ArtworkSprites] = Field(default=None, alias="official-artwork")
    dream_world: Optional[ArtworkSprites] = None


class Sprites(BaseModel):
    model_config = ConfigDict(frozen=True)

    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    other: Optional[OtherSprites] = None


class PokemonRecord(BaseModel):
    """The subset of a PokeAPI ``/pokemon/<query>`` payload the card needs."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    height: int = Field(ge=0)  # decimeters
    weight: int = Field(ge=0)  # hectograms
    base_experience: Optional[int] = None
    types: List[TypeSlot] = Field(default_factory=list)
    abilities: List[AbilitySlot] = Field(default_factory=list)
    sprites: Sprites = Field(default_factory=Sprites)

    @property
    def type_names(self) -> List[str]:
        return [entry.type.name for entry in self.types]

    @property
    def ability_names(self) -> List[str]:
        return [entry.ability.name for entry in self.abilities]


class PokemonCard(BaseModel):
    """Display-ready values derived from a record."""

    model_config = ConfigDict(frozen=True)

    pokemon_id: int
    name: str
    display_id: str
    height: str
    weight: str
    base_experience: str
    types: List[str]
    type_slugs: List[str]
    abilities: List[str]


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class ShowingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["showing"] = "showing"
    card: PokemonCard
    image_url: Optional[str] = None


DisplayState = Union[IdleState, LoadingState, ErrorState, ShowingState]


class ControlsState(BaseModel):
    """Search button, input field and help panel as the renderer should show them."""

    model_config = ConfigDict(frozen=True)

    search_enabled: bool = True
    search_label: str = "Search Pokemon"
    query_text: str = ""
    help_visible: bool = False
    focus_search: bool = False


class ShortcutAction(str, Enum):
    """Keyboard shortcut outcomes."""
    FOCUS_SEARCH = "focus_search"  # Ctrl/Cmd + K
    RANDOM = "random"              # Ctrl/Cmd + R
    DISMISS_HELP = "dismiss_help"  # Escape while help is open
