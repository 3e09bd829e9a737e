"""Public package exports for the Pokemon Explorer."""

from .clients import PokeAPIClient
from .config import ExplorerSettings
from .controller import ExplorerController
from .errors import (
    EmptyQueryError,
    MalformedResponseError,
    NotFoundError,
    PokeAPIError,
    PokemonExplorerError,
    RequestFailedError,
    TransportError,
)
from .formatter import (
    capitalize,
    format_ability_name,
    format_measure,
    format_pokemon,
    format_pokemon_id,
    image_candidates,
    resolve_image,
)
from .images import ImageVerifier
from .models import (
    ControlsState,
    DisplayState,
    ErrorState,
    IdleState,
    LoadingState,
    PokemonCard,
    PokemonRecord,
    ShortcutAction,
    ShowingState,
)
from .rendering import RecordingRenderer, Renderer
from .suggest import COMMON_POKEMON, suggest

__all__ = [
    "PokeAPIClient",
    "ExplorerSettings",
    "ExplorerController",
    "EmptyQueryError",
    "MalformedResponseError",
    "NotFoundError",
    "PokeAPIError",
    "PokemonExplorerError",
    "RequestFailedError",
    "TransportError",
    "capitalize",
    "format_ability_name",
    "format_measure",
    "format_pokemon",
    "format_pokemon_id",
    "image_candidates",
    "resolve_image",
    "ImageVerifier",
    "ControlsState",
    "DisplayState",
    "ErrorState",
    "IdleState",
    "LoadingState",
    "PokemonCard",
    "PokemonRecord",
    "ShortcutAction",
    "ShowingState",
    "RecordingRenderer",
    "Renderer",
    "COMMON_POKEMON",
    "suggest",
]
