"""Settings shared by the fetcher, the image resolver and the front-ends."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_API_BASE_URL = "https://pokeapi.co/api/v2/pokemon/"
DEFAULT_SPRITE_BASE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"
# Roughly the size of the national dex; ids past the end simply 404.
DEFAULT_RANDOM_MAX = 1010


class ExplorerSettings(BaseModel):
    api_base_url: str = DEFAULT_API_BASE_URL
    sprite_base_url: str = DEFAULT_SPRITE_BASE_URL
    random_max: int = Field(default=DEFAULT_RANDOM_MAX, ge=1)
    request_timeout: float = Field(default=10.0, gt=0)
    image_timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExplorerSettings":
        """Build settings from ``POKEAPI_*`` / ``POKEMON_RANDOM_MAX`` variables.

        Unset variables keep their defaults. Front-ends call ``load_dotenv()``
        before this so a local ``.env`` file is honoured.
        """
        env = os.environ if environ is None else environ
        overrides = {}
        if env.get("POKEAPI_BASE_URL"):
            overrides["api_base_url"] = env["POKEAPI_BASE_URL"]
        if env.get("POKEAPI_SPRITE_BASE_URL"):
            overrides["sprite_base_url"] = env["POKEAPI_SPRITE_BASE_URL"]
        if env.get("POKEMON_RANDOM_MAX"):
            overrides["random_max"] = env["POKEMON_RANDOM_MAX"]
        if env.get("POKEAPI_TIMEOUT"):
            overrides["request_timeout"] = env["POKEAPI_TIMEOUT"]
            overrides["image_timeout"] = env["POKEAPI_TIMEOUT"]
        return cls(**overrides)
