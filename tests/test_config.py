import pytest
from pydantic import ValidationError

from pokemon_explorer.config import DEFAULT_API_BASE_URL, DEFAULT_RANDOM_MAX, ExplorerSettings


def test_defaults_when_environment_is_empty():
    settings = ExplorerSettings.from_env({})
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.random_max == DEFAULT_RANDOM_MAX


def test_environment_overrides():
    settings = ExplorerSettings.from_env(
        {
            "POKEAPI_BASE_URL": "http://localhost:8000/pokemon/",
            "POKEMON_RANDOM_MAX": "151",
            "POKEAPI_TIMEOUT": "2.5",
        }
    )
    assert settings.api_base_url == "http://localhost:8000/pokemon/"
    assert settings.random_max == 151
    assert settings.request_timeout == 2.5
    assert settings.image_timeout == 2.5


def test_random_max_must_be_positive():
    with pytest.raises(ValidationError):
        ExplorerSettings(random_max=0)
