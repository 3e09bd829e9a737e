import pytest

from pokemon_explorer.config import ExplorerSettings
from tests.helpers import API_BASE, SPRITE_BASE, make_payload


@pytest.fixture
def settings():
    return ExplorerSettings(api_base_url=API_BASE, sprite_base_url=SPRITE_BASE, random_max=151)


@pytest.fixture
def pikachu_payload():
    return make_payload()
