import json

import requests

# PNG signature followed by padding; enough for filetype to recognise it.
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

SPRITE_BASE = "https://sprites.test/pokemon"
API_BASE = "https://pokeapi.test/api/v2/pokemon/"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, content=None, headers=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.content = content if content is not None else text.encode("utf-8")
        self.headers = headers or {}

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Answers GETs from a url -> response (or exception) table and records them."""

    def __init__(self, routes=None, default=None):
        self.routes = dict(routes or {})
        self.default = default if default is not None else FakeResponse(404, text="Not Found")
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        outcome = self.routes.get(url, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_payload(pokemon_id=25, name="pikachu", **overrides):
    payload = {
        "id": pokemon_id,
        "name": name,
        "height": 4,
        "weight": 60,
        "base_experience": 112,
        "types": [{"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.test/type/13/"}}],
        "abilities": [
            {"slot": 1, "is_hidden": False, "ability": {"name": "static", "url": "https://pokeapi.test/ability/9/"}},
            {"slot": 3, "is_hidden": True, "ability": {"name": "lightning-rod", "url": "https://pokeapi.test/ability/31/"}},
        ],
        "sprites": {
            "front_default": f"https://img.test/front/{pokemon_id}.png",
            "front_shiny": f"https://img.test/shiny/{pokemon_id}.png",
            "other": {
                "official-artwork": {"front_default": f"https://img.test/artwork/{pokemon_id}.png"},
                "dream_world": {"front_default": f"https://img.test/dream/{pokemon_id}.svg"},
            },
        },
        "stats": [],
        "moves": [],
    }
    payload.update(overrides)
    return payload


class ScriptedVerifier:
    """Image verifier that accepts only the URLs it was told to."""

    def __init__(self, accepted=()):
        self.accepted = set(accepted)
        self.attempts = []

    def __call__(self, url):
        self.attempts.append(url)
        return url in self.accepted


