"""PokeAPI client returning parsed Pokemon records."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ..config import ExplorerSettings
from ..errors import MalformedResponseError, NotFoundError, RequestFailedError, TransportError
from ..models import PokemonRecord

logger = logging.getLogger("pokemon_explorer.clients")


class PokeAPIClient:
    """Minimal wrapper around the public ``/pokemon/<name-or-id>`` endpoint.

    One GET per lookup: no retries and no caching. The query is expected to be
    normalised already (trimmed, lowercase); it is only quoted so it stays a
    single path segment.
    """

    def __init__(
        self,
        settings: Optional[ExplorerSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or ExplorerSettings()
        self.base_url = self.settings.api_base_url
        self.session = session or requests.Session()

    def build_url(self, query: str) -> str:
        return f"{self.base_url.rstrip('/')}/{quote(query, safe='')}"

    def fetch_pokemon(self, query: str) -> PokemonRecord:
        if not query:
            raise ValueError("query is required")

        url = self.build_url(query)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.settings.request_timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise TransportError(f"Could not reach PokeAPI: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(query)
        if not response.ok:
            raise RequestFailedError(response.status_code, response.text.strip()[:200])

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"PokeAPI returned invalid JSON for '{query}'") from exc

        try:
            return PokemonRecord.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(f"PokeAPI payload for '{query}' is not a Pokemon record") from exc
