"""Exception hierarchy shared by the fetcher and the controller."""

from __future__ import annotations

from typing import Optional


class PokemonExplorerError(RuntimeError):
    """Base class for every failure the explorer reports to the user."""


class EmptyQueryError(PokemonExplorerError):
    """Raised when a search is submitted without a name or ID."""


class PokeAPIError(PokemonExplorerError):
    """Raised when the PokeAPI lookup does not produce a record."""


class NotFoundError(PokeAPIError):
    def __init__(self, query: str) -> None:
        super().__init__(f"No Pokemon matches '{query}'")
        self.query = query


class RequestFailedError(PokeAPIError):
    def __init__(self, status: int, detail: Optional[str] = None) -> None:
        message = f"PokeAPI request failed with status {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status = status


class TransportError(PokeAPIError):
    """Raised when PokeAPI cannot be reached at all."""


class MalformedResponseError(PokeAPIError):
    """Raised when the response body is not a usable Pokemon record."""
