"""Search lifecycle: input → PokeAPI lookup → card or error message."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

import requests

from .clients import PokeAPIClient
from .config import ExplorerSettings
from .errors import EmptyQueryError, NotFoundError, PokeAPIError, TransportError
from .formatter import format_pokemon, resolve_image
from .images import ImageVerifier
from .models import (
    ControlsState,
    DisplayState,
    ErrorState,
    IdleState,
    LoadingState,
    ShortcutAction,
    ShowingState,
)
from .rendering import Renderer

logger = logging.getLogger("pokemon_explorer.controller")

EMPTY_QUERY_MESSAGE = "Please enter a name or ID number."
NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection and try again."
GENERIC_ERROR_MESSAGE = "An error occurred while fetching Pokemon data. Please try again."
RANDOM_ERROR_MESSAGE = "Unable to fetch random Pokemon. Please try again."

SEARCH_LABEL = "Search Pokemon"
SEARCHING_LABEL = "Searching..."

LOOKUP_ERRORS = (PokeAPIError, requests.RequestException)


def normalize_query(raw_query: str) -> str:
    return (raw_query or "").strip().lower()


def not_found_message(query: str) -> str:
    return f'Pokemon "{query}" not found. Please check the spelling or try a different name/ID.'


def describe_search_failure(query: str, error: Exception) -> str:
    """Map a failed lookup onto the message shown for a typed search."""
    if isinstance(error, NotFoundError):
        return not_found_message(query)
    if isinstance(error, (TransportError, requests.ConnectionError, requests.Timeout)):
        return NETWORK_ERROR_MESSAGE
    return GENERIC_ERROR_MESSAGE


def describe_random_failure(query: str, error: Exception) -> str:
    # A generated id is always well formed, so any failure is the service's.
    return RANDOM_ERROR_MESSAGE


class ExplorerController:
    """Application context for one explorer view.

    Owns the display state, the controls state and the collaborators (client,
    image verifier, renderer). Front-ends build one and call its entry points;
    every state change is pushed to the renderer.
    """

    def __init__(
        self,
        client: PokeAPIClient,
        renderer: Renderer,
        verify_image: Optional[Callable[[str], bool]] = None,
        settings: Optional[ExplorerSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.client = client
        self.renderer = renderer
        self.settings = settings or client.settings
        self.verify_image = verify_image or ImageVerifier(self.settings)
        self.rng = rng or random.Random()
        self.display_state: DisplayState = IdleState()
        self.controls = ControlsState(search_label=SEARCH_LABEL)
        self.last_error: Optional[Exception] = None
        self._generation = 0

        self.renderer.set_display_state(self.display_state)
        self.renderer.set_controls(self.controls)

    def search(self, raw_query: str) -> DisplayState:
        self._update_controls(query_text=raw_query or "")
        try:
            query = self._require_query(raw_query)
        except EmptyQueryError as exc:
            self.last_error = exc
            return self._show(ErrorState(message=str(exc)))
        return self._lookup(query, describe_search_failure, clear_input=True)

    def random_search(self) -> DisplayState:
        pokemon_id = self.rng.randint(1, self.settings.random_max)
        return self._lookup(str(pokemon_id), describe_random_failure, clear_input=False)

    def restore(self, state: DisplayState) -> None:
        """Show a state rendered earlier, e.g. one carried between web requests."""
        self._show(state)

    def show_help(self) -> None:
        self._update_controls(help_visible=True)

    def hide_help(self) -> None:
        self._update_controls(help_visible=False)

    def on_key(self, key: str, ctrl: bool = False, meta: bool = False) -> Optional[ShortcutAction]:
        """Handle the global shortcuts: Ctrl/Cmd+K, Ctrl/Cmd+R and Escape."""
        if ctrl or meta:
            if key.lower() == "k":
                self._update_controls(focus_search=True)
                return ShortcutAction.FOCUS_SEARCH
            if key.lower() == "r":
                self.random_search()
                return ShortcutAction.RANDOM
        if key == "Escape" and self.controls.help_visible:
            self.hide_help()
            return ShortcutAction.DISMISS_HELP
        return None

    @staticmethod
    def _require_query(raw_query: str) -> str:
        query = normalize_query(raw_query)
        if not query:
            raise EmptyQueryError(EMPTY_QUERY_MESSAGE)
        return query

    def _lookup(
        self,
        query: str,
        describe_failure: Callable[[str, Exception], str],
        clear_input: bool,
    ) -> DisplayState:
        self._generation += 1
        generation = self._generation
        self.last_error = None
        self._show(LoadingState())
        self._update_controls(search_enabled=False, search_label=SEARCHING_LABEL)
        try:
            try:
                record = self.client.fetch_pokemon(query)
            except LOOKUP_ERRORS as exc:
                logger.error("Error fetching Pokemon %r: %s", query, exc)
                if self._commit(generation, ErrorState(message=describe_failure(query, exc))):
                    self.last_error = exc
            else:
                card = format_pokemon(record)
                image_url = resolve_image(record, self.verify_image, self.settings)
                if self._commit(generation, ShowingState(card=card, image_url=image_url)) and clear_input:
                    self._update_controls(query_text="")
        finally:
            self._finish_loading(generation)
        return self.display_state

    def _commit(self, generation: int, state: DisplayState) -> bool:
        if generation != self._generation:
            logger.debug("Dropping stale %s result from lookup #%s", state.kind, generation)
            return False
        self._show(state)
        return True

    def _finish_loading(self, generation: int) -> None:
        if generation != self._generation:
            return
        if isinstance(self.display_state, LoadingState):
            # Only reachable when something unexpected escaped the lookup.
            self._show(IdleState())
        self._update_controls(search_enabled=True, search_label=SEARCH_LABEL)

    def _show(self, state: DisplayState) -> DisplayState:
        self.display_state = state
        self.renderer.set_display_state(state)
        if self.controls.help_visible:
            self._update_controls(help_visible=False)
        return state

    def _update_controls(self, **changes) -> None:
        changes.setdefault("focus_search", False)
        self.controls = self.controls.model_copy(update=changes)
        self.renderer.set_controls(self.controls)
