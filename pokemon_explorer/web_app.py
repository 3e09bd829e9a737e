"""Minimal Flask frontend for the Pokemon Explorer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests
from dotenv import load_dotenv
from flask import Flask, current_app, jsonify, render_template, request
from flask import session as flask_session
from pydantic import TypeAdapter, ValidationError

from .clients import PokeAPIClient
from .config import ExplorerSettings
from .controller import ExplorerController
from .errors import EmptyQueryError, NotFoundError
from .images import ImageVerifier
from .models import DisplayState, LoadingState, ShowingState
from .rendering import RecordingRenderer
from .suggest import suggest

logger = logging.getLogger("pokemon_explorer.web")

STATE_KEY = "display_state"
_state_adapter = TypeAdapter(DisplayState)


load_dotenv()


@dataclass
class ExplorerContext:
    """Collaborators built once per app and shared by every request."""

    settings: ExplorerSettings
    client: PokeAPIClient
    verifier: ImageVerifier


def _context() -> ExplorerContext:
    return current_app.extensions["pokemon_explorer"]


def _new_controller(restore: bool = False) -> ExplorerController:
    # Each request gets its own controller; only the HTTP session is shared.
    context = _context()
    controller = ExplorerController(
        context.client,
        RecordingRenderer(),
        verify_image=context.verifier,
        settings=context.settings,
    )
    if restore:
        _restore_state(controller)
    return controller


def _restore_state(controller: ExplorerController) -> None:
    """Bring back the card or error the previous page showed."""
    saved = flask_session.get(STATE_KEY)
    if not saved:
        return
    try:
        controller.restore(_state_adapter.validate_python(saved))
    except ValidationError:
        logger.warning("Discarding unreadable display state from the session cookie")
        flask_session.pop(STATE_KEY, None)


def _flag(key: str) -> bool:
    return request.form.get(key) in {"on", "true", "1"}


def _render(controller: ExplorerController):
    if not isinstance(controller.display_state, LoadingState):
        flask_session[STATE_KEY] = controller.display_state.model_dump()
    return render_template(
        "index.html",
        state=controller.display_state,
        controls=controller.controls,
    )


def create_app(
    settings: Optional[ExplorerSettings] = None,
    session: Optional[requests.Session] = None,
) -> Flask:
    settings = settings or ExplorerSettings.from_env()
    session = session or requests.Session()

    flask_app = Flask(__name__)
    flask_app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY", "change-me")
    flask_app.extensions["pokemon_explorer"] = ExplorerContext(
        settings=settings,
        client=PokeAPIClient(settings=settings, session=session),
        verifier=ImageVerifier(settings=settings, session=session),
    )

    @flask_app.route("/", methods=["GET", "POST"])
    def index():
        controller = _new_controller()
        if request.method == "POST":
            controller.search(request.form.get("query", ""))
        return _render(controller)

    @flask_app.route("/random", methods=["POST"])
    def random_pokemon():
        controller = _new_controller()
        controller.random_search()
        return _render(controller)

    @flask_app.route("/help", methods=["GET", "POST"])
    def help_panel():
        controller = _new_controller(restore=True)
        if request.method == "POST" and request.form.get("action") == "close":
            controller.hide_help()
        else:
            controller.show_help()
        return _render(controller)

    @flask_app.route("/shortcut", methods=["POST"])
    def shortcut():
        controller = _new_controller(restore=True)
        if _flag("help_visible"):
            controller.show_help()
        action = controller.on_key(
            request.form.get("key", ""),
            ctrl=_flag("ctrl"),
            meta=_flag("meta"),
        )
        logger.debug("Shortcut %r handled as %s", request.form.get("key"), action)
        return _render(controller)

    @flask_app.route("/suggest")
    def suggestions():
        return jsonify(suggest(request.args.get("q", "")))

    @flask_app.route("/api/pokemon/<query>")
    def pokemon_json(query: str):
        controller = _new_controller()
        state = controller.search(query)
        if isinstance(state, ShowingState):
            status = 200
        elif isinstance(controller.last_error, NotFoundError):
            status = 404
        elif isinstance(controller.last_error, EmptyQueryError):
            status = 400
        else:
            status = 502
        return jsonify(state.model_dump()), status

    @flask_app.route("/health")
    def health():
        # Simple health check for load balancers
        return {"status": "ok"}, 200

    return flask_app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "4000")), debug=True)
