"""Interactive terminal front-end that looks Pokemon up on PokeAPI."""

from __future__ import annotations

import argparse
import logging
from typing import List, Sequence

from dotenv import load_dotenv

from .clients import PokeAPIClient
from .config import ExplorerSettings
from .controller import ExplorerController
from .models import ControlsState, DisplayState, ErrorState, LoadingState, ShowingState

HELP_TEXT = """\
Type a Pokemon name (pikachu) or National Dex number (25) and press Enter.
  !    random Pokemon
  ?    show this help
  :q   quit"""


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive Pokemon Explorer powered by PokeAPI")
    parser.add_argument("--query", type=str, help="Look up a single name or ID and exit")
    parser.add_argument("--random", action="store_true", help="Look up a random Pokemon and exit")
    parser.add_argument(
        "--random-max",
        type=int,
        help="Highest ID a random lookup may pick (defaults to POKEMON_RANDOM_MAX or 1010)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def format_state(state: DisplayState) -> str:
    if isinstance(state, LoadingState):
        return "Searching..."
    if isinstance(state, ErrorState):
        return f"Error: {state.message}"
    if isinstance(state, ShowingState):
        card = state.card
        lines = [f"=== {card.name} {card.display_id} ==="]
        lines.append(f"Image: {state.image_url or 'not available'}")
        lines.append(f"Height: {card.height} | Weight: {card.weight} | Base Exp: {card.base_experience}")
        lines.append(f"Types: {', '.join(card.types)}")
        lines.append(f"Abilities: {', '.join(card.abilities)}")
        return "\n".join(lines)
    return ""


class ConsoleRenderer:
    """Prints display states as they arrive; the help panel prints once per opening."""

    def __init__(self) -> None:
        self.output: List[str] = []
        self._help_visible = False

    def _emit(self, text: str) -> None:
        if text:
            self.output.append(text)
            print(text)

    def set_display_state(self, state: DisplayState) -> None:
        self._emit(format_state(state))

    def set_controls(self, controls: ControlsState) -> None:
        if controls.help_visible and not self._help_visible:
            self._emit(HELP_TEXT)
        self._help_visible = controls.help_visible


def run_command(controller: ExplorerController, line: str) -> bool:
    """Dispatch one line of input; returns False when the user wants to quit."""
    command = line.strip()
    if command in {":q", ":quit"}:
        return False
    if command == "!":
        controller.random_search()
    elif command == "?":
        controller.show_help()
    else:
        controller.hide_help()
        controller.search(line)
    return True


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = ExplorerSettings.from_env()
    if args.random_max is not None:
        settings = settings.model_copy(update={"random_max": max(1, args.random_max)})

    controller = ExplorerController(PokeAPIClient(settings=settings), ConsoleRenderer())

    if args.query is not None:
        controller.search(args.query)
        return
    if args.random:
        controller.random_search()
        return

    print("Pokemon Explorer. Type ? for help.")
    while True:
        try:
            line = input("Pokemon name or ID: ")
        except EOFError:
            break
        if not run_command(controller, line):
            break


if __name__ == "__main__":
    main()
