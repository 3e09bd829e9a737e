"""Client utilities for integrating with the PokeAPI service."""

from .pokeapi import PokeAPIClient

__all__ = ["PokeAPIClient"]
