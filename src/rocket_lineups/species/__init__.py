# ABOUTME: Species reference lookup used to resolve scraped monster names
# ABOUTME: Protocol plus a JSON-backed implementation

from .base import SpeciesLookup, SpeciesNotFoundError, SpeciesRecord
from .pokedex import PokedexLookup, normalize_name

__all__ = [
    "PokedexLookup",
    "SpeciesLookup",
    "SpeciesNotFoundError",
    "SpeciesRecord",
    "normalize_name",
]
