# ABOUTME: JSON-backed species lookup with name normalization and closest-match fallback
# ABOUTME: Species data is read from a local file or downloaded once with httpx

import difflib
import json
import re
import unicodedata
from collections.abc import Iterable
from pathlib import Path

import httpx

from rocket_lineups.species.base import SpeciesNotFoundError, SpeciesRecord
from rocket_lineups.utils.logging import get_logger

logger = get_logger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Words the guide pages add around species names that carry no identity
_NOISE_TOKENS = {"shadow", "form", "forme"}

_REGIONAL_TOKENS = {
    "alolan": "alola",
    "galarian": "galar",
    "hisuian": "hisui",
    "paldean": "paldea",
}


# Symbols the ASCII fold would drop but that tell species apart
_GENDER_SYMBOLS = {"♀": " female ", "♂": " male "}


def normalize_name(name: str) -> str:
    """Reduce a display name to an order-insensitive lookup key.

    >>> normalize_name("Shadow Raichu (Alolan Form)")
    'alola raichu'
    >>> normalize_name("Nidoran♂")
    'male nidoran'
    """
    for symbol, word in _GENDER_SYMBOLS.items():
        name = name.replace(symbol, word)
    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii").lower()
    tokens = [_REGIONAL_TOKENS.get(token, token) for token in _NON_ALNUM_RE.split(folded) if token]
    return " ".join(sorted(token for token in tokens if token not in _NOISE_TOKENS))


class PokedexLookup:
    """Species lookup over an in-memory list of species entries.

    Entries look like ``{"no": 26, "name": "Raichu", "form": "Alola", "types": ["Electric", "Psychic"]}``;
    ``form`` is optional.
    """

    def __init__(self, entries: Iterable[dict], cutoff: float = 0.8):
        self.cutoff = cutoff
        self._by_key: dict[str, SpeciesRecord] = {}
        form_only: list[tuple[str, SpeciesRecord]] = []

        for entry in entries:
            record = SpeciesRecord(id=int(entry["no"]), name=entry["name"], types=tuple(entry.get("types", ())))
            form = entry.get("form")
            if form:
                self._by_key.setdefault(normalize_name(f"{entry['name']} {form}"), record)
                form_only.append((normalize_name(entry["name"]), record))
            else:
                # First entry wins
                self._by_key.setdefault(normalize_name(entry["name"]), record)

        # Species listed only by form still answer to their plain name; a base entry takes precedence
        for key, record in form_only:
            self._by_key.setdefault(key, record)

        logger.info("Loaded species data", species_count=len(self._by_key))

    def resolve_by_fuzzy_name(self, name: str) -> SpeciesRecord:
        key = normalize_name(name)
        record = self._by_key.get(key)
        if record is not None:
            return record

        candidates = difflib.get_close_matches(key, self._by_key.keys(), n=1, cutoff=self.cutoff)
        if not candidates:
            raise SpeciesNotFoundError(name)

        logger.debug("Resolved species by closest match", name=name, matched_key=candidates[0])
        return self._by_key[candidates[0]]

    @classmethod
    def from_file(cls, path: Path | str) -> "PokedexLookup":
        with open(path, encoding="utf-8") as f:
            return cls(json.load(f))

    @classmethod
    async def from_source(cls, source: str, client: httpx.AsyncClient | None = None) -> "PokedexLookup":
        """Load species data from a local path or an http(s) URL."""
        if not source.startswith(("http://", "https://")):
            return cls.from_file(source)

        http_client = client or httpx.AsyncClient()
        try:
            logger.debug("Downloading species data", url=source)
            response = await http_client.get(source, follow_redirects=True)
            response.raise_for_status()
            return cls(response.json())
        finally:
            if client is None:
                await http_client.aclose()
