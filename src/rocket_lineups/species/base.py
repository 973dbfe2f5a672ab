# ABOUTME: Protocol for resolving scraped monster names to species records
# ABOUTME: The lookup is expected to be total for names found on the guide pages

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class SpeciesRecord(BaseModel):
    """Canonical species data returned by a species lookup."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="National species number")
    name: str = Field(description="Canonical display name")
    types: tuple[str, ...] = Field(default=(), description="Elemental types, primary type first")


class SpeciesLookup(Protocol):
    """Protocol for fuzzy species name resolution."""

    def resolve_by_fuzzy_name(self, name: str) -> SpeciesRecord:
        """Resolve a loosely formatted name to a species record.

        Raises:
            SpeciesNotFoundError: If no species matches the name
        """
        ...


class SpeciesNotFoundError(LookupError):
    """Raised when a scraped name cannot be resolved to a species."""

    def __init__(self, name: str):
        super().__init__(f"No species matches name {name!r}")
        self.name = name
