# ABOUTME: Domain models for the invasion dataset - records, lineup entries and the adversary roster
# ABOUTME: Field aliases carry the JSON keys the consuming app reads

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AdversaryKind(str, Enum):
    """Kind of Team GO Rocket adversary a guide page documents."""

    GRUNT = "Grunt"
    LEADER = "Leader"
    BOSS = "Boss"


class RosterEntry(BaseModel):
    """A named leader or boss with its own counters guide page."""

    model_config = ConfigDict(frozen=True)

    kind: AdversaryKind
    name: str

    @property
    def label(self) -> str:
        return f"{self.kind.value} {self.name}"


DEFAULT_ROSTER: tuple[RosterEntry, ...] = (
    RosterEntry(kind=AdversaryKind.LEADER, name="Sierra"),
    RosterEntry(kind=AdversaryKind.LEADER, name="Cliff"),
    RosterEntry(kind=AdversaryKind.LEADER, name="Arlo"),
    RosterEntry(kind=AdversaryKind.BOSS, name="Giovanni"),
)


class LineupSlotEntry(BaseModel):
    """One monster appearance within one slot of an adversary's lineup."""

    model_config = ConfigDict(populate_by_name=True)

    slot_number: int = Field(alias="slotNo", ge=1, description="1-based position in the encounter")
    species_id: int = Field(alias="no", description="Species number resolved from the fuzzy name lookup")
    display_name: str = Field(alias="name", description="Canonical species name")
    original_name: str = Field(alias="originalName", description="Name as scraped from the guide page")
    types: list[str] = Field(default_factory=list, description="Elemental types, primary type first")
    catchable: bool = Field(default=False, description="Whether the monster can be caught after the battle")
    shiny_available: bool = Field(alias="shinyAvailable", default=False, description="Whether it can be shiny")
    image_url: str = Field(alias="imageUrl", default="", description="Sprite URL")


class InvasionRecord(BaseModel):
    """One adversary's encounter definition."""

    model_config = ConfigDict(populate_by_name=True)

    quote: str = Field(default="", description="Normalized flavor text shown to the player")
    # "orignialQuote" is the key spelling the consuming app reads
    original_quote: str = Field(alias="orignialQuote", default="", description="Raw scraped flavor text")
    category: str = Field(description="Normalized category label")
    portrait_image_url: str = Field(alias="characterImageUrl", default="", description="Adversary avatar URL")
    is_special: bool = Field(alias="isSpecial", default=False, description="True for named leaders and the boss")
    lineup: list[LineupSlotEntry] = Field(alias="lineupPokemons", default_factory=list)
