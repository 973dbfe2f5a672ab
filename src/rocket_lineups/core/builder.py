# ABOUTME: Invasion builder - combines one adversary's quote, category and lineup into a record
# ABOUTME: Also resolves the portrait image, with a random grunt portrait for unknown characters

import random

from rocket_lineups.core.lineup import assemble_lineup
from rocket_lineups.core.models import AdversaryKind, InvasionRecord, RosterEntry
from rocket_lineups.core.tables import map_category, rewrite_description
from rocket_lineups.extraction.base import RawGruntSection, RawMonster
from rocket_lineups.species.base import SpeciesLookup

GRUNT_IDENTITY = "Grunt"

PORTRAIT_FILES = {
    "Cliff": "leader-cliff.png",
    "Arlo": "leader-arlo.png",
    "Sierra": "leader-sierra.png",
    "Giovanni": "boss-giovanni.png",
    "James": "leader-james.png",
    "Jessie": "leader-jessie.png",
    "Male Grunt": "grunt-male.png",
    "Female Grunt": "grunt-female.png",
}

FALLBACK_PORTRAIT_FILES = ("grunt-male.png", "grunt-female.png")


class PortraitResolver:
    """Maps a character identity to its portrait URL.

    Unknown identities get one of the generic grunt portraits, picked with ``rng``.
    Pass a seeded ``random.Random`` to make the choice reproducible.
    """

    def __init__(self, base_url: str, rng: random.Random | None = None):
        self.base_url = base_url.rstrip("/")
        self.rng = rng or random.Random()

    def resolve(self, character_name: str) -> str:
        filename = PORTRAIT_FILES.get(character_name)
        if filename is None:
            filename = self.rng.choice(FALLBACK_PORTRAIT_FILES)
        return f"{self.base_url}/{filename}"


def build_grunt_invasion(
    section: RawGruntSection, species: SpeciesLookup, portraits: PortraitResolver
) -> InvasionRecord:
    # Grunt sections do not tell the grunt's gender apart, so the portrait is a fallback pick
    return InvasionRecord(
        quote=rewrite_description(section.quote),
        original_quote=section.quote,
        category=map_category(section.category),
        portrait_image_url=portraits.resolve(GRUNT_IDENTITY),
        is_special=False,
        lineup=assemble_lineup(AdversaryKind.GRUNT, section.slot_groups, species),
    )


def build_leader_invasion(
    entry: RosterEntry, slots: list[list[RawMonster]], species: SpeciesLookup, portraits: PortraitResolver
) -> InvasionRecord:
    return InvasionRecord(
        quote="",
        original_quote="",
        category=map_category(entry.label),
        portrait_image_url=portraits.resolve(entry.name),
        is_special=True,
        lineup=assemble_lineup(entry.kind, slots, species),
    )
