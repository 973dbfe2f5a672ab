# ABOUTME: Lineup assembler - turns raw slot groups into canonical lineup entries
# ABOUTME: Applies the per-kind catchable and shiny policies and resolves species names

from rocket_lineups.core.models import AdversaryKind, LineupSlotEntry
from rocket_lineups.extraction.base import RawMonster
from rocket_lineups.species.base import SpeciesLookup

# Slot whose monster can be caught after winning, per adversary kind.
# Grunt catches are not tracked yet.
CATCHABLE_SLOT = {
    AdversaryKind.LEADER: 1,
    AdversaryKind.BOSS: 3,
}


def is_catchable(kind: AdversaryKind, slot_number: int) -> bool:
    return CATCHABLE_SLOT.get(kind) == slot_number


def is_shiny_available(kind: AdversaryKind, marked_shiny: bool) -> bool:
    """Only leader encounters offer shiny monsters; boss and grunt markers are ignored."""
    return kind is AdversaryKind.LEADER and marked_shiny


def assemble_lineup(
    kind: AdversaryKind, slot_groups: list[list[RawMonster]], species: SpeciesLookup
) -> list[LineupSlotEntry]:
    """Build lineup entries from slot groups in order; slot numbers start at 1.

    Species resolution errors propagate: an unresolvable name aborts the run.
    """
    lineup: list[LineupSlotEntry] = []

    for index, monsters in enumerate(slot_groups):
        slot_number = index + 1
        for monster in monsters:
            record = species.resolve_by_fuzzy_name(monster.name)
            lineup.append(
                LineupSlotEntry(
                    slot_number=slot_number,
                    species_id=record.id,
                    display_name=record.name,
                    original_name=monster.name,
                    types=list(record.types),
                    catchable=is_catchable(kind, slot_number),
                    shiny_available=is_shiny_available(kind, monster.shiny),
                    image_url=monster.image_url,
                )
            )

    return lineup
