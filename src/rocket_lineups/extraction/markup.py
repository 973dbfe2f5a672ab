# ABOUTME: Markup extractor for the grunt battle guide and the leader/boss counters pages
# ABOUTME: Locates adversary sections with BeautifulSoup and returns raw strings, never normalized values

from bs4 import BeautifulSoup, Tag

from rocket_lineups.core.models import AdversaryKind
from rocket_lineups.extraction.base import LineupLayout, RawGruntSection, RawMonster
from rocket_lineups.utils.logging import get_logger

logger = get_logger(__name__)

SECTION_HEADING_SELECTOR = ".hub-title-with-icon"
CATEGORY_BADGE_SELECTOR = "span.type-badge"
GRUNT_CELL_SELECTOR = "table tr td"
LEADER_TABLE_SELECTOR = ".hub-scrollable table"
LEADER_CELL_SELECTOR = "tr td .hub-flex-list, .hub-pokemon-list li"
MONSTER_NAME_SELECTOR = ".content .name"
SHINY_CLASS = "shiny"
LAZY_IMAGE_ATTRIBUTES = ("data-src", "data-lazy-src")

# Sibling hops from the type badge block to the element holding the lineup table
_LAYOUT_HOPS = {
    LineupLayout.SINGLE: 1,
    LineupLayout.MULTIPLE: 2,
}

# Fixed cell-index to slot mapping of the leader and boss counters grids.
# Encodes the page's visual grid; a layout change on the site means updating these tables.
SLOT_CELL_MAPS: dict[AdversaryKind, tuple[tuple[int, ...], ...]] = {
    AdversaryKind.LEADER: ((0,), (1, 3, 5), (2, 4, 6)),
    AdversaryKind.BOSS: ((0,), (1, 3, 4), (2,)),
}


def _text(node: Tag | None) -> str:
    if node is None:
        return ""
    return node.get_text().strip()


def extract_monster(anchor: Tag) -> RawMonster:
    """Read name, image and shiny marker from one monster anchor."""
    image_url = ""
    image = anchor.select_one("img")
    if image is not None:
        for attribute in (*LAZY_IMAGE_ATTRIBUTES, "src"):
            value = image.get(attribute)
            if value:
                image_url = str(value)
                break

    return RawMonster(
        name=_text(anchor.select_one(MONSTER_NAME_SELECTOR)),
        image_url=image_url,
        shiny=SHINY_CLASS in (anchor.get("class") or []),
    )


def extract_cell_monsters(cell: Tag) -> list[RawMonster]:
    """All monster anchors of one lineup cell, in document order."""
    return [extract_monster(anchor) for anchor in cell.select("a")]


def detect_layout(badge_block: Tag) -> LineupLayout:
    """Multiple-lineup sections put an ``h2`` sub-heading between the badge block and the table."""
    following = badge_block.find_next_sibling()
    if following is not None and following.name == "h2":
        return LineupLayout.MULTIPLE
    return LineupLayout.SINGLE


def find_lineup_container(badge_block: Tag, layout: LineupLayout) -> Tag | None:
    """Walk the sibling path that ``layout`` prescribes to the lineup table's container."""
    node: Tag | None = badge_block
    for _ in range(_LAYOUT_HOPS[layout]):
        if node is None:
            return None
        node = node.find_next_sibling()
    return node


def extract_grunt_section(heading: Tag) -> RawGruntSection:
    """Extract quote, category and slot groups for one grunt section heading."""
    quote = _text(heading)
    parent = heading.parent
    badge_block = parent.find_next_sibling() if parent is not None else None

    if badge_block is None:
        logger.debug("Grunt section has no badge block", quote=quote)
        return RawGruntSection(quote=quote)

    category = _text(badge_block.select_one(CATEGORY_BADGE_SELECTOR))
    layout = detect_layout(badge_block)
    container = find_lineup_container(badge_block, layout)

    if container is None:
        logger.debug("Grunt section has no lineup table", quote=quote, layout=layout.value)
        return RawGruntSection(quote=quote, category=category, layout=layout)

    slot_groups = [extract_cell_monsters(cell) for cell in container.select(GRUNT_CELL_SELECTOR)]
    return RawGruntSection(quote=quote, category=category, layout=layout, slot_groups=slot_groups)


def extract_grunt_sections(document: BeautifulSoup) -> list[RawGruntSection]:
    """Extract every grunt section of the battle guide page, in page order."""
    sections = [extract_grunt_section(heading) for heading in document.select(SECTION_HEADING_SELECTOR)]
    logger.info(
        "Extracted grunt sections",
        section_count=len(sections),
        multiple_lineups=sum(1 for section in sections if section.layout is LineupLayout.MULTIPLE),
    )
    return sections


def extract_leader_slots(document: BeautifulSoup, kind: AdversaryKind) -> list[list[RawMonster]]:
    """Regroup the counters table's cells into the three slots of a leader or boss lineup."""
    try:
        slot_map = SLOT_CELL_MAPS[kind]
    except KeyError:
        raise ValueError(f"No slot mapping for adversary kind {kind.value!r}") from None

    table = document.select_one(LEADER_TABLE_SELECTOR)
    cells = table.select(LEADER_CELL_SELECTOR) if table is not None else []
    if table is None:
        logger.warning("Lineup table not found", kind=kind.value)

    slots: list[list[RawMonster]] = []
    for cell_indexes in slot_map:
        monsters: list[RawMonster] = []
        for index in cell_indexes:
            if index < len(cells):
                monsters.extend(extract_cell_monsters(cells[index]))
        slots.append(monsters)

    logger.debug("Extracted leader slots", kind=kind.value, cell_count=len(cells), slot_sizes=[len(s) for s in slots])
    return slots
