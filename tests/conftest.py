# ABOUTME: Shared fixtures for invasion extraction tests
# ABOUTME: HTML page builders mimicking the guide site, plus in-memory species and page providers

import pytest
from bs4 import BeautifulSoup

from rocket_lineups.species.base import SpeciesNotFoundError, SpeciesRecord

SPECIES = {
    "Beedrill": SpeciesRecord(id=15, name="Beedrill", types=("Bug", "Poison")),
    "Scyther": SpeciesRecord(id=123, name="Scyther", types=("Bug", "Flying")),
    "Pinsir": SpeciesRecord(id=127, name="Pinsir", types=("Bug",)),
    "Gastly": SpeciesRecord(id=92, name="Gastly", types=("Ghost", "Poison")),
    "Haunter": SpeciesRecord(id=93, name="Haunter", types=("Ghost", "Poison")),
    "Misdreavus": SpeciesRecord(id=200, name="Misdreavus", types=("Ghost",)),
    "Sneasel": SpeciesRecord(id=215, name="Sneasel", types=("Dark", "Ice")),
    "Lapras": SpeciesRecord(id=131, name="Lapras", types=("Water", "Ice")),
    "Sharpedo": SpeciesRecord(id=319, name="Sharpedo", types=("Water", "Dark")),
    "Shiftry": SpeciesRecord(id=275, name="Shiftry", types=("Grass", "Dark")),
    "Gardevoir": SpeciesRecord(id=282, name="Gardevoir", types=("Psychic", "Fairy")),
    "Alakazam": SpeciesRecord(id=65, name="Alakazam", types=("Psychic",)),
    "Houndoom": SpeciesRecord(id=229, name="Houndoom", types=("Dark", "Fire")),
    "Persian": SpeciesRecord(id=53, name="Persian", types=("Normal",)),
    "Kangaskhan": SpeciesRecord(id=115, name="Kangaskhan", types=("Normal",)),
    "Nidoking": SpeciesRecord(id=34, name="Nidoking", types=("Poison", "Ground")),
    "Rhyperior": SpeciesRecord(id=464, name="Rhyperior", types=("Ground", "Rock")),
    "Mewtwo": SpeciesRecord(id=150, name="Mewtwo", types=("Psychic",)),
}


class FakeSpeciesLookup:
    """Exact-name species lookup over the fixture table."""

    def __init__(self, species: dict[str, SpeciesRecord] | None = None):
        self.species = species or SPECIES
        self.calls: list[str] = []

    def resolve_by_fuzzy_name(self, name: str) -> SpeciesRecord:
        self.calls.append(name)
        try:
            return self.species[name]
        except KeyError:
            raise SpeciesNotFoundError(name) from None


class FakePageProvider:
    """Serves canned HTML per URL and records the fetch order."""

    def __init__(self, pages: dict[str, str]):
        self.pages = pages
        self.fetched: list[str] = []

    async def fetch_rendered_page(self, url: str) -> BeautifulSoup:
        self.fetched.append(url)
        return BeautifulSoup(self.pages[url], "html.parser")


def monster_anchor(name: str, image: str | None = None, shiny: bool = False, lazy: bool = False) -> str:
    classes = "hub-pokemon shiny" if shiny else "hub-pokemon"
    image = image or f"https://img.example.com/{name.lower()}.png"
    img = f'<img src="data:image/gif;base64,R0lG" data-src="{image}">' if lazy else f'<img src="{image}">'
    return f'<a class="{classes}" href="/pokemon/{name.lower()}">{img}<div class="content"><span class="name">{name}</span></div></a>'


def lineup_table(slots: list[list[str]]) -> str:
    cells = "".join(f"<td>{''.join(slot)}</td>" for slot in slots)
    return f'<div class="hub-lineup"><table><tbody><tr>{cells}</tr></tbody></table></div>'


def grunt_section(quote: str, category: str, slots: list[list[str]], multiple: bool = False) -> str:
    heading = f'<div class="hub-title-wrap"><h2 class="hub-title-with-icon"><img src="/icon.png"> {quote} </h2></div>'
    badge = f'<div class="hub-badges"><span class="type-badge">{category}</span></div>'
    sub_heading = "<h2>Lineup 1</h2>" if multiple else ""
    return f"{heading}\n{badge}\n{sub_heading}\n{lineup_table(slots)}"


def grunt_page(*sections: str) -> str:
    return f'<html><body><article class="entry">{"".join(sections)}</article></body></html>'


def leader_page(cells: list[list[str]], cells_per_row: int = 3) -> str:
    rows = []
    for start in range(0, len(cells), cells_per_row):
        row_cells = "".join(
            f'<td><div class="hub-flex-list">{"".join(cell)}</div></td>' for cell in cells[start : start + cells_per_row]
        )
        rows.append(f"<tr>{row_cells}</tr>")
    table = f'<div class="hub-scrollable"><table><tbody>{"".join(rows)}</tbody></table></div>'
    return f"<html><body><h1>Counters</h1>{table}</body></html>"


@pytest.fixture
def species_lookup() -> FakeSpeciesLookup:
    return FakeSpeciesLookup()


@pytest.fixture
def two_section_grunt_html() -> str:
    return grunt_page(
        grunt_section("Go, my super bug Pokémon!", "Bug", [[monster_anchor("Beedrill")], [monster_anchor("Scyther")]]),
        grunt_section("Ke...ke...ke...ke...ke...ke!", "Ghost", [[monster_anchor("Gastly")], [monster_anchor("Haunter")]]),
    )


@pytest.fixture
def sierra_html() -> str:
    return leader_page(
        [
            [monster_anchor("Sneasel", shiny=True)],
            [monster_anchor("Lapras")],
            [monster_anchor("Houndoom")],
            [monster_anchor("Sharpedo", shiny=True)],
            [monster_anchor("Gardevoir")],
            [monster_anchor("Shiftry")],
            [monster_anchor("Alakazam")],
        ]
    )


@pytest.fixture
def giovanni_html() -> str:
    return leader_page(
        [
            [monster_anchor("Persian", shiny=True)],
            [monster_anchor("Kangaskhan")],
            [monster_anchor("Mewtwo", shiny=True)],
            [monster_anchor("Nidoking")],
            [monster_anchor("Rhyperior")],
        ]
    )
