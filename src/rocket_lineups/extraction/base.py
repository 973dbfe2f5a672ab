# ABOUTME: Protocol for acquiring rendered guide pages plus the raw extraction models
# ABOUTME: Raw models carry scraped strings only; normalization happens in the core layer

from enum import Enum
from typing import Protocol

from bs4 import BeautifulSoup
from pydantic import BaseModel, Field


class PageMarkupProvider(Protocol):
    """Protocol for fetching a guide page as it looks after full rendering.

    The returned document must include lazily loaded images, i.e. what a browser
    shows after scrolling the whole page.
    """

    async def fetch_rendered_page(self, url: str) -> BeautifulSoup:
        """Fetch and parse the rendered markup of ``url``.

        Raises:
            PageAcquisitionError: If the page cannot be reached or rendered
        """
        ...


class ExtractionError(Exception):
    """Raised when invasion data extraction fails."""

    pass


class PageAcquisitionError(ExtractionError):
    """Raised when a guide page cannot be fetched or rendered. Fatal to the run."""

    pass


class LineupLayout(str, Enum):
    """How a grunt section places its lineup table relative to the type badge block."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class RawMonster(BaseModel):
    """One monster anchor as found in the markup."""

    name: str = ""
    image_url: str = ""
    shiny: bool = False


class RawGruntSection(BaseModel):
    """Raw fields of one grunt section on the battle guide page."""

    quote: str = ""
    category: str = ""
    layout: LineupLayout = LineupLayout.SINGLE
    slot_groups: list[list[RawMonster]] = Field(default_factory=list)
