# ABOUTME: Markup acquisition and raw field extraction from the guide pages
# ABOUTME: Pipeline Stage 1: rendered page markup → raw quote/category/slot strings

"""
Extraction Layer: Get raw data from the guide site

This layer handles:
- Rendering guide pages in a headless browser
- Locating adversary sections and lineup tables in the markup
- Reading monster names, image URLs and shiny markers

Data Flow: Guide pages → Raw extraction models → Core layer
"""

from .base import (
    ExtractionError,
    LineupLayout,
    PageAcquisitionError,
    PageMarkupProvider,
    RawGruntSection,
    RawMonster,
)

__all__ = [
    "ExtractionError",
    "LineupLayout",
    "PageAcquisitionError",
    "PageMarkupProvider",
    "RawGruntSection",
    "RawMonster",
]
