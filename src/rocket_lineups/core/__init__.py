# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 2: raw extraction → normalized, ordered invasion records

"""
Core Layer: Business logic and workflow orchestration

This layer handles:
- Lookup tables and the category/description normalizers
- Lineup assembly with catchable and shiny policies
- Invasion record building and ordering
- Pipeline orchestration across the adversary roster

Data Flow: extraction/ raw models → Normalized records → persistence/ sink
"""

from .models import (
    DEFAULT_ROSTER,
    AdversaryKind,
    InvasionRecord,
    LineupSlotEntry,
    RosterEntry,
)

# Import the pipeline on-demand to avoid circular imports
# Use: from rocket_lineups.core.pipeline import RocketInvasionPipeline

__all__ = [
    "DEFAULT_ROSTER",
    "AdversaryKind",
    "InvasionRecord",
    "LineupSlotEntry",
    "RosterEntry",
]
