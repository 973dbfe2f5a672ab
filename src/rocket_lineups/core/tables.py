# ABOUTME: Static lookup tables (category tags, description rules) and the normalizers built on them
# ABOUTME: Tables are loaded once from the bundled JSON and shared read-only for the whole run

import json
import re
from functools import lru_cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, Field

from rocket_lineups.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORY_TAGS_FILE = "rocket-invasion-category-tags.json"
DESCRIPTION_RULES_FILE = "rocket-invasion-description-dictionary.json"

# sprintf-style placeholders: %s, %1$s and the literal %%
_PLACEHOLDER_RE = re.compile(r"%(?:(\d+)\$)?s|%%")


class CategoryTag(BaseModel):
    """Maps a raw category tag to its display label and sort priority."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    display_text: str = Field(alias="displayText")
    priority: int | None = None


class DescriptionRule(BaseModel):
    """Rewrites a scraped quote whose text matches ``pattern`` (case-insensitive)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pattern: str
    display_text: str = Field(alias="displayText")

    @property
    def regex(self) -> re.Pattern[str]:
        return _compile(self.pattern)


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def _read_bundled_json(filename: str) -> list[dict]:
    return json.loads(resources.files("rocket_lineups.data").joinpath(filename).read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def load_category_tags() -> tuple[CategoryTag, ...]:
    """Load the category tag table bundled with the package."""
    tags = tuple(CategoryTag.model_validate(item) for item in _read_bundled_json(CATEGORY_TAGS_FILE))
    logger.debug("Loaded category tags", count=len(tags))
    return tags


@lru_cache(maxsize=1)
def load_description_rules() -> tuple[DescriptionRule, ...]:
    """Load the ordered description rewrite rules bundled with the package."""
    rules = tuple(DescriptionRule.model_validate(item) for item in _read_bundled_json(DESCRIPTION_RULES_FILE))
    logger.debug("Loaded description rules", count=len(rules))
    return rules


def format_positional(template: str, values: tuple[str | None, ...]) -> str:
    """Substitute ``values`` into a sprintf-style template.

    ``%s`` consumes the next value, ``%N$s`` takes the N-th (1-based) value and
    ``%%`` is a literal percent sign. Missing values become empty strings and
    surplus values are ignored.
    """
    position = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal position
        if match.group(0) == "%%":
            return "%"
        if match.group(1):
            index = int(match.group(1)) - 1
        else:
            index = position
            position += 1
        if 0 <= index < len(values):
            return values[index] or ""
        return ""

    return _PLACEHOLDER_RE.sub(_replace, template)


def map_category(category_tag: str, tags: tuple[CategoryTag, ...] | None = None) -> str:
    """Return the display label for a raw category tag, or the tag itself when unknown."""
    for tag in tags if tags is not None else load_category_tags():
        if tag.text == category_tag:
            return tag.display_text
    return category_tag


def rewrite_description(description: str, rules: tuple[DescriptionRule, ...] | None = None) -> str:
    """Rewrite a quote with the first matching rule; unmatched quotes pass through."""
    for rule in rules if rules is not None else load_description_rules():
        match = rule.regex.search(description)
        if match:
            return format_positional(rule.display_text, match.groups())
    return description


def category_priority(display_text: str, tags: tuple[CategoryTag, ...] | None = None) -> int | None:
    """Look up the sort priority of a normalized category label."""
    for tag in tags if tags is not None else load_category_tags():
        if tag.display_text == display_text:
            return tag.priority
    return None
