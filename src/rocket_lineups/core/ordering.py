# ABOUTME: Collection orderer - sorts invasion records by their category's priority
# ABOUTME: Stable ascending sort; categories missing from the tag table go last

from collections.abc import Iterable

from rocket_lineups.core.models import InvasionRecord
from rocket_lineups.core.tables import CategoryTag, category_priority


def order_invasions(
    records: Iterable[InvasionRecord], tags: tuple[CategoryTag, ...] | None = None
) -> list[InvasionRecord]:
    """Sort records by the priority of their normalized category.

    Ties and unknown categories keep their input order.
    """

    def _sort_key(record: InvasionRecord) -> tuple[bool, int]:
        priority = category_priority(record.category, tags)
        return (priority is None, priority if priority is not None else 0)

    return sorted(records, key=_sort_key)
