from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from scripts.lib.config import StatsType
from scripts.lib.tables import Record


class CategoryAggregator:
    """
    Collects one week's records per stats category.

    The column set of a category is taken from the first record added for it
    and never changes afterwards; later records keep all their fields, extra
    ones are dropped at write time. Feed records in game order from a single
    thread, since the first record decides the columns.
    """

    def __init__(self) -> None:
        self._schemas: Dict[StatsType, Tuple[str, ...]] = {}
        self._records: Dict[StatsType, List[Record]] = {}

    def add(self, record: Record) -> None:
        if record.category not in self._schemas:
            self._schemas[record.category] = tuple(record.fields)
            self._records[record.category] = []
        self._records[record.category].append(record)

    def extend(self, records: Iterable[Record]) -> None:
        for r in records:
            self.add(r)

    def categories(self) -> List[StatsType]:
        """Categories with at least one record, in order of first sighting."""
        return list(self._schemas)

    def schema(self, category: StatsType) -> Tuple[str, ...]:
        return self._schemas[category]

    def records(self, category: StatsType) -> List[Record]:
        return list(self._records.get(category, []))

    def __len__(self) -> int:
        return sum(len(v) for v in self._records.values())
