from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable


class MemoryStore:
    """Process-lifetime in-memory store shared by the repositories.

    Note: One instance is created per application container, so tests get a
    fresh store per app. Rows live in plain dicts keyed by integer id and every
    table has its own id counter starting at 1. There is no locking and no
    cross-table integrity.
    """

    TABLES = ("users", "classes", "events", "attendance")

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[int, Any]] = {}
        self._next_ids: Dict[str, int] = {}
        self.reset()

    def reset(self) -> None:
        """Drop every row and restart all id counters."""
        self._tables = defaultdict(dict)
        self._next_ids = {name: 1 for name in self.TABLES}

    def next_id(self, table: str) -> int:
        current = self._next_ids.get(table, 1)
        self._next_ids[table] = current + 1
        return current

    def table(self, table: str) -> Dict[int, Any]:
        return self._tables[table]

    def rows(self, table: str) -> Iterable[Any]:
        return list(self._tables[table].values())

    def counts(self) -> Dict[str, int]:
        return {name: len(self._tables[name]) for name in self.TABLES}
