from __future__ import annotations
from datetime import date
from typing import Dict, List, Optional

from .domain import LibraryItem, LoanRecord


class ItemRepo:
    def __init__(self) -> None:
        self._items: Dict[int, LibraryItem] = {}

    def add(self, item: LibraryItem) -> Optional[LibraryItem]:
        """Insert or replace by id; returns the replaced item, if any."""
        previous = self._items.get(item.item_id)
        # a replaced id keeps its original listing position
        self._items[item.item_id] = item
        return previous

    def get(self, item_id: int) -> Optional[LibraryItem]:
        return self._items.get(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def list_all(self) -> List[LibraryItem]:
        return list(self._items.values())


class LoanRepo:
    def __init__(self) -> None:
        self._loans: Dict[int, LoanRecord] = {}

    def add(self, record: LoanRecord) -> None:
        self._loans[record.item_id] = record

    def get(self, item_id: int) -> Optional[LoanRecord]:
        return self._loans.get(item_id)

    def remove(self, item_id: int) -> Optional[LoanRecord]:
        return self._loans.pop(item_id, None)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._loans

    def __len__(self) -> int:
        return len(self._loans)

    def list_all(self) -> List[LoanRecord]:
        return list(self._loans.values())

    def list_overdue(self, today: date) -> List[LoanRecord]:
        return [r for r in self._loans.values() if r.is_overdue(today)]
