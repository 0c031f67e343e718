from __future__ import annotations
from datetime import date, timedelta
from typing import Optional, Tuple
import logging

from .domain import LibraryItem, LoanRecord
from .errors import AlreadyBorrowed, ItemNotFound, NotBorrowed
from .repositories import ItemRepo, LoanRepo

logger = logging.getLogger(__name__)


class FineService:
    def __init__(self, fine_per_day: float) -> None:
        self.fine_per_day = float(fine_per_day)

    def assess(self, record: LoanRecord, returned_on: date) -> Tuple[int, float]:
        """Whole overdue days and the fine owed; the due date itself is on time."""
        days = record.days_overdue(returned_on)
        return days, days * self.fine_per_day


class LendingService:
    """
    Borrow/return state machine over the catalog and loan maps.

    Every method either raises before touching state or updates the item's
    borrowed flag and the loan map together.
    """

    def __init__(self, items: ItemRepo, loans: LoanRepo, fines: FineService) -> None:
        self.items = items
        self.loans = loans
        self.fines = fines

    def register(self, item: LibraryItem) -> Optional[LibraryItem]:
        previous = self.items.add(item)
        if previous is not None:
            logger.warning("[add] id %s re-registered, replacing '%s'", item.item_id, previous.title)
            if self.loans.remove(item.item_id) is not None:
                logger.warning("[add] active loan for id %s dropped", item.item_id)
        if item.borrowed and item.item_id not in self.loans:
            # no due date to attach, so the item enters the catalog available
            item.mark_returned()
        logger.info("[add] '%s' added to the library", item.title)
        return previous

    def _require(self, item_id: int) -> LibraryItem:
        item = self.items.get(item_id)
        if item is None:
            raise ItemNotFound(item_id)
        return item

    def borrow(self, item_id: int, duration_days: int, borrow_date: date) -> Tuple[LibraryItem, LoanRecord]:
        if duration_days < 0:
            raise ValueError(f"duration_days must be non-negative, got {duration_days}")
        item = self._require(item_id)
        if item.borrowed:
            raise AlreadyBorrowed(item_id, item.title)

        record = LoanRecord(item_id=item_id, due_date=borrow_date + timedelta(days=duration_days))
        item.mark_borrowed()
        self.loans.add(record)
        logger.info("[borrow] '%s' borrowed on %s, due %s", item.title, borrow_date, record.due_date)
        return item, record

    def return_item(self, item_id: int, returned_on: date) -> Tuple[LibraryItem, LoanRecord, int, float]:
        item = self._require(item_id)
        record = self.loans.get(item_id)
        if record is None:
            if item.borrowed:
                # flag set outside the ledger with no loan behind it
                logger.warning("[return] '%s' flagged borrowed without a loan, clearing", item.title)
                item.mark_returned()
            raise NotBorrowed(item_id, item.title)

        days, fine = self.fines.assess(record, returned_on)
        if days:
            logger.info("[return] '%s' is %d day(s) overdue, fine %.2f", item.title, days, fine)

        item.mark_returned()
        self.loans.remove(item_id)
        logger.info("[return] '%s' returned on %s", item.title, returned_on)
        return item, record, days, fine
