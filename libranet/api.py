from __future__ import annotations
from datetime import date
from typing import Callable, List, Optional
import logging

from .config import settings
from .domain import BorrowResult, LibraryItem, LoanRecord, ReturnResult
from .errors import LendingError
from .repositories import ItemRepo, LoanRepo
from .services import FineService, LendingService

logger = logging.getLogger(__name__)

NO_BORROWED_ITEMS = "No items are currently borrowed."


class LibraNet:
    """
    The lending ledger: wires repos + services and offers a compact API.

    Rejected operations come back as results carrying an ``ErrorKind``;
    ``LendingError`` never propagates past this class.
    """

    def __init__(
        self,
        fine_per_day: Optional[float] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.today = today

        # repos
        self.items = ItemRepo()
        self.loans = LoanRepo()

        # services
        self.fine_service = FineService(
            settings.fine_per_day if fine_per_day is None else fine_per_day
        )
        self.lending = LendingService(self.items, self.loans, self.fine_service)

    @property
    def fine_per_day(self) -> float:
        return self.fine_service.fine_per_day

    @property
    def catalog_size(self) -> int:
        return len(self.items)

    # ---- catalog
    def add_item(self, item: LibraryItem) -> None:
        self.lending.register(item)

    def get_item(self, item_id: int) -> Optional[LibraryItem]:
        """Registered item, for reading. Lending state changes go through borrow_item/return_item."""
        return self.items.get(item_id)

    def loan_for(self, item_id: int) -> Optional[LoanRecord]:
        return self.loans.get(item_id)

    # ---- circulation
    def borrow_item(
        self,
        item_id: int,
        duration_days: Optional[int] = None,
        borrow_date: Optional[date] = None,
    ) -> BorrowResult:
        if duration_days is None:
            duration_days = settings.default_loan_days
        borrow_date = borrow_date or self.today()
        try:
            item, record = self.lending.borrow(item_id, duration_days, borrow_date)
        except LendingError as e:
            logger.warning("[borrow] %s", e)
            return BorrowResult(item_id=item_id, error=e.kind, error_message=str(e))
        return BorrowResult(
            item_id=item_id,
            title=item.title,
            borrow_date=borrow_date,
            due_date=record.due_date,
        )

    def return_item(self, item_id: int, returned_on: Optional[date] = None) -> ReturnResult:
        returned_on = returned_on or self.today()
        try:
            item, record, days, fine = self.lending.return_item(item_id, returned_on)
        except LendingError as e:
            logger.warning("[return] %s", e)
            return ReturnResult(item_id=item_id, error=e.kind, error_message=str(e))
        return ReturnResult(
            item_id=item_id,
            title=item.title,
            due_date=record.due_date,
            returned_on=returned_on,
            days_overdue=days,
            fine=fine,
        )

    # ---- reporting
    def list_all_items(self) -> List[str]:
        return [item.details() for item in self.items.list_all()]

    def list_borrowed_items(self) -> List[str]:
        records = self.loans.list_all()
        if not records:
            return [NO_BORROWED_ITEMS]

        today = self.today()
        lines: List[str] = []
        for record in records:
            item = self.items.get(record.item_id)
            status = "Overdue" if record.is_overdue(today) else "On Time"
            lines.append(f"{item.details()} | Due: {record.due_date.isoformat()} ({status})")
        return lines

    def report_overdue(self) -> List[LoanRecord]:
        return self.loans.list_overdue(self.today())
