from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, ClassVar, Optional
import logging

from .errors import ErrorKind

logger = logging.getLogger(__name__)


class ItemKind(Enum):
    BOOK = "Book"
    AUDIOBOOK = "Audiobook"
    EMAGAZINE = "E-Magazine"


@dataclass
class LibraryItem(ABC):
    item_id: int
    title: str
    author: str
    borrowed: bool = field(default=False, kw_only=True)

    kind: ClassVar[ItemKind]
    creator_label: ClassVar[str] = "Author"

    def __setattr__(self, name: str, value: Any) -> None:
        # ids are assigned once, by the caller, at construction
        if name == "item_id" and "item_id" in self.__dict__:
            raise AttributeError("item_id cannot be changed after construction")
        super().__setattr__(name, value)

    @property
    def availability(self) -> str:
        return "Borrowed" if self.borrowed else "Available"

    def mark_borrowed(self) -> None:
        self.borrowed = True

    def mark_returned(self) -> None:
        self.borrowed = False

    @abstractmethod
    def variant_field(self) -> str:
        ...

    def details(self) -> str:
        return (
            f"[{self.kind.value}] ID: {self.item_id}, Title: {self.title}, "
            f"{self.creator_label}: {self.author}, {self.variant_field()}, "
            f"Status: {self.availability}"
        )


@dataclass
class Book(LibraryItem):
    page_count: int

    kind: ClassVar[ItemKind] = ItemKind.BOOK

    def variant_field(self) -> str:
        return f"Pages: {self.page_count}"


@dataclass
class Audiobook(LibraryItem):
    duration_minutes: int

    kind: ClassVar[ItemKind] = ItemKind.AUDIOBOOK

    @property
    def duration(self) -> str:
        hours, minutes = divmod(self.duration_minutes, 60)
        return f"{hours}h {minutes}m"

    def variant_field(self) -> str:
        return f"Duration: {self.duration}"

    def play(self) -> str:
        notice = f"Playing '{self.title}'..."
        logger.info(notice)
        return notice


@dataclass
class EMagazine(LibraryItem):
    """A periodical issue. Archiving it does not affect lending."""

    issue_number: int
    archived: bool = field(default=False, kw_only=True)

    kind: ClassVar[ItemKind] = ItemKind.EMAGAZINE
    creator_label: ClassVar[str] = "Publisher"

    @property
    def publisher(self) -> str:
        return self.author

    def variant_field(self) -> str:
        return f"Issue: {self.issue_number}"

    def archive(self) -> str:
        self.archived = True
        notice = f"EMagazine '{self.title}' Issue {self.issue_number} has been archived."
        logger.info(notice)
        return notice


@dataclass
class LoanRecord:
    item_id: int
    due_date: date

    def is_overdue(self, today: date) -> bool:
        return today > self.due_date

    def days_overdue(self, today: date) -> int:
        return max(0, (today - self.due_date).days)


@dataclass
class BorrowResult:
    item_id: int
    title: Optional[str] = None
    borrow_date: Optional[date] = None
    due_date: Optional[date] = None
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ReturnResult:
    item_id: int
    title: Optional[str] = None
    due_date: Optional[date] = None
    returned_on: Optional[date] = None
    days_overdue: int = 0
    fine: float = 0.0
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def overdue(self) -> bool:
        return self.days_overdue > 0
