from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    ITEM_NOT_FOUND = "ItemNotFound"
    ALREADY_BORROWED = "AlreadyBorrowed"
    NOT_BORROWED = "NotBorrowed"


class LendingError(Exception):
    """Base for rejected ledger operations. Never leaves the LibraNet facade."""

    kind: ErrorKind

    def __init__(self, item_id: int, message: str) -> None:
        super().__init__(message)
        self.item_id = item_id


class ItemNotFound(LendingError):
    kind = ErrorKind.ITEM_NOT_FOUND

    def __init__(self, item_id: int) -> None:
        super().__init__(item_id, f"No item found with ID: {item_id}")


class AlreadyBorrowed(LendingError):
    kind = ErrorKind.ALREADY_BORROWED

    def __init__(self, item_id: int, title: str) -> None:
        super().__init__(item_id, f"'{title}' is already borrowed.")


class NotBorrowed(LendingError):
    kind = ErrorKind.NOT_BORROWED

    def __init__(self, item_id: int, title: str) -> None:
        super().__init__(item_id, f"'{title}' is not currently borrowed.")
