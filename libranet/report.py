"""Message text for ledger results, as shown by the CLI."""

from __future__ import annotations
from typing import List

from .config import settings
from .domain import BorrowResult, LibraryItem, ReturnResult


def describe_added(item: LibraryItem) -> str:
    return f"Added '{item.title}' to the library."


def describe_borrow(result: BorrowResult) -> str:
    if not result.ok:
        return f"Error: {result.error_message}"
    return (
        f"'{result.title}' has been borrowed on {result.borrow_date.isoformat()}. "
        f"It is due on {result.due_date.isoformat()}."
    )


def describe_return(result: ReturnResult, currency: str | None = None) -> List[str]:
    if not result.ok:
        return [f"Error: {result.error_message}"]

    currency = currency or settings.currency
    lines: List[str] = []
    if result.overdue:
        lines.append(
            f"A fine of {currency} {result.fine:.2f} is due for the late return of '{result.title}'."
        )
    lines.append(f"'{result.title}' has been successfully returned.")
    return lines
