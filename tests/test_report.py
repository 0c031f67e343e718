from datetime import date

from libranet import BorrowResult, Book, ErrorKind, ReturnResult
from libranet.report import describe_added, describe_borrow, describe_return


def test_describe_added():
    assert describe_added(Book(1, "Dune", "Frank Herbert", 412)) == "Added 'Dune' to the library."


def test_describe_borrow():
    ok = BorrowResult(item_id=1, title="Dune", borrow_date=date(2024, 1, 1), due_date=date(2024, 1, 8))
    assert describe_borrow(ok) == "'Dune' has been borrowed on 2024-01-01. It is due on 2024-01-08."

    failed = BorrowResult(item_id=1, error=ErrorKind.ALREADY_BORROWED, error_message="'Dune' is already borrowed.")
    assert describe_borrow(failed) == "Error: 'Dune' is already borrowed."


def test_describe_return_with_fine():
    result = ReturnResult(item_id=1, title="Dune", days_overdue=5, fine=50.0)
    assert describe_return(result, currency="Rs") == [
        "A fine of Rs 50.00 is due for the late return of 'Dune'.",
        "'Dune' has been successfully returned.",
    ]


def test_describe_return_on_time():
    result = ReturnResult(item_id=1, title="Dune")
    assert describe_return(result) == ["'Dune' has been successfully returned."]
