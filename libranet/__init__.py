"""
LibraNet lending ledger package.

Exports key modules for convenient imports.
"""

from .domain import (
    ItemKind,
    LibraryItem,
    Book,
    Audiobook,
    EMagazine,
    LoanRecord,
    BorrowResult,
    ReturnResult,
)

from .errors import (
    ErrorKind,
    LendingError,
    ItemNotFound,
    AlreadyBorrowed,
    NotBorrowed,
)

from .repositories import (
    ItemRepo,
    LoanRepo,
)

from .services import (
    FineService,
    LendingService,
)

from .api import LibraNet, NO_BORROWED_ITEMS
from .config import Settings, settings
from .seed import demo_items, seed_demo_data

__all__ = [
    # domain
    "ItemKind",
    "LibraryItem",
    "Book",
    "Audiobook",
    "EMagazine",
    "LoanRecord",
    "BorrowResult",
    "ReturnResult",
    # errors
    "ErrorKind",
    "LendingError",
    "ItemNotFound",
    "AlreadyBorrowed",
    "NotBorrowed",
    # repos
    "ItemRepo",
    "LoanRepo",
    # services
    "FineService",
    "LendingService",
    # api
    "LibraNet",
    "NO_BORROWED_ITEMS",
    # config
    "Settings",
    "settings",
    # seed
    "demo_items",
    "seed_demo_data",
]
