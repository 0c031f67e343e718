from __future__ import annotations
from typing import List

from .api import LibraNet
from .domain import Audiobook, Book, EMagazine, LibraryItem


def demo_items() -> List[LibraryItem]:
    return [
        Book(110, "Harry Potter and the Prisoner of Azkaban", "J.K. Rowling", 435),
        Book(115, "The 3 Mistakes of My Life", "Chetan Bhagat", 258),
        Audiobook(210, "The Lord of the Rings: The Fellowship of the Ring", "J.R.R. Tolkien", 1257),
        EMagazine(310, "National Geographic Traveller India", "ACK Media", 150),
    ]


def seed_demo_data(ledger: LibraNet) -> List[LibraryItem]:
    items = demo_items()
    for item in items:
        ledger.add_item(item)
    return items
