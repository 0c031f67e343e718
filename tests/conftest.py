from datetime import date

import pytest

from libranet import LibraNet, seed_demo_data

TODAY = date(2024, 1, 8)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def ledger(today):
    # fixed clock so overdue checks do not depend on the wall calendar
    lib = LibraNet(fine_per_day=10.0, today=lambda: today)
    seed_demo_data(lib)
    return lib


@pytest.fixture
def assert_consistent():
    def check(lib):
        for item in lib.items.list_all():
            assert item.borrowed == (item.item_id in lib.loans), item.item_id
        for record in lib.loans.list_all():
            assert lib.get_item(record.item_id) is not None
    return check
