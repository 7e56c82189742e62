from __future__ import annotations

import pytest

from order_placement.core.errors import InvalidInputError
from order_placement.domain.pricing import ALLOCATION_TOLERANCE, Price, PriceAllocator


def test_allocate_shares_one_unit_price_across_members():
    allocations = PriceAllocator().allocate(Price.of(120), [2, 1])

    assert [a.unit_price for a in allocations] == [Price.of(40), Price.of(40)]
    assert [a.total_price for a in allocations] == [Price.of(80), Price.of(40)]


def test_allocate_single_member():
    (allocation,) = PriceAllocator().allocate(Price.of(100), [2])

    assert allocation.unit_price == Price.of(50)
    assert allocation.total_price == Price.of(100)


@pytest.mark.parametrize(
    "total, quantities",
    [
        (100, [1, 1, 1]),
        (99.99, [3, 7]),
        (0.05, [1, 2, 4]),
        (1234.56, [5, 1, 1, 9]),
        (0, [2, 3]),
    ],
)
def test_allocated_totals_sum_back_to_line_total(total, quantities):
    allocations = PriceAllocator().allocate(Price.of(total), quantities)
    item_sum = PriceAllocator.sum_prices(*(a.total_price for a in allocations))

    assert abs(item_sum.amount - total) < ALLOCATION_TOLERANCE


@pytest.mark.parametrize("quantities", [[], [0], [0, 0]])
def test_allocate_rejects_zero_total_quantity(quantities):
    with pytest.raises(InvalidInputError):
        PriceAllocator().allocate(Price.of(10), quantities)


def test_allocate_requires_total_price():
    with pytest.raises(InvalidInputError):
        PriceAllocator().allocate(None, [1])
