"""Derived product count for orders.

Every product sells at one fixed unit price, so an order's product count
(`jumlah_produk`) follows from its subtotal. Subtotals are whole rupiah held
as integers; divisibility is checked with exact integer modulo, never with
floating point.
"""
import logging
from typing import Any

from tortoise.transactions import in_transaction

from .models import Order

logger = logging.getLogger(__name__)

UNIT_PRICE = 13000

# Column limits: `jumlah_produk` is a 32-bit INT, `subtotal` a 64-bit BIGINT.
MAX_UNITS = 2**31 - 1
MAX_SUBTOTAL = 2**63 - 1


class InvalidSubtotal(ValueError):
    pass


def is_valid_subtotal(subtotal: Any, unit_price: int = UNIT_PRICE) -> bool:
    """True iff `subtotal` is a positive integer multiple of `unit_price`
    whose product count fits the `jumlah_produk` column."""
    if isinstance(subtotal, bool) or not isinstance(subtotal, int):
        return False
    if subtotal <= 0 or subtotal > MAX_SUBTOTAL:
        return False
    return subtotal % unit_price == 0 and subtotal // unit_price <= MAX_UNITS


def compute_units(subtotal: int, unit_price: int = UNIT_PRICE) -> int:
    """Number of products paid for by `subtotal`.

    Raises:
        InvalidSubtotal: If the subtotal is not a positive multiple of the unit price.
    """
    if not is_valid_subtotal(subtotal, unit_price):
        raise InvalidSubtotal(
            f"Subtotal must be a positive multiple of {unit_price}, at most {unit_price * MAX_UNITS}."
        )
    return subtotal // unit_price


def rounded_units(subtotal: int, unit_price: int = UNIT_PRICE) -> int:
    """Half-up rounded product count, used to repair rows that predate validation."""
    return (2 * subtotal + unit_price) // (2 * unit_price)


async def backfill_units(unit_price: int = UNIT_PRICE) -> int:
    """Recompute `jumlah_produk` for every order where it disagrees with the subtotal.

    Safe to run repeatedly: once all rows are consistent nothing is written.

    Returns:
        The number of orders that were updated.
    """
    async with in_transaction() as conn:
        rows = await Order.all().using_db(conn).values_list("order_id", "subtotal", "jumlah_produk")
        stale: dict[int, list[int]] = {}
        for order_id, subtotal, units in rows:
            expected = rounded_units(int(subtotal), unit_price)
            if units != expected:
                stale.setdefault(expected, []).append(order_id)
        for expected, order_ids in stale.items():
            await Order.filter(order_id__in=order_ids).using_db(conn).update(jumlah_produk=expected)

    updated = sum(len(ids) for ids in stale.values())
    if updated:
        logger.info(f"Backfilled jumlah_produk on {updated} orders")
    return updated
