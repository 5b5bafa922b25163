"""Order totals."""

from decimal import Decimal

from schemas import Order


def recompute_total(order: Order) -> Decimal:
    """Set order.total_price from the current price of every line's product.

    Always a full pass over the items; prices are read live, not snapshotted.
    """
    order.total_price = sum((item.line_total for item in order.items), Decimal("0"))
    return order.total_price
