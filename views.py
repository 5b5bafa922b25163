"""
Display helpers

Rows for the user / product / order tables and the order detail text shown by
the UI layer. Nothing here mutates the store.
"""

from decimal import Decimal
from typing import List, Tuple

from schemas import Order, Product, User

DATE_FORMAT = "%Y-%m-%d %H:%M"


def format_currency(amount: Decimal) -> str:
    """Format amount as currency string."""
    return f"${amount:.2f}"


def user_rows(users: List[User]) -> List[Tuple[str, str, str]]:
    return [(u.id, u.username, u.email) for u in users]


def product_rows(products: List[Product]) -> List[Tuple[str, str, str, int]]:
    return [(p.id, p.name, f"{p.price:.2f}", p.stock) for p in products]


def order_rows(orders: List[Order]) -> List[Tuple[str, str, str, str, str]]:
    return [
        (
            o.id,
            o.user.username,
            format_currency(o.total_price),
            o.created_at.strftime(DATE_FORMAT),
            o.status.value,
        )
        for o in orders
    ]


def order_details(order: Order) -> str:
    lines = [
        f"Order ID: {order.id}",
        f"User: {order.user.username}",
        f"Status: {order.status.value}",
        f"Total: {format_currency(order.total_price)}",
        "",
        "Items:",
    ]
    for item in order.items:
        lines.append(f"- {item.product.name} (Qty: {item.quantity}) @ {format_currency(item.product.price)} ea.")
    return "\n".join(lines)
