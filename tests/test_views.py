"""
Tests for table rows and order detail text.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from database import EntityStore
import views


def test_format_currency() -> None:
    assert views.format_currency(Decimal("1349.98")) == "$1349.98"
    assert views.format_currency(Decimal("0")) == "$0.00"


def test_rows(store: EntityStore) -> None:
    u = store.create_user("a", "a@x.io")
    p = store.create_product("Monitor", "399", 75)
    o = store.create_order(u.id, [(p.id, 2)], created_at=datetime(2024, 3, 5, 9, 7))

    assert views.user_rows(store.list_users()) == [(u.id, "a", "a@x.io")]
    assert views.product_rows(store.list_products()) == [(p.id, "Monitor", "399.00", 75)]
    assert views.order_rows(store.list_orders()) == [(o.id, "a", "$798.00", "2024-03-05 09:07", "Pending")]


def test_order_details(seeded_store: EntityStore) -> None:
    order = seeded_store.list_orders()[1]
    text = views.order_details(order)
    lines = text.splitlines()
    assert lines[0] == f"Order ID: {order.id}"
    assert lines[1] == "User: jane_doe"
    assert lines[2] == "Status: Pending"
    assert lines[3] == "Total: $917.50"
    assert lines[-2:] == [
        "- 4K Monitor (Qty: 2) @ $399.00 ea.",
        "- Mechanical Keyboard (Qty: 1) @ $119.50 ea.",
    ]
