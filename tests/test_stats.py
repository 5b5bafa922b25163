"""
Tests for dashboard statistics.
"""

from __future__ import annotations

from decimal import Decimal

from database import EntityStore
from schemas import OrderStatus
import stats


def test_empty_store(store: EntityStore) -> None:
    summary = stats.dashboard_summary(store)
    assert summary.total_users == 0
    assert summary.total_products == 0
    assert summary.pending_orders == 0
    assert summary.total_sales == Decimal("0")


def test_seeded_counts(seeded_store: EntityStore) -> None:
    assert stats.total_users(seeded_store) == 3
    assert stats.total_products(seeded_store) == 4
    assert stats.pending_order_count(seeded_store) == 1
    assert stats.total_sales(seeded_store) == Decimal("1349.98")


def test_cancelled_orders_count_as_sales(seeded_store: EntityStore) -> None:
    pending = [o for o in seeded_store.list_orders() if o.status == OrderStatus.PENDING][0]
    seeded_store.update_order_status(pending.id, OrderStatus.CANCELLED)
    assert stats.pending_order_count(seeded_store) == 0
    assert stats.total_sales(seeded_store) == Decimal("1349.98") + Decimal("917.50")


def test_reads_do_not_mutate(seeded_store: EntityStore) -> None:
    before = [(o.id, o.status, o.total_price) for o in seeded_store.list_orders()]
    stats.dashboard_summary(seeded_store)
    stats.dashboard_summary(seeded_store)
    assert [(o.id, o.status, o.total_price) for o in seeded_store.list_orders()] == before
