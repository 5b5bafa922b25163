"""
Dashboard statistics

Read-only scans over the store for the four dashboard cards.
"""

from decimal import Decimal

from database import EntityStore
from schemas import DashboardStats, OrderStatus


def total_users(store: EntityStore) -> int:
    return store.count("user")


def total_products(store: EntityStore) -> int:
    return store.count("product")


def pending_order_count(store: EntityStore) -> int:
    return sum(1 for o in store.list_orders() if o.status == OrderStatus.PENDING)


def total_sales(store: EntityStore) -> Decimal:
    # Every non-pending order counts, cancelled ones included.
    return sum(
        (o.total_price for o in store.list_orders() if o.status != OrderStatus.PENDING),
        Decimal("0"),
    )


def dashboard_summary(store: EntityStore) -> DashboardStats:
    return DashboardStats(
        total_users=total_users(store),
        total_products=total_products(store),
        pending_orders=pending_order_count(store),
        total_sales=total_sales(store),
    )
