"""Sample catalog loaded on start-up."""

from decimal import Decimal

from database import EntityStore
from schemas import OrderStatus

SAMPLE_USERS = [
    ("anoop_v", "anoop.v@example.com"),
    ("jane_doe", "jane.d@web.com"),
    ("alex_smith", "asmith@mail.net"),
]

SAMPLE_PRODUCTS = [
    ("Laptop Pro", Decimal("1299.99"), 50),
    ("Wireless Mouse", Decimal("49.99"), 150),
    ("4K Monitor", Decimal("399.00"), 75),
    ("Mechanical Keyboard", Decimal("119.50"), 120),
]


def seed_sample_data(store: EntityStore) -> None:
    u1, u2, _ = [store.create_user(name, email) for name, email in SAMPLE_USERS]
    p1, p2, p3, p4 = [store.create_product(*row) for row in SAMPLE_PRODUCTS]

    o1 = store.create_order(u1.id, status=OrderStatus.SHIPPED)
    store.add_item(o1.id, p1.id, 1)
    store.add_item(o1.id, p2.id, 1)

    o2 = store.create_order(u2.id, status=OrderStatus.PENDING)
    store.add_item(o2.id, p3.id, 2)
    store.add_item(o2.id, p4.id, 1)
