from decimal import Decimal
from typing import Any, Iterable, List, Optional, Union

import config
from database import EntityStore
from errors import CatalogError
from logger import get_logger, setup_from_config
from schemas import DashboardStats, Order, OrderStatus, Product, User
from seed import seed_sample_data
import stats
import views

logger = get_logger("service")


class CatalogService:
    """Operations the UI layer calls. Wraps one EntityStore and holds nothing else.

    Errors (ValidationError, NotFoundError) propagate to the caller unchanged;
    they are logged here as warnings.
    """

    def __init__(self, store: Optional[EntityStore] = None, seed: Optional[bool] = None):
        # A store handed in by the caller is never seeded unless asked for.
        if seed is None:
            seed = store is None and config.seed_sample_data()
        self._store = store if store is not None else EntityStore()
        if seed:
            seed_sample_data(self._store)
            logger.info(
                "Loaded sample data: %d users, %d products, %d orders",
                stats.total_users(self._store),
                stats.total_products(self._store),
                len(self._store.list_orders()),
            )

    def _run(self, action: str, fn, *args):
        try:
            return fn(*args)
        except CatalogError as e:
            logger.warning("%s rejected: %s", action, e)
            raise

    # Users
    def get_user(self, user_id: str) -> User:
        return self._store.get_user(user_id)

    def list_users(self) -> List[User]:
        return self._store.list_users()

    def create_user(self, username: str, email: str) -> User:
        user = self._run("create_user", self._store.create_user, username, email)
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: str, username: str, email: str) -> User:
        user = self._run("update_user", self._store.update_user, user_id, username, email)
        logger.info("Updated user %s", user_id)
        return user

    def delete_user(self, user_id: str) -> None:
        self._run("delete_user", self._store.delete_user, user_id)
        logger.info("Deleted user %s", user_id)

    # Products
    def get_product(self, product_id: str) -> Product:
        return self._store.get_product(product_id)

    def list_products(self) -> List[Product]:
        return self._store.list_products()

    def create_product(self, name: str, price: Union[Decimal, str, float], stock: int) -> Product:
        product = self._run("create_product", self._store.create_product, name, price, stock)
        logger.info("Created product %s", product.id)
        return product

    def update_product(self, product_id: str, name: str, price: Union[Decimal, str, float], stock: int) -> Product:
        product = self._run("update_product", self._store.update_product, product_id, name, price, stock)
        logger.info("Updated product %s", product_id)
        return product

    def delete_product(self, product_id: str) -> None:
        self._run("delete_product", self._store.delete_product, product_id)
        logger.info("Deleted product %s", product_id)

    # Orders
    def get_order(self, order_id: str) -> Order:
        return self._store.get_order(order_id)

    def list_orders(self) -> List[Order]:
        return self._store.list_orders()

    def create_order(self, user_id: str, items: Iterable[Any] = ()) -> Order:
        order = self._run("create_order", self._store.create_order, user_id, items)
        logger.info("Created order %s for user %s, total %s", order.id, user_id, order.total_price)
        return order

    def add_item(self, order_id: str, product_id: str, quantity: int) -> Order:
        order = self._run("add_item", self._store.add_item, order_id, product_id, quantity)
        logger.info("Added %s x%s to order %s", product_id, quantity, order_id)
        return order

    def update_order_status(self, order_id: str, status: Union[OrderStatus, str]) -> Order:
        order = self._run("update_order_status", self._store.update_order_status, order_id, status)
        logger.info("Order %s is now %s", order_id, order.status.value)
        return order

    # Dashboard
    def total_users(self) -> int:
        return stats.total_users(self._store)

    def total_products(self) -> int:
        return stats.total_products(self._store)

    def pending_order_count(self) -> int:
        return stats.pending_order_count(self._store)

    def total_sales(self) -> Decimal:
        return stats.total_sales(self._store)

    def dashboard(self) -> DashboardStats:
        return stats.dashboard_summary(self._store)


if __name__ == "__main__":
    setup_from_config()
    service = CatalogService()
    summary = service.dashboard()
    logger.info(
        "Dashboard: %d users, %d products, %d pending orders, %s total sales",
        summary.total_users,
        summary.total_products,
        summary.pending_orders,
        views.format_currency(summary.total_sales),
    )
    for row in views.order_rows(service.list_orders()):
        logger.info("Order %s | %s | %s | %s | %s", *row)
