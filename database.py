"""
In-memory Entity Store

Holds the three collections ("user", "product", "order") keyed by id in
insertion order, and issues identifiers. Every mutating method validates its
whole input before touching a collection, so a rejected call changes nothing.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Set, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from errors import NotFoundError, ValidationError
from schemas import (
    CreateOrderRequest,
    Order,
    OrderItem,
    OrderItemIn,
    OrderStatus,
    Product,
    ProductIn,
    StatusUpdate,
    User,
    UserIn,
)
from totals import recompute_total

M = TypeVar("M", bound=BaseModel)


def gen_id() -> str:
    """Short opaque token: 8 uppercase hex chars (32 random bits) of a UUID4."""
    return str(uuid.uuid4())[:8].upper()


def validate(model: Type[M], **data) -> M:
    """Build `model` from raw form values, raising the catalog ValidationError."""
    try:
        return model(**data)
    except PydanticValidationError as e:
        err = e.errors()[0]
        names = [str(part) for part in err["loc"] if isinstance(part, str)]
        raise ValidationError(names[-1] if names else model.__name__, err["msg"]) from e


class EntityStore:
    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, BaseModel]] = {
            "user": {},
            "product": {},
            "order": {},
        }
        # Every id ever issued, so deleted ids are never handed out again.
        self._issued: Set[str] = set()

    def _new_id(self) -> str:
        new_id = gen_id()
        while new_id in self._issued:
            new_id = gen_id()
        self._issued.add(new_id)
        return new_id

    def _find(self, kind: str, entity_id: str):
        doc = self._collections[kind].get(entity_id)
        if doc is None:
            raise NotFoundError(kind, entity_id)
        return doc

    def count(self, kind: str) -> int:
        return len(self._collections[kind])

    # Users
    def get_user(self, user_id: str) -> User:
        return self._find("user", user_id)

    def list_users(self) -> List[User]:
        return list(self._collections["user"].values())

    def create_user(self, username: str, email: str) -> User:
        data = validate(UserIn, username=username, email=email)
        user = User(id=self._new_id(), **data.model_dump())
        self._collections["user"][user.id] = user
        return user

    def update_user(self, user_id: str, username: str, email: str) -> User:
        user = self.get_user(user_id)
        data = validate(UserIn, username=username, email=email)
        user.username = data.username
        user.email = data.email
        return user

    def delete_user(self, user_id: str) -> User:
        # Orders keep their reference to the removed user.
        self.get_user(user_id)
        return self._collections["user"].pop(user_id)

    # Products
    def get_product(self, product_id: str) -> Product:
        return self._find("product", product_id)

    def list_products(self) -> List[Product]:
        return list(self._collections["product"].values())

    def create_product(self, name: str, price: Union[Decimal, str, float], stock: int) -> Product:
        data = validate(ProductIn, name=name, price=price, stock=stock)
        product = Product(id=self._new_id(), **data.model_dump())
        self._collections["product"][product.id] = product
        return product

    def update_product(self, product_id: str, name: str, price: Union[Decimal, str, float], stock: int) -> Product:
        product = self.get_product(product_id)
        data = validate(ProductIn, name=name, price=price, stock=stock)
        product.name = data.name
        product.price = data.price
        product.stock = data.stock
        # Totals follow live prices.
        for order in self.orders_with_product(product):
            recompute_total(order)
        return product

    def delete_product(self, product_id: str) -> Product:
        self.get_product(product_id)
        return self._collections["product"].pop(product_id)

    # Orders
    def get_order(self, order_id: str) -> Order:
        return self._find("order", order_id)

    def list_orders(self) -> List[Order]:
        return list(self._collections["order"].values())

    def orders_with_product(self, product: Product) -> List[Order]:
        return [
            o for o in self._collections["order"].values()
            if any(item.product is product for item in o.items)
        ]

    def create_order(
        self,
        user_id: str,
        items: Iterable[Any] = (),
        status: Union[OrderStatus, str] = OrderStatus.PENDING,
        created_at: Optional[datetime] = None,
    ) -> Order:
        req = validate(CreateOrderRequest, user_id=user_id, items=items)
        initial = validate(StatusUpdate, status=status).status
        user = self.get_user(req.user_id)
        lines = [OrderItem(product=self.get_product(i.product_id), quantity=i.quantity) for i in req.items]

        order = Order(
            id=self._new_id(),
            user=user,
            items=lines,
            status=initial,
            created_at=created_at or datetime.now(),
        )
        recompute_total(order)
        self._collections["order"][order.id] = order
        return order

    def add_item(self, order_id: str, product_id: str, quantity: int) -> Order:
        order = self.get_order(order_id)
        line = validate(OrderItemIn, product_id=product_id, quantity=quantity)
        product = self.get_product(line.product_id)
        order.items.append(OrderItem(product=product, quantity=line.quantity))
        recompute_total(order)
        return order

    def update_order_status(self, order_id: str, status: Union[OrderStatus, str]) -> Order:
        order = self.get_order(order_id)
        # No transition graph: any status may follow any other.
        order.status = validate(StatusUpdate, status=status).status
        return order
