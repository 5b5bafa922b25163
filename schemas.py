"""
Domain Schemas for the Catalog

Each entity model represents one collection in the in-memory store.
The *In / *Request models validate user-entered form values before they
reach the store.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OrderStatus(str, Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# Entities
class _Entity(BaseModel):
    # Edits go through the same field checks as creation.
    model_config = ConfigDict(validate_assignment=True)


class User(_Entity):
    id: str = Field(..., frozen=True, description="Opaque 8-character identifier")
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class Product(_Entity):
    id: str = Field(..., frozen=True, description="Opaque 8-character identifier")
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, description="Price in dollars")
    stock: int = Field(..., ge=0, strict=True)


class OrderItem(_Entity):
    # The product is shared with the catalog, not copied.
    product: Product = Field(..., frozen=True)
    quantity: int = Field(..., gt=0, strict=True)

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class Order(_Entity):
    id: str = Field(..., frozen=True)
    user: User = Field(..., frozen=True)
    items: List[OrderItem] = Field(default_factory=list)
    status: OrderStatus = Field(OrderStatus.PENDING, description="Pending|Shipped|Delivered|Cancelled")
    created_at: datetime = Field(default_factory=datetime.now, frozen=True)
    total_price: Decimal = Field(Decimal("0"), description="Derived from items, see totals.recompute_total")


# Form input models
class _FormModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class UserIn(_FormModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class ProductIn(_FormModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0, strict=True)


class OrderItemIn(_FormModel):
    product_id: str
    quantity: int = Field(..., gt=0, strict=True)

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data):
        """Accept a (product_id, quantity) pair as well as a mapping."""
        if isinstance(data, (tuple, list)):
            if len(data) != 2:
                raise ValueError("line item must be a (product_id, quantity) pair")
            return {"product_id": data[0], "quantity": data[1]}
        return data


class CreateOrderRequest(_FormModel):
    user_id: str
    items: List[OrderItemIn] = Field(default_factory=list)


class StatusUpdate(BaseModel):
    status: OrderStatus


class DashboardStats(BaseModel):
    total_users: int
    total_products: int
    pending_orders: int
    total_sales: Decimal
