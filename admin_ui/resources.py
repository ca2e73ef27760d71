"""Admin resources: which tables are listed and how their columns look."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Type

from .components import LinkComponent
from .models import Record


class Product(Record):
    attributes = ("id", "name", "sku", "price", "available_on")
    attribute_labels = {"sku": "SKU"}


class User(Record):
    attributes = ("id", "email", "first_name", "last_name", "created_at")


def format_price(product: Product) -> str:
    if product.price is None:
        return ""
    return f"${float(product.price):,.2f}"


def format_date(value: Any) -> str:
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime("%b %d, %Y")
    return str(value)


def full_name(user: User) -> str:
    return " ".join(part for part in (user.first_name, user.last_name) if part)


def product_columns() -> List[Mapping[str, Any]]:
    return [
        {"header": "name", "data": "name"},
        {"header": "sku", "data": "sku", "class_name": "font-mono"},
        {"header": "price", "data": format_price, "class_name": "text-right"},
        {"header": lambda: "Available", "data": lambda product: format_date(product.available_on)},
        # Actions column, no header label
        {"header": lambda: "", "data": lambda product: LinkComponent(f"/admin/products/{product.id}", "Edit")},
    ]


def user_columns() -> List[Mapping[str, Any]]:
    return [
        {"header": "email", "data": "email"},
        {"header": lambda: "Name", "data": full_name},
        {"header": "created_at", "data": lambda user: format_date(user.created_at)},
    ]


@dataclass(frozen=True)
class AdminResource:
    name: str
    title: str
    model: Type[Record]
    columns: Callable[[], List[Mapping[str, Any]]]
    order_by: str = "id"
    position: int = 0

    @property
    def href(self) -> str:
        return f"/admin/{self.name}"


RESOURCES: Dict[str, AdminResource] = {
    resource.name: resource
    for resource in (
        AdminResource("products", "Products", Product, product_columns, order_by="name", position=10),
        AdminResource("users", "Users", User, user_columns, order_by="created_at", position=20),
    )
}
