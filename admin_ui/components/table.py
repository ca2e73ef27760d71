"""Table component.

Renders a page of records as a ``<table>``: one header row, one body row
per record and a footer holding the pagination component. Every row uses
the same column order.

Columns are described by mappings (or :class:`Column` instances)::

    TableComponent(
        page=page,
        columns=[
            {"header": "name", "data": "name"},
            {"header": lambda: "Price", "data": lambda product: f"${product.price:.2f}"},
            {"header": "", "data": lambda product: LinkComponent(f"/products/{product.id}", "Edit")},
        ],
    )

``header`` is an attribute name, labelled through the model's
``human_attribute_name``, or a zero-argument callable. ``data`` is an
attribute name read off each record, or a callable taking the record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Union

from markupsafe import Markup

from ..models import Page, Record
from .base import BaseComponent, content_tag, to_content
from .pagination import PaginationComponent

HEADER_CELL_CLASSES = """
    border-b
    border-gray-100
    py-3
    px-4
    text-[#4f4f4f]
    text-left
    text-3.5
    font-[600]
    line-[120%]
"""
DATA_CELL_CLASSES = "py-2 px-4"
COLUMN_KEYS = frozenset({"header", "data", "class_name"})


class ColumnConfigurationError(ValueError):
    """A column descriptor has the wrong shape."""


@dataclass(frozen=True)
class FieldAccessor:
    name: str


@dataclass(frozen=True)
class ComputedAccessor:
    function: Callable[..., Any]


Accessor = Union[FieldAccessor, ComputedAccessor]


def to_accessor(value: Any, role: str) -> Accessor:
    match value:
        case FieldAccessor() | ComputedAccessor():
            return value
        case str():
            return FieldAccessor(value)
        case _ if callable(value):
            return ComputedAccessor(value)
        case _:
            raise ColumnConfigurationError(
                f"column {role} must be an attribute name or a callable, got {type(value).__name__}"
            )


def is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    return isinstance(value, str) and not value.strip()


@dataclass(frozen=True)
class Column:
    header: Accessor
    data: Accessor
    class_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "header", to_accessor(self.header, "header"))
        object.__setattr__(self, "data", to_accessor(self.data, "data"))
        if self.class_name is not None and not isinstance(self.class_name, str):
            raise ColumnConfigurationError("column class_name must be a string")

    @classmethod
    def from_descriptor(cls, descriptor: Union["Column", Mapping[str, Any]]) -> "Column":
        if isinstance(descriptor, Column):
            return descriptor
        if not isinstance(descriptor, Mapping):
            raise ColumnConfigurationError(
                f"column descriptor must be a mapping, got {type(descriptor).__name__}"
            )

        unknown = set(descriptor) - COLUMN_KEYS
        if unknown:
            raise ColumnConfigurationError(f"unknown column keys: {', '.join(sorted(unknown))}")
        for key in ("header", "data"):
            if key not in descriptor:
                raise ColumnConfigurationError(f"column descriptor is missing {key!r}")

        return cls(**descriptor)

    def resolve_header(self, model: type[Record]) -> Any:
        match self.header:
            case FieldAccessor(name=name):
                return model.human_attribute_name(name)
            case ComputedAccessor(function=function):
                return function()

    def resolve_data(self, record: Any) -> Any:
        match self.data:
            case FieldAccessor(name=name):
                return getattr(record, name)
            case ComputedAccessor(function=function):
                return function(record)


class TableComponent(BaseComponent):
    def __init__(
        self,
        page: Page,
        columns: Iterable[Union[Column, Mapping[str, Any]]] = (),
        pagination_component: Callable[..., Any] | None = PaginationComponent,
    ) -> None:
        """
        Args:
            page: The page of records to show.
            columns: Column descriptors, in display order.
            pagination_component: Called with ``page=`` to build the footer
                paginator. ``None`` leaves the footer out.
        """
        if page is None:
            raise ValueError("page is required")

        self.page = page
        self.columns = tuple(Column.from_descriptor(column) for column in columns)
        self.pagination_component = pagination_component
        self.model_class = page.records.model
        self.rows = page.records

    def render_cell(self, tag: str, cell: Any, attrs: Mapping[str, Any] | None = None) -> Markup:
        # Component instances are allowed as cell content
        content = to_content(cell).render(self.view_context)
        return content_tag(tag, content, attrs)

    def render_header_cell(self, column: Column) -> Markup:
        cell = column.resolve_header(self.model_class)
        cell_tag = "td" if is_blank(cell) else "th"
        return self.render_cell(cell_tag, cell, {"class": HEADER_CELL_CLASSES})

    def render_data_cell(self, column: Column, record: Any) -> Markup:
        cell = column.resolve_data(record)
        classes = DATA_CELL_CLASSES
        if column.class_name:
            classes = f"{classes} {column.class_name}"
        return self.render_cell("td", cell, {"class": classes})

    def render_header_row(self) -> Markup:
        return content_tag("tr", Markup("").join(self.render_header_cell(column) for column in self.columns))

    def render_body_row(self, record: Any) -> Markup:
        cells = Markup("").join(self.render_data_cell(column, record) for column in self.columns)
        return content_tag("tr", cells, {"class": "border-b border-gray-100"})

    def render_table_footer(self) -> Markup:
        if self.pagination_component is None:
            return Markup("")

        pagination = content_tag("div", self.render_pagination_component(), {"class": "flex justify-center"})
        cell = content_tag("td", pagination, {"colspan": len(self.columns), "class": "py-4"})
        return content_tag("tfoot", content_tag("tr", cell))

    def render_pagination_component(self) -> Markup:
        return self.pagination_component(page=self.page).render_in(self.view_context)

    def call(self) -> Markup:
        body = Markup("").join(self.render_body_row(record) for record in self.rows)
        return content_tag("table", Markup("").join([
            content_tag("thead", self.render_header_row()),
            content_tag("tbody", body),
            self.render_table_footer(),
        ]), {"class": "table-auto w-full bg-white"})
