from .base import BaseComponent, Renderable, ViewContext, content_tag
from .link import LinkComponent
from .pagination import PaginationComponent
from .table import Column, ColumnConfigurationError, ComputedAccessor, FieldAccessor, TableComponent

__all__ = [
    "BaseComponent",
    "Column",
    "ColumnConfigurationError",
    "ComputedAccessor",
    "FieldAccessor",
    "LinkComponent",
    "PaginationComponent",
    "Renderable",
    "TableComponent",
    "ViewContext",
    "content_tag",
]
