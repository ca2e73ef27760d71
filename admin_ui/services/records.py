"""Record sources: where admin listings get their pages from."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Protocol, Sequence

from ..models import Page, RecordSet
from ..resources import AdminResource


logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    def fetch_page(self, resource: AdminResource, number: int, per_page: int) -> Page: ...

    def ping(self) -> None: ...


class InMemoryRecordSource:
    """Serves rows held in memory, keyed by resource name."""

    def __init__(self, rows: Mapping[str, Sequence[Mapping[str, Any]]]) -> None:
        self._rows: Dict[str, List[Mapping[str, Any]]] = {name: list(items) for name, items in rows.items()}

    def fetch_page(self, resource: AdminResource, number: int, per_page: int) -> Page:
        def sort_key(row: Mapping[str, Any]):
            value = row.get(resource.order_by)
            # Rows without a value go last
            return (value is None, 0 if value is None else value)

        rows = sorted(self._rows.get(resource.name, []), key=sort_key)
        start = (number - 1) * per_page
        records = [resource.model.from_row(row) for row in rows[start:start + per_page]]
        return Page(
            records=RecordSet(resource.model, tuple(records)),
            number=number,
            per_page=per_page,
            total_count=len(rows),
        )

    def ping(self) -> None:
        return None


SAMPLE_ROWS: Dict[str, List[Dict[str, Any]]] = {
    "products": [
        {"id": 1, "name": "Ruby on Rails Tote", "sku": "RTOTE-001", "price": 15.99, "available_on": "2024-01-15"},
        {"id": 2, "name": "Python Mug", "sku": "PMUG-002", "price": 12.50, "available_on": "2024-02-01"},
        {"id": 3, "name": "Solid Hoodie", "sku": "HOOD-003", "price": 49.00, "available_on": "2024-03-10"},
        {"id": 4, "name": "Canvas Cap", "sku": "CAP-004", "price": 19.99, "available_on": None},
    ],
    "users": [
        {"id": 1, "email": "ann@example.com", "first_name": "Ann", "last_name": "Lee", "created_at": "2024-01-02T09:30:00Z"},
        {"id": 2, "email": "bo@example.com", "first_name": "Bo", "last_name": None, "created_at": "2024-02-11T14:00:00Z"},
    ],
}


def sample_record_source() -> InMemoryRecordSource:
    logger.warning("Using in-memory sample records (development mode)")
    return InMemoryRecordSource(SAMPLE_ROWS)
