"""Generic page-of-records container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, Type, TypeVar

from .record import Record

T = TypeVar("T", bound=Record)


@dataclass(frozen=True)
class RecordSet(Generic[T]):
    """Ordered records of one model class."""

    model: Type[T]
    items: Sequence[T] = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


@dataclass(frozen=True)
class Page(Generic[T]):
    """A single page of records plus meta-data."""

    records: RecordSet[T]
    number: int = 1          # current page index (1-based)
    per_page: int = 25       # size of each page
    total_count: int = 0     # records in the whole result set

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("page number must be at least 1")
        if self.per_page < 1:
            raise ValueError("per_page must be at least 1")
        if self.total_count < 0:
            raise ValueError("total_count must not be negative")

    # ------------- helpers -------------
    @property
    def total_pages(self) -> int:
        return max(1, -(-self.total_count // self.per_page))

    @property
    def first(self) -> bool:
        return self.number == 1

    @property
    def last(self) -> bool:
        return self.number >= self.total_pages

    @property
    def has_next(self) -> bool:
        return not self.last

    @property
    def has_prev(self) -> bool:
        return not self.first

    @property
    def next_number(self) -> int | None:
        return self.number + 1 if self.has_next else None

    @property
    def prev_number(self) -> int | None:
        if not self.has_prev:
            return None
        # Past the end, step back to the last page that has records
        return min(self.number - 1, self.total_pages)

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.per_page
