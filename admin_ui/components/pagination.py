from __future__ import annotations

from typing import List

from markupsafe import Markup

from ..models import Page
from .base import BaseComponent, content_tag

LINK_CLASSES = "px-3 py-1 rounded text-3.5 text-[#4f4f4f] hover:bg-gray-50"
CURRENT_CLASSES = "px-3 py-1 rounded text-3.5 font-[600] bg-gray-100"
DISABLED_CLASSES = "px-3 py-1 rounded text-3.5 text-gray-300"
GAP = None


class PaginationComponent(BaseComponent):
    """Previous/next links around a window of page numbers."""

    def __init__(self, page: Page, window: int = 2) -> None:
        self.page = page
        self.window = window

    def page_numbers(self) -> List[int | None]:
        """Page numbers to link, with ``None`` where a run of pages is skipped."""
        total = self.page.total_pages
        current = self.page.number
        shown = {1, total}
        shown.update(range(max(1, current - self.window), min(total, current + self.window) + 1))

        numbers: List[int | None] = []
        previous = 0
        for number in sorted(shown):
            if number - previous > 1:
                numbers.append(GAP)
            numbers.append(number)
            previous = number
        return numbers

    def _link(self, number: int, label: str, rel: str | None = None) -> Markup:
        return content_tag("a", label, {
            "href": self.view_context.page_url(number),
            "rel": rel,
            "class": LINK_CLASSES,
        })

    def render_prev(self) -> Markup:
        if self.page.prev_number is None:
            return content_tag("span", "Previous", {"class": DISABLED_CLASSES, "aria-disabled": "true"})
        return self._link(self.page.prev_number, "Previous", rel="prev")

    def render_next(self) -> Markup:
        if self.page.next_number is None:
            return content_tag("span", "Next", {"class": DISABLED_CLASSES, "aria-disabled": "true"})
        return self._link(self.page.next_number, "Next", rel="next")

    def render_number(self, number: int | None) -> Markup:
        if number is GAP:
            return content_tag("span", "…", {"class": DISABLED_CLASSES})
        if number == self.page.number:
            return content_tag("span", str(number), {"class": CURRENT_CLASSES, "aria-current": "page"})
        return self._link(number, str(number))

    def call(self) -> Markup:
        items = [self.render_prev()]
        items.extend(self.render_number(number) for number in self.page_numbers())
        items.append(self.render_next())
        return content_tag("nav", Markup("").join(items), {
            "aria-label": "Pagination",
            "class": "flex items-center gap-1",
        })
