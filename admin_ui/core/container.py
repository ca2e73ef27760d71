"""Component container.

Components are registered under slash-separated keys (``"ui/table"``) and
resolved by the engine when it wires routes. Providers are named start-up
hooks that populate the container, started at most once each.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavItem:
    key: str
    label: str
    href: str
    position: int = 0


class Container:
    def __init__(self) -> None:
        self._components: Dict[str, Any] = {}
        self._providers: Dict[str, Callable[["Container"], None]] = {}
        self._started: set[str] = set()
        self._nav_items: List[NavItem] = []

    # ------------- components -------------
    def register(self, key: str, component: Any) -> None:
        if key in self._components:
            raise ValueError(f"Component already registered: {key}")
        self._components[key] = component

    def component(self, key: str) -> Any:
        try:
            return self._components[key]
        except KeyError:
            raise LookupError(f"No component registered under {key!r}") from None

    def __contains__(self, key: str) -> bool:
        return key in self._components

    # ------------- providers -------------
    def register_provider(self, name: str, boot: Callable[["Container"], None]) -> None:
        self._providers[name] = boot

    def start(self, name: str) -> None:
        if name in self._started:
            return
        try:
            boot = self._providers[name]
        except KeyError:
            raise LookupError(f"No provider registered under {name!r}") from None

        boot(self)
        self._started.add(name)
        logger.info(f"Started provider {name}")

    # ------------- navigation -------------
    def add_nav_item(self, item: NavItem) -> None:
        self._nav_items.append(item)

    @property
    def nav_items(self) -> List[NavItem]:
        return sorted(self._nav_items, key=lambda item: (item.position, item.label))
