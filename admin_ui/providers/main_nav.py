import logging
from typing import Iterable

from ..core.container import Container, NavItem
from ..resources import AdminResource


logger = logging.getLogger(__name__)


def main_nav_provider(resources: Iterable[AdminResource]):
    """Build the ``main_nav`` provider: one navigation item per admin resource."""
    resources = list(resources)

    def boot(container: Container) -> None:
        for resource in resources:
            container.add_nav_item(NavItem(
                key=resource.name,
                label=resource.title,
                href=resource.href,
                position=resource.position,
            ))
        logger.info(f"Registered {len(resources)} main navigation items")

    return boot
