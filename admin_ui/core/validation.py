import logging
import re
from typing import Optional, Tuple

from fastapi import HTTPException


logger = logging.getLogger(__name__)

RESOURCE_NAME_PATTERN = re.compile(r'^[a-z][a-z0-9_]*$')


def validate_resource_name(name: str) -> None:
    if not name or not RESOURCE_NAME_PATTERN.match(name):
        raise HTTPException(status_code=400, detail="Invalid resource name")


def validate_paging(page: Optional[int], per_page: Optional[int], *, default_per_page: int, max_per_page: int) -> Tuple[int, int]:
    """Check the paging query parameters and fill in defaults.

    Returns the ``(page, per_page)`` pair to query with.
    """
    if page is None:
        page = 1
    if per_page is None:
        per_page = default_per_page

    if page < 1:
        raise HTTPException(status_code=400, detail="page must be a positive integer")

    if per_page < 1 or per_page > max_per_page:
        raise HTTPException(status_code=400, detail=f"per_page must be between 1 and {max_per_page}")

    return page, per_page
