"""Page slicing for in-memory ordered result collections."""

from collections.abc import Sequence
from typing import TypeVar

from app.application.dtos.people import PageResult

T = TypeVar("T")


def slice_page(items: Sequence[T], page_number: int, page_size: int) -> PageResult[T]:
    """Return the 1-indexed page of items at page_size.

    The page is items[(page_number - 1) * page_size : page_number * page_size],
    clipped to the collection. page_number below 1 is treated as 1; a page past
    the end is empty (not an error). items is never mutated or reordered.

    Args:
        items: Full ordered result collection.
        page_number: Requested page (1-indexed).
        page_size: Items per page; must be positive.

    Returns:
        PageResult with the page items and pagination metadata.

    Raises:
        ValueError: If page_size is less than 1.
    """
    if page_size < 1:
        raise ValueError("page_size must be a positive integer")
    page_number = max(1, page_number)
    total = len(items)
    offset = (page_number - 1) * page_size
    page = list(items[offset : offset + page_size])
    return PageResult(
        items=page,
        total=total,
        page_number=page_number,
        page_size=page_size,
        has_more=offset + page_size < total,
    )
