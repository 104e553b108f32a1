"""Bounded pagination shared by every paginated listing."""

import logging
from typing import Callable, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def accumulate(fetch_page: Callable[[int], Sequence[T]], start: int, limit: int) -> List[T]:
    """
    Walk pages ``start, start + 1, ...`` until ``limit`` records are collected.

    Args:
        fetch_page: Returns the records found on the given page number
        start: First page number to request
        limit: Maximum number of records to return

    Returns:
        At most ``limit`` records, in page order then document order.

    The loop stops as soon as a page comes back empty (end of data) or the
    limit is reached. When a page holds more records than are still needed,
    only the leading ones are kept and no further page is requested. With
    ``limit == 0`` nothing is fetched at all. Errors raised by ``fetch_page``
    propagate unchanged.
    """
    result: List[T] = []
    page = start

    while len(result) < limit:
        batch = fetch_page(page)
        logger.debug("Page %d returned %d records", page, len(batch))
        if not batch:
            break

        remaining = limit - len(result)
        if len(batch) > remaining:
            result.extend(batch[:remaining])
            break
        result.extend(batch)

        page += 1

    return result
