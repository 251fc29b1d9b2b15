"""Structured logging for pagination.

Records carry their fields in ``extra`` so log pipelines can index them.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    builder: str,
    page_index: int,
    page_size: int,
    items: int,
    total: int | None,
    has_more: bool,
) -> None:
    """Log one successfully decoded page.

    Args:
        builder: Builder class name
        page_index: 1-based index of the page just fetched
        page_size: Requested page size
        items: Number of items the page carried
        total: Total items reported by the server, if any
        has_more: Whether another page will be requested
    """
    logger.debug(
        "page_fetched",
        extra={
            "builder": builder,
            "page_index": page_index,
            "page_size": page_size,
            "items": items,
            "total": total,
            "has_more": has_more,
        },
    )


def log_pagination_complete(*, builder: str, pages_fetched: int, items_yielded: int) -> None:
    logger.debug(
        "pagination_complete",
        extra={
            "builder": builder,
            "pages_fetched": pages_fetched,
            "items_yielded": items_yielded,
        },
    )


def log_page_error(*, builder: str, page_index: int, error_type: str, error_message: str) -> None:
    """Log a page fetch that failed; the error is re-raised by the caller."""
    logger.warning(
        "page_error",
        extra={
            "builder": builder,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
