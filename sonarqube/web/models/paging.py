"""Page descriptor models shared by all paginated endpoints."""

from __future__ import annotations

from pydantic import Field

from .base import ApiModel


class Paging(ApiModel):
    """Position of one page within a result set.

    ``page_index`` and ``page_size`` describe the page just fetched;
    ``total`` counts items across all pages.
    """

    page_index: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total: int = Field(..., ge=0)

    @property
    def has_more(self) -> bool:
        return self.page_index * self.page_size < self.total


class PaginatedResponse(ApiModel):
    """Common envelope for paginated search responses.

    Classic endpoints send ``paging``; some newer ones only send
    ``isLastPage``.
    """

    paging: Paging | None = None
    is_last_page: bool | None = None
