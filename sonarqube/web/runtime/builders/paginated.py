"""Auto-paginating request builder.

Architecture:
    ``PaginatedBuilder`` adds page parameters (``p``/``ps``) to a
    ``RequestBuilder`` and knows where a decoded page keeps its items.
    ``PageIterator`` walks the pages lazily: it fetches a page only when the
    consumer asks for an item and the previous page is drained, so stopping
    early never costs an extra request. Pages are fetched strictly one after
    another in increasing index order.

    Each page is fetched with a copy of the builder's parameters whose
    ``p``/``ps`` are overwritten; the builder itself is never mutated by a
    walk, so ``all()`` can be called again to start over.

Example:
    >>> async for project in client.projects.search().query("api").all():
    ...     print(project.key)
"""

from __future__ import annotations

from collections import deque
from collections.abc import AsyncIterator, Mapping
from typing import Any, ClassVar, Generic, Self, TypeVar

from ...config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ...core.enums import PaginationState
from ...models.paging import Paging
from .base import RequestBuilder, ResponseT
from .rules import InRange, Rule, validate
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete

ItemT = TypeVar("ItemT")


def _field(response: Any, name: str) -> Any:
    if isinstance(response, Mapping):
        return response.get(name)
    return getattr(response, name, None)


class PaginatedBuilder(RequestBuilder[ResponseT], Generic[ResponseT, ItemT]):
    """Request builder for endpoints answering with ``paging`` envelopes.

    Subclasses set ``items_field`` to the response attribute holding the
    page's items and may lower ``max_page_size`` / ``default_page_size``.
    """

    items_field: ClassVar[str] = "items"
    default_page_size: ClassVar[int] = DEFAULT_PAGE_SIZE
    max_page_size: ClassVar[int] = MAX_PAGE_SIZE

    def page(self, page_index: int) -> Self:
        """Set the 1-based page index."""
        return self._set_param("p", page_index)

    def page_size(self, size: int) -> Self:
        """Set the page size (1 to ``max_page_size``)."""
        return self._set_param("ps", size)

    def _validation_rules(self) -> tuple[Rule, ...]:
        return (
            InRange("p", minimum=1),
            InRange("ps", minimum=1, maximum=self.max_page_size),
            *self.rules,
        )

    def get_items(self, response: ResponseT) -> list[ItemT]:
        """Items carried by one decoded page."""
        return list(_field(response, self.items_field) or [])

    def has_more_pages(self, response: ResponseT) -> bool:
        """Decide from a page's descriptor whether another page exists."""
        paging = _field(response, "paging")
        if isinstance(paging, Mapping):
            paging = Paging.model_validate(paging)
        if paging is not None:
            return paging.has_more
        if isinstance(response, Mapping):
            is_last_page = response.get("isLastPage")
        else:
            is_last_page = getattr(response, "is_last_page", None)
        if is_last_page is not None:
            return not is_last_page
        return False

    def start_position(self) -> tuple[int, int]:
        """Page index and size a fresh walk starts from."""
        return self._params.get("p", 1), self._params.get("ps", self.default_page_size)

    async def fetch_page(self, page_index: int, page_size: int) -> ResponseT:
        """Validate and execute a single page with the given cursor."""
        params = {**self._params, "p": page_index, "ps": page_size}
        validate(params, self._validation_rules())
        return await self._executor(params)

    def all(self) -> PageIterator[ItemT]:
        """Lazy sequence of items across all pages, starting a new walk."""
        return PageIterator(self)

    async def pages(self) -> AsyncIterator[ResponseT]:
        """Yield whole decoded pages in order."""
        walk = PageIterator(self)
        while (response := await walk.next_page()) is not None:
            yield response

    async def to_list(self) -> list[ItemT]:
        """Drain every page into one list, preserving page order."""
        return [item async for item in self.all()]

    async def first(self) -> ItemT | None:
        """First item of the first page, or None; fetches at most one page."""
        iterator = self.all()
        try:
            return await anext(iterator)
        except StopAsyncIteration:
            return None
        finally:
            await iterator.aclose()


class PageIterator(Generic[ItemT]):
    """Single-pass async iterator over the items of a paginated query.

    Holds at most one page of items. ``state`` follows
    ``PaginationState``; once terminal, the iterator only raises
    ``StopAsyncIteration``. A failing fetch propagates its exception to the
    consumer at the point of the failing page; items already yielded stay
    valid.
    """

    def __init__(self, builder: PaginatedBuilder[Any, ItemT]) -> None:
        self._builder = builder
        self._buffer: deque[ItemT] = deque()
        self._next_index, self._page_size = builder.start_position()
        self._more = True
        self.state = PaginationState.READY
        self.pages_fetched = 0
        self.items_yielded = 0
        self.total: int | None = None

    def __aiter__(self) -> PageIterator[ItemT]:
        return self

    async def __anext__(self) -> ItemT:
        while not self._buffer:
            response = await self.next_page()
            if response is None:
                raise StopAsyncIteration
            self._buffer.extend(self._builder.get_items(response))
        self.items_yielded += 1
        return self._buffer.popleft()

    async def next_page(self) -> Any | None:
        """Fetch the next page, or return None once the walk is over."""
        if self.state.is_terminal:
            return None
        if not self._more:
            self._finish()
            return None

        page_index = self._next_index
        builder_name = type(self._builder).__name__
        self.state = PaginationState.FETCHING
        try:
            response = await self._builder.fetch_page(page_index, self._page_size)
        except Exception as e:
            self.state = PaginationState.FAILED
            log_page_error(
                builder=builder_name,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        items = self._builder.get_items(response)
        paging = _field(response, "paging")
        if paging is not None:
            self.total = _field(paging, "total")
        # An empty page ends the walk even if total claims otherwise
        self._more = bool(items) and self._builder.has_more_pages(response)
        self._next_index = page_index + 1
        self.pages_fetched += 1
        self.state = PaginationState.HAS_PAGE
        log_page_fetched(
            builder=builder_name,
            page_index=page_index,
            page_size=self._page_size,
            items=len(items),
            total=self.total,
            has_more=self._more,
        )
        return response

    async def aclose(self) -> None:
        """Stop the walk; no further pages are fetched."""
        self._buffer.clear()
        self._more = False
        self._finish()

    def _finish(self) -> None:
        if self.state.is_terminal:
            return
        self.state = PaginationState.EXHAUSTED
        log_pagination_complete(
            builder=type(self._builder).__name__,
            pages_fetched=self.pages_fetched,
            items_yielded=self.items_yielded,
        )
