"""Unit tests for auto-pagination.

Pages are served by an AsyncMock executor so each test can count fetches and
inspect the ``p``/``ps`` cursor sent for every page.
"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from sonarqube.web.core import PaginationState, ServerError, ValidationError, ValidationReason
from sonarqube.web.resources.projects import SearchProjectsBuilder, SearchProjectsResponse


def project_page(index: int, size: int, total: int, keys: list[str]) -> SearchProjectsResponse:
    return SearchProjectsResponse.model_validate(
        {
            "paging": {"pageIndex": index, "pageSize": size, "total": total},
            "components": [{"key": k, "name": k.upper()} for k in keys],
        }
    )


def serve(total: int, size: int) -> AsyncMock:
    """Executor answering any page of a ``total``-item result set."""
    keys = [f"p{i}" for i in range(total)]

    async def execute(params):
        index, ps = params["p"], params["ps"]
        chunk = keys[(index - 1) * ps : index * ps]
        return project_page(index, ps, total, chunk)

    return AsyncMock(side_effect=execute)


class TestPageWalk:
    """Test ordering, termination and fetch counts."""

    @pytest.mark.asyncio
    async def test_two_pages_three_items(self):
        """Test 3 items over pages of 2 yield in order with exactly 2 fetches."""
        executor = AsyncMock(
            side_effect=[
                project_page(1, 2, 3, ["a", "b"]),
                project_page(2, 2, 3, ["c"]),
            ]
        )
        builder = SearchProjectsBuilder(executor).page_size(2)

        keys = [project.key async for project in builder.all()]

        assert keys == ["a", "b", "c"]
        assert executor.await_count == 2
        assert [c.args[0]["p"] for c in executor.await_args_list] == [1, 2]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("total,size", [(0, 5), (1, 5), (5, 5), (6, 5), (23, 4), (10, 1)])
    async def test_fetch_count_is_ceiling(self, total, size):
        """Test N items over pages of k take exactly ceil(N/k) fetches."""
        executor = serve(total, size)
        builder = SearchProjectsBuilder(executor).page_size(size)

        items = await builder.to_list()

        assert [p.key for p in items] == [f"p{i}" for i in range(total)]
        assert executor.await_count == max(1, -(-total // size))

    @pytest.mark.asyncio
    async def test_early_exit_does_not_fetch_next_page(self):
        """Test stopping inside page 1 never requests page 2."""
        executor = serve(total=10, size=3)
        seen = []
        async for project in SearchProjectsBuilder(executor).page_size(3).all():
            seen.append(project.key)
            if len(seen) == 3:
                break

        assert seen == ["p0", "p1", "p2"]
        assert executor.await_count == 1

    @pytest.mark.asyncio
    async def test_each_page_gets_its_own_params(self):
        """Test filters are kept and the builder itself is not mutated."""
        executor = serve(total=4, size=2)
        builder = SearchProjectsBuilder(executor).query("api").page_size(2)

        await builder.to_list()

        sent = [c.args[0] for c in executor.await_args_list]
        assert sent == [
            {"q": "api", "ps": 2, "p": 1},
            {"q": "api", "ps": 2, "p": 2},
        ]
        assert builder.params == {"q": "api", "ps": 2}

    @pytest.mark.asyncio
    async def test_starts_from_requested_page(self):
        executor = serve(total=6, size=2)
        items = await SearchProjectsBuilder(executor).page(2).page_size(2).to_list()

        assert [p.key for p in items] == ["p2", "p3", "p4", "p5"]
        assert [c.args[0]["p"] for c in executor.await_args_list] == [2, 3]

    @pytest.mark.asyncio
    async def test_default_page_size(self):
        executor = serve(total=1, size=100)
        await SearchProjectsBuilder(executor).to_list()
        assert executor.await_args.args[0]["ps"] == 100

    @pytest.mark.asyncio
    async def test_empty_page_stops_walk(self):
        """Test an empty page ends iteration even if total claims more."""
        executor = AsyncMock(
            side_effect=[project_page(1, 2, 10, ["a", "b"]), project_page(2, 2, 10, [])]
        )
        items = await SearchProjectsBuilder(executor).page_size(2).to_list()

        assert [p.key for p in items] == ["a", "b"]
        assert executor.await_count == 2

    @pytest.mark.asyncio
    async def test_is_last_page_fallback(self):
        """Test raw pages without paging use isLastPage."""
        executor = AsyncMock(
            side_effect=[
                {"components": [{"key": "a"}], "isLastPage": False},
                {"components": [{"key": "b"}], "isLastPage": True},
            ]
        )
        items = await SearchProjectsBuilder(executor).to_list()

        assert items == [{"key": "a"}, {"key": "b"}]
        assert executor.await_count == 2

    @pytest.mark.asyncio
    async def test_raw_paging_descriptor(self):
        """Test raw pages with a paging mapping follow the same has-more rule."""
        pages = [
            {"paging": {"pageIndex": i, "pageSize": 1, "total": 2}, "components": [{"key": k}]}
            for i, k in ((1, "a"), (2, "b"))
        ]
        executor = AsyncMock(side_effect=pages)
        items = await SearchProjectsBuilder(executor).page_size(1).to_list()

        assert items == [{"key": "a"}, {"key": "b"}]
        assert executor.await_count == 2

    def test_has_more_pages_matches_paging_model(self):
        builder = SearchProjectsBuilder(AsyncMock())
        middle = project_page(2, 5, 11, ["x"])
        last = project_page(3, 5, 11, ["y"])

        assert builder.has_more_pages(middle) is middle.paging.has_more is True
        assert builder.has_more_pages(last) is last.paging.has_more is False

    @pytest.mark.asyncio
    async def test_no_descriptor_means_single_page(self):
        executor = AsyncMock(return_value={"components": [{"key": "a"}]})
        items = await SearchProjectsBuilder(executor).to_list()

        assert items == [{"key": "a"}]
        assert executor.await_count == 1


class TestPageValidation:
    """Test page parameters are checked before any fetch."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [0, 501])
    async def test_page_size_out_of_range(self, size):
        executor = AsyncMock()
        with pytest.raises(ValidationError) as exc_info:
            await SearchProjectsBuilder(executor).page_size(size).to_list()

        assert exc_info.value.reason == ValidationReason.OUT_OF_RANGE
        assert exc_info.value.field == "ps"
        executor.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_index_below_one(self):
        executor = AsyncMock()
        with pytest.raises(ValidationError):
            await SearchProjectsBuilder(executor).page(0).execute()
        executor.assert_not_called()

    @pytest.mark.asyncio
    async def test_builder_rules_apply_to_walk(self):
        executor = AsyncMock()
        with pytest.raises(ValidationError) as exc_info:
            await SearchProjectsBuilder(executor).qualifiers(["NOPE"]).first()
        assert exc_info.value.reason == ValidationReason.INVALID_CHOICE
        executor.assert_not_called()


class TestPageIteratorState:
    """Test iterator state, failures and convenience accessors."""

    @pytest.mark.asyncio
    async def test_state_transitions(self):
        executor = serve(total=3, size=2)
        iterator = SearchProjectsBuilder(executor).page_size(2).all()
        assert iterator.state == PaginationState.READY

        await anext(iterator)
        assert iterator.state == PaginationState.HAS_PAGE
        assert iterator.total == 3

        rest = [p async for p in iterator]
        assert len(rest) == 2
        assert iterator.state == PaginationState.EXHAUSTED
        assert iterator.pages_fetched == 2
        assert iterator.items_yielded == 3

    @pytest.mark.asyncio
    async def test_failure_mid_walk(self):
        """Test a failing page surfaces after earlier items were delivered."""
        executor = AsyncMock(
            side_effect=[project_page(1, 2, 4, ["a", "b"]), ServerError("boom", status_code=500)]
        )
        iterator = SearchProjectsBuilder(executor).page_size(2).all()
        seen = []

        with pytest.raises(ServerError):
            async for project in iterator:
                seen.append(project.key)

        assert seen == ["a", "b"]
        assert iterator.state == PaginationState.FAILED
        with pytest.raises(StopAsyncIteration):
            await anext(iterator)
        assert executor.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, caplog):
        executor = AsyncMock(side_effect=ServerError("boom", status_code=500))
        with caplog.at_level(logging.WARNING, logger="sonarqube.web.runtime.builders.telemetry"):
            with pytest.raises(ServerError):
                await SearchProjectsBuilder(executor).to_list()

        record = next(r for r in caplog.records if r.getMessage() == "page_error")
        assert record.page_index == 1
        assert record.error_type == "ServerError"

    @pytest.mark.asyncio
    async def test_aclose_stops_walk(self):
        executor = serve(total=10, size=2)
        iterator = SearchProjectsBuilder(executor).page_size(2).all()
        await anext(iterator)
        await iterator.aclose()

        with pytest.raises(StopAsyncIteration):
            await anext(iterator)
        assert iterator.state == PaginationState.EXHAUSTED
        assert executor.await_count == 1

    @pytest.mark.asyncio
    async def test_first(self):
        """Test first() fetches a single page."""
        executor = serve(total=10, size=5)
        project = await SearchProjectsBuilder(executor).page_size(5).first()

        assert project.key == "p0"
        assert executor.await_count == 1

    @pytest.mark.asyncio
    async def test_first_on_empty_result(self):
        executor = serve(total=0, size=5)
        assert await SearchProjectsBuilder(executor).first() is None

    @pytest.mark.asyncio
    async def test_pages_yields_whole_pages(self):
        executor = serve(total=5, size=2)
        pages = [page async for page in SearchProjectsBuilder(executor).page_size(2).pages()]

        assert [len(p.components) for p in pages] == [2, 2, 1]
        assert [p.paging.page_index for p in pages] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_all_restarts(self):
        """Test each all() call starts a fresh walk."""
        executor = serve(total=2, size=5)
        builder = SearchProjectsBuilder(executor)

        first = await builder.to_list()
        second = await builder.to_list()

        assert [p.key for p in first] == [p.key for p in second]
        assert executor.await_count == 2

    @pytest.mark.asyncio
    async def test_execute_returns_single_page(self):
        executor = serve(total=10, size=3)
        response = await SearchProjectsBuilder(executor).page(2).page_size(3).execute()

        assert [p.key for p in response.components] == ["p3", "p4", "p5"]
        assert response.paging.has_more is True
