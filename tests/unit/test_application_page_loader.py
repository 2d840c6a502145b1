"""Unit tests for LatestPageLoader (last request wins)."""

import asyncio

import pytest

from src.application.services import LatestPageLoader
from src.core.result import Success
from src.domain.value_objects import PageResult, PageSpec


def _page(spec: PageSpec, label: str) -> Success:
    return Success(
        value=PageResult(
            records=({"label": label},), total=1, page=spec.page, page_size=spec.page_size
        )
    )


@pytest.mark.unit
class TestLatestPageLoader:
    """Test superseded loads never deliver results."""

    async def test_single_load_returns_result(self):
        async def fetch(collection, spec):
            return _page(spec, collection)

        loader = LatestPageLoader(fetch)

        result = await loader.load("leads", PageSpec(page=1, page_size=20))

        assert result.value.records == ({"label": "leads"},)
        assert loader.sequence == 1

    async def test_older_load_is_superseded(self):
        # Arrange
        first_started = asyncio.Event()
        release_first = asyncio.Event()

        async def fetch(collection, spec):
            if spec.search == "ac":
                first_started.set()
                await release_first.wait()
            return _page(spec, spec.search)

        loader = LatestPageLoader(fetch)

        # Act
        older = asyncio.create_task(
            loader.load("leads", PageSpec(page=1, page_size=20, search="ac"))
        )
        await first_started.wait()
        newer = await loader.load("leads", PageSpec(page=1, page_size=20, search="acme"))

        # Assert
        assert await older is None
        assert newer.value.records == ({"label": "acme"},)
        assert loader.sequence == 2

    async def test_slow_page_request_loses_to_later_one(self):
        # Arrange
        gate = asyncio.Event()

        async def fetch(collection, spec):
            if spec.page == 2:
                await gate.wait()
            return _page(spec, str(spec.page))

        loader = LatestPageLoader(fetch)

        # Act
        slow = asyncio.create_task(loader.load("leads", PageSpec(page=2, page_size=10)))
        await asyncio.sleep(0)
        fast = await loader.load("leads", PageSpec(page=3, page_size=10))
        gate.set()

        # Assert
        assert fast.value.page == 3
        assert await slow is None

    async def test_caller_cancellation_propagates(self):
        started = asyncio.Event()

        async def fetch(collection, spec):
            started.set()
            await asyncio.sleep(10)

        loader = LatestPageLoader(fetch)
        task = asyncio.create_task(loader.load("leads", PageSpec(page=1, page_size=10)))
        await started.wait()

        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
