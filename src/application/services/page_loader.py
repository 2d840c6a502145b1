"""Last-request-wins page loading.

A controller that fires page requests faster than they complete (typing in
a search box, clicking through pages) must only render the newest answer.
Each load() supersedes the previous one: the older in-flight load is
cancelled and its caller receives None instead of a stale page.

Usage:
    loader = LatestPageLoader(handler.paginate)
    result = await loader.load("leads", PageSpec(page=1, page_size=20, search="ac"))
    if result is None:
        return  # a newer request replaced this one
"""

import asyncio
from collections.abc import Awaitable, Callable

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects import PageResult, PageSpec

type PageFetcher = Callable[[str, PageSpec], Awaitable[Result[PageResult, DomainError]]]


class LatestPageLoader:
    """Serializes page loads so only the latest request delivers a result.

    Attributes:
        _fetch: Function fetching one page (usually handler.paginate).
        _sequence: Number of the most recent load() call.
        _current: Task of the most recent load, if still running.
    """

    def __init__(self, fetch: PageFetcher) -> None:
        self._fetch = fetch
        self._sequence = 0
        self._current: asyncio.Task[Result[PageResult, DomainError]] | None = None

    @property
    def sequence(self) -> int:
        return self._sequence

    async def load(
        self, collection: str, spec: PageSpec
    ) -> Result[PageResult, DomainError] | None:
        """Load a page, superseding any load still in flight.

        Returns:
            The fetch result, or None if a newer load() replaced this one.

        Raises:
            asyncio.CancelledError: If the caller itself was cancelled.
        """
        self._sequence += 1
        ticket = self._sequence

        if self._current is not None and not self._current.done():
            self._current.cancel()

        task = asyncio.ensure_future(self._fetch(collection, spec))
        self._current = task
        try:
            result = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if ticket != self._sequence and (current is None or not current.cancelling()):
                return None
            raise

        if ticket != self._sequence:
            return None
        return result
