"""Lazy iteration over paginated search endpoints.

A paginator fetches one page at a time, strictly in order, and only when the
caller asks for an item beyond the ones already fetched. Paginators are
single use: once exhausted (or after a failed fetch) they stay exhausted, and
a new one has to be created to search again.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Generic, List, Optional, Sequence, Tuple, TypeVar

from .models.logs import Log, LogsListRequestPage, LogsSearchRequest
from .models.monitors import MonitorSearchResult, MonitorsSearchRequest

if TYPE_CHECKING:
    from .api.logs import LogsAPI
    from .api.monitors import MonitorsAPI


logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncPaginator(Generic[T]):
    """Base class holding the page buffer and the termination flag.

    Subclasses implement ``_fetch_page``, returning the items of the next
    page and whether another page follows it.
    """

    def __init__(self):
        self._buffer: Deque[T] = deque()
        self._done = False
        self.pages_fetched = 0

    async def _fetch_page(self) -> Tuple[Sequence[T], bool]:
        raise NotImplementedError

    def __aiter__(self) -> "AsyncPaginator[T]":
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if self._done:
                raise StopAsyncIteration

            # Stays finished if the fetch raises.
            self._done = True
            items, has_more = await self._fetch_page()
            self.pages_fetched += 1
            self._buffer.extend(items)
            self._done = not has_more

        return self._buffer.popleft()

    async def collect(self) -> List[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]


class MonitorSearchPaginator(AsyncPaginator[MonitorSearchResult]):
    """Iterates over monitor search results by page number.

    Starts at ``request.page`` (or 0) and keeps every other request field
    fixed. Stops after the page whose metadata reports it is the last one.
    """

    def __init__(self, monitors_api: "MonitorsAPI", request: MonitorsSearchRequest):
        super().__init__()
        self._api = monitors_api
        self._request = request
        self._page = request.page or 0

    async def _fetch_page(self) -> Tuple[Sequence[MonitorSearchResult], bool]:
        request = self._request.model_copy(update={"page": self._page})
        response = await self._api.search(request)

        metadata = response.metadata
        # metadata.page is zero based, page_count is a count
        has_more = metadata.page + 1 < metadata.page_count

        logger.debug(
            "Fetched monitor search page",
            extra={
                "page": metadata.page,
                "page_count": metadata.page_count,
                "count": len(response.monitors),
                "has_more": has_more
            }
        )

        self._page += 1
        return response.monitors, has_more


class LogSearchPaginator(AsyncPaginator[Log]):
    """Iterates over log search results by following ``meta.page.after``.

    Stops after the first response without a next cursor.
    """

    def __init__(self, logs_api: "LogsAPI", request: LogsSearchRequest):
        super().__init__()
        self._api = logs_api
        self._request = request
        self._cursor: Optional[str] = request.page.cursor if request.page else None

    async def _fetch_page(self) -> Tuple[Sequence[Log], bool]:
        page = self._request.page or LogsListRequestPage()
        request = self._request.model_copy(
            update={"page": page.model_copy(update={"cursor": self._cursor})}
        )
        response = await self._api.search(request)

        self._cursor = response.next_cursor
        logger.debug(
            "Fetched log search page",
            extra={"count": len(response.data), "has_more": self._cursor is not None}
        )
        return response.data, self._cursor is not None
