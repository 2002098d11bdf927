"""Logs API."""

import logging
from typing import Optional

from ..client import Client
from ..models.logs import LogsSearchRequest, LogsSearchResponse
from ..pagination import LogSearchPaginator

logger = logging.getLogger(__name__)


class LogsAPI:
    """Search logs."""

    def __init__(self, client: Client):
        self.client = client

    async def search(self, request: Optional[LogsSearchRequest] = None) -> LogsSearchResponse:
        """Return one page of logs matching ``request``.

        An empty request searches every index with the API's default time
        range.
        """
        request = request or LogsSearchRequest()
        response = await self.client.post(request.path_and_query(), request.body(), LogsSearchResponse)
        logger.debug(
            "Searched logs",
            extra={
                "count": len(response.data),
                "has_next_page": response.next_cursor is not None
            }
        )
        return response

    def iter_search(self, request: Optional[LogsSearchRequest] = None) -> LogSearchPaginator:
        """Iterate over every log matching ``request``, following page cursors."""
        return LogSearchPaginator(self, request or LogsSearchRequest())
