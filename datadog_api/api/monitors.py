"""Monitors API."""

import logging

from ..client import Client
from ..models.monitors import (
    CreateMonitorRequest,
    DeleteMonitorRequest,
    DeleteMonitorResponse,
    EditMonitorRequest,
    GetMonitorRequest,
    Monitor,
    MonitorsSearchRequest,
    MonitorsSearchResponse
)
from ..pagination import MonitorSearchPaginator

logger = logging.getLogger(__name__)


class MonitorsAPI:
    """Search, create, read, edit and delete monitors."""

    def __init__(self, client: Client):
        self.client = client

    async def search(self, request: MonitorsSearchRequest) -> MonitorsSearchResponse:
        """Return one page of monitors matching ``request``."""
        response = await self.client.get(request.path_and_query(), MonitorsSearchResponse)
        logger.debug(
            "Searched monitors",
            extra={
                "query": request.query,
                "page": response.metadata.page,
                "page_count": response.metadata.page_count,
                "count": len(response.monitors)
            }
        )
        return response

    def iter_search(self, request: MonitorsSearchRequest) -> MonitorSearchPaginator:
        """Iterate over every monitor matching ``request``, page by page.

        Nothing is fetched until the first monitor is requested.
        """
        return MonitorSearchPaginator(self, request)

    async def create_monitor(self, request: CreateMonitorRequest) -> Monitor:
        logger.info(
            "Creating monitor",
            extra={"monitor_name": request.name, "monitor_type": request.type.value}
        )
        return await self.client.post(request.path_and_query(), request.body(), Monitor)

    async def get_monitor(self, request: GetMonitorRequest) -> Monitor:
        return await self.client.get(request.path_and_query(), Monitor)

    async def edit_monitor(self, request: EditMonitorRequest) -> Monitor:
        """Replace the definition of monitor ``request.monitor_id``.

        Raises:
            ValidationError: If the monitor ID is not a positive integer
        """
        path_and_query = request.path_and_query()
        logger.info("Editing monitor", extra={"monitor_id": request.monitor_id})
        return await self.client.put(path_and_query, request.body(), Monitor)

    async def delete_monitor(self, request: DeleteMonitorRequest) -> DeleteMonitorResponse:
        path_and_query = request.path_and_query()
        logger.info(
            "Deleting monitor",
            extra={"monitor_id": request.monitor_id, "force": request.force}
        )
        return await self.client.delete(path_and_query, DeleteMonitorResponse)
