"""Dashboard lists API."""

import logging

from ..client import Client
from ..models.dashboard_lists import (
    AddDashboardListItemsRequest,
    AddDashboardListItemsResponse,
    DeleteDashboardListItemsRequest,
    DeleteDashboardListItemsResponse,
    GetDashboardListItemsRequest,
    GetDashboardListItemsResponse
)

logger = logging.getLogger(__name__)


class DashboardListsAPI:
    """Manage the dashboards contained in manual dashboard lists."""

    def __init__(self, client: Client):
        self.client = client

    async def get_items(self, request: GetDashboardListItemsRequest) -> GetDashboardListItemsResponse:
        """Fetch the dashboards of a list."""
        return await self.client.get(request.path_and_query(), GetDashboardListItemsResponse)

    async def add_items(self, request: AddDashboardListItemsRequest) -> AddDashboardListItemsResponse:
        """Add dashboards to a list."""
        path_and_query = request.path_and_query()
        logger.info(
            "Adding dashboards to list",
            extra={
                "dashboard_list_id": request.dashboard_list_id,
                "count": len(request.dashboards)
            }
        )
        return await self.client.post(path_and_query, request.body(), AddDashboardListItemsResponse)

    async def delete_items(self, request: DeleteDashboardListItemsRequest) -> DeleteDashboardListItemsResponse:
        """Remove dashboards from a list.

        The dashboards to remove travel in the body of the DELETE request.
        """
        path_and_query = request.path_and_query()
        logger.info(
            "Removing dashboards from list",
            extra={
                "dashboard_list_id": request.dashboard_list_id,
                "count": len(request.dashboards)
            }
        )
        return await self.client.delete(
            path_and_query,
            DeleteDashboardListItemsResponse,
            body=request.body()
        )
