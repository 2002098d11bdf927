"""Dashboards API."""

import logging

from ..client import Client
from ..models.dashboards import (
    CreateDashboardRequest,
    Dashboard,
    DeleteDashboardRequest,
    DeleteDashboardResponse,
    GetDashboardRequest,
    UpdateDashboardRequest
)

logger = logging.getLogger(__name__)


class DashboardsAPI:
    """Create, read, update and delete dashboards."""

    def __init__(self, client: Client):
        self.client = client

    async def create_dashboard(self, request: CreateDashboardRequest) -> Dashboard:
        """Create a dashboard from ``request``.

        Returns:
            The created dashboard, including its new ID
        """
        logger.info(
            "Creating dashboard",
            extra={"title": request.title, "widget_count": len(request.widgets)}
        )
        return await self.client.post(request.path_and_query(), request.body(), Dashboard)

    async def get_dashboard(self, request: GetDashboardRequest) -> Dashboard:
        return await self.client.get(request.path_and_query(), Dashboard)

    async def update_dashboard(self, request: UpdateDashboardRequest) -> Dashboard:
        """Replace the dashboard ``request.dashboard_id`` with ``request``.

        Raises:
            ValidationError: If the dashboard ID is empty
        """
        path_and_query = request.path_and_query()
        logger.info(
            "Updating dashboard",
            extra={"dashboard_id": request.dashboard_id, "title": request.title}
        )
        return await self.client.put(path_and_query, request.body(), Dashboard)

    async def delete_dashboard(self, request: DeleteDashboardRequest) -> DeleteDashboardResponse:
        path_and_query = request.path_and_query()
        logger.info("Deleting dashboard", extra={"dashboard_id": request.dashboard_id})
        return await self.client.delete(path_and_query, DeleteDashboardResponse)
