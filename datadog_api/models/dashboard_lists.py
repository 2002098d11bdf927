"""Dashboard list models.

Dashboard lists organise dashboards so they are easier to find and share.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import DatadogModel, DatadogRequest, build_path_and_query, path_segment


class DashboardType(str, Enum):
    """Enumeration of dashboard types inside a list."""
    CUSTOM_TIMEBOARD = "custom_timeboard"
    CUSTOM_SCREENBOARD = "custom_screenboard"
    INTEGRATION_SCREENBOARD = "integration_screenboard"
    INTEGRATION_TIMEBOARD = "integration_timeboard"
    HOST_TIMEBOARD = "host_timeboard"


class Author(DatadogModel):
    """Creator of a dashboard."""

    email: Optional[str] = Field(None, description="Email of the creator")
    handle: Optional[str] = Field(None, description="Handle of the creator")
    name: Optional[str] = Field(None, description="Name of the creator")


class DashboardListItem(DatadogModel):
    """Dashboard within a list."""

    id: str = Field(..., description="ID of the dashboard")
    type: DashboardType = Field(..., description="Type of the dashboard")
    title: Optional[str] = Field(None, description="Title of the dashboard")
    author: Optional[Author] = Field(None, description="Creator of the dashboard")
    created: Optional[str] = Field(None, description="Date of creation")
    modified: Optional[str] = Field(None, description="Date of last edition")
    icon: Optional[str] = Field(None, description="URL to the icon of the dashboard")
    is_favorite: Optional[bool] = Field(None, description="Whether the dashboard is a favorite")
    is_read_only: Optional[bool] = Field(None, description="Whether the dashboard is read only")
    is_shared: Optional[bool] = Field(None, description="Whether the dashboard is publicly shared")
    popularity: Optional[int] = Field(None, description="Popularity of the dashboard")
    url: Optional[str] = Field(None, description="URL path to the dashboard")


class DashboardReference(DatadogModel):
    """Dashboard to add to or remove from a list."""

    id: str = Field(..., description="ID of the dashboard")
    type: DashboardType = Field(..., description="Type of the dashboard")


def _items_path(dashboard_list_id: int) -> str:
    list_id = path_segment(dashboard_list_id, "dashboard_list_id")
    return build_path_and_query(f"/api/v2/dashboard/lists/manual/{list_id}/dashboards")


class GetDashboardListItemsRequest(DatadogRequest):
    """Fetch the dashboard definitions of a list."""

    dashboard_list_id: int = Field(..., exclude=True, description="ID of the dashboard list")

    def path_and_query(self) -> str:
        return _items_path(self.dashboard_list_id)


class GetDashboardListItemsResponse(DatadogModel):
    """Dashboards within a list."""

    dashboards: List[DashboardListItem] = Field(..., description="Dashboards in the list")
    total: Optional[int] = Field(None, description="Number of dashboards in the list")


class AddDashboardListItemsRequest(DatadogRequest):
    """Add dashboards to an existing dashboard list."""

    dashboard_list_id: int = Field(..., exclude=True, description="ID of the dashboard list")
    dashboards: List[DashboardReference] = Field(default_factory=list, description="Dashboards to add")

    def path_and_query(self) -> str:
        return _items_path(self.dashboard_list_id)


class AddDashboardListItemsResponse(DatadogModel):
    """Dashboards added to the list."""

    added_dashboards_to_list: List[DashboardReference] = Field(default_factory=list)


class DeleteDashboardListItemsRequest(DatadogRequest):
    """Remove dashboards from an existing dashboard list."""

    dashboard_list_id: int = Field(..., exclude=True, description="ID of the dashboard list")
    dashboards: List[DashboardReference] = Field(default_factory=list, description="Dashboards to remove")

    def path_and_query(self) -> str:
        return _items_path(self.dashboard_list_id)


class DeleteDashboardListItemsResponse(DatadogModel):
    """Dashboards removed from the list."""

    deleted_dashboards_from_list: List[DashboardReference] = Field(default_factory=list)
