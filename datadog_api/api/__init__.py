"""API areas of the Datadog client."""

from ..client import Client
from .authentication import AuthenticationAPI
from .dashboards import DashboardsAPI
from .dashboard_lists import DashboardListsAPI
from .logs import LogsAPI
from .monitors import MonitorsAPI
from .security_monitoring import SecurityMonitoringAPI


class DatadogAPI:
    """All API areas sharing a single transport client."""

    def __init__(self, client: Client):
        self.client = client
        self.authentication = AuthenticationAPI(client)
        self.dashboards = DashboardsAPI(client)
        self.dashboard_lists = DashboardListsAPI(client)
        self.logs = LogsAPI(client)
        self.monitors = MonitorsAPI(client)
        self.security_monitoring = SecurityMonitoringAPI(client)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


__all__ = [
    "DatadogAPI",
    "AuthenticationAPI",
    "DashboardsAPI",
    "DashboardListsAPI",
    "LogsAPI",
    "MonitorsAPI",
    "SecurityMonitoringAPI"
]
