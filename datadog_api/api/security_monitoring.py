"""Security monitoring API."""

from typing import Optional

from ..client import Client
from ..models.security_monitoring import ListRulesRequest, ListRulesResponse


class SecurityMonitoringAPI:
    """List detection rules."""

    def __init__(self, client: Client):
        self.client = client

    async def list_rules(self, request: Optional[ListRulesRequest] = None) -> ListRulesResponse:
        """Return one page of rules; the API defaults to 10 rules per page."""
        request = request or ListRulesRequest()
        return await self.client.get(request.path_and_query(), ListRulesResponse)
