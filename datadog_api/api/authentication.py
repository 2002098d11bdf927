"""Authentication API: API key validation."""

import logging
from typing import Optional

from ..client import Client
from ..models.authentication import ValidateRequest, ValidateResponse

logger = logging.getLogger(__name__)


class AuthenticationAPI:
    """Checks the credentials a client is configured with."""

    def __init__(self, client: Client):
        self.client = client

    async def validate(self, request: Optional[ValidateRequest] = None) -> ValidateResponse:
        """Check whether the API key is valid.

        Raises:
            APIError: 403 with the API's messages when the key is invalid
        """
        request = request or ValidateRequest()
        response = await self.client.get(request.path_and_query(), ValidateResponse)
        logger.info("Validated API key", extra={"valid": response.valid})
        return response
