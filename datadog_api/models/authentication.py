"""Models for the API key validation endpoint.

Requests that write data need an API key; requests that read data need an
application key as well. The validation endpoint only checks the API key and
answers 403 when it is invalid.
"""

from pydantic import Field

from .common import DatadogModel, DatadogRequest


class ValidateRequest(DatadogRequest):
    """Check whether the configured API key is valid."""

    def path_and_query(self) -> str:
        return "/api/v1/validate"


class ValidateResponse(DatadogModel):
    """Result of an API key validation."""

    valid: bool = Field(..., description="Whether the API key is valid")
