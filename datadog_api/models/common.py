"""Shared building blocks for Datadog request and response models."""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ValidationError


class DatadogModel(BaseModel):
    """Base model for every Datadog wire structure.

    Fields are populated by their Python name or by their wire alias, and
    unknown response fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Render the model as the JSON object sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorResponse(DatadogModel):
    """Body returned by every endpoint on a non-2xx status."""

    errors: List[str] = Field(..., description="Human-readable error messages")


def build_path_and_query(path: str, params: Sequence[Tuple[str, Any]] = ()) -> str:
    """Join a path with its query parameters.

    Parameters whose value is ``None`` are dropped, booleans render as
    ``true``/``false`` and the remaining order is preserved.
    """
    pairs = []
    for name, value in params:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((name, str(value)))

    if not pairs:
        return path
    return f"{path}?{urlencode(pairs, quote_via=quote, safe='[]:,')}"


def path_segment(value: Any, field_name: str) -> str:
    """Validate and escape an identifier substituted into a URL path.

    Raises:
        ValidationError: If the identifier is empty, or a non-positive integer
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(
            f"{field_name} is required",
            field_name=field_name,
            field_value=value
        )
    if isinstance(value, int):
        if value <= 0:
            raise ValidationError(
                f"{field_name} must be a positive integer",
                field_name=field_name,
                field_value=value
            )
        return str(value)

    text = str(value).strip()
    if not text:
        raise ValidationError(
            f"{field_name} cannot be empty",
            field_name=field_name,
            field_value=value
        )
    return quote(text, safe="")


class DatadogRequest(DatadogModel):
    """A single API call's parameters.

    Subclasses mark path and query fields with ``exclude=True`` so they never
    leak into the JSON body, and implement ``path_and_query``.
    """

    def path_and_query(self) -> str:
        raise NotImplementedError

    def body(self) -> Optional[Dict[str, Any]]:
        """JSON body for write verbs."""
        return self.to_wire()
