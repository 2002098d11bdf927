"""Log search models.

The search endpoint returns logs matching a query, one page at a time. The
``meta.page.after`` cursor of a response asks for the following page.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import DatadogModel, DatadogRequest


class LogsSort(str, Enum):
    """Sort order of a log search."""
    TIMESTAMP_ASC = "timestamp"
    TIMESTAMP_DESC = "-timestamp"


class LogsQueryFilter(DatadogModel):
    """The search and filter query settings.

    ``from`` and ``to`` accept date math (``now-15m``) as well as timestamps.
    """

    from_: Optional[str] = Field(None, alias="from", description="Minimum time of the requested logs")
    to: Optional[str] = Field(None, description="Maximum time of the requested logs")
    indexes: Optional[List[str]] = Field(None, description="Indexes to search, defaults to all")
    query: Optional[str] = Field(None, description="Search query following the log search syntax")


class LogsQueryOptions(DatadogModel):
    """Global query options. Supply either a timezone or a time offset, not both."""

    time_offset: Optional[int] = Field(None, alias="timeOffset", description="Time offset in seconds")
    timezone: Optional[str] = Field(None, description="Timezone, e.g. UTC+03:00")


class LogsListRequestPage(DatadogModel):
    """Paging attributes for listing logs."""

    cursor: Optional[str] = Field(None, description="Cursor from a previous response")
    limit: Optional[int] = Field(None, description="Maximum number of logs in the response")


class LogsSearchRequest(DatadogRequest):
    """Search logs matching a query."""

    filter: Optional[LogsQueryFilter] = None
    options: Optional[LogsQueryOptions] = None
    page: Optional[LogsListRequestPage] = None
    sort: Optional[LogsSort] = None

    def path_and_query(self) -> str:
        return "/api/v2/logs/events/search"


class LogType(str, Enum):
    LOG = "log"


class LogsResponseStatus(str, Enum):
    DONE = "done"
    TIMEOUT = "timeout"


class Log(DatadogModel):
    """A single log event.

    ``attributes`` is open ended: it maps attribute names to arbitrary JSON
    values.
    """

    id: str = Field(..., description="Unique ID of the log")
    attributes: Dict[str, Any] = Field(default_factory=dict)
    type: Optional[LogType] = None


class LogsWarning(DatadogModel):
    """A non fatal error; partial results may be returned."""

    code: Optional[str] = None
    detail: Optional[str] = None
    title: Optional[str] = None


class LogsResponseMetadataPage(DatadogModel):
    after: Optional[str] = Field(None, description="Cursor for the next page of results")


class LogsResponseMetadata(DatadogModel):
    """The metadata associated with a request."""

    elapsed: Optional[int] = Field(None, description="Time elapsed in milliseconds")
    page: Optional[LogsResponseMetadataPage] = None
    request_id: Optional[str] = None
    status: Optional[LogsResponseStatus] = None
    warnings: Optional[List[LogsWarning]] = None


class LogsResponseLinks(DatadogModel):
    next: Optional[str] = Field(None, description="Link for the next set of results")


class LogsSearchResponse(DatadogModel):
    """Logs matching a search and the pagination information."""

    data: List[Log] = Field(default_factory=list)
    links: Optional[LogsResponseLinks] = None
    meta: Optional[LogsResponseMetadata] = None

    @property
    def next_cursor(self) -> Optional[str]:
        """Cursor of the following page, or None on the last page."""
        if self.meta is None or self.meta.page is None:
            return None
        return self.meta.page.after or None
