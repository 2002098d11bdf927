"""Monitor models.

Monitors watch a metric or check and notify a team when a threshold is
crossed.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field

from .common import DatadogModel, DatadogRequest, build_path_and_query, path_segment


class MonitorType(str, Enum):
    """Enumeration of monitor types."""
    COMPOSITE = "composite"
    EVENT_ALERT = "event alert"
    LOG_ALERT = "log alert"
    METRIC_ALERT = "metric alert"
    PROCESS_ALERT = "process alert"
    QUERY_ALERT = "query alert"
    RUM_ALERT = "rum alert"
    SERVICE_CHECK = "service check"
    SYNTHETICS_ALERT = "synthetics alert"
    TRACE_ANALYTICS_ALERT = "trace-analytics alert"
    SLO_ALERT = "slo alert"
    EVENT_V2_ALERT = "event-v2 alert"
    AUDIT_ALERT = "audit alert"
    CI_PIPELINES_ALERT = "ci-pipelines alert"


class MonitorOverallState(str, Enum):
    """The different states a monitor can be in."""
    ALERT = "Alert"
    IGNORED = "Ignored"
    NO_DATA = "No Data"
    OK = "OK"
    SKIPPED = "Skipped"
    UNKNOWN = "Unknown"
    WARN = "Warn"


class MonitorsSearchRequest(DatadogRequest):
    """Search and filter monitor details.

    ``query`` takes the same space separated attributes as the Manage
    Monitors page, e.g. ``type:metric status:alert``. ``sort`` is a field and
    direction separated by a comma, e.g. ``name,asc``.
    """

    query: str = Field(default="", exclude=True, description="Monitor search query")
    page: Optional[int] = Field(None, exclude=True, ge=0, description="Page to start paginating from")
    per_page: Optional[int] = Field(None, exclude=True, ge=1, description="Monitors per page")
    sort: Optional[str] = Field(None, exclude=True, description="Sort order, e.g. name,asc")

    def path_and_query(self) -> str:
        return build_path_and_query(
            "/api/v1/monitor/search",
            [
                ("query", self.query),
                ("page", self.page),
                ("per_page", self.per_page),
                ("sort", self.sort),
            ]
        )

    def body(self) -> None:
        return None


class SearchFacet(DatadogModel):
    """A facet value and the number of monitors carrying it."""

    name: Union[bool, int, str, None] = None
    count: int = 0


class SearchFacetCounts(DatadogModel):
    """The counts of monitors per different criteria."""

    muted: List[SearchFacet] = Field(default_factory=list)
    status: List[SearchFacet] = Field(default_factory=list)
    tag: List[SearchFacet] = Field(default_factory=list)
    type: List[SearchFacet] = Field(default_factory=list)


class MonitorSearchMetadata(DatadogModel):
    """Pagination metadata of a monitor search."""

    page: int = Field(..., description="Current page")
    page_count: int = Field(..., description="Number of pages")
    per_page: Optional[int] = Field(None, description="Monitors per page")
    total_count: Optional[int] = Field(None, description="Total number of monitors")


class Creator(DatadogModel):
    """Object describing the creator of a monitor."""

    email: Optional[str] = None
    handle: Optional[str] = None
    name: Optional[str] = None


class MonitorNotification(DatadogModel):
    """A notification target of a monitor."""

    handle: Optional[str] = None
    name: Optional[str] = None


class MonitorSearchResult(DatadogModel):
    """A monitor found by a search."""

    id: int = Field(..., description="ID of the monitor")
    name: Optional[str] = None
    classification: Optional[str] = None
    creator: Optional[Creator] = None
    last_triggered_ts: Optional[int] = None
    metrics: List[str] = Field(default_factory=list)
    notifications: List[MonitorNotification] = Field(default_factory=list)
    org_id: Optional[int] = None
    query: Optional[str] = None
    scopes: List[str] = Field(default_factory=list)
    status: Optional[MonitorOverallState] = None
    tags: List[str] = Field(default_factory=list)
    type: Optional[MonitorType] = None


class MonitorsSearchResponse(DatadogModel):
    """The response of a monitor search."""

    monitors: List[MonitorSearchResult] = Field(default_factory=list)
    metadata: MonitorSearchMetadata
    counts: Optional[SearchFacetCounts] = None


class MonitorThresholds(DatadogModel):
    """The different monitor thresholds available."""

    critical: Optional[float] = None
    critical_recovery: Optional[float] = None
    ok: Optional[float] = None
    unknown: Optional[float] = None
    warning: Optional[float] = None
    warning_recovery: Optional[float] = None


class MonitorThresholdWindows(DatadogModel):
    """Alerting time window options."""

    recovery_window: Optional[str] = None
    trigger_window: Optional[str] = None


class MonitorOptionsAggregation(DatadogModel):
    """Type of aggregation performed in the monitor query."""

    group_by: Optional[str] = None
    metric: Optional[str] = None
    type: Optional[str] = None


class MonitorOptions(DatadogModel):
    """Options of a monitor.

    Every option is optional; unset options are left out of the request so
    Datadog applies its own defaults.
    """

    aggregation: Optional[MonitorOptionsAggregation] = None
    enable_logs_sample: Optional[bool] = None
    escalation_message: Optional[str] = None
    evaluation_delay: Optional[int] = Field(None, ge=0, description="Seconds to delay evaluation")
    groupby_simple_monitor: Optional[bool] = None
    include_tags: Optional[bool] = None
    locked: Optional[bool] = None
    min_failure_duration: Optional[int] = None
    min_location_failed: Optional[int] = None
    new_group_delay: Optional[int] = Field(None, ge=0, description="Seconds to skip evaluation of new groups")
    new_host_delay: Optional[int] = None
    no_data_timeframe: Optional[int] = None
    notify_audit: Optional[bool] = None
    notify_no_data: Optional[bool] = None
    renotify_interval: Optional[int] = None
    renotify_occurrences: Optional[int] = None
    renotify_statuses: Optional[List[str]] = None
    require_full_window: Optional[bool] = None
    synthetics_check_id: Optional[str] = None
    threshold_windows: Optional[MonitorThresholdWindows] = None
    thresholds: Optional[MonitorThresholds] = None
    timeout_h: Optional[int] = None


class CreateMonitorRequest(DatadogRequest):
    """Create a monitor."""

    query: str = Field(..., description="The monitor query")
    type: MonitorType = Field(..., description="The type of the monitor")
    name: Optional[str] = None
    message: Optional[str] = None
    options: Optional[MonitorOptions] = None
    priority: Optional[int] = Field(None, ge=1, le=5)
    restricted_roles: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    def path_and_query(self) -> str:
        return "/api/v1/monitor"


class EditMonitorRequest(DatadogRequest):
    """Edit an existing monitor."""

    monitor_id: int = Field(..., exclude=True, description="ID of the monitor")
    query: str = Field(..., description="The monitor query")
    type: MonitorType = Field(..., description="The type of the monitor")
    name: Optional[str] = None
    message: Optional[str] = None
    options: Optional[MonitorOptions] = None
    priority: Optional[int] = Field(None, ge=1, le=5)
    restricted_roles: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    def path_and_query(self) -> str:
        monitor_id = path_segment(self.monitor_id, "monitor_id")
        return build_path_and_query(f"/api/v1/monitor/{monitor_id}")


class GetMonitorRequest(DatadogRequest):
    """Get a monitor's details."""

    monitor_id: int = Field(..., exclude=True)
    group_states: Optional[str] = Field(None, exclude=True, description="e.g. alert,warn")

    def path_and_query(self) -> str:
        monitor_id = path_segment(self.monitor_id, "monitor_id")
        return build_path_and_query(
            f"/api/v1/monitor/{monitor_id}",
            [("group_states", self.group_states)]
        )


class DeleteMonitorRequest(DatadogRequest):
    """Delete a monitor. ``force`` deletes it even when referenced elsewhere."""

    monitor_id: int = Field(..., exclude=True)
    force: Optional[bool] = Field(None, exclude=True)

    def path_and_query(self) -> str:
        monitor_id = path_segment(self.monitor_id, "monitor_id")
        return build_path_and_query(
            f"/api/v1/monitor/{monitor_id}",
            [("force", self.force)]
        )

    def body(self) -> None:
        return None


class MonitorGroupState(DatadogModel):
    last_nodata_ts: Optional[int] = None
    last_notified_ts: Optional[int] = None
    last_resolved_ts: Optional[int] = None
    last_triggered_ts: Optional[int] = None
    name: Optional[str] = None
    status: Optional[MonitorOverallState] = None


class MonitorState(DatadogModel):
    groups: Dict[str, MonitorGroupState] = Field(default_factory=dict)


class Monitor(DatadogModel):
    """A monitor as returned by the create, edit and get endpoints."""

    id: int = Field(..., description="ID of the monitor")
    query: str = Field(..., description="The monitor query")
    type: MonitorType = Field(..., description="The type of the monitor")
    name: Optional[str] = None
    message: Optional[str] = None
    classification: Optional[str] = None
    created: Optional[str] = None
    creator: Optional[Creator] = None
    deleted: Optional[str] = None
    modified: Optional[str] = None
    multi: Optional[bool] = None
    options: Optional[MonitorOptions] = None
    overall_state: Optional[MonitorOverallState] = None
    priority: Optional[int] = None
    restricted_roles: Optional[List[str]] = None
    state: Optional[MonitorState] = None
    tags: List[str] = Field(default_factory=list)


class DeleteMonitorResponse(DatadogModel):
    deleted_monitor_id: int
