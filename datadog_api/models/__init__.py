"""Data models for the Datadog API client."""

from .common import (
    DatadogModel,
    DatadogRequest,
    ErrorResponse,
    build_path_and_query
)

from .authentication import (
    ValidateRequest,
    ValidateResponse
)

from .dashboard_lists import (
    DashboardType,
    Author,
    DashboardListItem,
    DashboardReference,
    GetDashboardListItemsRequest,
    GetDashboardListItemsResponse,
    AddDashboardListItemsRequest,
    AddDashboardListItemsResponse,
    DeleteDashboardListItemsRequest,
    DeleteDashboardListItemsResponse
)

from .dashboards import (
    LayoutType,
    ReflowType,
    TextAlign,
    VerticalAlign,
    TickEdge,
    RequestAggregator,
    MetricAggregator,
    ResponseFormat,
    CustomLink,
    WidgetTime,
    Formula,
    MetricsQuery,
    WidgetRequest,
    NoteDefinition,
    QueryValueDefinition,
    WidgetLayout,
    Widget,
    CreateDashboardRequest,
    UpdateDashboardRequest,
    GetDashboardRequest,
    DeleteDashboardRequest,
    Dashboard,
    DeleteDashboardResponse
)

from .logs import (
    LogsSort,
    LogsQueryFilter,
    LogsQueryOptions,
    LogsListRequestPage,
    LogsSearchRequest,
    Log,
    LogsSearchResponse
)

from .monitors import (
    MonitorType,
    MonitorOverallState,
    MonitorsSearchRequest,
    MonitorSearchResult,
    MonitorsSearchResponse,
    MonitorOptions,
    MonitorThresholds,
    CreateMonitorRequest,
    EditMonitorRequest,
    GetMonitorRequest,
    DeleteMonitorRequest,
    Monitor,
    DeleteMonitorResponse
)

from .security_monitoring import (
    RuleSeverity,
    ListRulesRequest,
    SecurityMonitoringRule,
    ListRulesResponse
)

__all__ = [
    # Shared
    'DatadogModel',
    'DatadogRequest',
    'ErrorResponse',
    'build_path_and_query',

    # Authentication
    'ValidateRequest',
    'ValidateResponse',

    # Dashboard lists
    'DashboardType',
    'Author',
    'DashboardListItem',
    'DashboardReference',
    'GetDashboardListItemsRequest',
    'GetDashboardListItemsResponse',
    'AddDashboardListItemsRequest',
    'AddDashboardListItemsResponse',
    'DeleteDashboardListItemsRequest',
    'DeleteDashboardListItemsResponse',

    # Dashboards
    'LayoutType',
    'ReflowType',
    'TextAlign',
    'VerticalAlign',
    'TickEdge',
    'RequestAggregator',
    'MetricAggregator',
    'ResponseFormat',
    'CustomLink',
    'WidgetTime',
    'Formula',
    'MetricsQuery',
    'WidgetRequest',
    'NoteDefinition',
    'QueryValueDefinition',
    'WidgetLayout',
    'Widget',
    'CreateDashboardRequest',
    'UpdateDashboardRequest',
    'GetDashboardRequest',
    'DeleteDashboardRequest',
    'Dashboard',
    'DeleteDashboardResponse',

    # Logs
    'LogsSort',
    'LogsQueryFilter',
    'LogsQueryOptions',
    'LogsListRequestPage',
    'LogsSearchRequest',
    'Log',
    'LogsSearchResponse',

    # Monitors
    'MonitorType',
    'MonitorOverallState',
    'MonitorsSearchRequest',
    'MonitorSearchResult',
    'MonitorsSearchResponse',
    'MonitorOptions',
    'MonitorThresholds',
    'CreateMonitorRequest',
    'EditMonitorRequest',
    'GetMonitorRequest',
    'DeleteMonitorRequest',
    'Monitor',
    'DeleteMonitorResponse',

    # Security monitoring
    'RuleSeverity',
    'ListRulesRequest',
    'SecurityMonitoringRule',
    'ListRulesResponse'
]
