"""Dashboard and widget models.

Only the ``note`` and ``query_value`` widget definitions are modelled; they
are selected on the wire by their ``type`` field.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from .common import DatadogModel, DatadogRequest, build_path_and_query, path_segment


class LayoutType(str, Enum):
    """Layout of a dashboard."""
    ORDERED = "ordered"
    FREE = "free"


class ReflowType(str, Enum):
    """Reflow behaviour of an ordered dashboard."""
    AUTO = "auto"
    FIXED = "fixed"


class TextAlign(str, Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class TickEdge(str, Enum):
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"


class RequestAggregator(str, Enum):
    """Aggregator used for a widget request."""
    AVERAGE = "avg"
    MINIMUM = "min"
    MAXIMUM = "max"
    SUM = "sum"
    LAST = "last"
    PERCENTILE = "percentile"


class MetricAggregator(str, Enum):
    """Aggregation methods available for metrics queries."""
    AVERAGE = "avg"
    MINIMUM = "min"
    MAXIMUM = "max"
    SUM = "sum"
    LAST = "last"
    AREA = "area"
    NORM = "l2norm"
    PERCENTILE = "percentile"


class ResponseFormat(str, Enum):
    TIMESERIES = "timeseries"
    SCALAR = "scalar"


class CustomLink(DatadogModel):
    """Context menu link on a widget."""

    is_hidden: Optional[bool] = Field(None, description="Toggle context menu link visibility")
    label: Optional[str] = Field(None, description="Label for the custom link URL")
    link: Optional[str] = Field(None, description="URL of the custom link")
    override_label: Optional[str] = Field(None, description="Label ID of a context menu link")


class WidgetTime(DatadogModel):
    """Time setting for a widget."""

    live_span: Optional[str] = Field(None, description="Timeframe, e.g. 5m, 1h, 1w, alert")


class Formula(DatadogModel):
    """Formula operating on widget queries."""

    formula: str = Field(..., description="Expression built from queries, formulas and functions")
    alias: Optional[str] = Field(None, description="Expression alias")


class MetricsQuery(DatadogModel):
    """A formula and functions metrics query."""

    data_source: str = Field(default="metrics", description="Data source for metrics queries")
    name: str = Field(..., description="Name of the query for use in formulas")
    query: str = Field(..., description="Metrics query definition")
    aggregator: Optional[MetricAggregator] = Field(None, description="Aggregation method")


class WidgetRequest(DatadogModel):
    """Data request of a query value widget."""

    aggregator: Optional[RequestAggregator] = None
    formulas: Optional[List[Formula]] = None
    queries: Optional[List[MetricsQuery]] = None
    response_format: Optional[ResponseFormat] = None


class NoteDefinition(DatadogModel):
    """Free text widget."""

    type: Literal["note"] = "note"
    content: str = Field(..., description="Markdown content of the note")
    background_color: Optional[str] = None
    font_size: Optional[str] = None
    has_padding: Optional[bool] = None
    show_tick: Optional[bool] = None
    text_align: Optional[TextAlign] = None
    tick_edge: Optional[TickEdge] = None
    tick_pos: Optional[str] = None
    vertical_align: Optional[VerticalAlign] = None


class QueryValueDefinition(DatadogModel):
    """Single value widget."""

    type: Literal["query_value"] = "query_value"
    requests: List[WidgetRequest] = Field(default_factory=list)
    autoscale: Optional[bool] = None
    custom_links: Optional[List[CustomLink]] = None
    custom_unit: Optional[str] = None
    precision: Optional[int] = Field(None, description="Number of decimals to show")
    text_align: Optional[TextAlign] = None
    time: Optional[WidgetTime] = None
    title: Optional[str] = None
    title_align: Optional[TextAlign] = None
    title_size: Optional[str] = None


WidgetDefinition = Annotated[
    Union[NoteDefinition, QueryValueDefinition],
    Field(discriminator="type")
]


class WidgetLayout(DatadogModel):
    """Position and size of a widget on a free or fixed layout."""

    x: int
    y: int
    width: int
    height: int
    is_column_break: Optional[bool] = None


class Widget(DatadogModel):
    """A widget placed on a dashboard."""

    definition: WidgetDefinition
    id: Optional[int] = None
    layout: Optional[WidgetLayout] = None


class CreateDashboardRequest(DatadogRequest):
    """Create a dashboard."""

    title: str = Field(..., description="Title of the dashboard")
    layout_type: LayoutType = Field(..., description="Layout type of the dashboard")
    widgets: List[Widget] = Field(default_factory=list)
    description: Optional[str] = None
    is_read_only: Optional[bool] = None
    notify_list: Optional[List[str]] = None
    reflow_type: Optional[ReflowType] = None

    def path_and_query(self) -> str:
        return "/api/v1/dashboard"


class UpdateDashboardRequest(DatadogRequest):
    """Replace the definition of an existing dashboard."""

    dashboard_id: str = Field(..., exclude=True, description="ID of the dashboard")
    title: str = Field(..., description="Title of the dashboard")
    layout_type: LayoutType = Field(..., description="Layout type of the dashboard")
    widgets: List[Widget] = Field(default_factory=list)
    description: Optional[str] = None
    is_read_only: Optional[bool] = None
    notify_list: Optional[List[str]] = None
    reflow_type: Optional[ReflowType] = None

    def path_and_query(self) -> str:
        dashboard_id = path_segment(self.dashboard_id, "dashboard_id")
        return build_path_and_query(f"/api/v1/dashboard/{dashboard_id}")


class GetDashboardRequest(DatadogRequest):
    dashboard_id: str = Field(..., exclude=True)

    def path_and_query(self) -> str:
        dashboard_id = path_segment(self.dashboard_id, "dashboard_id")
        return build_path_and_query(f"/api/v1/dashboard/{dashboard_id}")


class DeleteDashboardRequest(DatadogRequest):
    dashboard_id: str = Field(..., exclude=True)

    def path_and_query(self) -> str:
        dashboard_id = path_segment(self.dashboard_id, "dashboard_id")
        return build_path_and_query(f"/api/v1/dashboard/{dashboard_id}")


class Dashboard(DatadogModel):
    """Dashboard as returned by the create, update and get endpoints."""

    id: str = Field(..., description="ID of the dashboard")
    title: str = Field(..., description="Title of the dashboard")
    layout_type: LayoutType = Field(..., description="Layout type of the dashboard")
    widgets: List[Widget] = Field(default_factory=list)
    description: Optional[str] = None
    author_handle: Optional[str] = None
    author_name: Optional[str] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    is_read_only: Optional[bool] = None
    notify_list: Optional[List[str]] = None
    reflow_type: Optional[ReflowType] = None
    url: Optional[str] = None


class DeleteDashboardResponse(DatadogModel):
    deleted_dashboard_id: str
