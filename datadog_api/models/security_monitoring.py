"""Security monitoring rule models.

Rule fields use camelCase on the wire; the models expose snake_case names
and map them through aliases.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import DatadogModel, DatadogRequest, build_path_and_query


class RuleSeverity(str, Enum):
    """Severity of the security signal."""
    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class FilterAction(str, Enum):
    REQUIRE = "require"
    SUPPRESS = "suppress"


class DetectionMethod(str, Enum):
    THRESHOLD = "threshold"
    NEW_VALUE = "new_value"
    ANOMALY_DETECTION = "anomaly_detection"
    IMPOSSIBLE_TRAVEL = "impossible_travel"
    HARDCODED = "hardcoded"


class QueryAggregation(str, Enum):
    COUNT = "count"
    CARDINALITY = "cardinality"
    SUM = "sum"
    MAX = "max"
    NEW_VALUE = "new_value"
    GEO_DATA = "geo_data"


class ListRulesRequest(DatadogRequest):
    """List security monitoring rules, one page at a time."""

    page_size: Optional[int] = Field(None, exclude=True, ge=1, description="Size for a given page")
    page_number: Optional[int] = Field(None, exclude=True, ge=0, description="Page number to return")

    def path_and_query(self) -> str:
        return build_path_and_query(
            "/api/v2/security_monitoring/rules",
            [
                ("page[number]", self.page_number),
                ("page[size]", self.page_size),
            ]
        )

    def body(self) -> None:
        return None


class RuleCase(DatadogModel):
    """Case for generating signals."""

    condition: Optional[str] = Field(None, description="Logical operations on query counts")
    name: Optional[str] = None
    notifications: List[str] = Field(default_factory=list)
    status: RuleSeverity


class RuleFilter(DatadogModel):
    """Additional query filtering matched events before processing."""

    action: FilterAction
    query: str


class NewValueOptions(DatadogModel):
    forget_after: Optional[int] = Field(None, alias="forgetAfter", description="Days after which a learned value is forgotten")
    learning_duration: Optional[int] = Field(None, alias="learningDuration", description="Days during which values are learned")


class RuleOptions(DatadogModel):
    """Options on rules."""

    detection_method: Optional[DetectionMethod] = Field(None, alias="detectionMethod")
    evaluation_window: Optional[int] = Field(None, alias="evaluationWindow")
    keep_alive: Optional[int] = Field(None, alias="keepAlive")
    max_signal_duration: Optional[int] = Field(None, alias="maxSignalDuration")
    new_value_options: Optional[NewValueOptions] = Field(None, alias="newValueOptions")


class AgentRule(DatadogModel):
    agent_rule_id: Optional[str] = Field(None, alias="agentRuleId")
    expression: Optional[str] = None


class RuleQuery(DatadogModel):
    """Query selecting logs which are part of the rule."""

    query: str
    name: Optional[str] = None
    aggregation: Optional[QueryAggregation] = None
    agent_rule: Optional[AgentRule] = Field(None, alias="agentRule")
    distinct_fields: List[str] = Field(default_factory=list, alias="distinctFields")
    group_by_fields: List[str] = Field(default_factory=list, alias="groupByFields")
    metric: Optional[str] = None


class SecurityMonitoringRule(DatadogModel):
    """A detection rule."""

    id: str = Field(..., description="ID of the rule")
    name: str = Field(..., description="Name of the rule")
    cases: List[RuleCase] = Field(default_factory=list)
    created_at: Optional[int] = Field(None, alias="createdAt", description="Creation time in milliseconds")
    creation_author_id: Optional[int] = Field(None, alias="creationAuthorId")
    filters: List[RuleFilter] = Field(default_factory=list)
    has_extended_title: Optional[bool] = Field(None, alias="hasExtendedTitle")
    is_default: Optional[bool] = Field(None, alias="isDefault")
    is_deleted: Optional[bool] = Field(None, alias="isDeleted")
    is_enabled: Optional[bool] = Field(None, alias="isEnabled")
    message: Optional[str] = None
    options: Optional[RuleOptions] = None
    queries: List[RuleQuery] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    update_author_id: Optional[int] = Field(None, alias="updateAuthorId")
    version: Optional[int] = None


class RulesMetaPage(DatadogModel):
    total_count: Optional[int] = None
    total_filtered_count: Optional[int] = None


class RulesMeta(DatadogModel):
    page: Optional[RulesMetaPage] = None


class ListRulesResponse(DatadogModel):
    """A page of security monitoring rules."""

    data: List[SecurityMonitoringRule] = Field(default_factory=list)
    meta: Optional[RulesMeta] = None
