from pydantic import BaseModel, ConfigDict, Field
from typing import List, Union

YearFilter = Union[str, int]


class StateAggregate(BaseModel):
    """Per-state rollup under the active year filter."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1, description="1-based position in the ranking")
    state: str = Field(..., description="Grouping key")
    order_count: int = Field(..., ge=0, description="Orders for this state in the filter")
    revenue: float = Field(..., description="Sum of sales for this state in the filter")
    percentage: float = Field(
        0.0,
        description="Share of the filter's total revenue (not of the top-N subset), 0-100"
    )


class OverallStats(BaseModel):
    """Filter-wide totals and averages. Never truncated to the top N."""

    model_config = ConfigDict(frozen=True)

    total_revenue: float = 0.0
    total_orders: int = 0
    total_states: int = 0
    avg_order_value: float = 0.0
    avg_state_revenue: float = 0.0


class RevenueSummary(BaseModel):
    """
    Response for one aggregation request.

    `overall` covers the whole filtered set; `ranked` holds at most top_n rows.
    """

    model_config = ConfigDict(frozen=True)

    year_filter: YearFilter = "all"
    overall: OverallStats = Field(default_factory=OverallStats)
    ranked: List[StateAggregate] = Field(default_factory=list)
