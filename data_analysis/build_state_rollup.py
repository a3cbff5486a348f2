"""
Build State-Level Revenue Rollup

Aggregates orders by state under a year filter:
- Counts orders and sums sales per state
- Ranks states by revenue (ties keep first-occurrence order)
- Computes each state's share of the filter's total revenue
- Computes filter-wide totals and averages

Orders without a state count toward the totals but are not grouped.
"""

import pandas as pd

from schemas.record_store import records_to_frame
from schemas.revenue_summary import OverallStats, RevenueSummary, StateAggregate

ALL_YEARS = "all"
DEFAULT_TOP_N = 10


def normalize_year_filter(year_filter):
    """
    "all" (any case) or a year. Digit strings from a selector widget are
    converted to int; anything else raises ValueError.
    """
    if year_filter is None:
        return ALL_YEARS
    if isinstance(year_filter, bool):
        raise ValueError(f"Invalid year filter: {year_filter!r}")
    if isinstance(year_filter, int):
        return year_filter
    text = str(year_filter).strip()
    if text.lower() == ALL_YEARS:
        return ALL_YEARS
    if text.isdigit():
        return int(text)
    raise ValueError(f"Invalid year filter: {year_filter!r}")


def filter_by_year(df: pd.DataFrame, year_filter) -> pd.DataFrame:
    """Rows for one year; undated rows only survive the "all" filter."""
    if year_filter == ALL_YEARS:
        return df
    mask = df["year"].eq(year_filter).fillna(False).astype(bool)
    return df[mask]


def group_by_state(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per state (order_count, revenue), highest revenue first.
    groupby(sort=False) keeps first-occurrence order, and the stable sort
    preserves it between equal revenues.
    """
    with_state = df[df["state"].fillna("") != ""]
    if with_state.empty:
        return pd.DataFrame({"state": [], "order_count": [], "revenue": []})

    rollup = (
        with_state.groupby("state", sort=False)
        .agg(order_count=("sales", "size"), revenue=("sales", "sum"))
        .reset_index()
    )
    return rollup.sort_values("revenue", ascending=False, kind="stable").reset_index(drop=True)


def build_overall_stats(filtered: pd.DataFrame, rollup: pd.DataFrame) -> OverallStats:
    total_revenue = float(filtered["sales"].sum()) if len(filtered) else 0.0
    total_orders = int(len(filtered))
    total_states = int(len(rollup))
    return OverallStats(
        total_revenue=total_revenue,
        total_orders=total_orders,
        total_states=total_states,
        avg_order_value=total_revenue / total_orders if total_orders > 0 else 0.0,
        avg_state_revenue=total_revenue / total_states if total_states > 0 else 0.0,
    )


def aggregate(records, year_filter=ALL_YEARS, top_n=DEFAULT_TOP_N) -> RevenueSummary:
    """
    Rank states by revenue for the given year filter.

    `records` is any sequence of OrderRecord (e.g. RecordStore.records).
    `top_n=None` returns every state. The overall stats are always computed
    over the full filtered set, and percentages use its total revenue rather
    than the sum of the returned rows.
    """
    if top_n is not None and top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")
    year_filter = normalize_year_filter(year_filter)

    filtered = filter_by_year(records_to_frame(records), year_filter)
    rollup = group_by_state(filtered)
    overall = build_overall_stats(filtered, rollup)

    if top_n is not None:
        rollup = rollup.head(top_n)

    total = overall.total_revenue
    ranked = [
        StateAggregate(
            rank=position,
            state=row.state,
            order_count=int(row.order_count),
            revenue=float(row.revenue),
            percentage=float(row.revenue) / total * 100 if total != 0 else 0.0,
        )
        for position, row in enumerate(rollup.itertuples(index=False), start=1)
    ]
    return RevenueSummary(year_filter=year_filter, overall=overall, ranked=ranked)


def ranked_to_frame(ranked) -> pd.DataFrame:
    """Ranked StateAggregate rows as a DataFrame for tables and CSV downloads."""
    columns = ["rank", "state", "order_count", "revenue", "percentage"]
    return pd.DataFrame([row.model_dump() for row in ranked], columns=columns)
