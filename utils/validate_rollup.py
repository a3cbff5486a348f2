"""
State Rollup Reconciliation Check

Compares the untruncated state rollup with the filter-wide totals and computes:
- Record counts (filtered, undated, state-less)
- Grouped revenue vs. total revenue
- Sum of state percentages
- Diagnostic summary

Use this before reporting to confirm every dollar is accounted for.
"""

from data_analysis.build_state_rollup import aggregate, filter_by_year, normalize_year_filter
from schemas.record_store import records_to_frame

TOLERANCE = 1e-6


def validate_rollup(records, year_filter="all"):
    report = {}
    year_filter = normalize_year_filter(year_filter)

    frame = records_to_frame(records)
    filtered = filter_by_year(frame, year_filter)
    summary = aggregate(records, year_filter, top_n=None)

    report["year_filter"] = year_filter
    report["records"] = len(frame)
    report["undated_records"] = int(frame["year"].isna().sum())
    report["filtered_orders"] = summary.overall.total_orders

    stateless = filtered[filtered["state"].fillna("") == ""]
    report["stateless_orders"] = len(stateless)
    report["stateless_revenue"] = float(stateless["sales"].sum()) if len(stateless) else 0.0

    report["grouped_revenue"] = sum(row.revenue for row in summary.ranked)
    report["total_revenue"] = summary.overall.total_revenue
    report["percentage_sum"] = sum(row.percentage for row in summary.ranked)

    gap = report["total_revenue"] - report["grouped_revenue"] - report["stateless_revenue"]
    report["reconciled"] = abs(gap) <= TOLERANCE * max(1.0, abs(report["total_revenue"]))

    # Diagnostic interpretation
    if not report["reconciled"]:
        report["diagnosis"] = (
            f"State revenues do not add up to the total (gap {gap:.6f}). "
            "The rollup or the filter is dropping orders."
        )
    elif report["filtered_orders"] == 0:
        report["diagnosis"] = "No orders match this filter."
    elif report["stateless_orders"] > 0:
        report["diagnosis"] = (
            f"{report['stateless_orders']} orders have no state; they are included in "
            "the totals but not in any state row, so shares add up to less than 100%."
        )
    else:
        report["diagnosis"] = "State rollup reconciles with the totals."

    return report
