"""
Dashboard controller: the only surface the Streamlit page talks to.

The page owns the selected year; it calls on_filter_change() with it and
renders the DashboardView it gets back. Nothing here keeps state between calls.
"""

import logging
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from data_analysis.build_state_rollup import ALL_YEARS, aggregate
from data_ingestion.errors import EmptyInputError, MalformedHeaderError
from data_ingestion.load_orders import load_record_store
from schemas.record_store import RecordStore
from schemas.revenue_summary import OverallStats, StateAggregate
from utils import settings

EMPTY_INPUT_MESSAGE = "The orders file contains no data rows."
BAD_HEADER_MESSAGE = "The orders file has an unreadable header row."


class DashboardState(BaseModel):
    """Outcome of the one-time load: a record store, or a message for the user."""

    model_config = ConfigDict(frozen=True)

    store: Optional[RecordStore] = None
    error_message: Optional[str] = None


class DashboardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    year_filter: Union[str, int] = ALL_YEARS
    years: List[int] = Field(default_factory=list)
    overall: OverallStats = Field(default_factory=OverallStats)
    ranked: List[StateAggregate] = Field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def shown_states(self) -> int:
        return len(self.ranked)

    @property
    def shown_revenue(self) -> float:
        """Revenue of the displayed rows only, not the filter total."""
        return sum(row.revenue for row in self.ranked)


def load_dashboard(source=None, timeout=None) -> DashboardState:
    try:
        store = load_record_store(source, timeout)
    except EmptyInputError as e:
        logging.error(f"Orders CSV is empty: {e}")
        return DashboardState(error_message=EMPTY_INPUT_MESSAGE)
    except MalformedHeaderError as e:
        logging.error(f"Orders CSV header is malformed: {e}")
        return DashboardState(error_message=BAD_HEADER_MESSAGE)
    return DashboardState(store=store)


def year_options(state: DashboardState) -> list:
    """Selector entries: "all" first, then years newest first."""
    years = state.store.sorted_years() if state.store is not None else []
    return [ALL_YEARS] + years


def on_filter_change(state: DashboardState, year_filter=ALL_YEARS, top_n=None) -> DashboardView:
    """Recompute the view for a newly selected year filter."""
    if top_n is None:
        top_n = settings.top_n()
    if state.store is None:
        return DashboardView(year_filter=ALL_YEARS, error_message=state.error_message)

    summary = aggregate(state.store.records, year_filter, top_n)
    return DashboardView(
        year_filter=summary.year_filter,
        years=state.store.sorted_years(),
        overall=summary.overall,
        ranked=summary.ranked,
    )
