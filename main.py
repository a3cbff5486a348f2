"""
File: main.py
Purpose:
    Entry point for running the orders revenue pipeline once, outside the dashboard.
    - Loads the orders CSV (or the built-in sample when it is unavailable)
    - Checks that the state rollup reconciles with the totals
    - Prints the top states for all years and for each year found
"""


import logging

from data_analysis.build_state_rollup import ALL_YEARS, aggregate, ranked_to_frame
from data_ingestion.errors import EmptyInputError, MalformedHeaderError
from data_ingestion.load_orders import load_record_store
from utils import settings
from utils.formatting import format_count, format_currency
from utils.validate_rollup import validate_rollup


def print_summary(summary):
    overall = summary.overall
    label = "ALL YEARS" if summary.year_filter == ALL_YEARS else str(summary.year_filter)
    print("\n" + "=" * 60)
    print(f"TOP STATES BY REVENUE ({label})")
    print("=" * 60)
    print(f"Total revenue:        {format_currency(overall.total_revenue)}")
    print(f"Total orders:         {format_count(overall.total_orders)}")
    print(f"States:               {format_count(overall.total_states)}")
    print(f"Avg order value:      {format_currency(overall.avg_order_value)}")
    print(f"Avg revenue / state:  {format_currency(overall.avg_state_revenue)}")
    if summary.ranked:
        print()
        print(ranked_to_frame(summary.ranked).to_string(index=False, float_format=lambda v: f"{v:,.2f}"))
    else:
        print("\nNo data to display.")


def main():
    settings.configure_logging()

    try:
        store = load_record_store(settings.orders_source(), settings.fetch_timeout())
    except (EmptyInputError, MalformedHeaderError) as e:
        logging.error(f"Cannot build the report: {e}")
        return 1

    top_n = settings.top_n()
    for year_filter in [ALL_YEARS] + store.sorted_years():
        report = validate_rollup(store.records, year_filter)
        if report["reconciled"]:
            logging.info(f"{year_filter}: {report['diagnosis']}")
        else:
            logging.warning(f"{year_filter}: {report['diagnosis']}")
        print_summary(aggregate(store.records, year_filter, top_n))

    logging.info("Report completed successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
