"""
File: data_ingestion/parse_orders_csv.py
Purpose:
    Turn raw orders CSV text into an immutable RecordStore.
    - Header row defines the columns by position
    - Rows whose field count differs from the header are skipped
    - Unparsable sales become 0.0, unparsable dates leave the year unset
    - Distinct order years are collected for the year selector

The CSV dialect is deliberately simple: comma-separated, no quoting.
"""


import logging

import numpy as np
import pandas as pd

from data_ingestion.errors import EmptyInputError, MalformedHeaderError
from schemas.order_record import OrderRecord
from schemas.record_store import RecordStore

DELIMITER = ","

# pandas resolves these to the current clock; an order date never means "now"
RELATIVE_DATE_WORDS = ("now", "today")

# CSV header -> OrderRecord attribute
RECORD_FIELDS = {
    "name": "name",
    "segment": "segment",
    "state": "state",
    "city": "city",
    "order_date": "order_date",
    "ship_mode": "ship_mode",
}


def split_csv_line(line: str) -> list:
    return [value.strip() for value in line.split(DELIMITER)]


def parse_order_year(order_date):
    """
    Calendar year of an order date string, or None when it cannot be parsed.
    Accepts anything pandas' general date parser does (ISO dates, 01/15/2023, ...).
    """
    if not order_date or order_date.strip().lower() in RELATIVE_DATE_WORDS:
        return None
    try:
        parsed = pd.to_datetime(order_date, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return int(parsed.year)


def parse_sales(value) -> float:
    """Sales amount as a float; blank, unparsable or non-finite values give 0.0."""
    if value is None or value == "":
        return 0.0
    amount = pd.to_numeric(value, errors="coerce")
    if pd.isna(amount) or not np.isfinite(amount):
        return 0.0
    return float(amount)


def build_order_record(row: dict) -> OrderRecord:
    fields = {attr: row.get(column, "") for column, attr in RECORD_FIELDS.items()}
    extra = {k: v for k, v in row.items() if k not in RECORD_FIELDS and k != "sales"}
    return OrderRecord(
        **fields,
        sales=parse_sales(row.get("sales")),
        year=parse_order_year(row.get("order_date")),
        extra=extra,
    )


def ingest(raw_text: str) -> RecordStore:
    """
    Parse orders CSV text into a RecordStore.

    Raises EmptyInputError when the text is blank or has no data rows, and
    MalformedHeaderError when the header names no column at all.
    """
    lines = [line for line in (raw_text or "").splitlines() if line.strip()]
    if len(lines) <= 1:
        raise EmptyInputError("Orders CSV has no data rows")

    headers = split_csv_line(lines[0])
    if not any(headers):
        raise MalformedHeaderError(f"Orders CSV header names no columns: {lines[0]!r}")

    records = []
    years = set()
    skipped = 0
    for line_no, line in enumerate(lines[1:], start=2):
        values = split_csv_line(line)
        if len(values) != len(headers):
            skipped += 1
            logging.debug(f"Skipping line {line_no}: {len(values)} fields, expected {len(headers)}")
            continue

        record = build_order_record(dict(zip(headers, values)))
        if record.year is not None:
            years.add(record.year)
        records.append(record)

    logging.info(f"Parsed {len(records)} orders ({skipped} malformed rows skipped)")
    logging.info(f"Years found: {sorted(years, reverse=True)}")
    return RecordStore(records=tuple(records), years=frozenset(years))
