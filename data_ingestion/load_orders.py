"""
File: data_ingestion/load_orders.py
Purpose:
    Read the orders CSV from its configured source and ingest it.
    - http(s) sources are fetched with requests (with a timeout)
    - anything else is treated as a local file path
    - an unreachable source, bad status or empty body falls back to the
      built-in sample dataset instead of failing the dashboard
"""


import logging
from pathlib import Path

import requests

from data_ingestion.errors import InputUnavailableError
from data_ingestion.parse_orders_csv import ingest
from data_ingestion.sample_orders import SAMPLE_ORDERS_CSV
from schemas.record_store import RecordStore
from utils import settings

settings.configure_logging()

USER_AGENT = "Mozilla/5.0 (compatible; StateRevenueDashboard/1.0)"
HEADERS = {"User-Agent": USER_AGENT, "Accept": "text/csv, text/plain, */*"}


def is_url(source) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def read_orders_file(filepath, encodings=("utf-8-sig", "latin1")) -> str:
    """Read a local CSV file, trying each encoding in turn."""
    try:
        raw = Path(filepath).read_bytes()
    except OSError as e:
        raise InputUnavailableError(f"Cannot read {filepath}: {e}") from e

    last_err = None
    for enc in encodings:
        try:
            text = raw.decode(enc)
            logging.info(f"Loaded {filepath} with encoding {enc}")
            return text
        except UnicodeDecodeError as e:
            logging.warning(f"Failed to decode {filepath} with encoding {enc}: {e}")
            last_err = e
    raise InputUnavailableError(f"All encoding attempts failed for {filepath}") from last_err


def fetch_orders_url(url: str, timeout: float) -> str:
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise InputUnavailableError(f"Fetching {url} failed: {e}") from e
    logging.info(f"Fetched {url} (HTTP {resp.status_code}, {len(resp.content)} bytes)")
    return resp.text


def fetch_orders_csv(source=None, timeout=None) -> str:
    """
    Return the raw CSV text of the orders source.

    Raises InputUnavailableError on any read failure, including an empty body.
    """
    if source is None:
        source = settings.orders_source()
    if timeout is None:
        timeout = settings.fetch_timeout()

    if is_url(source):
        text = fetch_orders_url(str(source), timeout)
    else:
        text = read_orders_file(source)

    if not text or not text.strip():
        raise InputUnavailableError(f"Orders source {source} is empty")
    return text


def load_record_store(source=None, timeout=None) -> RecordStore:
    """
    Load and ingest the orders CSV, substituting the sample dataset when the
    source is unavailable. EmptyInputError / MalformedHeaderError from parsing
    a source that *was* read are not recovered here.
    """
    try:
        raw_text = fetch_orders_csv(source, timeout)
    except InputUnavailableError as e:
        logging.warning(f"Orders source unavailable, using built-in sample data: {e}")
        raw_text = SAMPLE_ORDERS_CSV

    store = ingest(raw_text)
    logging.info(f"Loaded {len(store)} orders across {len(store.years)} years")
    return store
