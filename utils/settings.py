"""
Runtime settings for the dashboard, read from the environment (and a local
.env file when present).

    ORDERS_CSV_SOURCE     path or http(s) URL of the orders CSV
    ORDERS_FETCH_TIMEOUT  seconds to wait for the source before falling back
    DASHBOARD_TOP_N       rows in the ranked state table
    LOG_LEVEL             logging level name
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SOURCE = "orders_customers.csv"
DEFAULT_TIMEOUT = 10.0
DEFAULT_TOP_N = 10
LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s'


def _env_number(name, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logging.warning(f"Invalid {name}={raw!r}; using default {default}")
        return default
    if value <= 0:
        logging.warning(f"{name} must be positive, got {raw!r}; using default {default}")
        return default
    return value


def orders_source() -> str:
    return os.getenv("ORDERS_CSV_SOURCE", DEFAULT_SOURCE)


def fetch_timeout() -> float:
    return _env_number("ORDERS_FETCH_TIMEOUT", DEFAULT_TIMEOUT, float)


def top_n() -> int:
    return _env_number("DASHBOARD_TOP_N", DEFAULT_TOP_N, int)


def log_level() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging():
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
