import logging

from utils import settings
from utils.formatting import format_count, format_currency, format_percentage


def test_settings_defaults(monkeypatch):
    for name in ["ORDERS_CSV_SOURCE", "ORDERS_FETCH_TIMEOUT", "DASHBOARD_TOP_N", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)

    assert settings.orders_source() == "orders_customers.csv"
    assert settings.fetch_timeout() == 10.0
    assert settings.top_n() == 10
    assert settings.log_level() == logging.INFO


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ORDERS_CSV_SOURCE", "https://example.com/orders.csv")
    monkeypatch.setenv("ORDERS_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("DASHBOARD_TOP_N", "25")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert settings.orders_source() == "https://example.com/orders.csv"
    assert settings.fetch_timeout() == 2.5
    assert settings.top_n() == 25
    assert settings.log_level() == logging.DEBUG


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("ORDERS_FETCH_TIMEOUT", "soon")
    monkeypatch.setenv("DASHBOARD_TOP_N", "-3")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert settings.fetch_timeout() == 10.0
    assert settings.top_n() == 10
    assert settings.log_level() == logging.INFO


def test_formatting():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(-20) == "-$20.00"
    assert format_count(12345) == "12,345"
    assert format_percentage(57.142857) == "57.14%"
