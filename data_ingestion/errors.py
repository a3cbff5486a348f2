"""
File: data_ingestion/errors.py
Purpose:
    Exceptions raised while loading and parsing the orders CSV.
    - InputUnavailableError is recovered by the loader (sample dataset fallback)
    - EmptyInputError / MalformedHeaderError reach the dashboard as a message
"""


class OrderIngestionError(Exception):
    """Base class for every orders ingestion failure."""


class InputUnavailableError(OrderIngestionError):
    """The orders source could not be read (network, status, missing file, empty body)."""


class EmptyInputError(OrderIngestionError):
    """The CSV text is blank or holds nothing beyond the header row."""


class MalformedHeaderError(OrderIngestionError):
    """The header row does not name a single column."""
