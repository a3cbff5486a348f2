"""Display formatting for dashboard figures (single en-US currency/number format)."""


def format_currency(value) -> str:
    """150.5 -> '$150.50', -20 -> '-$20.00'."""
    value = float(value or 0.0)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_count(value) -> str:
    return f"{int(value or 0):,}"


def format_percentage(value, digits: int = 2) -> str:
    return f"{float(value or 0.0):.{digits}f}%"
