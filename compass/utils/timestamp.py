"""Timestamp and date formatting utilities."""

from datetime import date, datetime
from typing import Optional

# Fixed English month names so letter dates do not depend on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def today() -> date:
    """Current local calendar date."""
    return date.today()


def now() -> str:
    """Current local time as a sortable YYYYMMDD_HHMMSS stamp for directory names."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat()


def format_long_date(value: Optional[date] = None) -> str:
    """
    Format a date the way letter headers show it.

    Args:
        value: Date to format (defaults to today)

    Returns:
        Date as "Month D, YYYY" with no zero padding on the day

    Examples:
        format_long_date(date(2025, 1, 5))
        # "January 5, 2025"
    """
    if value is None:
        value = today()
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
