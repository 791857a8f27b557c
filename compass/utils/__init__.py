"""
Shared utilities for COMPASS.

Common functionality used across contexts:
- Text processing
- Date formatting
- Configuration loading
- Logger setup
"""

from compass.utils.timestamp import format_long_date, now, now_exact, today

__all__ = ["format_long_date", "now", "now_exact", "today"]
