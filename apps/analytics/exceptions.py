"""
Domain exceptions for analytics app.

Reporting is read-only, so the only failure it adds is a malformed query.

Exception Hierarchy:
    InvalidInputError (apps.common)
    └── InvalidPeriodError

Usage:
    from apps.analytics.exceptions import InvalidPeriodError

    if not MONTH_PATTERN.fullmatch(month):
        raise InvalidPeriodError("Invalid month format. Use YYYY-MM")
"""

from apps.common.exceptions import InvalidInputError


class InvalidPeriodError(InvalidInputError):
    """
    Raised when a month key is malformed.

    Months must be in YYYY-MM format (e.g., '2025-01').
    """

    default_message = 'Invalid month format. Use YYYY-MM.'
