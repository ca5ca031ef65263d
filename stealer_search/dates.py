"""Date conversions between local selections and the search service's wire format."""
from __future__ import annotations

from datetime import date, datetime, time


def format_api_date(selected: datetime | date | None) -> str:
    """Format a locally selected date-time for a date filter.

    Parameters
    ----------
    selected : datetime.datetime or datetime.date, optional
        The user's selection. Plain dates are taken at midnight.

    Returns
    -------
    str
        ``YYYY-MM-DDTHH:mm:ssZ``, or an empty string when nothing is selected.

    """
    if selected is None:
        return ""
    if not isinstance(selected, datetime):
        selected = datetime.combine(selected, time())
    # Z is a literal: wall-clock fields are sent without UTC conversion.
    return (
        f"{selected.year:04d}-{selected.month:02d}-{selected.day:02d}"
        f"T{selected.hour:02d}:{selected.minute:02d}:{selected.second:02d}Z"
    )


def parse_local_datetime(text: str | None) -> datetime | None:
    """Parse a date-time typed by the user (``2024-01-31``, ``2024-01-31 13:45``...).

    Raises
    ------
    ValueError
        If the text is not an ISO 8601 date or date-time.
    """
    if not text or not text.strip():
        return None
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError as err:
        raise ValueError(f"Invalid date-time {text!r}: expected YYYY-MM-DD[ HH:MM[:SS]]") from err


def parse_api_datetime(text: str | None) -> datetime | None:
    """Parse a timestamp returned by the service, None if it can't be read."""
    if not text:
        return None
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
