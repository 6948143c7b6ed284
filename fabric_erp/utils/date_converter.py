# fabric_erp/utils/date_converter.py

from datetime import date, datetime
from typing import Any, Callable, Optional
import logging

from fabric_erp.constants import DATE_FORMAT, DISPLAY_DATE_FORMAT

logger = logging.getLogger(__name__)

# Anything that answers "what is today's date" for the caller
Clock = Callable[[], date]


def system_clock() -> date:
    """Local calendar date of the evaluating machine."""
    return date.today()


def _local_date(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def to_date(value: Any) -> Optional[date]:
    """
    Converts a stored date value to a calendar date, dropping any time of day.
    Timestamps carrying an offset are first moved to the local timezone, so the
    date is the one the evaluating machine sees.
    Accepts date, datetime and ISO strings ("2025-01-15", "2025-01-15T10:30:00+05:30").
    Unparseable input returns None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _local_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return _local_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        return datetime.strptime(text[:10], DATE_FORMAT).date()
    except ValueError:
        logger.warning(f"Ignoring unparseable date value: {value!r}")
        return None


def days_until(due: date, today: date) -> int:
    """Whole calendar days from today to due (negative when due is in the past)."""
    return (due - today).days


def format_due_time(due_value: Any, today: date, window_days: int = 14) -> Optional[str]:
    """
    Short wording for a due date relative to today.
    Returns None when the date is missing or further away than `window_days`.
    """
    due = to_date(due_value)
    if due is None:
        return None

    days = days_until(due, today)
    if days < 0:
        overdue_days = -days
        return f"Overdue by {overdue_days} day{'s' if overdue_days != 1 else ''}"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    if days <= window_days:
        return f"Due in {days} days"
    return None


def format_display_date(value: Any) -> str:
    """15 Jan 2025 style; "-" when missing."""
    parsed = to_date(value)
    if parsed is None:
        return "-"
    return parsed.strftime(DISPLAY_DATE_FORMAT)
