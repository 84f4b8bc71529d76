"""Display formatting for verification records."""
from datetime import datetime

EMPTY = '—'


def format_amount(amount) -> str:
    """Format amount with two decimals."""
    if amount is None or amount == '':
        return EMPTY
    try:
        return f"{float(amount):.2f}"
    except (TypeError, ValueError):
        return str(amount)


def format_date(date_str: str | None) -> str:
    """Format a YYYY-MM-DD date for display.

    The date is read at local noon so that no timezone shift can move it
    to the previous or next day.
    """
    if not date_str:
        return EMPTY
    try:
        value = datetime.strptime(date_str[:10], '%Y-%m-%d').replace(hour=12)
    except ValueError:
        return date_str
    return value.strftime('%x')


def format_datetime(timestamp: str | None) -> str:
    """Format an ISO timestamp in local date-time."""
    if not timestamp:
        return EMPTY
    try:
        value = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
    except ValueError:
        return timestamp
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime('%x %X')


def format_approved(approved) -> str:
    return 'Yes' if approved else 'No'


def format_notes(notes: str | None) -> str:
    return notes or EMPTY
