"""Due-date parsing and timezone normalization.

All stored due dates live in one fixed reference timezone, IST (UTC+05:30).
Civil input ("2025-06-05" or "2025-06-05 18:30") carries no offset; it is
read at face value with an assumed source offset and converted to the
reference timezone. The host's timezone database is never consulted, so
the same input gives the same stored timestamp on every machine.

Example:
    >>> parse_due("2025-06-05")
    datetime.datetime(2025, 6, 5, 0, 0, tzinfo=datetime.timezone(datetime.timedelta(seconds=19800), 'IST'))
    >>> format_due(parse_due("2025-06-05 18:30"))
    '2025-06-05 18:30 IST'
"""

from datetime import datetime, timedelta, timezone

from todo_cli.errors import DateParseError

REFERENCE_OFFSET = timedelta(hours=5, minutes=30)
REFERENCE_TZ = timezone(REFERENCE_OFFSET, "IST")

# Tried in order; a date without a time defaults to 00:00.
DUE_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")
DUE_FORMATS_HELP = "YYYY-MM-DD HH:MM or YYYY-MM-DD"

DISPLAY_FORMAT = "%Y-%m-%d %H:%M IST"


def parse_civil(raw: str) -> datetime:
    """Parse a raw due-date string into a naive civil datetime.

    Args:
        raw: User-supplied date or date-time string.

    Returns:
        Naive datetime (no tzinfo).

    Raises:
        DateParseError: If no accepted format matches.
    """
    text = raw.strip()
    for fmt in DUE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise DateParseError(raw, DUE_FORMATS_HELP)


def normalize_due(
    civil: datetime,
    source_offset: timedelta = REFERENCE_OFFSET,
) -> datetime:
    """Convert a civil datetime to the reference timezone.

    Args:
        civil: Naive civil datetime, or an aware datetime (converted as-is).
        source_offset: Offset the civil value is assumed to be in.

    Returns:
        Aware datetime in REFERENCE_TZ.
    """
    if civil.tzinfo is None:
        civil = civil.replace(tzinfo=timezone(source_offset))
    return civil.astimezone(REFERENCE_TZ)


def parse_due(raw: str, source_offset: timedelta = REFERENCE_OFFSET) -> datetime:
    """Parse and normalize a raw due-date string in one step."""
    return normalize_due(parse_civil(raw), source_offset)


def format_due(due: datetime) -> str:
    """Render a due date in the reference timezone for display."""
    return normalize_due(due).strftime(DISPLAY_FORMAT)
