from datetime import date, datetime, timezone

from fredclient.errors import InvalidParameterError

DATE_FORMAT = "%Y-%m-%d"
# series/updates start_time and end_time: YYYYMMDDHhmm
UPDATE_TIME_FORMAT = "%Y%m%d%H%M"


def format_date(value: date | str) -> str:
    """Normalize a date or YYYY-MM-DD string to the FRED query format."""
    if isinstance(value, datetime):
        return value.date().strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DATE_FORMAT).strftime(DATE_FORMAT)
        except ValueError as exc:
            raise InvalidParameterError(f"Expected a YYYY-MM-DD date, got {value!r}") from exc
    raise InvalidParameterError(f"Expected a date or YYYY-MM-DD string, got {type(value).__name__}")


def format_update_time(value: datetime | str) -> str:
    if isinstance(value, datetime):
        return value.strftime(UPDATE_TIME_FORMAT)
    if isinstance(value, str):
        try:
            return datetime.strptime(value, UPDATE_TIME_FORMAT).strftime(UPDATE_TIME_FORMAT)
        except ValueError as exc:
            raise InvalidParameterError(f"Expected a YYYYMMDDHhmm timestamp, got {value!r}") from exc
    raise InvalidParameterError(f"Expected a datetime or YYYYMMDDHhmm string, got {type(value).__name__}")


def parse_last_updated(ts: str) -> datetime:
    """Parse FRED's 'YYYY-MM-DD HH:MM:SS-05' style timestamps to an aware datetime.

    The offset carries hours only; a missing offset is treated as UTC.
    """
    ts = ts.strip()
    head, sign, offset = ts[:19], ts[19:20], ts[20:]
    if sign in ("+", "-") and offset.isdigit() and len(offset) == 2:
        ts = f"{head}{sign}{offset}:00"
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
