from datetime import date, datetime, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """Current time in UTC. Wrapped so tests can patch it."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utc_now().date()


def to_calendar_date(value: Optional[Union[str, date, datetime]]) -> date:
    """
    Normalizes a caller-supplied date into a calendar date.

    ``None`` means today in UTC. ``YYYY-MM-DD`` strings are taken as they are;
    full ISO-8601 timestamps are converted to UTC first and then truncated, so
    ``2024-01-05T23:30:00-02:00`` lands on 2024-01-06. Naive timestamps are
    treated as UTC. Raises ``ValueError`` for anything that does not parse.
    """
    if value is None:
        return utc_today()
    if isinstance(value, datetime):
        return _as_utc(value).date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return utc_today()
    if len(text) == 10:
        return datetime.strptime(text, "%Y-%m-%d").date()

    # fromisoformat does not accept a trailing 'Z' before Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(text)).date()


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
