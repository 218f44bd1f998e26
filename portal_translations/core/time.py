from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def to_utc_iso(dt: datetime = None) -> str:
    """
    Convert a datetime to an ISO-8601 string in UTC.
    Naive datetimes are assumed to already be UTC; None means now.
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt.isoformat()
