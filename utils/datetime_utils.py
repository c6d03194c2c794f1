from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)

def to_utc(dt: datetime) -> datetime:
    """
    Converts a datetime object to a timezone-aware UTC datetime object.
    If dt is naive, it's assumed to be UTC already (SQLite hands back naive values).
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
