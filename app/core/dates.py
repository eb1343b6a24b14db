from datetime import datetime, timezone


def as_utc(dt: datetime) -> datetime:
    """SQLite hands DateTime(timezone=True) back naive; those values are stored as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def isoformat_utc(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return as_utc(dt).isoformat().replace("+00:00", "Z")
