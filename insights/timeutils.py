from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo


def span_bounds(span_years: int, today: date) -> tuple[date, date]:
    """Return the inclusive (start, end) window ending on `today`."""

    if span_years < 1:
        raise ValueError(f"Span must cover at least one year: {span_years}")
    try:
        start = today.replace(year=today.year - span_years)
    except ValueError:
        # 29 February with a non-leap target year.
        start = today.replace(year=today.year - span_years, day=28)
    return start, today


def format_yyyymmdd(value: date) -> str:
    return value.strftime("%Y%m%d")


def parse_yyyymmdd(raw: str) -> date | None:
    try:
        return datetime.strptime(raw, "%Y%m%d").date()
    except (TypeError, ValueError):
        return None


def ensure_aware(dt: datetime, tz: tzinfo) -> datetime:
    """Attach or convert timezone information to a datetime."""

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def isoformat_with_tz(dt: datetime, tz: tzinfo | None = None) -> str:
    """Return an ISO8601 string with timezone offset."""

    zone = tz or dt.tzinfo or timezone.utc  # noqa: UP017
    aware = ensure_aware(dt, zone)
    return aware.isoformat()
