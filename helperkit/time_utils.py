from __future__ import annotations

from datetime import date, datetime, timezone

UTC = timezone.utc


def to_utc(ts: datetime) -> datetime:
    """Return `ts` as an aware UTC datetime; naive values are taken to be UTC."""
    if getattr(ts, "tzinfo", None) is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def now_utc() -> datetime:
    return datetime.now(tz=UTC)


def utc_today(now_ref: datetime | date | None = None) -> date:
    if now_ref is None:
        return now_utc().date()
    if isinstance(now_ref, datetime):
        return to_utc(now_ref).date()
    return now_ref
