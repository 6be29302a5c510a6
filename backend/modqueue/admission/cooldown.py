from datetime import datetime, timedelta, timezone

from .normalizer import round2

MS_PER_DAY = 24 * 3600 * 1000


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands datetimes back without tzinfo
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def format_days(days: float) -> str:
    if days == int(days):
        return str(int(days))
    return repr(days)


def remaining_cooldown_days(
    last_request_at: datetime | None,
    cooldown_days: float,
    now: datetime,
) -> float | None:
    """Days left before another request is allowed, or None when there is no wait."""
    if last_request_at is None:
        return None

    elapsed_ms = (_as_utc(now) - _as_utc(last_request_at)) / timedelta(milliseconds=1)
    min_wait_ms = cooldown_days * MS_PER_DAY
    if elapsed_ms >= min_wait_ms:
        return None
    return round2((min_wait_ms - elapsed_ms) / MS_PER_DAY)


def cooldown_reason(
    last_request_at: datetime | None,
    cooldown_days: float,
    now: datetime,
) -> str | None:
    remaining = remaining_cooldown_days(last_request_at, cooldown_days, now)
    if remaining is None:
        return None
    return f"You need to wait {format_days(remaining)} days before you can request again"
