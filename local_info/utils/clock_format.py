from datetime import datetime, timedelta, timezone
from typing import Optional


def format_time(instant: datetime) -> str:
    """Format *instant* as 'h:mma', e.g. '3:07pm' (hour 0 shows as 12)."""
    suffix = "pm" if instant.hour >= 12 else "am"
    hour = instant.hour % 12 or 12
    return f"{hour}:{instant.minute:02d}{suffix}"


def shifted_now(utc_offset_hours: int, now: Optional[datetime] = None) -> datetime:
    """
    Current UTC instant moved by a flat number of hours.

    No DST or tz database lookups: the offset is applied as-is.  Only the
    wall-clock hour and minute are meaningful, so whole days are dropped
    from the offset and any integer is accepted.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return now + timedelta(hours=utc_offset_hours % 24)
