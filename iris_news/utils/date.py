"""Date utilities."""
from datetime import datetime
from typing import Optional
from dateutil import tz


def capture_date(now: Optional[datetime] = None, timezone: Optional[str] = None) -> str:
    """
    Format the capture date the way the ja-JP locale prints a short date,
    e.g. ``2024/3/5`` (no zero padding).
    """
    zone = tz.gettz(timezone) if timezone else tz.tzlocal()
    if now is None:
        now = datetime.now(zone)
    elif timezone and now.tzinfo is not None:
        now = now.astimezone(zone)
    return f"{now.year}/{now.month}/{now.day}"
