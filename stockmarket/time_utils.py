"""Centralised timestamp handling.

Events carry UTC-aware ``datetime`` values internally and ISO 8601 strings
in their serialized form.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current time as a UTC-aware datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(ts: str | int | float) -> datetime:
    """Parse any timestamp representation to a UTC-aware datetime.

    Accepted inputs:
      * ISO 8601 string (``T`` or space separator, with or without ``Z``)
      * ``YYYY/MM/DD`` date prefix (normalised to dashes)
      * Integer or float milliseconds since epoch
      * String containing a numeric value (e.g. ``"1640995200000"``)
      * Empty / whitespace-only string → ``now_utc()``
    """
    if isinstance(ts, (int, float)):
        return datetime.fromtimestamp(ts / 1000, tz=timezone.utc)

    s = (ts or "").strip()
    if not s:
        return now_utc()

    # String that looks like a number → treat as milliseconds
    if s.replace(".", "", 1).lstrip("-").isdigit():
        return datetime.fromtimestamp(int(float(s)) / 1000, tz=timezone.utc)

    if len(s) >= 10 and s[4] == "/" and s[7] == "/":
        s = f"{s[:4]}-{s[5:7]}-{s[8:]}"

    s = s.replace("Z", "+00:00")
    s = s.replace(" ", "T", 1)

    dt = datetime.fromisoformat(s)
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Render *dt* as an ISO string, treating naive values as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
