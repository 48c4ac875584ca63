"""Shared local-time helpers.

Todo timestamps are stored as local time with an explicit UTC offset so that
they stay human readable in the JSON file and still parse unambiguously.
"""

from __future__ import annotations

from datetime import datetime, timedelta

_TICK = timedelta(microseconds=1)


def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp the way it is written to the store file."""
    return moment.isoformat(timespec="microseconds")


def parse_timestamp(raw: str) -> datetime | None:
    """Parse a stored timestamp, returning None for unparseable values."""
    try:
        parsed = datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def next_timestamp(previous: str | None = None) -> str:
    """Return a formatted "now" strictly later than ``previous``.

    Two refreshes within the same clock tick would otherwise produce equal
    timestamps.
    """
    now = local_now()
    last = parse_timestamp(previous) if previous else None
    if last is not None and now <= last:
        try:
            now = (last + _TICK).astimezone(now.tzinfo)
        except OverflowError:
            # previous is at datetime.max; nothing later is representable
            pass
    return format_timestamp(now)
