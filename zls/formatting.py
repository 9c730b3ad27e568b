"""Size and timestamp formatting for listing rows."""

from __future__ import annotations

from datetime import datetime, timezone

SIZE_UNITS = ("B", "K", "M", "G", "T")
UNKNOWN_TIME = "???"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Fixed English abbreviations so output does not depend on the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_size(size: int, human: bool) -> str:
    """Return ``size`` as raw decimal bytes or a 1024-scaled label.

    Scaling stops at ``T``. Bytes are shown without decimals (``512B``); every
    larger unit gets exactly one decimal (``1.5K``). The unit is picked before
    rounding, so ``1048575`` renders as ``1024.0K`` rather than ``1.0M``.
    """
    if not human:
        return str(size)

    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_index += 1

    if unit_index == 0:
        return f"{value:.0f}{SIZE_UNITS[unit_index]}"
    return f"{value:.1f}{SIZE_UNITS[unit_index]}"


def format_time(timestamp: datetime | None) -> str:
    """Render ``timestamp`` in UTC as ``Mon DD HH:MM``.

    ``None`` renders as ``???``. Naive datetimes are taken to be UTC and
    anything before the Unix epoch renders as the epoch itself.
    """
    if timestamp is None:
        return UNKNOWN_TIME

    if timestamp.tzinfo is None:
        moment = timestamp.replace(tzinfo=timezone.utc)
    else:
        moment = timestamp.astimezone(timezone.utc)
    if moment < EPOCH:
        moment = EPOCH

    month = _MONTH_ABBREVIATIONS[moment.month - 1]
    return f"{month} {moment.day:02d} {moment.hour:02d}:{moment.minute:02d}"


__all__ = [
    "SIZE_UNITS",
    "UNKNOWN_TIME",
    "EPOCH",
    "format_size",
    "format_time",
]
