"""
RFC 3339 timestamps for created/updated stamps and date-valued inputs.

Fractional seconds are optional on input and formatted without trailing
zeros on output; a zero UTC offset is always written as "Z".
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated

from pydantic import AfterValidator, StringConstraints
from pydantic_core import PydanticCustomError

from recordbook.errors import ERR_BAD_DATE, ValidationError

RFC3339_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def _parse(value: str) -> tuple[datetime, str]:
    match = RFC3339_PATTERN.match(value) if isinstance(value, str) else None
    if not match:
        raise ValidationError(ERR_BAD_DATE)

    offset = match.group("offset")
    if offset == "Z":
        tz = timezone.utc
    else:
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValidationError(ERR_BAD_DATE)
        delta = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-delta if offset[0] == "-" else delta)

    fraction = match.group("fraction") or ""
    try:
        parsed = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction[:6].ljust(6, "0")),
            tzinfo=tz,
        )
    except ValueError:
        raise ValidationError(ERR_BAD_DATE) from None
    return parsed, fraction.rstrip("0")


def _format(value: datetime, fraction: str) -> str:
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if fraction:
        text = f"{text}.{fraction}"
    offset = value.utcoffset()
    if not offset:
        return f"{text}Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 string, raising ValidationError when it is not one."""
    parsed, _ = _parse(value)
    return parsed


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return _format(value, f"{value.microsecond:06d}".rstrip("0"))


def normalize_timestamp(value: str) -> str:
    """
    Return the canonical form of an RFC 3339 input.

    Sub-microsecond digits survive the round trip even though the parsed
    datetime cannot hold them.
    """
    parsed, fraction = _parse(value)
    return _format(parsed, fraction)


def time_now() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def _validate_date(value: str) -> str:
    try:
        return normalize_timestamp(value)
    except ValidationError:
        raise PydanticCustomError("bad_date", ERR_BAD_DATE) from None


DateString = Annotated[
    str, StringConstraints(min_length=1), AfterValidator(_validate_date)
]
