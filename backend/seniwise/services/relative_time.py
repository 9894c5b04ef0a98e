"""Coarse relative-time and absolute display formatting for timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

_MINUTE = 60
_HOUR = 3600
_DAY = 86400
_MONTH = 30 * _DAY


@dataclass(frozen=True, slots=True)
class TimestampDisplay:
    """Absolute (minute precision, UTC) and relative renderings of one instant."""

    display_date: str = ""
    relative: str = ""

    @property
    def combined(self) -> str:
        if not self.display_date:
            return ""
        if not self.relative:
            return self.display_date
        return f"{self.display_date} ({self.relative})"


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp into UTC; naive values are taken as UTC.

    Returns None for anything unparseable, including instants that fall
    outside the supported range once shifted to UTC.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def format_relative_seconds(delta_seconds: float) -> str:
    """Describe a signed offset from now; positive offsets are in the future."""

    suffix = "from now" if delta_seconds > 0 else "ago"
    seconds = int(abs(delta_seconds))
    if seconds < _MINUTE:
        return "just now"
    if seconds < _HOUR:
        return f"{seconds // _MINUTE} min {suffix}"
    if seconds < _DAY:
        return f"{seconds // _HOUR} hr {suffix}"
    if seconds < _MONTH:
        days = seconds // _DAY
        return f"{days} day{'' if days == 1 else 's'} {suffix}"
    return f"{seconds // _MONTH} mo {suffix}"


def format_relative(value: str | datetime | None, *, now: datetime | None = None) -> str:
    """Return a short relative string such as "5 min ago"; empty when unparseable."""

    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    return format_relative_seconds((parsed - reference).total_seconds())


def format_timestamp(value: str | datetime | None, *, now: datetime | None = None) -> TimestampDisplay:
    """Return absolute `YYYY-MM-DD HH:MM` (UTC) and relative renderings."""

    parsed = parse_timestamp(value)
    if parsed is None:
        return TimestampDisplay()
    display_date = parsed.strftime("%Y-%m-%d %H:%M")
    return TimestampDisplay(display_date=display_date, relative=format_relative(parsed, now=now))


def age_on(birth_date: date, today: date) -> int:
    """Whole years between `birth_date` and `today`."""

    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
