"""Calendar helpers used by the date prompt, and date-range parsing."""

from __future__ import annotations

import calendar
import datetime
import re
from dataclasses import dataclass

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def closest_four_digit_year(two_digit_year: int, today: datetime.date | None = None) -> int:
    """Expand a two-digit year to the nearest year in the previous, current
    or next century relative to *today*. Ties go to the current century.
    """
    if not 0 <= two_digit_year <= 99:
        raise ValueError(f"expected a two-digit year, got {two_digit_year}")

    current_year = (today or datetime.date.today()).year
    century = current_year - current_year % 100
    candidates = (century + two_digit_year, century - 100 + two_digit_year, century + 100 + two_digit_year)
    return min(candidates, key=lambda year: abs(current_year - year))


def parse_month(text: str) -> int | None:
    """Month number for an English month name or a prefix of one.

    At least three letters are needed, so ``"Jun"`` and ``"june"`` both
    give 6 but ``"Ju"`` gives ``None``.
    """
    text = text.strip()
    if len(text) < 3:
        return None
    wanted = text.casefold()
    for number, name in enumerate(MONTH_NAMES, start=1):
        if name.casefold().startswith(wanted):
            return number
    return None


def days_in_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return calendar.monthrange(year, month)[1]


# ---------------------------------------------------------------------------
# Date ranges
# ---------------------------------------------------------------------------


@dataclass(order=True)
class DateRange:
    """A span between two moments, ordered by start and then end.

    The earlier moment always ends up as ``start``.
    """

    start: datetime.datetime
    end: datetime.datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            self.start, self.end = self.end, self.start

    @property
    def duration(self) -> datetime.timedelta:
        return self.end - self.start

    def overlaps(self, other: DateRange) -> bool:
        return self.start <= other.end and self.end >= other.start

    def __contains__(self, moment: datetime.datetime) -> bool:
        return self.start <= moment <= self.end

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d %H:%M:%S} to {self.end:%Y-%m-%d %H:%M:%S}"

    def smart_str(self, date_format: str = "%Y-%m-%d", time_format: str = "%H:%M:%S") -> str:
        """Render the range without repeating what both ends share.

        One moment prints once, a range within one day prints the date
        once, and a range between equal times of day prints dates only.
        """
        both = f"{date_format} {time_format}"
        same_date = self.start.date() == self.end.date()
        same_time = self.start.time() == self.end.time()
        if same_date and same_time:
            return self.start.strftime(both)
        if same_date:
            return (
                f"{self.start.strftime(date_format)}, "
                f"{self.start.strftime(time_format)} to {self.end.strftime(time_format)}"
            )
        if same_time:
            return f"{self.start.strftime(date_format)} to {self.end.strftime(date_format)}"
        return f"{self.start.strftime(both)} to {self.end.strftime(both)}"


_RANGE_SPLIT_RE = re.compile(r"[\s,/\\-]+")
_TIME_RE = re.compile(r"(\d{1,2})(?::(\d{2}))?(?::(\d{2}))?(am|pm|a|p)?", re.IGNORECASE)
_BARE_TIME_RE = re.compile(r"\d{1,2}(?::\d{2}){0,2}")
_NUMBER_RE = re.compile(r"(\d{1,2})(?:st|nd|rd|th)?", re.IGNORECASE)


class _UnparseableRange(Exception):
    pass


@dataclass
class _PartialDate:
    year: int | None = None
    month: int | None = None
    day: int | None = None


def _range_words(text: str) -> list[str]:
    """Split *text*, joining a separated ``am``/``pm`` onto its time."""
    words: list[str] = []
    for word in _RANGE_SPLIT_RE.split(text.strip()):
        if not word:
            continue
        meridiem = word.replace(".", "").casefold()
        if meridiem in ("am", "pm") and words and _BARE_TIME_RE.fullmatch(words[-1]):
            words[-1] += meridiem
        else:
            words.append(word)
    return words


def _parse_time(word: str) -> datetime.time | None:
    match = _TIME_RE.fullmatch(word)
    if not match:
        return None
    hour_text, minute, second, meridiem = match.groups()
    if minute is None and meridiem is None:
        # a bare number is a day, month or year
        return None

    hour = int(hour_text)
    if meridiem:
        if not 1 <= hour <= 12:
            raise _UnparseableRange(word)
        hour %= 12
        if meridiem.casefold().startswith("p"):
            hour += 12
    try:
        return datetime.time(hour, int(minute or 0), int(second or 0))
    except ValueError as exc:
        raise _UnparseableRange(word) from exc


def _classify(words: list[str]) -> list[tuple[str, object]]:
    """Tag each useful word as a time, month, year or number."""
    parts: list[tuple[str, object]] = []
    for word in words:
        time = _parse_time(word)
        number = _NUMBER_RE.fullmatch(word)
        month = parse_month(word)
        if time is not None:
            parts.append(("time", time))
        elif len(word) == 4 and word.isdigit():
            parts.append(("year", int(word)))
        elif number:
            parts.append(("number", int(number.group(1))))
        elif month is not None:
            parts.append(("month", month))
    return parts


def _numeric_dates(
    fields: list[tuple[str, int]], month_first: bool, today: datetime.date
) -> list[_PartialDate]:
    """Dates written all in digits: ``2024-01-05``, ``1/5/2024``, ``1/5/24``."""
    kinds = "".join("Y" if kind == "year" else "N" for kind, _ in fields)
    values = [value for _, value in fields]
    # Only three or six bare numbers carry two-digit years.
    short_years = kinds in ("NNN", "NNNNNN")

    dates: list[_PartialDate] = []
    i = 0
    while i < len(kinds):
        if kinds[i] == "Y" and kinds[i + 1 : i + 3] == "NN":
            dates.append(_PartialDate(values[i], values[i + 1], values[i + 2]))
            i += 3
        elif kinds[i : i + 2] == "NN":
            first, second = values[i], values[i + 1]
            month, day = (first, second) if month_first else (second, first)
            date = _PartialDate(month=month, day=day)
            i += 2
            if i < len(kinds) and (kinds[i] == "Y" or short_years):
                year = values[i]
                date.year = closest_four_digit_year(year, today) if year < 100 else year
                i += 1
            dates.append(date)
        else:
            raise _UnparseableRange(kinds)
    return dates


def _named_month_dates(fields: list[tuple[str, int]], today: datetime.date) -> list[_PartialDate]:
    """Dates with month names: ``Jan 5 - Feb 10, 2024``, ``May 4 - 9``."""
    dates: list[_PartialDate] = []
    current: _PartialDate | None = None
    for kind, value in fields:
        if kind == "number" and value > 31:
            kind, value = "year", closest_four_digit_year(value, today)

        if kind == "month":
            if current is None or current.month is not None:
                current = _PartialDate(month=value)
                dates.append(current)
            else:
                current.month = value
        elif kind == "number":
            if current is None or current.day is not None:
                current = _PartialDate(day=value)
                dates.append(current)
            else:
                current.day = value
        elif current is None or current.year is not None:
            current = _PartialDate(year=value)
            dates.append(current)
        else:
            current.year = value
    return dates


def _complete(
    partial: _PartialDate, other: _PartialDate, today: datetime.date, is_end: bool
) -> datetime.date:
    year = partial.year or other.year or today.year
    month = partial.month or other.month
    if month is None or not 1 <= month <= 12:
        raise _UnparseableRange(partial)
    last_day = days_in_month(month, year)
    day = partial.day or (last_day if is_end else 1)
    if not 1 <= day <= last_day:
        raise _UnparseableRange(partial)
    return datetime.date(year, month, day)


def parse_date_range(
    text: str,
    month_first: bool = True,
    today: datetime.date | None = None,
) -> DateRange | None:
    """Read a date range such as ``"Jan 5 - Feb 10, 2024"`` or ``"3pm-5pm"``.

    Words are split on blanks, commas, slashes and dashes. Month names,
    four-digit years, times (``14:30``, ``2pm``, ``2:30 p.m.``) and
    numbers are picked out; other words such as "to" are skipped. All-digit
    dates read month first unless *month_first* is false, and two-digit
    years expand around *today*. A missing year is taken from the other
    end of the range or else from *today*; a missing day is the first of
    the month for the start and the last for the end. Without times both
    ends are at midnight; one time applies to both ends, and an end time
    before the start time on the same day runs into the next day. With
    times only, the range is on *today*. Returns ``None`` when the text
    does not describe a range.
    """
    today = today or datetime.date.today()
    try:
        parts = _classify(_range_words(text))
        if len(parts) < 2:
            return None
        times = [value for kind, value in parts if kind == "time"]
        fields = [(kind, value) for kind, value in parts if kind != "time"]
        if len(times) > 2:
            return None

        if not fields:
            start_date = end_date = today
        else:
            if any(kind == "month" for kind, _ in fields):
                dates = _named_month_dates(fields, today)
            else:
                dates = _numeric_dates(fields, month_first, today)
            if not 1 <= len(dates) <= 2:
                return None
            first, last = dates[0], dates[-1]
            start_date = _complete(first, last, today, is_end=False)
            end_date = _complete(last, first, today, is_end=True)
    except _UnparseableRange:
        return None

    midnight = datetime.time()
    start = datetime.datetime.combine(start_date, times[0] if times else midnight)
    end = datetime.datetime.combine(end_date, times[-1] if times else midnight)
    if len(times) == 2 and start_date == end_date and end < start:
        end += datetime.timedelta(days=1)
    return DateRange(start, end)
