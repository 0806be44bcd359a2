#worktock\utils\timeparse.py
"""
Time parsing utilities implemented as a class.
- TimeParser.to_date(token, ref_date)
- TimeParser.to_stime(token)
- TimeParser.now()

Used for command-line arguments only; the log itself is read by core/lexer.py.
"""

import re
from datetime import date, datetime, timedelta

from dateutil import parser as dateparser

from worktock.core.stime import STime

_RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}


class TimeParser:
    """Argument token → date / STime parsing, plus the "now" provider."""

    @staticmethod
    def now():
        """Current local (date, STime)."""
        current = datetime.now()
        return current.date(), STime(current.hour, current.minute)

    @staticmethod
    def to_date(tok, ref_date=None):
        """
        Convert a date token to a date.

        Accepts today / yesterday / tomorrow, d/m (year from ref_date),
        d/m/y and anything dateutil reads with day-first ordering.
        Raises ValueError when nothing fits.
        """
        ref = date.today() if ref_date is None else ref_date
        tok = tok.strip().lower()
        if tok in _RELATIVE_DAYS:
            return ref + timedelta(days=_RELATIVE_DAYS[tok])

        m = re.fullmatch(r"(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?", tok)
        if m:
            day, month = int(m.group(1)), int(m.group(2))
            year = int(m.group(3)) if m.group(3) else ref.year
            if year < 100:
                year += 2000
            return date(year, month, day)

        # Fallback: dateutil parser, missing fields taken from ref
        try:
            dt = dateparser.parse(tok, dayfirst=True, default=datetime(ref.year, ref.month, ref.day))
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Unrecognised date: {tok!r}") from e
        return dt.date()

    @staticmethod
    def to_stime(tok):
        """
        Convert a time token ("9:30", "0930", "9:30pm") to an STime.
        Raises ValueError when nothing fits.
        """
        tok = tok.strip().lower()

        # H:M, no range check (25:30 is a valid late clock-out)
        if re.fullmatch(r"\d+:\d+", tok):
            return STime.parse(tok)

        # HHMM
        if re.fullmatch(r"\d{4}", tok):
            return STime(int(tok[:2]), int(tok[2:]))

        # Fallback: dateutil parser (am/pm and friends)
        try:
            dt = dateparser.parse(tok)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Unrecognised time: {tok!r}") from e
        return STime(dt.hour, dt.minute)

    @classmethod
    def week_bounds(cls, ref_date):
        """(monday, sunday) of the ISO week containing ref_date."""
        monday = ref_date - timedelta(days=ref_date.weekday())
        return monday, monday + timedelta(days=6)

    @classmethod
    def month_bounds(cls, ref_date):
        """(first, last) day of the month containing ref_date."""
        first = ref_date.replace(day=1)
        next_first = (first + timedelta(days=32)).replace(day=1)
        return first, next_first - timedelta(days=1)
