#worktock\core\stime.py
"""
core/stime.py

STime: minute-resolution clock time / duration.

The value is a plain count of minutes and is never wrapped at 24 hours:
a clock-out written as "25:30" or a duration of several days both stay
representable, and `since` relies on that for overnight sessions.
"""

import functools
import re

from worktock.core.errors import IntegerParseError, StructuralMismatch
from worktock.infra.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR

_INT = re.compile(r"\s*(-?\d+)\s*")


def _to_int(text):
    m = _INT.fullmatch(text)
    if not m:
        raise IntegerParseError(text)
    return int(m.group(1))


@functools.total_ordering
class STime:

    __slots__ = ("_minutes",)

    def __init__(self, hours=0, minutes=0):
        self._minutes = int(hours) * MINUTES_PER_HOUR + int(minutes)

    @classmethod
    def from_minutes(cls, total):
        t = cls.__new__(cls)
        t._minutes = int(total)
        return t

    @classmethod
    def parse(cls, text):
        """Parse "H:M" (either side any integer, no range checks)."""
        if ":" not in text:
            raise StructuralMismatch(f"expected 'H:M', got {text!r}")
        hours, minutes = text.split(":", 1)
        return cls(_to_int(hours), _to_int(minutes))

    @property
    def total_minutes(self):
        return self._minutes

    @property
    def hours(self):
        return abs(self._minutes) // MINUTES_PER_HOUR

    @property
    def minutes(self):
        return abs(self._minutes) % MINUTES_PER_HOUR

    def since(self, now_date, then_time, then_date):
        """
        Minutes elapsed from (then_time on then_date) to (self on now_date).

        Only bare clock times are logged, so a session crossing midnight
        is recovered from the whole-day difference between the dates.
        With equal dates this is just ``self - then_time``.
        """
        days = (now_date - then_date).days
        return STime.from_minutes(self._minutes + MINUTES_PER_DAY * days - then_time._minutes)

    def __add__(self, other):
        if not isinstance(other, STime):
            return NotImplemented
        return STime.from_minutes(self._minutes + other._minutes)

    def __sub__(self, other):
        if not isinstance(other, STime):
            return NotImplemented
        return STime.from_minutes(self._minutes - other._minutes)

    def __neg__(self):
        return STime.from_minutes(-self._minutes)

    def __eq__(self, other):
        if not isinstance(other, STime):
            return NotImplemented
        return self._minutes == other._minutes

    def __lt__(self, other):
        if not isinstance(other, STime):
            return NotImplemented
        return self._minutes < other._minutes

    def __hash__(self):
        return hash(self._minutes)

    def __bool__(self):
        return self._minutes != 0

    def __str__(self):
        sign = "-" if self._minutes < 0 else ""
        return f"{sign}{self.hours:02d}:{self.minutes:02d}"

    def __repr__(self):
        return f"STime({str(self)!r})"
