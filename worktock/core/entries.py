#worktock\core\entries.py
"""
core/entries.py

Folded log entries and the intervals built from them.
"""

import datetime
from dataclasses import dataclass
from typing import Optional, Tuple

from worktock.core.stime import STime


@dataclass(frozen=True)
class InData:
    """A clock-in with the job, date and tags in force when it was read."""
    time: STime
    date: datetime.date
    job: str
    tags: Tuple[str, ...]
    line: int


@dataclass(frozen=True)
class InEntry:
    data: InData


@dataclass(frozen=True)
class OutEntry:
    time: STime
    line: Optional[int] = None


@dataclass(frozen=True)
class Interval:
    start: InData
    end: STime

    @property
    def job(self):
        return self.start.job

    @property
    def date(self):
        return self.start.date

    @property
    def tags(self):
        return self.start.tags

    @property
    def duration(self):
        return self.end - self.start.time
