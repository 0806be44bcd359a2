"""
filters/filters.py

Selection rules for the worktock reports.

Encapsulates:
- Date range / single day / week / month selection (inclusive bounds)
- Job selection by exact name, prefix or named group
- Tag selection
- Applying every configured rule at once
"""

from worktock.core.errors import MessageError
from worktock.utils.timeparse import TimeParser


class IntervalFilters:
    """
    Stateful filter container: each `by_*` call adds one predicate.

    Parameters (all optional):
      groups: mapping of group name → member job names, as defined in the log
    """

    def __init__(self, groups=None):
        self.groups = dict(groups or {})
        self._predicates = []

    def __len__(self):
        return len(self._predicates)

    def add(self, predicate):
        self._predicates.append(predicate)
        return self

    # ----- Dates -----
    def by_date_range(self, since=None, until=None):
        """Keep intervals starting on a date within [since, until]; None is open."""
        if since is not None:
            self.add(lambda iv: iv.date >= since)
        if until is not None:
            self.add(lambda iv: iv.date <= until)
        return self

    def by_day(self, day):
        return self.by_date_range(day, day)

    def by_week(self, ref_date):
        """Monday to Sunday of the week containing ref_date."""
        return self.by_date_range(*TimeParser.week_bounds(ref_date))

    def by_month(self, ref_date):
        return self.by_date_range(*TimeParser.month_bounds(ref_date))

    # ----- Jobs and tags -----
    def by_job(self, name):
        return self.add(lambda iv: iv.job == name)

    def by_job_prefix(self, prefix):
        return self.add(lambda iv: iv.job.startswith(prefix))

    def by_tag(self, tag):
        return self.add(lambda iv: tag in iv.tags)

    def by_group(self, name):
        """Keep jobs listed in the named group; unknown groups are an error."""
        if name not in self.groups:
            raise MessageError(f"group {name!r} is not defined")
        members = set(self.groups[name])
        return self.add(lambda iv: iv.job in members)

    # ----- Application -----
    def matches(self, interval):
        return all(p(interval) for p in self._predicates)

    def apply(self, intervals):
        """Intervals passing every predicate, order preserved."""
        return [iv for iv in intervals or () if self.matches(iv)]
