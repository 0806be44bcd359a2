"""
worktock\pdio\report.py
Plain-text reports for a set of intervals.

- Optional per-interval listing, grouped under date headings
- Per-job totals, largest first, then a grand total
- The still-open session, shown as closed "now"
"""

import sys
from collections import OrderedDict

from worktock.core.stime import STime


class ReportPrinter:

    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout

    def _line(self, text=""):
        self.out.write(f"{text}\n")

    @staticmethod
    def describe(iv):
        tags = f" [{', '.join(iv.tags)}]" if iv.tags else ""
        return f"{iv.job}: {iv.start.time}-{iv.end} ({iv.duration}){tags}"

    @staticmethod
    def job_totals(intervals):
        """OrderedDict job → total STime, largest total first."""
        totals = {}
        for iv in intervals:
            totals[iv.job] = totals.get(iv.job, STime()) + iv.duration
        return OrderedDict(sorted(totals.items(), key=lambda kv: (-kv[1].total_minutes, kv[0])))

    def print_intervals(self, intervals):
        current_date = None
        for iv in intervals:
            if iv.date != current_date:
                current_date = iv.date
                self._line(current_date.strftime("%a %d/%m/%Y"))
            self._line(f"  {self.describe(iv)}")

    def print_totals(self, intervals):
        grand = STime()
        for job, total in self.job_totals(intervals).items():
            self._line(f"{job}: {total}")
            grand = grand + total
        self._line(f"TOTAL: {grand}")
        return grand

    def print_open(self, open_interval):
        self._line(f"Clocked in since {open_interval.date.strftime('%d/%m/%Y')} "
                   f"{self.describe(open_interval)}")

    def print_errors(self, line_errors):
        for err in line_errors:
            self._line(f"Error: {err}")

    def print_report(self, intervals, open_interval=None, list_all=False):
        """Listing (optional), totals including the open session, then the open session."""
        if list_all:
            self.print_intervals(intervals)
            self._line()
        totalled = list(intervals)
        if open_interval is not None:
            totalled.append(open_interval)
        total = self.print_totals(totalled)
        if open_interval is not None:
            self.print_open(open_interval)
        return total
