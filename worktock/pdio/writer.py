"""
worktock\pdio\writer.py
Writers for the clock log and for CSV exports.

Responsibilities:
- Append clock-in / clock-out records to the log (never rewrite it)
- Write intervals to CSV with a total row
- Add watermark footer
"""

import csv
from pathlib import Path

from worktock.core.stime import STime
from worktock.infra.constants import CSV_HEADER, DEFAULT_OUTPUT_FILENAME, WATERMARK
from worktock.patterns.patterns import BARE_IDENT


def format_name(name):
    """A job/tag name as the log grammar reads it back: bare if possible, else quoted."""
    if BARE_IDENT.fullmatch(name):
        return name
    escaped = (name.replace("\\", "\\\\").replace('"', '\\"')
               .replace("\t", "\\t").replace("\n", "\\n"))
    return f'"{escaped}"'


def format_date(d):
    return f"{d.day}/{d.month}/{d.year}"


class LogWriter:
    """Appends records to the clock log."""

    def __init__(self, log_path):
        self.log_path = Path(log_path)

    @staticmethod
    def clock_in_records(job, now_date, now_time, last_date=None, last_job=None):
        """Records for a clock-in; date and job lines only when they changed."""
        records = []
        if last_date != now_date:
            records.append(format_date(now_date))
        if last_job != job:
            records.append(format_name(job))
        records.append(str(now_time))
        return records

    @staticmethod
    def clock_out_records(now_time):
        return [f"-{now_time}"]

    def read(self):
        """Log text, or '' when the log does not exist yet."""
        if not self.log_path.exists():
            return ""
        return self.log_path.read_text(encoding="utf-8")

    def append(self, records):
        """Append records, one per line, starting on a fresh line."""
        existing = self.read()
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            if existing and not existing.endswith("\n"):
                f.write("\n")
            for rec in records:
                f.write(f"{rec}\n")
        return self.log_path


class CsvWriter:
    """CSV writer with watermark and total support."""

    def __init__(self, out_path=None):
        self.out_path = Path(out_path) if out_path else Path.cwd() / DEFAULT_OUTPUT_FILENAME

    def write(self, intervals):
        """Write intervals into a CSV file with a total and watermark."""
        total = STime()
        for iv in intervals:
            total = total + iv.duration

        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        with self.out_path.open("w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(CSV_HEADER)
            for iv in intervals:
                w.writerow([
                    iv.date.isoformat(),
                    iv.job,
                    " ".join(iv.tags),
                    str(iv.start.time),
                    str(iv.end),
                    str(iv.duration),
                ])
            w.writerow(["TOTAL", "", "", "", "", str(total)])
            f.write(f"# {WATERMARK}\n")

        return self.out_path
