"""
core/parser.py

LogParser: the central engine that:
- Lexes the raw log into positioned actions
- Folds actions into dated, tagged, job-attributed entries
- Pairs entries into intervals
- Keeps the still-open session and any anomalies for the report
"""

from worktock.core.intervals import close_open, reconstruct_intervals
from worktock.core.lexer import lex
from worktock.core.reducer import ReducerState, fold
from worktock.infra.constants import DEFAULT_JOB


class ParsedLog:
    """Entries and group definitions read from one log, plus the final context."""

    def __init__(self, entries, groups, last_date=None, last_job=DEFAULT_JOB):
        self.entries = entries
        self.groups = groups
        self.last_date = last_date
        self.last_job = last_job

    def __repr__(self):
        return f"ParsedLog({len(self.entries)} entries, groups={sorted(self.groups)!r})"


def parse_log(text, default_job=DEFAULT_JOB):
    """
    Lex and fold a whole log.

    Raises ParseFailure if the text is malformed, or AggregatedLinesError
    with every line that could not be applied.
    """
    state = ReducerState(job=default_job)
    groups, entries = fold(lex(text), state)
    return ParsedLog(entries, groups, last_date=state.date, last_job=state.job)


class Timesheet:
    """Everything a report needs from one log."""

    def __init__(self, intervals, open_entry, anomalies, groups, last_date=None, last_job=DEFAULT_JOB):
        self.intervals = intervals
        self.open_entry = open_entry
        self.anomalies = anomalies
        self.groups = groups
        # Date and job in force at the end of the log, for appending
        self.last_date = last_date
        self.last_job = last_job

    def with_open_closed(self, now_date, now_time):
        """Intervals plus the open session closed at "now" (not persisted)."""
        if self.open_entry is None:
            return list(self.intervals)
        return list(self.intervals) + [close_open(self.open_entry, now_date, now_time)]


class LogParser:
    """Runs the whole pipeline over raw log text."""

    def __init__(self, default_job=DEFAULT_JOB, strict=False):
        self.default_job = default_job
        self.strict = strict

    def parse(self, raw_text):
        parsed = parse_log(raw_text, default_job=self.default_job)
        intervals, open_entry, anomalies = reconstruct_intervals(parsed.entries, strict=self.strict)
        return Timesheet(intervals, open_entry, anomalies, parsed.groups,
                         last_date=parsed.last_date, last_job=parsed.last_job)
