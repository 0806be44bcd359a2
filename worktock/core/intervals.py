#worktock\core\intervals.py
"""
core/intervals.py

Pairs clock entries into worked intervals.

A clock-in while another session is open closes that session at the new
clock-in time (switching job without clocking out).  A clock-out closes
the open session.  Whatever is still open at the end is handed back to
the caller, which may close it "now" for display but never writes it.
"""

from worktock.core.entries import InEntry, Interval, OutEntry
from worktock.core.errors import LineError, MessageError, NegativeTimeError, UnmatchedOutError
from worktock.infra.logger import LoggerFactory

log = LoggerFactory.get_logger(__name__)


def _end_on(prev, time, date):
    """`time` on `date` as an end time relative to prev's start day."""
    return prev.time + time.since(date, prev.time, prev.date)


def reconstruct_intervals(entries, strict=False):
    """
    Returns (intervals, open_entry, anomalies).

    - intervals: Interval list in the source order of their clock-ins
    - open_entry: InData still clocked in at the end, or None
    - anomalies: LineError list (negative times, clock-outs with nothing
      open); the affected pairing is dropped and processing continues

    With strict=True a negative time raises NegativeTimeError instead.
    """
    intervals = []
    anomalies = []
    current = None

    def negative(prev, end):
        err = NegativeTimeError(prev.time, end)
        if strict:
            raise err
        log.warning("line %d: %s", prev.line, err)
        anomalies.append(LineError(prev.line, err))

    for entry in entries:
        if isinstance(entry, InEntry):
            data = entry.data
            if current is not None:
                end = _end_on(current, data.time, data.date)
                if end < current.time:
                    negative(current, end)
                else:
                    intervals.append(Interval(current, end))
            current = data
        elif isinstance(entry, OutEntry):
            if current is None:
                err = UnmatchedOutError(entry.time)
                log.warning("line %s: %s", entry.line, err)
                anomalies.append(LineError(entry.line, err))
                continue
            if entry.time < current.time:
                negative(current, entry.time)
            else:
                intervals.append(Interval(current, entry.time))
            current = None
        else:
            raise MessageError(f"unknown entry {entry!r}")

    return intervals, current, anomalies


def close_open(open_entry, now_date, now_time):
    """
    Interval for a session still clocked in, closed at (now_date, now_time).

    The end is expressed relative to the start's day, so a session begun
    at 23:00 and viewed at 01:00 the next morning ends at "25:00".
    """
    return Interval(open_entry, _end_on(open_entry, now_time, now_date))
