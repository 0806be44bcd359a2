#worktock\core\reducer.py
"""
core/reducer.py

Folds positioned actions into clock entries.

Records in a log lean on the records before them: a clock-in takes the
job, date and tags most recently set.  ReducerState carries that context
through one fold; every clock-in snapshots it when emitted, so later
changes never reach earlier entries.

Errors are collected per line and the fold carries on, so one pass
reports every problem in the log.
"""

import datetime

from worktock.core.actions import (AddTag, ClearTags, DefGroup, In, InOut, Out,
                                   SetDate, SetJob, SetNum)
from worktock.core.entries import InData, InEntry, OutEntry
from worktock.core.errors import AggregatedLinesError, LineError, MessageError, NotSetError, TockError
from worktock.infra.constants import DEFAULT_JOB, YEAR_KEY
from worktock.infra.logger import LoggerFactory

log = LoggerFactory.get_logger(__name__)


class ReducerState:
    """Context carried between records: job, date, tags, year, groups."""

    def __init__(self, job=DEFAULT_JOB):
        self.job = job
        self.date = None
        self.tags = []
        self.year = None
        self.groups = {}

    def apply(self, action, line):
        """
        Apply one action; return the entries it emits (possibly none).

        Raises a TockError when the action cannot be applied, leaving the
        state as it was.
        """
        if isinstance(action, SetJob):
            self.job = action.name
        elif isinstance(action, SetDate):
            self.date = self._resolve_date(action)
        elif isinstance(action, AddTag):
            self.tags.append(action.name)
        elif isinstance(action, ClearTags):
            self.tags = [action.name] if action.name is not None else []
        elif isinstance(action, SetNum):
            if action.key == YEAR_KEY:
                self.year = action.value
            else:
                log.debug("line %d: ignoring numeric setting %r", line, action.key)
        elif isinstance(action, DefGroup):
            self.groups[action.name] = list(action.members)
        elif isinstance(action, In):
            return [self._clock_in(action.time, line)]
        elif isinstance(action, Out):
            return [OutEntry(action.time, line)]
        elif isinstance(action, InOut):
            return [self._clock_in(action.tin, line), OutEntry(action.tout, line)]
        else:
            raise MessageError(f"unknown action {action!r}")
        return []

    def _resolve_date(self, action):
        year = action.year
        if year is None:
            if self.year is None:
                raise NotSetError("date")
            year = self.year
        try:
            return datetime.date(year, action.month, action.day)
        # Overflow: the grammar admits integers of any size
        except (ValueError, OverflowError) as e:
            raise MessageError(f"invalid date {action.day}/{action.month}/{year}: {e}") from e

    def _clock_in(self, time, line):
        if self.date is None:
            raise NotSetError("date")
        return InEntry(InData(
            time=time,
            date=self.date,
            job=self.job,
            tags=tuple(self.tags),
            line=line,
        ))


def fold(positioned_actions, state=None):
    """
    Reduce actions to (groups, entries).

    Raises AggregatedLinesError holding a LineError for every action that
    could not be applied, in source order.
    """
    state = state if state is not None else ReducerState()
    entries = []
    errors = []
    for pa in positioned_actions:
        try:
            entries.extend(state.apply(pa.action, pa.line))
        except TockError as e:
            errors.append(LineError(pa.line, e))
    if errors:
        raise AggregatedLinesError(errors)
    return state.groups, entries
