#worktock\core\__init__.py

from .errors import (AggregatedLinesError, IntegerParseError, LineError, MessageError,
                     NegativeTimeError, NotSetError, ParseFailure, StructuralMismatch,
                     TockError, UnmatchedOutError)
from .stime import STime
from .entries import InData, InEntry, Interval, OutEntry
from .lexer import lex
from .reducer import ReducerState, fold
from .intervals import close_open, reconstruct_intervals
from .parser import LogParser, ParsedLog, Timesheet, parse_log

__all__ = [
    "STime",
    "InData",
    "InEntry",
    "OutEntry",
    "Interval",
    "lex",
    "ReducerState",
    "fold",
    "reconstruct_intervals",
    "close_open",
    "parse_log",
    "ParsedLog",
    "LogParser",
    "Timesheet",
    "TockError",
    "MessageError",
    "NotSetError",
    "ParseFailure",
    "IntegerParseError",
    "StructuralMismatch",
    "NegativeTimeError",
    "UnmatchedOutError",
    "LineError",
    "AggregatedLinesError",
]
