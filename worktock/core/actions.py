#worktock\core\actions.py
"""
core/actions.py

One action per record of the log, as produced by core/lexer.py.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from worktock.core.stime import STime


@dataclass(frozen=True)
class SetJob:
    name: str


@dataclass(frozen=True)
class AddTag:
    name: str


@dataclass(frozen=True)
class ClearTags:
    # Replacement tag; None clears everything
    name: Optional[str] = None


@dataclass(frozen=True)
class SetDate:
    day: int
    month: int
    # None means "use the year carried forward"
    year: Optional[int] = None


@dataclass(frozen=True)
class SetNum:
    key: str
    value: int


@dataclass(frozen=True)
class DefGroup:
    name: str
    members: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class In:
    time: STime


@dataclass(frozen=True)
class Out:
    time: STime


@dataclass(frozen=True)
class InOut:
    tin: STime
    tout: STime


@dataclass(frozen=True)
class PositionedAction:
    line: int
    col: int
    action: object
