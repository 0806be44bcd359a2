#worktock\core\errors.py
"""
core/errors.py

Error taxonomy for reading a clock log.

- ParseFailure: the grammar rejected the input (fatal, single, positioned)
- NotSetError / MessageError: a record is valid but lacks context
  (recoverable, collected per line)
- NegativeTimeError: a clock-out earlier than its clock-in
- UnmatchedOutError: a clock-out with nothing open
- AggregatedLinesError: every LineError found while folding a log
"""


class TockError(Exception):
    """Base class for everything the core raises."""


class MessageError(TockError):

    def __init__(self, text):
        super().__init__(text)
        self.text = text

    def __str__(self):
        return self.text


class NotSetError(TockError):
    """A record needs context (date, year) that no earlier record set."""

    def __init__(self, field):
        super().__init__(field)
        self.field = field

    def __str__(self):
        return f"{self.field} not set"


class ParseFailure(TockError):

    def __init__(self, line=None, column=None, detail=None, text=None):
        super().__init__(line, column, detail, text)
        self.line = line
        self.column = column
        self.detail = detail
        self.text = text

    def __str__(self):
        pieces = ["Parse error"]
        if self.line is not None:
            pieces.append(f" at line {self.line}")
        if self.column is not None:
            pieces.append(" at" if self.line is None else ",")
            pieces.append(f" column {self.column}")
        if self.detail is not None:
            pieces.append(": ")
            pieces.append(self.detail)
        if self.text is not None:
            pieces.append(": ")
            pieces.append(f"{self.text!r}")
        return "".join(pieces)


class IntegerParseError(TockError):

    def __init__(self, text):
        super().__init__(text)
        self.text = text

    def __str__(self):
        return f"not an integer: {self.text!r}"


class StructuralMismatch(TockError):

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"unexpected structure: {self.detail}"


class NegativeTimeError(TockError):
    """Clock-out before clock-in. `start` and `end` are STime values."""

    def __init__(self, start, end):
        super().__init__(start, end)
        self.start = start
        self.end = end

    def __str__(self):
        return f"clock-out {self.end} is before clock-in {self.start}"


class UnmatchedOutError(TockError):

    def __init__(self, time):
        super().__init__(time)
        self.time = time

    def __str__(self):
        return f"clock-out {self.time} with nothing clocked in"


class LineError:
    """An error bound to the 1-based source line it came from."""

    __slots__ = ("line", "error")

    def __init__(self, line, error):
        self.line = line
        self.error = error

    def __eq__(self, other):
        if not isinstance(other, LineError):
            return NotImplemented
        return (self.line == other.line and type(self.error) is type(other.error)
                and str(self.error) == str(other.error))

    def __hash__(self):
        return hash((self.line, type(self.error), str(self.error)))

    def __repr__(self):
        return f"LineError({self.line!r}, {self.error!r})"

    def __str__(self):
        return f"line {self.line}: {self.error}"


class AggregatedLinesError(TockError):
    """All per-line failures of one pass, in the order they were found."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __len__(self):
        return len(self.errors)

    def __str__(self):
        if not self.errors:
            return "no errors"
        return "\n".join(str(e) for e in self.errors)
