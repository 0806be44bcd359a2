#worktock\core\lexer.py
"""
core/lexer.py

Turns the text of a clock log into positioned actions.

A log is a stream of records separated by commas or newlines.  Spaces,
separators and comments ('#' up to the next comma or newline) between
records are skipped.  Each record is matched against the candidates below
in priority order; the first one that matches wins, and a failed
candidate leaves the position untouched for the next one:

    __[tag]          ClearTags (replacing the tag list with `tag` if given)
    _tag             AddTag
    -H:M             Out
    D/M[/Y]          SetDate (Y absent: year carried forward)
    H:M[-H:M]        In / InOut
    =key:N           SetNum
    $name[a, b, c]   DefGroup
    name[=N]         SetNum with "=N", otherwise SetJob

Names are bare words (a letter, then letters, digits, '_') or quoted
strings.  If no candidate matches, the whole log is rejected with a
ParseFailure at that record.
"""

import bisect

from worktock.core.actions import (AddTag, ClearTags, DefGroup, In, InOut, Out,
                                   PositionedAction, SetDate, SetJob, SetNum)
from worktock.core.errors import ParseFailure
from worktock.core.stime import STime
from worktock.patterns.patterns import (ADD_TAG, BARE_IDENT, CLEAR_TAGS, CLOCK_IN,
                                        CLOCK_OUT, DATE, GROUP_CLOSE, GROUP_OPEN,
                                        GROUP_START, INT, KEY_SEP, QUOTE_ESCAPE,
                                        QUOTE_ESCAPES, QUOTED_STR, RECORD_TEXT,
                                        SET_NUM, SKIP, VALUE_SEP)


class Lexer:
    """Single-use scanner over one log text."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        # Offsets of every '\n', for mapping positions to lines
        self._newlines = [i for i, ch in enumerate(text) if ch == "\n"]
        self._hint = None

    # ----- Positions -----
    def position(self, pos):
        """1-based (line, column) of an offset."""
        n = bisect.bisect_left(self._newlines, pos)
        line_start = self._newlines[n - 1] + 1 if n else 0
        return n + 1, pos - line_start + 1

    def _fail(self, pos):
        line, col = self.position(pos)
        snippet = RECORD_TEXT.match(self.text, pos).group(0).strip()
        detail = self._hint or "unrecognised record"
        raise ParseFailure(line, col, detail, snippet or None)

    # ----- Primitives -----
    def _match(self, pattern):
        m = pattern.match(self.text, self.pos)
        if m:
            self.pos = m.end()
        return m

    def _skip(self):
        self._match(SKIP)

    def _at_end(self):
        return self.pos >= len(self.text)

    def _str_val(self):
        """Quoted or bare name at the current position, or None."""
        m = self._match(QUOTED_STR)
        if m:
            return QUOTE_ESCAPE.sub(
                lambda e: QUOTE_ESCAPES.get(e.group(1), e.group(1)), m.group(1))
        if self.text.startswith('"', self.pos):
            self._hint = "unterminated quoted string"
            return None
        m = self._match(BARE_IDENT)
        return m.group(0) if m else None

    def _int(self):
        m = self._match(INT)
        return int(m.group(0)) if m else None

    # ----- Records, in priority order -----
    def _clear_tags(self):
        if not self._match(CLEAR_TAGS):
            return None
        return ClearTags(self._str_val())

    def _add_tag(self):
        if not self._match(ADD_TAG):
            return None
        name = self._str_val()
        return AddTag(name) if name is not None else None

    def _clock_out(self):
        m = self._match(CLOCK_OUT)
        if not m:
            return None
        return Out(STime(int(m.group(1)), int(m.group(2))))

    def _date(self):
        m = self._match(DATE)
        if not m:
            return None
        day, month, year = m.group(1, 2, 3)
        return SetDate(int(day), int(month), int(year) if year is not None else None)

    def _clock_in(self):
        m = self._match(CLOCK_IN)
        if not m:
            return None
        tin = STime(int(m.group(1)), int(m.group(2)))
        if m.group(3) is None:
            return In(tin)
        return InOut(tin, STime(int(m.group(3)), int(m.group(4))))

    def _set_num(self):
        if not self._match(SET_NUM):
            return None
        key = self._str_val()
        if key is None or not self._match(KEY_SEP):
            return None
        value = self._int()
        return SetNum(key, value) if value is not None else None

    def _group(self):
        if not self._match(GROUP_OPEN):
            return None
        name = self._str_val()
        if name is None or not self._match(GROUP_START):
            return None
        members = []
        while True:
            self._skip()
            if self._match(GROUP_CLOSE):
                return DefGroup(name, tuple(members))
            member = self._str_val()
            if member is None:
                if self._hint is None:
                    self._hint = f"expected a name or ']' in group {name!r}"
                return None
            members.append(member)

    def _job_or_num(self):
        name = self._str_val()
        if name is None:
            return None
        mark = self.pos
        if self._match(VALUE_SEP):
            value = self._int()
            if value is not None:
                return SetNum(name, value)
        self.pos = mark
        return SetJob(name)

    _candidates = (
        _clear_tags,
        _add_tag,
        _clock_out,
        _date,
        _clock_in,
        _set_num,
        _group,
        _job_or_num,
    )

    def _record(self):
        start = self.pos
        self._hint = None
        for candidate in self._candidates:
            action = candidate(self)
            if action is not None:
                return action
            self.pos = start
        self._fail(start)

    def actions(self):
        """Yield every PositionedAction; raises ParseFailure on bad input."""
        self._skip()
        while not self._at_end():
            line, col = self.position(self.pos)
            yield PositionedAction(line, col, self._record())
            self._skip()


def lex(text):
    """All positioned actions of `text`, or ParseFailure for the first bad record."""
    return list(Lexer(text).actions())
