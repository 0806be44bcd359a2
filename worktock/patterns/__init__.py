from .patterns import (
    SKIP,
    BARE_IDENT,
    QUOTED_STR,
    QUOTE_ESCAPE,
    QUOTE_ESCAPES,
    INT,
    CLEAR_TAGS,
    ADD_TAG,
    CLOCK_OUT,
    DATE,
    CLOCK_IN,
    SET_NUM,
    GROUP_OPEN,
    GROUP_START,
    GROUP_CLOSE,
    KEY_SEP,
    VALUE_SEP,
    RECORD_TEXT,
)

__all__ = [
    "SKIP",
    "BARE_IDENT",
    "QUOTED_STR",
    "QUOTE_ESCAPE",
    "QUOTE_ESCAPES",
    "INT",
    "CLEAR_TAGS",
    "ADD_TAG",
    "CLOCK_OUT",
    "DATE",
    "CLOCK_IN",
    "SET_NUM",
    "GROUP_OPEN",
    "GROUP_START",
    "GROUP_CLOSE",
    "KEY_SEP",
    "VALUE_SEP",
    "RECORD_TEXT",
]
