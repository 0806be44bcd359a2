#worktock\patterns\patterns.py

import re

# ---------- Between records ----------
# Whitespace, separators and comments; a comment runs up to the next separator
SKIP = re.compile(r"(?:[ \t,\r\n]+|#[^,\r\n]*)*")

# ---------- Values ----------
BARE_IDENT = re.compile(r"[^\W\d_]\w*")
QUOTED_STR = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
QUOTE_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
QUOTE_ESCAPES = {"t": "\t", "n": "\n", '"': '"', "\\": "\\"}

INT = re.compile(r"-?\d+")

# ---------- Records ----------
CLEAR_TAGS = re.compile(r"__")
ADD_TAG = re.compile(r"_")

# -H:M
CLOCK_OUT = re.compile(r"-(\d+):(\d+)")

# D/M or D/M/Y
DATE = re.compile(r"(\d+)[ \t]*/[ \t]*(\d+)(?:[ \t]*/[ \t]*(\d+))?")

# H:M or H:M-H:M
CLOCK_IN = re.compile(r"(\d+):(\d+)(?:-(\d+):(\d+))?")

SET_NUM = re.compile(r"=")
GROUP_OPEN = re.compile(r"\$")
GROUP_START = re.compile(r"[ \t]*\[")
GROUP_CLOSE = re.compile(r"\]")
KEY_SEP = re.compile(r"[ \t]*:[ \t]*")
VALUE_SEP = re.compile(r"[ \t]*=[ \t]*")

# Rest of the current record, for error messages
RECORD_TEXT = re.compile(r"[^,\r\n]*")
