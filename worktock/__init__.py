"""
worktock: clock in and out of jobs in a plain-text log and report the time.

    from worktock.core import LogParser
    sheet = LogParser().parse(text)
"""

__version__ = "1.0.0"
