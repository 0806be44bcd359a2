#worktock\infra\logger.py
"""
infra/logger.py

Logger factory for worktock.

Every module logs through a child of the package logger "worktock";
handlers live on that one logger only, so records from the lexer, the
reducer and the CLI share a single stderr stream (and log file).

Env controls:
- WORKTOCK_LOGLEVEL: logging level (default: INFO)
- WORKTOCK_LOGFILE: optional log file path

The CLI may override both at startup through LoggerFactory.configure.
"""

import logging
import os
import sys

from worktock.infra.constants import CONSTANTS

ROOT_NAME = "worktock"

_BRIEF = logging.Formatter("[%(levelname)s] %(message)s")
# At DEBUG the reader wants to know which stage spoke
_VERBOSE = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")


class _LoggerConfig:
    """Level and log file, from the environment or from CLI flags."""

    def __init__(self, level_name="INFO", logfile=None):
        self.level_name = level_name
        self.logfile = logfile

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        level = environ.get(CONSTANTS.env_loglevel, "INFO").strip().upper()
        logfile = environ.get(CONSTANTS.env_logfile)
        logfile = logfile.strip() if logfile else None
        return cls(level_name=level, logfile=logfile)

    @property
    def level(self):
        # Unknown names fall back to INFO
        level = logging.getLevelName(self.level_name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def formatter(self):
        return _VERBOSE if self.level <= logging.DEBUG else _BRIEF


class LoggerFactory:
    """
    Hands out loggers under the "worktock" package logger.

    Usage:
        from worktock.infra import LoggerFactory
        log = LoggerFactory.get_logger(__name__)
    """

    _config = None
    _stderr_handler = None
    _file_handler = None

    @classmethod
    def get_logger(cls, name):
        if cls._config is None:
            cls.configure()
        if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
            name = f"{ROOT_NAME}.{name}"
        return logging.getLogger(name)

    @classmethod
    def configure(cls, level=None, logfile=None, environ=None):
        """
        (Re)configure the package logger.

        Explicit arguments win over WORKTOCK_LOGLEVEL / WORKTOCK_LOGFILE.
        Safe to call more than once: handlers are replaced, never stacked.
        """
        cfg = _LoggerConfig.from_env(environ)
        if level is not None:
            cfg.level_name = str(level).strip().upper()
        if logfile is not None:
            cfg.logfile = str(logfile)

        root = logging.getLogger(ROOT_NAME)
        if cls._stderr_handler is None:
            cls._stderr_handler = logging.StreamHandler(sys.stderr)
            root.addHandler(cls._stderr_handler)
        cls._stderr_handler.setFormatter(cfg.formatter)

        if cls._file_handler is not None:
            root.removeHandler(cls._file_handler)
            cls._file_handler.close()
            cls._file_handler = None
        if cfg.logfile:
            try:
                cls._file_handler = logging.FileHandler(cfg.logfile, encoding="utf-8")
            except OSError as e:
                root.error("Failed to set up file logging at %s: %s", cfg.logfile, e)
            else:
                cls._file_handler.setFormatter(cfg.formatter)
                root.addHandler(cls._file_handler)

        root.setLevel(cfg.level)
        cls._config = cfg
        return root
