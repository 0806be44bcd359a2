#worktock\infra\config.py
"""
infra/config.py

Runtime configuration for the CLI.

Sources, lowest to highest priority:
- built-in defaults (infra/constants.py)
- config file: plain "key: value" lines, '#' comments, blank lines ignored
- environment: WORKTOCK_FILE, WORKTOCK_JOB
- command-line flags (applied by main.py via `override`)

Recognised keys: file, job. Unknown keys are kept in `extra`.
"""

import os
from pathlib import Path

from worktock.infra.constants import CONSTANTS


class ConfigError(Exception):
    """Raised for an unreadable or malformed config file."""


def expand_path(raw):
    """Expand '~' and $VARS in a path string."""
    return Path(os.path.expandvars(os.path.expanduser(raw.strip())))


class Config:
    """Resolved settings for one invocation."""

    def __init__(self, log_path=None, job=None, extra=None):
        self.log_path = log_path if log_path else expand_path(CONSTANTS.default_log_path)
        self.job = job if job else CONSTANTS.default_job
        self.extra = dict(extra or {})

    def __repr__(self):
        return f"Config(log_path={str(self.log_path)!r}, job={self.job!r})"

    @staticmethod
    def parse_text(text, source="<config>"):
        """Parse "key: value" lines into a dict. Later keys win."""
        values = {}
        for n, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue
            if ":" not in line:
                raise ConfigError(f"{source}, line {n}: expected 'key: value', got {raw_line!r}")
            key, value = line.split(":", 1)
            key = key.strip().lower()
            if not key:
                raise ConfigError(f"{source}, line {n}: missing key")
            values[key] = value.strip()
        return values

    @classmethod
    def load(cls, path=None, environ=None):
        """
        Build a Config from file + environment.

        A missing file is only an error when `path` was given explicitly.
        """
        environ = os.environ if environ is None else environ
        explicit = path is not None
        cfg_path = expand_path(str(path)) if explicit else expand_path(CONSTANTS.default_config_path)

        values = {}
        if cfg_path.is_file():
            try:
                text = cfg_path.read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigError(f"Cannot read config file {cfg_path}: {e}") from e
            values = cls.parse_text(text, source=str(cfg_path))
        elif explicit:
            raise ConfigError(f"Config file not found: {cfg_path}")

        log_file = environ.get(CONSTANTS.env_file) or values.pop("file", None)
        job = environ.get(CONSTANTS.env_job) or values.pop("job", None)
        values.pop("file", None)
        values.pop("job", None)

        return cls(
            log_path=expand_path(log_file) if log_file else None,
            job=job,
            extra=values,
        )

    def override(self, log_path=None, job=None):
        """Apply command-line overrides in place; returns self."""
        if log_path:
            self.log_path = expand_path(str(log_path))
        if job:
            self.job = job
        return self
