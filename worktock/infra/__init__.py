#worktock\infra\__init__.py

from .constants import (CONSTANTS, CSV_HEADER, DEFAULT_CONFIG_PATH, DEFAULT_JOB,
                        DEFAULT_LOG_PATH, DEFAULT_OUTPUT_FILENAME, MINUTES_PER_DAY,
                        MINUTES_PER_HOUR, WATERMARK, YEAR_KEY)
from .logger import LoggerFactory
from .config import Config, ConfigError

__all__ = [
    "LoggerFactory",
    "Config",
    "ConfigError",
    "CONSTANTS",
    "WATERMARK",
    "DEFAULT_JOB",
    "YEAR_KEY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_PATH",
    "CSV_HEADER",
    "DEFAULT_OUTPUT_FILENAME",
]
