#worktock\infra\constants.py

"""
infra/constants.py

Immutable project-wide constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""
    watermark = "Compiled with worktock 1.0"

    # Job used for clock-ins before any job line appears in the log
    default_job = "General"

    # Only numeric override the reducer acts on ("=year:2019" / "year=2019")
    year_key = "year"

    minutes_per_hour = 60
    minutes_per_day = 60 * 24

    # Config file (key: value lines) and the log it points at
    default_config_path = "~/.config/work_tock/init"
    default_log_path = "~/.config/work_tock/clock.tock"

    # Environment overrides
    env_file = "WORKTOCK_FILE"
    env_job = "WORKTOCK_JOB"
    env_loglevel = "WORKTOCK_LOGLEVEL"
    env_logfile = "WORKTOCK_LOGFILE"

    csv_header = ["Date", "Job", "Tags", "In", "Out", "Duration"]

    # Default output CSV filename
    default_output_filename = "worktock.csv"


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
WATERMARK = CONSTANTS.watermark
DEFAULT_JOB = CONSTANTS.default_job
YEAR_KEY = CONSTANTS.year_key
MINUTES_PER_HOUR = CONSTANTS.minutes_per_hour
MINUTES_PER_DAY = CONSTANTS.minutes_per_day
DEFAULT_CONFIG_PATH = CONSTANTS.default_config_path
DEFAULT_LOG_PATH = CONSTANTS.default_log_path
CSV_HEADER = CONSTANTS.csv_header
DEFAULT_OUTPUT_FILENAME = CONSTANTS.default_output_filename
