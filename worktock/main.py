"""

CLI entrypoint:
- Loads config (file + environment + flags)
- Reads the clock log
- Clocks in / out by appending to the log, or
- Filters the intervals and prints a report (optionally exports CSV)

Exit codes:
 0 = success
 1 = nothing to do (no matching intervals, already clocked in/out)
 2 = input error (e.g., config or log missing, bad argument, clocking
     at a time before the open clock-in)
 3 = the log has errors
"""

import argparse
import sys

from worktock.core.errors import AggregatedLinesError, MessageError, ParseFailure
from worktock.core.intervals import close_open
from worktock.core.parser import LogParser
from worktock.filters.filters import IntervalFilters
from worktock.infra.config import Config, ConfigError
from worktock.infra.constants import DEFAULT_CONFIG_PATH
from worktock.infra.logger import LoggerFactory
from worktock.pdio.report import ReportPrinter
from worktock.pdio.writer import CsvWriter, LogWriter, format_date
from worktock.utils.timeparse import TimeParser

log = LoggerFactory.get_logger("worktock.main")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="worktock",
        description="Clock in and out of jobs and report time worked from a plain-text log.",
    )
    parser.add_argument("-c", "--config", help=f"config file (default {DEFAULT_CONFIG_PATH})")
    parser.add_argument("-f", "--file", help="clock log to read and append to")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    clock = parser.add_argument_group("clocking")
    clock.add_argument("-i", "--in", dest="clock_in", nargs="?", const="", metavar="JOB",
                       help="clock in (to JOB, or the configured default job)")
    clock.add_argument("-o", "--out", dest="clock_out", action="store_true", help="clock out")
    clock.add_argument("--at", metavar="TIME", help="clock at TIME instead of now")

    filt = parser.add_argument_group("filters")
    filt.add_argument("--since", metavar="DATE", help="only intervals on or after DATE")
    filt.add_argument("--until", metavar="DATE", help="only intervals on or before DATE")
    filt.add_argument("--day", metavar="DATE", help="only intervals on DATE")
    filt.add_argument("--week", action="store_true", help="only this week (Monday to Sunday)")
    filt.add_argument("--month", action="store_true", help="only this month")
    filt.add_argument("--job", help="only this job")
    filt.add_argument("--job-prefix", metavar="PREFIX", help="only jobs starting with PREFIX")
    filt.add_argument("--tag", help="only intervals carrying TAG")
    filt.add_argument("--group", help="only jobs in the group defined in the log")

    out = parser.add_argument_group("output")
    out.add_argument("-p", "--print", dest="list_all", action="store_true",
                     help="list every interval before the totals")
    out.add_argument("--csv", metavar="PATH", help="also write the intervals to a CSV file")
    return parser


def _build_filters(args, groups, today):
    filters = IntervalFilters(groups)
    if args.since or args.until:
        since = TimeParser.to_date(args.since, today) if args.since else None
        until = TimeParser.to_date(args.until, today) if args.until else None
        filters.by_date_range(since, until)
    if args.day:
        filters.by_day(TimeParser.to_date(args.day, today))
    if args.week:
        filters.by_week(today)
    if args.month:
        filters.by_month(today)
    if args.job:
        filters.by_job(args.job)
    if args.job_prefix:
        filters.by_job_prefix(args.job_prefix)
    if args.tag:
        filters.by_tag(args.tag)
    if args.group:
        filters.by_group(args.group)
    return filters


def _closing_time(open_entry, today, now_time):
    """End time for the open session, or None if it would precede the clock-in."""
    end = close_open(open_entry, today, now_time).end
    if end < open_entry.time:
        log.error("Cannot clock at %s: %s has been clocked in since %s %s",
                  now_time, open_entry.job, format_date(open_entry.date), open_entry.time)
        return None
    return end


def _clock(args, cfg, sheet, writer, today, now_time):
    if args.clock_in is not None:
        job = args.clock_in or cfg.job
        if sheet.open_entry is not None:
            if sheet.open_entry.job == job:
                log.error("Already clocked in to %s since %s", job, sheet.open_entry.time)
                return 1
            # Switching job closes the open session at now_time
            if _closing_time(sheet.open_entry, today, now_time) is None:
                return 2
        records = LogWriter.clock_in_records(job, today, now_time, sheet.last_date, sheet.last_job)
        writer.append(records)
        log.info("Clocked in to %s at %s", job, now_time)
        return 0

    if sheet.open_entry is None:
        log.error("Not clocked in; nothing to clock out of")
        return 1
    # Out records carry no date: express the time relative to the clock-in day
    end = _closing_time(sheet.open_entry, today, now_time)
    if end is None:
        return 2
    writer.append(LogWriter.clock_out_records(end))
    log.info("Clocked out of %s at %s", sheet.open_entry.job, end)
    return 0


def main(argv, now=None, out=None):
    args = build_parser().parse_args(argv[1:])
    if args.verbose:
        LoggerFactory.configure(level="DEBUG")
    today, now_time = now if now is not None else TimeParser.now()
    printer = ReportPrinter(out)

    try:
        cfg = Config.load(args.config).override(log_path=args.file)
        if args.at:
            now_time = TimeParser.to_stime(args.at)
    except (ConfigError, ValueError) as e:
        log.error(str(e))
        return 2

    clocking = args.clock_in is not None or args.clock_out
    writer = LogWriter(cfg.log_path)
    if not clocking and not cfg.log_path.exists():
        log.error("Log file not found: %s", cfg.log_path)
        return 2

    try:
        sheet = LogParser().parse(writer.read())
    except OSError as e:
        log.error("Cannot read %s: %s", cfg.log_path, e)
        return 2
    except ParseFailure as e:
        printer.print_errors([e])
        return 3
    except AggregatedLinesError as e:
        printer.print_errors(e.errors)
        return 3

    if clocking:
        return _clock(args, cfg, sheet, writer, today, now_time)

    try:
        filters = _build_filters(args, sheet.groups, today)
    except (MessageError, ValueError) as e:
        log.error(str(e))
        return 2

    shown = filters.apply(sheet.intervals)
    open_interval = None
    if sheet.open_entry is not None:
        candidate = close_open(sheet.open_entry, today, now_time)
        if filters.matches(candidate):
            open_interval = candidate

    if not shown and open_interval is None:
        log.error("No intervals to report.")
        return 1

    totalled = shown + ([open_interval] if open_interval is not None else [])
    printer.print_report(shown, open_interval, list_all=args.list_all)

    if args.csv:
        out_path = CsvWriter(args.csv).write(totalled)
        log.info("Wrote %d interval(s) -> %s", len(totalled), out_path)
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
