"""Tests reading whole logs into timesheets."""


import datetime
import unittest

from ..core.entries import InEntry, OutEntry
from ..core.errors import (AggregatedLinesError, MessageError, NotSetError, ParseFailure,
                           UnmatchedOutError)
from ..core.parser import LogParser, parse_log
from ..core.stime import STime

SAMPLE = '''\
# Clock log
$work[acme, widgets]
=year:2020
6/1
acme,_client,9:00-12:00
widgets,13:00
-17:00
8/1
__,home,10:00-11:00   # short day
1/2
acme,9:00
'''


class ParseLogTest(unittest.TestCase):

    def test_entries_and_groups(self):
        parsed = parse_log(SAMPLE)
        self.assertEqual(parsed.groups, {'work': ['acme', 'widgets']})
        kinds = [type(e) for e in parsed.entries]
        self.assertEqual(kinds, [InEntry, OutEntry, InEntry, OutEntry,
                                 InEntry, OutEntry, InEntry])
        self.assertEqual(parsed.last_date, datetime.date(2020, 2, 1))
        self.assertEqual(parsed.last_job, 'acme')

    def test_date_then_clock_in(self):
        parsed = parse_log('17/5/2021\n8:45')
        [entry] = parsed.entries
        self.assertEqual(entry.data.date, datetime.date(2021, 5, 17))
        self.assertEqual(entry.data.time, STime(8, 45))
        self.assertEqual(entry.data.line, 2)

    def test_default_job_is_configurable(self):
        parsed = parse_log('1/1/2020,9:00', default_job='misc')
        self.assertEqual(parsed.entries[0].data.job, 'misc')

    def test_date_without_year(self):
        with self.assertRaises(AggregatedLinesError) as cm:
            parse_log('acme\n3/4\n9:00')
        errors = cm.exception.errors
        self.assertEqual([e.line for e in errors], [2, 3])
        self.assertTrue(all(isinstance(e.error, NotSetError) for e in errors))
        self.assertEqual(str(cm.exception), 'line 2: date not set\nline 3: date not set')

    def test_huge_numbers_are_line_errors(self):
        with self.assertRaises(AggregatedLinesError) as cm:
            parse_log('1/1/2020,acme,9:00\n99999999999999999999/1/2020\n-10:00')
        [err] = cm.exception.errors
        self.assertEqual(err.line, 2)
        self.assertIsInstance(err.error, MessageError)

        with self.assertRaises(AggregatedLinesError) as cm:
            parse_log('=year:99999999999999999999\n1/1\n9:00')
        self.assertEqual([e.line for e in cm.exception.errors], [2, 3])

    def test_structural_failure_is_single(self):
        with self.assertRaises(ParseFailure) as cm:
            parse_log('3/4\n9:00\n!!')
        self.assertEqual(cm.exception.line, 3)

    def test_group_redefinition_replaces(self):
        parsed = parse_log('$g[a, b]\n$g[c]')
        self.assertEqual(parsed.groups, {'g': ['c']})


class LogParserTest(unittest.TestCase):

    def test_sample(self):
        sheet = LogParser().parse(SAMPLE)
        self.assertEqual(
            [(iv.date.day, iv.job, iv.tags, str(iv.start.time), str(iv.end))
             for iv in sheet.intervals],
            [
                (6, 'acme', ('client',), '09:00', '12:00'),
                (6, 'widgets', ('client',), '13:00', '17:00'),
                (8, 'home', (), '10:00', '11:00'),
            ])
        self.assertEqual(sheet.open_entry.job, 'acme')
        self.assertEqual(sheet.open_entry.date, datetime.date(2020, 2, 1))
        self.assertEqual(sheet.anomalies, [])

    def test_switching_jobs_closes_previous(self):
        sheet = LogParser().parse('1/1/2020\njob1,9:00\njob2,10:00\n-11:00')
        self.assertEqual(
            [(iv.job, str(iv.start.time), str(iv.end)) for iv in sheet.intervals],
            [('job1', '09:00', '10:00'), ('job2', '10:00', '11:00')])
        self.assertIsNone(sheet.open_entry)

    def test_clear_tags_applies_until_next_tag(self):
        sheet = LogParser().parse(
            '1/1/2020,_a,_b,9:00-10:00,__,10:00-11:00,11:00-12:00,_c,12:00-13:00')
        self.assertEqual([iv.tags for iv in sheet.intervals],
                         [('a', 'b'), (), (), ('c',)])

    def test_unmatched_out_does_not_stop_processing(self):
        sheet = LogParser().parse('1/1/2020\n-9:00\njob,10:00\n-11:00')
        self.assertEqual(len(sheet.intervals), 1)
        self.assertEqual(sheet.intervals[0].job, 'job')
        [anomaly] = sheet.anomalies
        self.assertEqual(anomaly.line, 2)
        self.assertIsInstance(anomaly.error, UnmatchedOutError)

    def test_overnight_clock_out(self):
        sheet = LogParser().parse('1/1/2020\nnight,22:30\n-25:15')
        self.assertEqual(sheet.intervals[0].duration, STime(2, 45))

    def test_with_open_closed(self):
        sheet = LogParser().parse('31/12/2019\nlate,23:30')
        closed = sheet.with_open_closed(datetime.date(2020, 1, 1), STime(0, 45))
        self.assertEqual(len(closed), 1)
        self.assertEqual(closed[0].duration, STime(1, 15))
        # Nothing written back: the sheet still has the open entry
        self.assertEqual(sheet.intervals, [])
        self.assertIsNotNone(sheet.open_entry)

    def test_deterministic(self):
        first = LogParser().parse(SAMPLE)
        second = LogParser().parse(SAMPLE)
        self.assertEqual(first.intervals, second.intervals)
        self.assertEqual(first.open_entry, second.open_entry)

    def test_empty_log(self):
        sheet = LogParser().parse('')
        self.assertEqual(sheet.intervals, [])
        self.assertIsNone(sheet.open_entry)
        self.assertIsNone(sheet.last_date)
        self.assertEqual(sheet.last_job, 'General')
