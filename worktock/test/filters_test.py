"""Tests interval selection."""


import datetime
import unittest

from ..core.errors import MessageError
from ..core.parser import LogParser
from ..filters.filters import IntervalFilters

LOG = '''\
$work[acme, widgets]
=year:2020
6/1  # a Monday
acme,_client,9:00-12:00
widgets,13:00-17:00
8/1
__,home,10:00-11:00
1/2
acme,9:00-10:00
'''


class IntervalFiltersTest(unittest.TestCase):

    def setUp(self):
        sheet = LogParser().parse(LOG)
        self.intervals = sheet.intervals
        self.groups = sheet.groups

    def selected(self, filters):
        return [(iv.date.isoformat(), iv.job) for iv in filters.apply(self.intervals)]

    def test_no_filters_keeps_everything(self):
        filters = IntervalFilters()
        self.assertEqual(len(filters), 0)
        self.assertEqual(filters.apply(self.intervals), self.intervals)

    def test_date_range(self):
        self.assertEqual(
            self.selected(IntervalFilters().by_date_range(since=datetime.date(2020, 1, 7))),
            [('2020-01-08', 'home'), ('2020-02-01', 'acme')])
        self.assertEqual(
            self.selected(IntervalFilters().by_date_range(until=datetime.date(2020, 1, 8))),
            [('2020-01-06', 'acme'), ('2020-01-06', 'widgets'), ('2020-01-08', 'home')])

    def test_day(self):
        self.assertEqual(
            self.selected(IntervalFilters().by_day(datetime.date(2020, 1, 6))),
            [('2020-01-06', 'acme'), ('2020-01-06', 'widgets')])

    def test_week(self):
        # Wednesday 8 Jan 2020 is in the week of Monday 6 Jan
        self.assertEqual(
            len(IntervalFilters().by_week(datetime.date(2020, 1, 8)).apply(self.intervals)), 3)

    def test_month(self):
        self.assertEqual(
            self.selected(IntervalFilters().by_month(datetime.date(2020, 2, 15))),
            [('2020-02-01', 'acme')])

    def test_job_and_prefix(self):
        self.assertEqual(len(IntervalFilters().by_job('acme').apply(self.intervals)), 2)
        self.assertEqual(
            self.selected(IntervalFilters().by_job_prefix('w')),
            [('2020-01-06', 'widgets')])

    def test_tag(self):
        self.assertEqual(
            self.selected(IntervalFilters().by_tag('client')),
            [('2020-01-06', 'acme'), ('2020-01-06', 'widgets')])

    def test_group(self):
        filters = IntervalFilters(self.groups).by_group('work')
        self.assertEqual(
            [iv.job for iv in filters.apply(self.intervals)],
            ['acme', 'widgets', 'acme'])

    def test_unknown_group(self):
        with self.assertRaises(MessageError):
            IntervalFilters(self.groups).by_group('play')

    def test_combined(self):
        filters = (IntervalFilters(self.groups)
                   .by_group('work')
                   .by_date_range(since=datetime.date(2020, 1, 6),
                                  until=datetime.date(2020, 1, 31)))
        self.assertEqual(len(filters), 3)
        self.assertEqual(
            self.selected(filters),
            [('2020-01-06', 'acme'), ('2020-01-06', 'widgets')])
