"""Tests parsing of command-line dates and times."""


import datetime
import unittest

from ..core.stime import STime
from ..utils.timeparse import TimeParser

REF = datetime.date(2020, 1, 8)


class ToDateTest(unittest.TestCase):

    def test_relative_days(self):
        self.assertEqual(TimeParser.to_date('today', REF), REF)
        self.assertEqual(TimeParser.to_date('Yesterday', REF), datetime.date(2020, 1, 7))
        self.assertEqual(TimeParser.to_date('tomorrow', REF), datetime.date(2020, 1, 9))

    def test_day_first_dates(self):
        self.assertEqual(TimeParser.to_date('3/4', REF), datetime.date(2020, 4, 3))
        self.assertEqual(TimeParser.to_date('3/4/2021', REF), datetime.date(2021, 4, 3))
        self.assertEqual(TimeParser.to_date('3/4/21', REF), datetime.date(2021, 4, 3))

    def test_dateutil_fallback(self):
        self.assertEqual(TimeParser.to_date('3 April 2019', REF), datetime.date(2019, 4, 3))
        self.assertEqual(TimeParser.to_date('april 3', REF), datetime.date(2020, 4, 3))

    def test_invalid(self):
        for tok in ('notadate', '31/2/2020'):
            with self.subTest(tok):
                with self.assertRaises(ValueError):
                    TimeParser.to_date(tok, REF)


class ToSTimeTest(unittest.TestCase):

    def test_forms(self):
        cases = (
            ('9:30', STime(9, 30)),
            ('25:15', STime(25, 15)),
            ('0930', STime(9, 30)),
            ('9:30pm', STime(21, 30)),
            ('12am', STime(0, 0)),
        )
        for tok, expected in cases:
            with self.subTest(tok):
                self.assertEqual(TimeParser.to_stime(tok), expected)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            TimeParser.to_stime('banana')


class BoundsTest(unittest.TestCase):

    def test_week(self):
        self.assertEqual(TimeParser.week_bounds(REF),
                         (datetime.date(2020, 1, 6), datetime.date(2020, 1, 12)))

    def test_month(self):
        self.assertEqual(TimeParser.month_bounds(datetime.date(2020, 2, 10)),
                         (datetime.date(2020, 2, 1), datetime.date(2020, 2, 29)))
        self.assertEqual(TimeParser.month_bounds(datetime.date(2019, 12, 31)),
                         (datetime.date(2019, 12, 1), datetime.date(2019, 12, 31)))

    def test_now(self):
        today, now = TimeParser.now()
        self.assertIsInstance(today, datetime.date)
        self.assertIsInstance(now, STime)
        self.assertLess(now, STime(24, 0))
