"""Tests the package logger factory."""


import logging
import tempfile
import unittest
from pathlib import Path

from ..infra.logger import ROOT_NAME, LoggerFactory


class LoggerFactoryTest(unittest.TestCase):

    def setUp(self):
        # Back to whatever the environment asks for
        self.addCleanup(LoggerFactory.configure)
        self.root = logging.getLogger(ROOT_NAME)

    def test_loggers_live_under_the_package(self):
        self.assertEqual(LoggerFactory.get_logger('worktock.core.lexer').name,
                         'worktock.core.lexer')
        self.assertEqual(LoggerFactory.get_logger('plugin').name, 'worktock.plugin')
        self.assertEqual(LoggerFactory.get_logger('worktock').name, 'worktock')

    def test_handlers_only_on_package_logger(self):
        LoggerFactory.configure(environ={})
        child = LoggerFactory.get_logger('worktock.core.reducer')
        self.assertEqual(child.handlers, [])
        self.assertTrue(child.propagate)
        self.assertEqual(len(self.root.handlers), 1)

    def test_reconfigure_does_not_stack_handlers(self):
        LoggerFactory.configure(environ={})
        LoggerFactory.configure(environ={})
        self.assertEqual(len(self.root.handlers), 1)

    def test_level_from_environment(self):
        LoggerFactory.configure(environ={'WORKTOCK_LOGLEVEL': ' warning '})
        self.assertEqual(self.root.level, logging.WARNING)
        LoggerFactory.configure(environ={'WORKTOCK_LOGLEVEL': 'loud'})
        self.assertEqual(self.root.level, logging.INFO)

    def test_explicit_level_wins(self):
        LoggerFactory.configure(level='debug', environ={'WORKTOCK_LOGLEVEL': 'ERROR'})
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'worktock.log'
            LoggerFactory.configure(environ={'WORKTOCK_LOGFILE': str(path)})
            self.assertEqual(len(self.root.handlers), 2)
            LoggerFactory.get_logger('worktock.main').warning('clocked %s', 'out')
            # Drop the file handler before the directory goes away
            LoggerFactory.configure(environ={})
            self.assertEqual(len(self.root.handlers), 1)
            self.assertEqual(path.read_text(encoding='utf-8'), '[WARNING] clocked out\n')

    def test_unwritable_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'missing' / 'worktock.log'
            with self.assertLogs(ROOT_NAME, level='ERROR') as cm:
                LoggerFactory.configure(logfile=path, environ={})
        self.assertIn('Failed to set up file logging', cm.output[0])
