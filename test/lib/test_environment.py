import logging
import os

from unittest.mock import patch

from upcase.lib.environment import EVLog, LogLevel, UpcaseFormatter, environment, logger

from .. import TestBase


class TestEnvironment(TestBase):

    def test_verbosity_from_integer(self):
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': '1'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.INFO)
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': '7'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DEBUG)
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': '-1'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DETACHED)

    def test_verbosity_from_name(self):
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': 'DETACHED'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DETACHED)
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': 'debug'}):
            self.assertEqual(EVLog('VERBOSITY').value, LogLevel.DEBUG)

    def test_verbosity_unknown_name(self):
        with patch.dict(os.environ, {'UPCASE_VERBOSITY': 'LOUD'}):
            self.assertIsNone(EVLog('VERBOSITY').value)

    def test_verbosity_unset(self):
        with patch.dict(os.environ, clear=True):
            self.assertIsNone(EVLog('VERBOSITY').value)

    def test_setting_key(self):
        self.assertEqual(environment.verbosity.key, 'UPCASE_VERBOSITY')

    def test_log_level_from_verbosity(self):
        self.assertEqual(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertEqual(LogLevel.FromVerbosity(1), LogLevel.INFO)
        self.assertEqual(LogLevel.FromVerbosity(2), LogLevel.DEBUG)

    def test_formatter_level_names(self):
        formatter = UpcaseFormatter('{custom_level_name}: {message}', style='{')
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'hello', None, None)
        self.assertEqual(formatter.format(record), 'comment: hello')
        record = logging.LogRecord('test', logging.ERROR, __file__, 1, 'oops', None, None)
        self.assertEqual(formatter.format(record), 'failure: oops')

    def test_logger_configuration(self):
        log = logger('upcase.test.logger')
        self.assertFalse(log.propagate)
        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0].formatter, UpcaseFormatter)
        self.assertIs(logger('upcase.test.logger'), log)
        self.assertEqual(len(log.handlers), 1)

    def test_logger_default_level(self):
        with patch.object(environment, 'verbosity', EVLog('UNSET_FOR_TEST')):
            self.assertEqual(logger('upcase.test.default').level, LogLevel.WARNING)
