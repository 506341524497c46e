#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The logging setup of the package and its only configuration setting: the environment variable
`UPCASE_VERBOSITY`, which sets the initial log level of all units. It accepts either a verbosity
number (0 for warnings, 1 for info, 2 for debug output, negative to detach) or the name of an
element of `upcase.lib.environment.LogLevel`.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Optional

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    The levels of the `logging` module, extended by one level above all others:
    """
    DETACHED = logging.CRITICAL + 100
    """
    The unit was instantiated in code and is not attached to a terminal. It does not log anything;
    the only way it communicates a problem is by raising an exception.
    """

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        if verbosity < 0:
            return cls.DETACHED
        if verbosity == 0:
            return cls.WARNING
        if verbosity == 1:
            return cls.INFO
        return cls.DEBUG

    CRITICAL = logging.CRITICAL  # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa
    NOTSET   = logging.NOTSET    # noqa


class UpcaseFormatter(logging.Formatter):
    """
    Renders the level of a record with the words used in unit log output, available to the format
    string as `custom_level_name`.
    """
    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, record.levelname.lower())
        return super().formatMessage(record)


class EVLog:
    """
    A log level read from the environment variable `UPCASE_{name}` when the setting is created.
    The value is `None` when the variable is not set or when it cannot be interpreted; the latter
    case is reported as a warning.
    """
    key: str
    value: Optional[LogLevel]

    def __init__(self, name: str):
        self.key = F'UPCASE_{name}'
        self.value = self.read()

    def read(self) -> Optional[LogLevel]:
        try:
            loglevel = os.environ[self.key]
        except KeyError:
            return None
        try:
            return LogLevel.FromVerbosity(int(loglevel))
        except ValueError:
            pass
        try:
            return LogLevel[loglevel.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity {loglevel!r}; pick from: {levels}')
            return None


class environment:
    verbosity = EVLog('VERBOSITY')


def logger(name: str) -> Logger:
    """
    Obtain the logger with the given name, equipped with a single stderr handler that uses the
    unit log format. Log records do not propagate to the root logger. The initial level is the
    configured verbosity, or warning if none is configured.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(UpcaseFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        log.addHandler(handler)
    log.propagate = False
    level = environment.verbosity.value
    if level is None:
        level = LogLevel.WARNING
    log.setLevel(level)
    return log
