#!/usr/bin/env python
"""
Abstraction for logging in whoisrecord modules.

The library itself never adds handlers. Applications that want to see parser
debug output attach one with ParserLogs.
"""

import os
import logging

from whoisrecord import WhoisError

DEFAULT_LOGFORMAT = '%(name)s %(levelname)s %(message)s'
LOGLEVEL_ENV = 'WHOISRECORD_LOGLEVEL'

PACKAGE_LOGGER = 'whoisrecord'


def environment_loglevel():
    """Log level name from WHOISRECORD_LOGLEVEL

    Returns None if the variable is not set. Raises WhoisError for unknown
    level names.

    """
    level = os.environ.get(LOGLEVEL_ENV)
    if not level:
        return None
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise WhoisError('Invalid log level in %s: %s' % (LOGLEVEL_ENV, level))
    return level


class ParserLogs(dict):
    """Console logging for parser modules

    Setting the level attribute sets the level of every configured logger.

    """
    def __init__(self, names=(PACKAGE_LOGGER,), logformat=DEFAULT_LOGFORMAT, stream=None):
        level = environment_loglevel()

        self.logformat = logformat
        self.handlers = {}
        for name in names:
            l = logging.getLogger(name)
            h = logging.StreamHandler(stream)
            h.setFormatter(logging.Formatter(logformat))
            l.addHandler(h)
            self.handlers[name] = h
            self[name] = l

        if level is not None:
            self.level = level

    def __setattr__(self, attr, value):
        object.__setattr__(self, attr, value)
        if attr == 'level':
            for name, logger in self.items():
                logger.setLevel(self.level)

    def close(self):
        for name, logger in self.items():
            logger.removeHandler(self.handlers[name])
            self.handlers[name].close()
        self.handlers.clear()
        self.clear()
