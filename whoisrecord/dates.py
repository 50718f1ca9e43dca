#!/usr/bin/env python
"""
Parsers for the date formats found in whois responses

Most registries send ISO 8601 timestamps. Some ccTLD registries (for example
.is) send dates as month name, day and year, e.g. 'January 5 2020'.
"""

import logging
import re

from dateutil.parser import isoparse

from whoisrecord import WhoisDateError

MONTHS = {
    'January':      1,
    'February':     2,
    'March':        3,
    'April':        4,
    'May':          5,
    'June':         6,
    'July':         7,
    'August':       8,
    'September':    9,
    'October':      10,
    'November':     11,
    'December':     12,
}

# Complete date and time with optional fraction and UTC offset
RE_ISO_DATETIME = re.compile(
    r'^\d{4}-\d{2}-\d{2}[T ](?P<hour>\d{2}):\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}(:?\d{2})?)?$'
)

MONTH_DATE_TEMPLATE = '%(year)s-%(month)s-%(day)sT00:00:00'

logger = logging.getLogger(__name__)


def zero_pad(value, width=2):
    return str(value).rjust(width, '0')


def parse_iso_datetime(value):
    """Parse ISO 8601 timestamp

    Returns naive datetime, or None if value can't be parsed. Value must have
    both date and time, e.g. '2020-01-02T03:04:05'. UTC offset in value is
    dropped without adjusting the time.

    """
    value = value.strip()
    m = RE_ISO_DATETIME.match(value)
    if not m or int(m.group('hour')) > 23:
        logger.debug('Invalid ISO date %r: not a complete date and time', value)
        return None

    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        logger.debug('Invalid ISO date %r: %s', value, e)
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None)
    return parsed


def parse_month_datetime(value):
    """Parse month name date

    Parse dates like 'January 5 2020' to naive datetime at midnight. Month
    names are case sensitive. Tokens are separated by any run of whitespace,
    tabs included. Raises WhoisDateError for any value that can't be parsed.

    """
    try:
        month, day, year = value.split()
    except ValueError:
        raise WhoisDateError('Invalid month name date format: %s' % value, value)

    try:
        month = MONTHS[month]
    except KeyError:
        raise WhoisDateError('Unknown month name in date: %s' % value, value)

    timestamp = MONTH_DATE_TEMPLATE % {
        'year': year,
        'month': zero_pad(month),
        'day': zero_pad(day),
    }
    try:
        return isoparse(timestamp)
    except (ValueError, OverflowError):
        raise WhoisDateError('Invalid month name date: %s' % value, value)
