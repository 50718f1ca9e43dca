"""
Parse domain registry whois responses into structured records
"""

__version__ = '1.0.0'

__all__ = ['contacts', 'dates', 'log', 'parser', 'record', 'status', 'parse']


class WhoisError(Exception):
    def __str__(self):
        return self.args[0]


class WhoisDateError(WhoisError):
    """Unparseable date

    Raised when a month name style date can't be converted. Aborts the whole
    parse, no partial record is returned.

    """
    def __init__(self, message, value=None):
        super(WhoisDateError, self).__init__(message)
        self.value = value


def parse(raw):
    """Parse whois response text to a Record"""
    from whoisrecord.parser import WhoisRecordParser
    return WhoisRecordParser().parse(raw)
