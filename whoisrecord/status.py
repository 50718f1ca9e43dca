#!/usr/bin/env python
"""
Domain status interpretation
"""

# EPP status code for a domain without restrictions, see
# https://www.icann.org/en/system/files/files/epp-status-codes-30jun11-en.pdf
UNLOCKED_STATUS_PREFIX = 'ok'


def is_unlocked(status, case_sensitive=True):
    """Check if domain status allows transfers

    Only a status starting with 'ok' is unlocked. Lock codes like
    clientTransferProhibited, or a missing status, are not.

    """
    if not status:
        return False
    if not case_sensitive:
        status = status.lower()
    return status.startswith(UNLOCKED_STATUS_PREFIX)
