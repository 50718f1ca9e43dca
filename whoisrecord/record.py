#!/usr/bin/env python
"""
Record and contact values returned by the whois parser
"""

from collections import namedtuple
from datetime import datetime
from enum import Enum

CONTACT_FIELDS = (
    'name',
    'organization',
    'street',
    'city',
    'state',
    'zip',
    'country',
    'phone',
    'fax',
    'email',
)

RECORD_FIELDS = (
    'domain',
    'raw',
    'nameservers',
    'registrar',
    'domain_status',
    'unlocked',
    'created_at',
    'updated_at',
    'expires_at',
    'contacts',
)

# Shown instead of the raw response text in repr and formatted output
RAW_PLACEHOLDER = '…'

SECONDS_PER_DAY = 86400


class ContactRole(Enum):
    REGISTRANT = 'registrant'
    ADMINISTRATOR = 'administrator'
    TECHNICAL = 'technical'


class Contact(namedtuple('Contact', CONTACT_FIELDS, defaults=(None,) * len(CONTACT_FIELDS))):
    """Domain contact

    Identity and address details for one contact role. Every field is None
    unless the response contained it.

    """
    __slots__ = ()

    @property
    def is_empty(self):
        return all(value is None for value in self)


class Contacts(namedtuple('Contacts', [role.value for role in ContactRole])):
    """Contacts for the three fixed roles

    Registrant, administrator and technical contacts. No other roles exist.

    """
    __slots__ = ()

    @classmethod
    def empty(cls):
        return cls(*(Contact() for role in ContactRole))

    def get(self, role):
        try:
            return getattr(self, ContactRole(role).value)
        except ValueError:
            raise KeyError(role)

    def items(self):
        return [(role, getattr(self, role.value)) for role in ContactRole]

    def replace(self, role, contact):
        return self._replace(**{ContactRole(role).value: contact})


class Record(namedtuple('Record', RECORD_FIELDS)):
    """Parsed whois record

    Immutable result of one parse. The raw response is kept as given but is
    never shown by repr().

    """
    __slots__ = ()

    def __repr__(self):
        fields = ', '.join(
            '%s=%r' % (field, RAW_PLACEHOLDER if field == 'raw' else getattr(self, field))
            for field in RECORD_FIELDS
        )
        return 'Record(%s)' % fields

    def expires_in_days(self, now=None):
        """Days until expiration

        Returns number of whole days until expires_at, negative when the
        domain has already expired, or None if expiration date is unknown.

        """
        if self.expires_at is None:
            return None
        if now is None:
            now = datetime.now()
        return int((self.expires_at - now).total_seconds() // SECONDS_PER_DAY)


def format_record(record):
    """Format record for display

    Multi-line summary for terminal and log output. The raw response is
    replaced with RAW_PLACEHOLDER.

    """
    lines = [
        'Domain:        %s' % (record.domain or ''),
        'Registrar:     %s' % (record.registrar or ''),
        'Status:        %s' % (record.domain_status or ''),
        'Unlocked:      %s' % ('yes' if record.unlocked else 'no'),
        'Nameservers:   %s' % ','.join(record.nameservers),
    ]
    for label, value in (('Created', record.created_at), ('Updated', record.updated_at), ('Expires', record.expires_at)):
        lines.append('%-14s %s' % ('%s:' % label, value.isoformat() if value is not None else ''))

    for role, contact in record.contacts.items():
        if contact.is_empty:
            continue
        lines.append('%s contact:' % role.value.capitalize())
        for field in CONTACT_FIELDS:
            value = getattr(contact, field)
            if value is not None:
                lines.append('  %-13s %s' % ('%s:' % field, value))

    lines.append('Raw:           %s' % RAW_PLACEHOLDER)
    return '\n'.join(lines)
