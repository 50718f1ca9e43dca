#!/usr/bin/env python
"""
Parser for registry whois response text

Responses are parsed line by line. Each line with a colon is split to key and
value, and the lowercased key is looked up from FIELD_MAP. Lines without a
colon and unknown keys are skipped.
"""

import logging

from whoisrecord import WhoisError
from whoisrecord.contacts import match_role, apply_contact_field
from whoisrecord.dates import parse_iso_datetime, parse_month_datetime
from whoisrecord.record import Contacts, Record
from whoisrecord.status import is_unlocked

# Key spellings mapped to (RecordBuilder method, field)
FIELD_MAP = {
    'domain name':          ('set_value',       'domain'),
    'domain':               ('set_value',       'domain'),
    'name server':          ('add_nameserver',  'nameservers'),
    'nserver':              ('add_nameserver',  'nameservers'),
    'registrar':            ('set_value',       'registrar'),
    'sponsoring registrar': ('set_value',       'registrar'),
    'domain status':        ('set_status',      'domain_status'),
    'creation date':        ('set_iso_date',    'created_at'),
    'created':              ('set_month_date',  'created_at'),
    'updated date':         ('set_iso_date',    'updated_at'),
    'expiration date':      ('set_iso_date',    'expires_at'),
    'registry expiry date': ('set_iso_date',    'expires_at'),
    'expires':              ('set_month_date',  'expires_at'),
}

logger = logging.getLogger(__name__)


def split_lines(raw):
    return raw.replace('\r\n', '\n').split('\n')


def split_field(line):
    """Split line to key and value

    Returns (key, value) with lowercase key, or None if line has no colon.

    """
    line = line.strip()
    if ':' not in line:
        return None
    key, value = line.split(':', 1)
    return key.strip().lower(), value.strip()


def normalize_nameservers(nameservers):
    """Lowercase nameservers and remove duplicates

    Order of first occurrence is kept.

    """
    seen = set()
    normalized = []
    for nameserver in nameservers:
        nameserver = nameserver.lower()
        if nameserver not in seen:
            seen.add(nameserver)
            normalized.append(nameserver)
    return normalized


class RecordBuilder(object):
    """Accumulator for one parse

    Collects values from parsed lines. build() returns the immutable Record.

    """
    def __init__(self, raw, status_case_sensitive=True):
        self.raw = raw
        self.status_case_sensitive = status_case_sensitive
        self.domain = None
        self.registrar = None
        self.domain_status = None
        self.unlocked = False
        self.created_at = None
        self.updated_at = None
        self.expires_at = None
        self.nameservers = []
        self.contacts = Contacts.empty()

    def set_value(self, field, value):
        setattr(self, field, value)

    def add_nameserver(self, field, value):
        self.nameservers.append(value)

    def set_status(self, field, value):
        self.domain_status = value
        self.unlocked = is_unlocked(value, self.status_case_sensitive)

    def set_iso_date(self, field, value):
        parsed = parse_iso_datetime(value)
        if parsed is not None:
            setattr(self, field, parsed)

    def set_month_date(self, field, value):
        setattr(self, field, parse_month_datetime(value))

    def set_contact_field(self, role, subkey, value):
        contact = self.contacts.get(role)
        updated = apply_contact_field(contact, subkey, value)
        if updated is contact:
            logger.debug('Skipping unknown %s contact field %r', role.value, subkey)
            return
        self.contacts = self.contacts.replace(role, updated)

    def build(self):
        return Record(
            domain=self.domain,
            raw=self.raw,
            nameservers=tuple(normalize_nameservers(self.nameservers)),
            registrar=self.registrar,
            domain_status=self.domain_status,
            unlocked=self.unlocked,
            created_at=self.created_at,
            updated_at=self.updated_at,
            expires_at=self.expires_at,
            contacts=self.contacts,
        )


class WhoisRecordParser(object):
    """Whois response parser

    Subclasses can override field_map to accept more registry key spellings,
    and status_case_sensitive to match 'ok' status values in any case.

    """
    field_map = FIELD_MAP
    status_case_sensitive = True

    def __repr__(self):
        return 'whois record parser %s' % self.__class__.__name__

    def parse(self, raw):
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8', errors='replace')
        if not isinstance(raw, str):
            raise WhoisError('Whois response must be text, not %s' % type(raw).__name__)

        builder = RecordBuilder(raw, self.status_case_sensitive)
        for line in split_lines(raw):
            field = split_field(line)
            if field is None:
                continue
            self.dispatch(builder, *field)

        return builder.build()

    def dispatch(self, builder, key, value):
        try:
            method, field = self.field_map[key]
        except KeyError:
            pass
        else:
            getattr(builder, method)(field, value)
            return

        match = match_role(key)
        if match is not None:
            role, subkey = match
            builder.set_contact_field(role, subkey, value)
            return

        logger.debug('Skipping unknown key %r', key)
