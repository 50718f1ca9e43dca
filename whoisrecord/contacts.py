#!/usr/bin/env python
"""
Routing of role prefixed whois keys to contact fields

Keys like 'Registrant Name' or 'Tech Email' are split to a role prefix and a
sub-key, and the sub-key is mapped to a Contact field.
"""

from whoisrecord.record import ContactRole

ROLE_PREFIXES = (
    ('registrant ',     ContactRole.REGISTRANT),
    ('admin ',          ContactRole.ADMINISTRATOR),
    ('tech ',           ContactRole.TECHNICAL),
)

CONTACT_FIELD_MAP = {
    'name':             'name',
    'organization':     'organization',
    'street':           'street',
    'city':             'city',
    'state/province':   'state',
    'postal code':      'zip',
    'country':          'country',
    'phone':            'phone',
    'fax':              'fax',
    'email':            'email',
}


def match_role(key):
    """Match normalized key to contact role

    Returns tuple (role, subkey) or None if key has no role prefix.

    """
    for prefix, role in ROLE_PREFIXES:
        if key.startswith(prefix):
            return role, key[len(prefix):]
    return None


def apply_contact_field(contact, subkey, value):
    try:
        field = CONTACT_FIELD_MAP[subkey]
    except KeyError:
        return contact
    return contact._replace(**{field: value})
