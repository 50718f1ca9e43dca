from datetime import datetime

import pytest

from whoisrecord import parse
from whoisrecord.record import RAW_PLACEHOLDER, Contact, ContactRole, Contacts, format_record


def test_contacts_have_three_roles():
    contacts = Contacts.empty()

    assert [role for role, contact in contacts.items()] == list(ContactRole)
    assert all(contact.is_empty for role, contact in contacts.items())


def test_contacts_get_by_role():
    contacts = Contacts.empty().replace(ContactRole.TECHNICAL, Contact(name='Tech'))

    assert contacts.get(ContactRole.TECHNICAL).name == 'Tech'
    assert contacts.get('technical').name == 'Tech'
    assert contacts.registrant.is_empty


def test_contacts_unknown_role():
    with pytest.raises(KeyError):
        Contacts.empty().get('billing')


def test_record_is_immutable():
    record = parse('Registrar: Example')

    with pytest.raises(AttributeError):
        record.registrar = 'Other'


def test_repr_redacts_raw():
    raw = 'TERMS OF USE secret-raw-text\nRegistrar: Example\n'
    record = parse(raw)

    text = repr(record)
    assert 'secret-raw-text' not in text
    assert "raw='%s'" % RAW_PLACEHOLDER in text
    assert "registrar='Example'" in text
    assert record.raw == raw


def test_format_record(gtld_response):
    record = parse(gtld_response)

    text = format_record(record)
    assert 'Registrar:     Example Registrar LLC' in text
    assert 'Nameservers:   ns1.example.com,ns2.example.com' in text
    assert 'Expires:       2030-08-13T04:00:00' in text
    assert 'Registrant contact:' in text
    assert 'Technical contact:' in text
    assert 'TERMS OF USE' not in text
    assert text.endswith('Raw:           %s' % RAW_PLACEHOLDER)


def test_expires_in_days():
    record = parse('Registry Expiry Date: 2030-01-11T00:00:00Z')

    assert record.expires_in_days(now=datetime(2030, 1, 1)) == 10
    assert record.expires_in_days(now=datetime(2030, 1, 12)) == -1


def test_expires_in_days_unknown():
    assert parse('').expires_in_days() is None
