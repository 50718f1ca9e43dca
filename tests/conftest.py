import textwrap

import pytest


@pytest.fixture(scope='session')
def gtld_response():
    """Typical gTLD registry response with contacts and a legal notice"""
    return textwrap.dedent("""\
        Domain Name: EXAMPLE.COM
        Registry Domain ID: 2336799_DOMAIN_COM-VRSN
        Registrar WHOIS Server: whois.example-registrar.com
        Updated Date: 2024-01-02T09:30:00Z
        Creation Date: 1995-08-14T04:00:00Z
        Registry Expiry Date: 2030-08-13T04:00:00Z
        Registrar: Example Registrar LLC
        Domain Status: clientTransferProhibited https://icann.org/epp#clientTransferProhibited
        Name Server: NS1.EXAMPLE.COM
        Name Server: NS2.EXAMPLE.COM
        Registrant Name: Example DNS
        Registrant Organization: Example Corp
        Registrant Street: 1 Example Way
        Registrant City: Springfield
        Registrant State/Province: CA
        Registrant Postal Code: 90210
        Registrant Country: US
        Registrant Phone: +1.5550000
        Registrant Fax: +1.5550001
        Registrant Email: ops@example.com
        Admin Email: admin@example.com
        Tech Email: tech@example.com
        DNSSEC: unsigned
        >>> Last update of whois database: 2024-06-01T00:00:00Z <<<

        NOTICE: The expiration date displayed in this record is the date the
        registrar's sponsorship of the domain name registration in the registry is
        currently set to expire.
        TERMS OF USE You are not authorized to access or query our Whois
        database through the use of electronic processes that are high-volume
        """)


@pytest.fixture(scope='session')
def isnic_response():
    """Response in the .is registry format with month name dates"""
    return textwrap.dedent("""\
        % This is the ISNIC Whois server.
        %
        % Rights restricted by copyright.

        domain:       example.is
        registrant:   EX123-IS
        admin-c:      EX123-IS
        tech-c:       EX456-IS
        nserver:      NS1.EXAMPLE.IS
        nserver:      ns2.example.is
        nserver:      ns1.example.is
        created:      May 3 2001
        expires:      May 3 2025
        source:       ISNIC
        """)
