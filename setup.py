#!/usr/bin/env python

import os
import re
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def find_version(*file_paths):
    with open(os.path.join(here, *file_paths), 'r') as f:
        version_file = f.read()
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError('Unable to find version string.')


setup(
    name = 'whoisrecord',
    version = find_version('whoisrecord', '__init__.py'),
    license = 'PSF',
    keywords = 'whois domain registry response parser',
    description = 'Parse domain registry whois responses to structured records',
    packages = find_packages(exclude=('tests', 'tests.*')),
    python_requires = '>=3.8',
    install_requires = (
        'python-dateutil',
    ),
    extras_require = {
        'test': ('pytest',),
    },
)
