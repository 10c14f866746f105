#!/usr/bin/env python3
"""
safesdl install script for source distribution

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'safesdl', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']
    DESCRIPTION = _METADATA['description']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='safesdl',
    version=VERSION,
    author=AUTHOR,
    description=DESCRIPTION,
    license='GPLv3',
    python_requires='>=3.9',

    # contents
    # only include the safesdl package: exclude tests etc
    packages=find_packages(include=['safesdl', 'safesdl.*']),
    package_data={'safesdl.data': ['*.json']},
    # the bindings use ctypes; the SDL 1.2 shared library must be installed separately
    install_requires=[],
    extras_require={
        'test': ['coverage', 'pytest'],
        'lint': ['pylint'],
    },
    # launchers
    entry_points=dict(
        console_scripts=['safesdl-demo=safesdl:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
