#!/usr/bin/env python

"""
    TableFit
    ========

    TableFit computes column widths and row heights of rich text tables.

"""

import sys

from setuptools import find_packages, setup

if sys.version_info < (3, 10):
    raise RuntimeError('TableFit does not support Python < 3.10.')

setup(
    name='tablefit',
    version='1.0',
    description='Column widths and row heights of rich text tables',
    long_description=__doc__,
    python_requires='>=3.10',
    packages=find_packages(include=['tablefit', 'tablefit.*']),
    install_requires=[
        'Pillow >=10.1.0',
        'fonttools >=4.33.0',
        'tinycss2 >=1.0.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['tablefit = tablefit.__main__:main'],
    },
)
