#!/usr/bin/env python

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from setuptools import setup


# Utility function to read the README file.
# Used for the long_description.  It's nice, because now 1) we have a top level
# README file and 2) it's easier to type in the README file than to put a raw
# string in below ...
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(name = 'rpasswd',
       version = '1.0.0',
       description = 'secure random password generator and password hashing tool',
       license = "GPLv3",
       long_description=read('README.md'),
       long_description_content_type="text/markdown",
       packages = ['rpasswd'],
       python_requires = '>=3.11',
       install_requires = ("pysodium", "SecureString", "bcrypt", "argon2-cffi"),
       classifiers = ["Development Status :: 4 - Beta",
                      "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
                      "Topic :: Security :: Cryptography",
                      "Topic :: Security",
                   ],
       entry_points = {
           'console_scripts': [
               'rpasswd = rpasswd.rpasswd:main',
           ],
       },
)
