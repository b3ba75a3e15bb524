#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from glob import glob
from os.path import basename
from os.path import splitext

from setuptools import find_packages
from setuptools import setup


setup(
    name="clapper",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="a digital clapperboard you drive from a macro keypad",
    long_description="Keypad-driven roll, scene and take counters for a production slate.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    url="https://github.com/inklesspen/clapper",
    packages=find_packages("src"),
    package_dir={"": "src"},
    py_modules=[splitext(basename(path))[0] for path in glob("src/*.py")],
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Multimedia :: Video",
    ],
    project_urls={
        "Issue Tracker": "https://github.com/inklesspen/clapper/issues",
    },
    keywords=["slate", "clapperboard", "film production", "macro keypad"],
    python_requires=">=3.11",
    install_requires=[
        "cattrs>=23.1",
        "msgspec",
        "trio>=0.22.0",
        "trio-util>=0.7.0",
        "tricycle>=0.2.1",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "clapper = clapper.app:main",
        ],
    },
)
