#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="source-rcon",
    version="1.0.0",
    description="Source engine RCON client and command line tool",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "croniter",
    ],
    extras_require={
        "test": ["pytest<9"],
    },
    entry_points={
        'console_scripts': [
            'source-rcon=source_rcon.cli:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Topic :: Games/Entertainment",
        "Topic :: System :: Systems Administration",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
