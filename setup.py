#!/usr/bin/env python3
"""
Asset Versioning Setup Script
=============================
Allows installation of the asset-versioning package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="asset-versioning",
    version="0.1.2",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "asset-versioning=versioning.cli:main",
        ],
    },
)
