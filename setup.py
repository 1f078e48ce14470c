#!/usr/bin/env python3
"""Setup script for kcg-deck-tools package."""

from setuptools import setup, find_packages

setup(
    name="kcg-deck-tools",
    version="0.1.0",
    description="KCG trading card game deck code decoder and deck sheet renderer",
    author="KCG Deck Tools Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",
        "Pillow>=10.1.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
        "Flask>=2.2",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "kcgdeck=kcgdeck.cli:cli",
        ],
    },
    python_requires=">=3.10",
)
