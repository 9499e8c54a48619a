#!/usr/bin/env python
"""
Setup.py for floorgraph.
"""

from setuptools import setup, find_packages

setup(
    name="floorgraph",
    version="0.1.0",
    description="Generic in-memory undirected graph with connectivity queries",
    packages=find_packages(include=["floorgraph", "floorgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
