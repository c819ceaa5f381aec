#!/usr/bin/env python
"""
PyXOI Setup Script
Package metadata and dependencies live in pyproject.toml
"""
import logging

from setuptools import setup

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')


def _setup():
    """
    Main setup function - configuration moved to pyproject.toml
    """
    setup()


if __name__ == "__main__":
    _setup()
