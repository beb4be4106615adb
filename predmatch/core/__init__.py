# Path: predmatch/core/__init__.py
"""
predmatch Core Package

Core utilities shared by the matcher.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging, configure_logging

__all__ = [
    'setup_ipo_logging',
    'configure_logging',
]
