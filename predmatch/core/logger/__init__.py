# Path: predmatch/core/logger/__init__.py
"""
predmatch Logger Package

IPO-aware logging for the matcher.

Provides separate log streams for:
- INPUT layer (specification parsing)
- PROCESS layer (resolution and evaluation)
- OUTPUT layer (result facade)
"""

from .ipo_logging import (
    setup_ipo_logging,
    configure_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'configure_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
