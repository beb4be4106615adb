# Path: predmatch/constants.py
"""
System-Wide Constants for predmatch

Central repository for constant values used across the matcher.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Path Syntax
- Failure Defaults
- Failure Kinds
- Node Kinds
- Configuration
"""

from enum import Enum
from typing import Final


# ==============================================================================
# PATH SYNTAX
# ==============================================================================

PATH_SEPARATOR: Final[str] = '.'
"""Separator between segments of a dotted path ('deep.deeper.deepest')."""

WILDCARD_MARKER: Final[str] = '[]'
"""Suffix marking an each-path ('list[]' applies to every element)."""

ROOT_PATH_LABEL: Final[str] = '<root>'
"""Human readable label for the empty (root) path."""


# ==============================================================================
# FAILURE DEFAULTS
# ==============================================================================

DEFAULT_FAILURE_MESSAGE: Final[str] = 'Predicate Failed'
DEFAULT_FAILURE_DETAIL: Final[str] = 'Unknown'


# ==============================================================================
# FAILURE KINDS
# ==============================================================================

class FailureKind(str, Enum):
    """
    Discriminator for non-passing outcomes.

    PREDICATE_FAILURE: A predicate rejected a value (returned False or raised)
    UNEXPECTED_ERROR: Any other error raised while traversing the value
    """
    PREDICATE_FAILURE = 'predicate_failure'
    UNEXPECTED_ERROR = 'unexpected_error'


# ==============================================================================
# NODE KINDS
# ==============================================================================

class NodeKind(str, Enum):
    """
    Variants of a parsed specification node.

    PREDICATE: A single predicate function
    SUB_SPEC: A mapping of paths to child nodes
    PAIRED: A predicate plus a mapping of child nodes
    EMPTY: No predicate and no children (always passes)
    """
    PREDICATE = 'predicate'
    SUB_SPEC = 'sub_spec'
    PAIRED = 'paired'
    EMPTY = 'empty'


PAIRED_FORM_LENGTH: Final[int] = 2
"""A paired node is written as [predicate, sub_spec]."""


# ==============================================================================
# CONFIGURATION
# ==============================================================================

ENV_PREFIX: Final[str] = 'PREDMATCH_'
TRUTHY_ENV_VALUES: Final[tuple[str, ...]] = ('true', '1', 'yes', 'on')


__all__ = [
    'PATH_SEPARATOR',
    'WILDCARD_MARKER',
    'ROOT_PATH_LABEL',
    'DEFAULT_FAILURE_MESSAGE',
    'DEFAULT_FAILURE_DETAIL',
    'FailureKind',
    'NodeKind',
    'PAIRED_FORM_LENGTH',
    'ENV_PREFIX',
    'TRUTHY_ENV_VALUES',
]
