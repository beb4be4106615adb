# Path: predmatch/tests/unit/test_constants.py
"""
Tests for system-wide constants.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from predmatch.constants import (
    DEFAULT_FAILURE_DETAIL,
    DEFAULT_FAILURE_MESSAGE,
    PAIRED_FORM_LENGTH,
    PATH_SEPARATOR,
    WILDCARD_MARKER,
    FailureKind,
    NodeKind,
)


class TestPathSyntax:
    """Test path syntax constants."""

    def test_separator(self):
        assert PATH_SEPARATOR == '.'

    def test_wildcard_marker_is_two_chars(self):
        """The wildcard is the last two characters of an each-path."""
        assert WILDCARD_MARKER == '[]'
        assert len(WILDCARD_MARKER) == 2


class TestFailureDefaults:
    """Test failure defaults."""

    def test_default_message(self):
        assert DEFAULT_FAILURE_MESSAGE == 'Predicate Failed'

    def test_default_detail(self):
        assert DEFAULT_FAILURE_DETAIL == 'Unknown'


class TestEnums:
    """Test enumerations."""

    def test_failure_kinds(self):
        """Both failure kinds are defined and compare as strings."""
        assert FailureKind.PREDICATE_FAILURE == 'predicate_failure'
        assert FailureKind.UNEXPECTED_ERROR == 'unexpected_error'
        assert len(FailureKind) == 2

    def test_node_kinds(self):
        """All four node kinds are defined."""
        assert {kind.value for kind in NodeKind} == {'predicate', 'sub_spec', 'paired', 'empty'}

    def test_paired_form_length(self):
        assert PAIRED_FORM_LENGTH == 2
