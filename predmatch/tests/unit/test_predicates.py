# Path: predmatch/tests/unit/test_predicates.py
"""
Tests for the predicate builders.
"""

import re
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from predmatch import Matcher
from predmatch.predicates import (
    all_of,
    any_of,
    exists,
    has_length,
    is_boolean,
    is_equal_to,
    is_instance_of,
    is_integer,
    is_list,
    is_mapping,
    is_non_empty_string,
    is_none,
    is_number,
    is_one_of,
    is_string,
    matches_pattern,
    negate,
)


class TestTypeChecks:
    """Test the plain type predicates."""

    def test_is_string(self):
        assert is_string('a')
        assert not is_string(b'a')

    def test_is_non_empty_string(self):
        assert is_non_empty_string('a')
        assert not is_non_empty_string('')

    def test_numbers_exclude_bool(self):
        """bool is not a number here."""
        assert is_number(1.5) and is_number(3)
        assert not is_number(True)
        assert is_integer(3) and not is_integer(3.0) and not is_integer(False)

    def test_is_boolean(self):
        assert is_boolean(False)
        assert not is_boolean(0)

    def test_is_list(self):
        """Sequences other than text are lists."""
        assert is_list([]) and is_list(())
        assert not is_list('abc')
        assert not is_list({})

    def test_is_mapping(self):
        assert is_mapping({})
        assert not is_mapping([])

    def test_none_and_exists(self):
        assert is_none(None) and not is_none(0)
        assert exists(0) and not exists(None)


class TestBuilders:
    """Test predicate builders."""

    def test_is_equal_to(self):
        assert is_equal_to('Hello!')('Hello!')
        assert not is_equal_to('Hello!')('Goodbye!')

    def test_is_one_of(self):
        check = is_one_of('draft', 'final')
        assert check('final')
        assert not check('other')

    def test_is_instance_of(self):
        check = is_instance_of(int, float)
        assert check(1) and check(1.0)
        assert not check('1')

    def test_matches_pattern(self):
        check = matches_pattern(r'^\d{4}-\d{2}-\d{2}$')
        assert check('2024-01-15')
        assert not check('15/01/2024')
        assert not check(20240115)

    def test_matches_pattern_flags(self):
        assert matches_pattern('abc', re.IGNORECASE)('xABCx')

    @pytest.mark.parametrize('value, expected', [
        ([], False),
        ([1], True),
        ([1, 2, 3], True),
        ([1, 2, 3, 4], False),
        (5, False),
    ])
    def test_has_length(self, value, expected):
        assert has_length(1, 3)(value) is expected


class TestCombinators:
    """Test all_of / any_of / negate."""

    def test_all_of(self):
        check = all_of(is_string, is_non_empty_string)
        assert check('a')
        assert not check('')

    def test_any_of(self):
        check = any_of(is_none, is_string)
        assert check(None) and check('a')
        assert not check(1)

    def test_negate(self):
        assert negate(is_none)(1)
        assert not negate(is_none)(None)

    def test_returned_exception_does_not_hold(self):
        """Combinators read a returned exception as a failed check."""
        returns_error = lambda value: ValueError(value)
        assert not all_of(is_string, returns_error)('a')
        assert not any_of(returns_error)('a')
        assert negate(returns_error)('a')

    def test_builders_in_spec(self, sample_payload):
        """Builders compose into a realistic payload spec."""
        matcher = Matcher([is_mapping, {
            'id': matches_pattern(r'^evt-\d+$'),
            'date': all_of(is_string, has_length(10, 10)),
            'author.email': any_of(is_none, matches_pattern('@')),
            'tags': [all_of(is_list, has_length(1)), {'[]': is_non_empty_string}],
            'lines[]': [is_mapping, {'qty': all_of(is_integer, negate(is_equal_to(0)))}],
        }])
        assert matcher.passes(sample_payload)

        sample_payload['lines'][1]['qty'] = 0
        assert matcher.determine(sample_payload).failure == 'lines.1.qty'
