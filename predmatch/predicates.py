# Path: predmatch/predicates.py
"""
Predicate Builders

Small, reusable predicates for specification trees. Every predicate
takes the value under test and returns a bool; builders such as
is_equal_to() return such a predicate.

Example:
    from predmatch.predicates import is_mapping, is_list, is_string, is_equal_to

    spec = [is_mapping, {
        'list': [is_list, {'[]': is_string, '0': is_equal_to('football')}],
    }]
"""

import re
from collections.abc import Mapping, Sequence, Sized
from typing import Any, Callable, Optional

Predicate = Callable[[Any], bool]


def _holds(result: Any) -> bool:
    """Read a predicate result: only False or an exception instance fails."""
    return result is not False and not isinstance(result, BaseException)


# ==============================================================================
# TYPE CHECKS
# ==============================================================================

def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_number(value: Any) -> bool:
    """int or float, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_list(value: Any) -> bool:
    """Any sequence except text (list, tuple, ...)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_none(value: Any) -> bool:
    return value is None


def exists(value: Any) -> bool:
    """True for anything but None (an absent path resolves to None)."""
    return value is not None


# ==============================================================================
# BUILDERS
# ==============================================================================

def is_equal_to(expected: Any) -> Predicate:
    """Predicate: value == expected."""
    def _is_equal(value: Any) -> bool:
        return value == expected
    return _is_equal


def is_one_of(*choices: Any) -> Predicate:
    """Predicate: value equals one of choices."""
    def _is_one_of(value: Any) -> bool:
        return value in choices
    return _is_one_of


def is_instance_of(*types: type) -> Predicate:
    """Predicate: isinstance(value, types)."""
    def _is_instance(value: Any) -> bool:
        return isinstance(value, types)
    return _is_instance


def matches_pattern(pattern: str, flags: int = 0) -> Predicate:
    """
    Predicate: value is a string and the regex matches somewhere in it.

    Args:
        pattern: Regular expression (compiled once)
        flags: re flags

    Returns:
        Predicate function
    """
    compiled = re.compile(pattern, flags)

    def _matches(value: Any) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None
    return _matches


def has_length(minimum: int = 0, maximum: Optional[int] = None) -> Predicate:
    """Predicate: value is sized and minimum <= len(value) <= maximum."""
    def _has_length(value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        size = len(value)
        return size >= minimum and (maximum is None or size <= maximum)
    return _has_length


# ==============================================================================
# COMBINATORS
# ==============================================================================

def all_of(*predicates: Predicate) -> Predicate:
    """Predicate: every predicate holds (short-circuits on the first False)."""
    def _all_of(value: Any) -> bool:
        return all(_holds(predicate(value)) for predicate in predicates)
    return _all_of


def any_of(*predicates: Predicate) -> Predicate:
    """Predicate: at least one predicate holds."""
    def _any_of(value: Any) -> bool:
        return any(_holds(predicate(value)) for predicate in predicates)
    return _any_of


def negate(predicate: Predicate) -> Predicate:
    """Predicate: predicate does not hold."""
    def _negated(value: Any) -> bool:
        return not _holds(predicate(value))
    return _negated


__all__ = [
    'Predicate',
    'is_string',
    'is_non_empty_string',
    'is_number',
    'is_integer',
    'is_boolean',
    'is_list',
    'is_mapping',
    'is_none',
    'exists',
    'is_equal_to',
    'is_one_of',
    'is_instance_of',
    'matches_pattern',
    'has_length',
    'all_of',
    'any_of',
    'negate',
]
