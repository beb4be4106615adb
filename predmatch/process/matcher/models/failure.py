# Path: predmatch/process/matcher/models/failure.py
"""
Failure Models

Exceptions produced by the matcher:
- PredicateFailure: a predicate rejected a value (validation failure)
- SpecError: a specification could not be parsed
"""

from typing import Any, Optional, TYPE_CHECKING

from predmatch.constants import (
    DEFAULT_FAILURE_DETAIL,
    DEFAULT_FAILURE_MESSAGE,
    ROOT_PATH_LABEL,
    FailureKind,
)

if TYPE_CHECKING:
    from .spec_path import SpecPath


class SpecError(ValueError):
    """Raised at construction time when a specification is malformed."""


class PredicateFailure(Exception):
    """
    A predicate did not hold for the value at some path.

    Attributes:
        message: Human readable message (defaults to 'Predicate Failed')
        failure: Failing dotted path, or a caller supplied detail
        path: The SpecPath that failed (None when raised by hand)
        cause: Exception raised by the predicate, if it raised
        kind: Always FailureKind.PREDICATE_FAILURE

    Example:
        try:
            matcher.ensure(payload)
        except PredicateFailure as exc:
            print(exc.failure)  # e.g. "list.0"
    """

    kind = FailureKind.PREDICATE_FAILURE

    def __init__(
        self,
        message: Optional[str] = None,
        failure: Optional[str] = None,
        *,
        path: Optional['SpecPath'] = None,
        cause: Optional[BaseException] = None
    ):
        self.message = message or DEFAULT_FAILURE_MESSAGE
        if failure is None:
            failure = str(path) if path is not None else DEFAULT_FAILURE_DETAIL
        self.failure = failure
        self.path = path
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} at '{str(self.path) or ROOT_PATH_LABEL}'"
        return f"{self.message} ({self.failure})"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'kind': self.kind.value,
            'message': self.message,
            'failure': self.failure,
            'path': str(self.path) if self.path is not None else None,
            'cause': repr(self.cause) if self.cause is not None else None,
        }


def is_predicate_failure(err: Any) -> bool:
    """Check whether err is a PredicateFailure (as opposed to any other error)."""
    return isinstance(err, PredicateFailure)


def failure_kind(err: Any) -> Optional[FailureKind]:
    """
    Classify an error produced by the matcher.

    Returns:
        PREDICATE_FAILURE for PredicateFailure, UNEXPECTED_ERROR for any
        other exception, None when err is None
    """
    if err is None:
        return None
    if is_predicate_failure(err):
        return FailureKind.PREDICATE_FAILURE
    return FailureKind.UNEXPECTED_ERROR


__all__ = [
    'SpecError',
    'PredicateFailure',
    'is_predicate_failure',
    'failure_kind',
]
