# Path: predmatch/process/matcher/models/match_outcome.py
"""
Match Outcome Model

Tagged result of evaluating one value against one specification:
    ok       - every predicate held
    failed   - a predicate rejected a value (carries PredicateFailure)
    errored  - something else raised while traversing (carries the error)

The result facade reshapes an outcome into a boolean, a raised
exception or a returned error value.
"""

from dataclasses import dataclass
from typing import Any, Optional

from predmatch.constants import FailureKind

from .failure import PredicateFailure


@dataclass(frozen=True)
class MatchOutcome:
    """
    Result of evaluating a value.

    Attributes:
        value: The value that was evaluated (same object, never copied)
        failure: The first PredicateFailure, if a predicate did not hold
        error: Any other exception raised during traversal
    """
    value: Any
    failure: Optional[PredicateFailure] = None
    error: Optional[Exception] = None

    @classmethod
    def ok(cls, value: Any) -> 'MatchOutcome':
        """Create a passing outcome."""
        return cls(value=value)

    @classmethod
    def failed(cls, value: Any, failure: PredicateFailure) -> 'MatchOutcome':
        """Create an outcome for a predicate failure."""
        return cls(value=value, failure=failure)

    @classmethod
    def errored(cls, value: Any, error: Exception) -> 'MatchOutcome':
        """Create an outcome for an unexpected error."""
        return cls(value=value, error=error)

    @property
    def passed(self) -> bool:
        """Check if evaluation completed without failure or error."""
        return self.failure is None and self.error is None

    @property
    def problem(self) -> Optional[Exception]:
        """The failure or error, whichever is set."""
        return self.failure if self.failure is not None else self.error

    @property
    def kind(self) -> Optional[FailureKind]:
        """Discriminator of the problem (None when passed)."""
        if self.failure is not None:
            return FailureKind.PREDICATE_FAILURE
        if self.error is not None:
            return FailureKind.UNEXPECTED_ERROR
        return None

    @property
    def path(self) -> Optional[str]:
        """Dotted path of the failing node (None unless a predicate failed)."""
        if self.failure is None or self.failure.path is None:
            return None
        return str(self.failure.path)

    def to_dict(self) -> dict:
        """Convert to dictionary (the value itself is not included)."""
        return {
            'passed': self.passed,
            'kind': self.kind.value if self.kind is not None else None,
            'path': self.path,
            'message': str(self.problem) if self.problem is not None else None,
        }


__all__ = ['MatchOutcome']
