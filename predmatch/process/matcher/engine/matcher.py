# Path: predmatch/process/matcher/engine/matcher.py
"""
Matcher - Result Facade

Binds one specification to four ways of reading the same evaluation:

    passes(value)     -> bool, never raises
    fails(value)      -> not passes(value)
    ensure(value)     -> value, or raises PredicateFailure / the original error
    determine(value)  -> value, or returns the failure / error (not raised)

All four accept a single argument, so bound methods can be handed
around as plain callbacks:

    valid = list(filter(Matcher(spec).passes, payloads))
"""

from typing import Any, Optional, Union

from predmatch.config_loader import ConfigLoader
from predmatch.core.logger import get_output_logger

from .evaluator import Evaluator
from .spec_parser import SpecParser
from ..models.failure import PredicateFailure, is_predicate_failure
from ..models.match_outcome import MatchOutcome
from ..models.spec_node import SpecNode


class Matcher:
    """
    Structural validator built from a specification tree.

    A Matcher holds only its parsed specification and is safe to
    reuse across values and threads.

    Example:
        matcher = Matcher([is_mapping, {
            'list': [is_list, {'[]': is_string, '0': is_equal_to('football')}],
        }])

        matcher.passes({'list': ['football', 'baseball']})   # True
        matcher.ensure({'list': ['baseball']})               # raises at 'list.0'
    """

    __slots__ = ('_node', '_evaluator', '_logger')

    # Static helpers, available without an instance
    PredicateFailure = PredicateFailure
    is_predicate_failure = staticmethod(is_predicate_failure)

    def __init__(
        self,
        spec: Any = None,
        *,
        message: Optional[str] = None,
        strict: Optional[bool] = None,
        diagnostics: Optional[bool] = None
    ):
        """
        Initialize matcher.

        Args:
            spec: Specification tree (None matches every value)
            message: Message used for predicate failures
            strict: Reject malformed specification nodes
                    (defaults to the 'strict_specs' setting)
            diagnostics: Log each predicate invocation
                         (defaults to the 'diagnostics' setting)

        Raises:
            SpecError: If the specification cannot be parsed
        """
        config = ConfigLoader()
        if strict is None:
            strict = config.get('strict_specs', False)
        if diagnostics is None:
            diagnostics = config.get('diagnostics', False)
        if message is None:
            message = config.get('failure_message')

        self._node = SpecParser(strict=strict).parse(spec)
        self._evaluator = Evaluator(message=message, diagnostics=diagnostics)
        self._logger = get_output_logger('matcher.facade')

    @property
    def spec(self) -> SpecNode:
        """The parsed specification."""
        return self._node

    def evaluate(self, value: Any) -> MatchOutcome:
        """
        Evaluate value and return the tagged outcome.

        Args:
            value: Value to check

        Returns:
            MatchOutcome (ok, failed or errored)
        """
        return self._evaluator.evaluate(value, self._node)

    def passes(self, value: Any) -> bool:
        """True if every predicate holds and nothing raised."""
        return self.evaluate(value).passed

    def fails(self, value: Any) -> bool:
        """Negation of passes()."""
        return not self.passes(value)

    def ensure(self, value: Any) -> Any:
        """
        Return value unchanged if it passes, raise otherwise.

        Args:
            value: Value to check

        Returns:
            The same value object

        Raises:
            PredicateFailure: If a predicate did not hold
            Exception: The original error if traversal raised anything else
        """
        outcome = self.evaluate(value)
        if outcome.failure is not None:
            self._logger.debug(f"ensure() rejected value: {outcome.failure}")
            raise outcome.failure from outcome.failure.cause
        if outcome.error is not None:
            raise outcome.error
        return value

    def determine(self, value: Any) -> Union[Any, Exception]:
        """
        Return value if it passes, otherwise return (not raise) the error.

        Args:
            value: Value to check

        Returns:
            The same value object, a PredicateFailure, or the unexpected
            exception raised during traversal
        """
        outcome = self.evaluate(value)
        if outcome.passed:
            return value
        self._logger.debug(f"determine() rejected value: {outcome.problem}")
        return outcome.problem

    def __repr__(self) -> str:
        return f"Matcher(kind={self._node.kind.value})"


__all__ = ['Matcher']
