# Path: predmatch/process/matcher/engine/evaluator.py
"""
Recursive Evaluator

Walks a parsed specification tree against the value under test and
stops at the first violation.

Order of evaluation (observable when predicates have side effects):
depth-first, a node's own predicate before its children, siblings in
insertion order, wildcard elements in collection iteration order.
"""

from typing import Any, Optional

from predmatch.core.logger import get_process_logger

from .path_resolver import iter_keys, resolve
from ..models.failure import PredicateFailure
from ..models.match_outcome import MatchOutcome
from ..models.spec_node import SpecNode
from ..models.spec_path import SpecPath


_NO_KEY = object()


class Evaluator:
    """
    Evaluates a value against a parsed specification.

    The evaluator holds no per-call state, so one instance can be
    shared across threads.

    Example:
        evaluator = Evaluator()
        outcome = evaluator.evaluate(payload, SpecParser().parse(spec))
        if not outcome.passed:
            print(outcome.path)
    """

    def __init__(self, message: Optional[str] = None, diagnostics: bool = False):
        """
        Initialize evaluator.

        Args:
            message: Message for failures (defaults to 'Predicate Failed')
            diagnostics: Log every predicate invocation at DEBUG level
        """
        self.message = message
        self.diagnostics = diagnostics
        self.logger = get_process_logger('matcher.evaluator')

    def evaluate(self, root: Any, node: SpecNode) -> MatchOutcome:
        """
        Evaluate root against node.

        Args:
            root: Value under test
            node: Parsed specification

        Returns:
            MatchOutcome: ok, failed (first failing path) or errored
        """
        try:
            failure = self._ensure(root, node, SpecPath.ROOT)
        except Exception as exc:
            self.logger.warning(
                f"Unexpected {type(exc).__name__} during evaluation: {exc}"
            )
            return MatchOutcome.errored(root, exc)

        if failure is not None:
            self.logger.debug(f"Predicate failed at '{failure.failure}'")
            return MatchOutcome.failed(root, failure)
        return MatchOutcome.ok(root)

    def _ensure(self, root: Any, node: SpecNode, path: SpecPath) -> Optional[PredicateFailure]:
        if path.is_each:
            return self._ensure_each(root, node, path.lookup)
        return self._ensure_object(root, node, path, _NO_KEY)

    def _ensure_each(self, root: Any, node: SpecNode, path: SpecPath) -> Optional[PredicateFailure]:
        """Apply node to every key of the collection at path."""
        collection = resolve(root, path)
        for key in iter_keys(collection):
            failure = self._ensure_object(root, node, path.child(key), key)
            if failure is not None:
                return failure
        return None

    def _ensure_object(
        self,
        root: Any,
        node: SpecNode,
        path: SpecPath,
        with_key: Any
    ) -> Optional[PredicateFailure]:
        """Check the node's own predicate, then its children."""
        subject = resolve(root, path)

        if node.predicate is not None:
            failure = self._try_predicate(node, subject, path, with_key)
            if failure is not None:
                return failure

        # Children of an absent value are skipped
        if node.children and subject is not None:
            for child_path, child_node in node.children:
                failure = self._ensure(root, child_node, path.join(child_path))
                if failure is not None:
                    return failure
        return None

    def _try_predicate(
        self,
        node: SpecNode,
        subject: Any,
        path: SpecPath,
        with_key: Any
    ) -> Optional[PredicateFailure]:
        """
        Invoke a predicate. A raised exception, a returned exception
        instance or a False result is a failure; any other result,
        truthy or not, passes.
        """
        cause = None
        try:
            if with_key is not _NO_KEY and node.accepts_key:
                result = node.predicate(subject, with_key)
            else:
                result = node.predicate(subject)
        except Exception as exc:
            cause = exc
            result = False

        if self.diagnostics:
            self.logger.debug(f"Predicate at '{path}' returned {result!r}")

        if isinstance(result, BaseException):
            cause = result
            result = False

        if result is False:
            return PredicateFailure(self.message, path=path, cause=cause)
        return None


__all__ = ['Evaluator']
