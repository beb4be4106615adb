# Path: predmatch/process/matcher/__init__.py
"""
Matching Engine - Structural Validation

Checks nested values against a tree of predicate functions keyed by
path. The tree mirrors the shape of the data being checked:

    spec = [is_mapping, {
        'date': is_string,
        'author.name': is_non_empty_string,
        'tags[]': is_string,
    }]

Core Components:
    - SpecParser: Parses the tree once, at construction time
    - Evaluator: Walks the tree and stops at the first violation
    - Matcher: Facade exposing passes / fails / ensure / determine
    - Models: Paths, spec nodes, outcomes and failures

Example:
    from predmatch.process.matcher import Matcher

    matcher = Matcher(spec)
    payload = matcher.ensure(payload)   # raises PredicateFailure on violation
"""

from .engine import Matcher, SpecParser, Evaluator
from .models import (
    SpecError,
    PredicateFailure,
    is_predicate_failure,
    failure_kind,
    SpecPath,
    PredicateNode,
    SubSpecNode,
    PairedNode,
    EmptyNode,
    MatchOutcome,
)

__all__ = [
    'Matcher',
    'SpecParser',
    'Evaluator',
    'SpecError',
    'PredicateFailure',
    'is_predicate_failure',
    'failure_kind',
    'SpecPath',
    'PredicateNode',
    'SubSpecNode',
    'PairedNode',
    'EmptyNode',
    'MatchOutcome',
]
