# Path: predmatch/__init__.py
"""
predmatch - Structural Validation with Predicate Trees

Validates nested values (API payloads, parsed documents, config trees)
against a specification made of plain predicate functions, keyed by
path, that mirrors the shape of the data:

    from predmatch import Matcher
    from predmatch.predicates import is_mapping, is_list, is_string

    matcher = Matcher([is_mapping, {'tags[]': is_string}])
    matcher.passes({'tags': ['a', 'b']})   # True
    matcher.ensure({'tags': ['a', 3]})     # raises PredicateFailure at 'tags.1'

Submodules:
    - process.matcher: Parser, resolver, evaluator and Matcher facade
    - predicates: Reusable predicate builders
    - config_loader: .env / environment configuration
    - core.logger: IPO-aware logging
"""

from predmatch.constants import FailureKind
from predmatch.config_loader import ConfigLoader
from predmatch.core.logger import setup_ipo_logging, configure_logging
from predmatch.process.matcher import (
    Matcher,
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
from predmatch import predicates

__version__ = '1.0.0'

__all__ = [
    'Matcher',
    'SpecError',
    'PredicateFailure',
    'is_predicate_failure',
    'failure_kind',
    'FailureKind',
    'SpecPath',
    'PredicateNode',
    'SubSpecNode',
    'PairedNode',
    'EmptyNode',
    'MatchOutcome',
    'ConfigLoader',
    'setup_ipo_logging',
    'configure_logging',
    'predicates',
]
