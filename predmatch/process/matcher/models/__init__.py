# Path: predmatch/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the matcher:
- SpecPath: Parsed path (Field / EACH segments)
- Spec nodes: PredicateNode, SubSpecNode, PairedNode, EmptyNode
- MatchOutcome: Tagged result of one evaluation
- PredicateFailure / SpecError: Failures and specification errors
"""

from .failure import (
    SpecError,
    PredicateFailure,
    is_predicate_failure,
    failure_kind,
)

from .spec_path import (
    Field,
    Each,
    EACH,
    SpecPath,
)

from .spec_node import (
    takes_key,
    PredicateNode,
    SubSpecNode,
    PairedNode,
    EmptyNode,
    SpecNode,
    SPEC_NODE_TYPES,
)

from .match_outcome import MatchOutcome

__all__ = [
    # Failures
    'SpecError',
    'PredicateFailure',
    'is_predicate_failure',
    'failure_kind',
    # Paths
    'Field',
    'Each',
    'EACH',
    'SpecPath',
    # Nodes
    'takes_key',
    'PredicateNode',
    'SubSpecNode',
    'PairedNode',
    'EmptyNode',
    'SpecNode',
    'SPEC_NODE_TYPES',
    # Outcome
    'MatchOutcome',
]
