# Path: predmatch/process/matcher/models/spec_node.py
"""
Specification Node Models

Parsed form of a specification tree. Every node exposes the same
three attributes so the evaluator never has to inspect shapes:

    predicate   - callable or None
    accepts_key - whether the predicate can take (value, key)
    children    - tuple of (SpecPath, node) pairs, in insertion order

Variants:
    PredicateNode(fn)              - validates the node itself
    SubSpecNode(children)          - validates children only
    PairedNode(fn, children)       - both
    EmptyNode()                    - nothing (always passes)
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional, Union

from predmatch.constants import NodeKind

from .spec_path import SpecPath


def takes_key(predicate: Callable[..., Any]) -> bool:
    """
    Check whether a predicate can be called as predicate(value, key).

    Callables whose signature cannot be inspected (some builtins) are
    treated as single-argument predicates.
    """
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(None, None)
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class PredicateNode:
    """A predicate applied to the value at the current path."""
    predicate: Callable[..., Any]
    accepts_key: Optional[bool] = None
    children: tuple = field(default=(), init=False)

    kind: ClassVar[NodeKind] = NodeKind.PREDICATE

    def __post_init__(self):
        if self.accepts_key is None:
            object.__setattr__(self, 'accepts_key', takes_key(self.predicate))


@dataclass(frozen=True)
class SubSpecNode:
    """A mapping of relative paths to child nodes."""
    children: tuple = ()
    predicate: None = field(default=None, init=False)
    accepts_key: bool = field(default=False, init=False)

    kind: ClassVar[NodeKind] = NodeKind.SUB_SPEC


@dataclass(frozen=True)
class PairedNode:
    """A predicate for the node itself plus child nodes."""
    predicate: Callable[..., Any]
    children: tuple = ()
    accepts_key: Optional[bool] = None

    kind: ClassVar[NodeKind] = NodeKind.PAIRED

    def __post_init__(self):
        if self.accepts_key is None:
            object.__setattr__(self, 'accepts_key', takes_key(self.predicate))


@dataclass(frozen=True)
class EmptyNode:
    """No predicate and no children; evaluation is a no-op."""
    predicate: None = field(default=None, init=False)
    accepts_key: bool = field(default=False, init=False)
    children: tuple = field(default=(), init=False)

    kind: ClassVar[NodeKind] = NodeKind.EMPTY


SpecNode = Union[PredicateNode, SubSpecNode, PairedNode, EmptyNode]
SPEC_NODE_TYPES = (PredicateNode, SubSpecNode, PairedNode, EmptyNode)

ChildSpec = tuple[SpecPath, SpecNode]


__all__ = [
    'takes_key',
    'PredicateNode',
    'SubSpecNode',
    'PairedNode',
    'EmptyNode',
    'SpecNode',
    'SPEC_NODE_TYPES',
    'ChildSpec',
]
