# Path: predmatch/process/matcher/engine/spec_parser.py
"""
Specification Parser

Turns a raw specification tree (functions, mappings, [fn, mapping]
pairs) into parsed spec nodes. Parsing happens once, when a Matcher
is built, so evaluation never has to inspect shapes or re-parse
path keys.

Lenient mode (default) mirrors the permissive reading of malformed
nodes: anything unrecognized becomes an EmptyNode that always passes.
Strict mode raises SpecError instead. A wildcard inside a key
('lines[].qty') is rejected in both modes; only a trailing '[]'
fans out.
"""

from collections.abc import Mapping
from typing import Any

from predmatch.constants import PAIRED_FORM_LENGTH
from predmatch.core.logger import get_input_logger

from ..models.failure import SpecError
from ..models.spec_node import (
    SPEC_NODE_TYPES,
    EmptyNode,
    PairedNode,
    PredicateNode,
    SpecNode,
    SubSpecNode,
)
from ..models.spec_path import SpecPath


class SpecParser:
    """
    Parses raw specification trees into spec nodes.

    Recognized shapes:
    - callable                    -> PredicateNode
    - mapping                     -> SubSpecNode
    - [callable, mapping]         -> PairedNode
    - an already parsed node      -> returned unchanged
    - None                        -> EmptyNode

    Example:
        parser = SpecParser(strict=True)
        node = parser.parse([is_mapping, {'list[]': is_string}])
    """

    def __init__(self, strict: bool = False):
        """
        Initialize parser.

        Args:
            strict: Raise SpecError on malformed nodes instead of
                    treating them as always passing
        """
        self.strict = strict
        self.logger = get_input_logger('matcher.spec_parser')

    def parse(self, raw: Any) -> SpecNode:
        """
        Parse a raw specification tree.

        Args:
            raw: Specification node in any supported shape

        Returns:
            Parsed spec node

        Raises:
            SpecError: On cycles, misplaced wildcards, or (strict mode)
                       malformed nodes and keys
        """
        return self._parse(raw, set())

    def _parse(self, raw: Any, active: set[int]) -> SpecNode:
        if isinstance(raw, SPEC_NODE_TYPES):
            return raw
        if raw is None:
            return EmptyNode()
        if callable(raw):
            return PredicateNode(raw)

        if isinstance(raw, (Mapping, list, tuple)):
            if id(raw) in active:
                raise SpecError("Specification contains a cycle")
            active.add(id(raw))
            try:
                if isinstance(raw, Mapping):
                    return SubSpecNode(self._parse_children(raw, active))
                return self._parse_pair(raw, active)
            finally:
                active.discard(id(raw))

        return self._malformed(raw, "expected a callable, a mapping or a [predicate, mapping] pair")

    def _parse_pair(self, raw: Any, active: set[int]) -> SpecNode:
        """
        Parse the [predicate, sub_spec] form.

        Lenient mode reads element 0 as the predicate if callable and
        element 1 as the sub-spec if a mapping, ignoring anything else.
        """
        first = raw[0] if len(raw) > 0 else None
        second = raw[1] if len(raw) > 1 else None

        if self.strict:
            if len(raw) != PAIRED_FORM_LENGTH:
                raise SpecError(
                    f"Paired node must have {PAIRED_FORM_LENGTH} elements, got {len(raw)}"
                )
            if first is not None and not callable(first):
                raise SpecError(
                    f"Paired node predicate must be callable, got {type(first).__name__}"
                )
            if second is not None and not isinstance(second, Mapping):
                raise SpecError(
                    f"Paired node sub-spec must be a mapping, got {type(second).__name__}"
                )

        predicate = first if callable(first) else None
        children = self._parse_children(second, active) if isinstance(second, Mapping) else ()

        if predicate is None and not isinstance(second, Mapping):
            return self._malformed(raw, "pair has neither a predicate nor a sub-spec")
        if predicate is None:
            return SubSpecNode(children)
        if not isinstance(second, Mapping):
            return PredicateNode(predicate)
        return PairedNode(predicate, children)

    def _parse_children(self, mapping: Mapping, active: set[int]) -> tuple:
        """Parse a sub-spec mapping into (SpecPath, node) pairs, keeping order."""
        children = []
        for key, child in mapping.items():
            path = SpecPath.parse(self._key_text(key))
            children.append((path, self._parse(child, active)))
        return tuple(children)

    def _key_text(self, key: Any) -> str:
        """Convert a sub-spec key to its path text."""
        if isinstance(key, str):
            return key
        if isinstance(key, int) and not isinstance(key, bool):
            return str(key)
        if self.strict:
            raise SpecError(f"Sub-spec keys must be strings, got {type(key).__name__}")
        self.logger.debug(f"Converting non-string sub-spec key {key!r} to text")
        return str(key)

    def _malformed(self, raw: Any, reason: str) -> SpecNode:
        """Handle an unrecognized node according to the parsing mode."""
        if self.strict:
            raise SpecError(
                f"Unsupported specification node of type {type(raw).__name__}: {reason}"
            )
        self.logger.debug(
            f"Ignoring specification node of type {type(raw).__name__}: {reason}"
        )
        return EmptyNode()


__all__ = ['SpecParser']
