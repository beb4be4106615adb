# Path: predmatch/process/matcher/engine/path_resolver.py
"""
Path Resolver

Pulls sub-values out of the value under test. Missing segments never
raise: they resolve to None, the same as an absent value.

Lookup rules for one segment:
- Mapping: the key itself, then its integer form for digit strings
- Sequence (not str/bytes): digit strings and ints index it
- namedtuple: field names as well as indexes
- Any other object: public attribute access

iter_keys() mirrors these rules, so a wildcard over a plain object
visits its public instance attributes.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..models.spec_path import Each, SpecPath


_TEXT_TYPES = (str, bytes, bytearray)


def _as_index(key: Any) -> Optional[int]:
    """Interpret key as a sequence index, or None if it is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isascii() and key.isdecimal():
        return int(key)
    return None


def _is_attribute_name(key: Any) -> bool:
    return isinstance(key, str) and key.isidentifier() and not key.startswith('_')


def get_segment(container: Any, key: Any) -> Any:
    """
    Look up one key in a container.

    Args:
        container: Mapping, sequence or object (None resolves to None)
        key: Segment key

    Returns:
        The addressed value, or None when absent
    """
    if container is None or isinstance(container, _TEXT_TYPES):
        return None

    if isinstance(container, Mapping):
        if key in container:
            return container[key]
        index = _as_index(key)
        if isinstance(key, str) and index is not None and index in container:
            return container[index]
        return None

    if isinstance(container, Sequence):
        index = _as_index(key)
        if index is not None:
            return container[index] if 0 <= index < len(container) else None
        fields = getattr(container, '_fields', ())
        if key in fields:
            return getattr(container, key)
        return None

    if _is_attribute_name(key):
        return getattr(container, key, None)
    return None


def resolve(root: Any, path: SpecPath) -> Any:
    """
    Resolve a plain (non-wildcard) path against the root value.

    Args:
        root: Value under test
        path: Path to resolve; the root path returns root itself

    Returns:
        The addressed sub-value, or None when any segment is absent

    Raises:
        ValueError: If the path contains a wildcard segment
    """
    value = root
    for segment in path.segments:
        if isinstance(segment, Each):
            raise ValueError(f"Cannot resolve wildcard path '{path}'; resolve its lookup path")
        value = get_segment(value, segment.key)
        if value is None:
            return None
    return value


def iter_keys(collection: Any) -> list:
    """
    Keys of a collection in natural iteration order.

    Mappings give their keys, sequences their indexes and plain
    objects their public instance attributes. Strings, scalars,
    classes and None have no keys.
    """
    if collection is None or isinstance(collection, _TEXT_TYPES):
        return []
    if isinstance(collection, Mapping):
        return list(collection.keys())
    if isinstance(collection, Sequence):
        return list(range(len(collection)))
    if isinstance(collection, type) or not hasattr(collection, '__dict__'):
        return []
    return [key for key in vars(collection) if _is_attribute_name(key)]


__all__ = ['get_segment', 'resolve', 'iter_keys']
