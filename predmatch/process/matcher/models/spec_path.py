# Path: predmatch/process/matcher/models/spec_path.py
"""
Specification Paths

A SpecPath addresses a location inside the value under test. It is a
tuple of segments, each either a Field (one key or index) or EACH
(every key of the collection addressed so far).

Key strings are parsed once, when the specification is parsed:

    'date'                -> (Field('date'),)
    'deep.deeper.deepest' -> (Field('deep'), Field('deeper'), Field('deepest'))
    'items[0].name'       -> (Field('items'), Field('0'), Field('name'))
    'list[]'              -> (Field('list'), EACH)
    '[]'                  -> (EACH,)

EACH is only valid as the last segment of a key.
"""

import re
from dataclasses import dataclass
from typing import Any, ClassVar

from predmatch.constants import PATH_SEPARATOR, WILDCARD_MARKER

from .failure import SpecError


# name followed by any number of [index] groups, e.g. "items[0][]"
_PART_RE = re.compile(r'^([^\[\]]*)((?:\[[^\[\]]*\])*)$')
_INDEX_RE = re.compile(r'\[([^\[\]]*)\]')


@dataclass(frozen=True)
class Field:
    """A single key (mapping key, sequence index or attribute name)."""
    key: Any

    def __str__(self) -> str:
        return str(self.key)


@dataclass(frozen=True)
class Each:
    """Wildcard segment: every key of the addressed collection."""

    def __str__(self) -> str:
        return WILDCARD_MARKER


EACH = Each()


@dataclass(frozen=True)
class SpecPath:
    """
    Immutable path made of Field and EACH segments.

    Attributes:
        segments: Ordered segments from the root of the value
    """
    segments: tuple = ()

    ROOT: ClassVar['SpecPath']

    @classmethod
    def parse(cls, text: str) -> 'SpecPath':
        """
        Parse a key string into a SpecPath.

        Empty parts are dropped, so '' and '.' both address the root.

        Args:
            text: Dotted / bracketed key string

        Returns:
            Parsed SpecPath

        Raises:
            SpecError: If a wildcard is followed by further segments
        """
        segments: list = []
        for part in text.split(PATH_SEPARATOR):
            if not part:
                continue
            segments.extend(cls._parse_part(part))

        for position, segment in enumerate(segments):
            if isinstance(segment, Each) and position != len(segments) - 1:
                raise SpecError(
                    f"Wildcard '{WILDCARD_MARKER}' must end the path: {text!r}"
                )

        return cls(tuple(segments))

    @staticmethod
    def _parse_part(part: str) -> list:
        """Split one dot-separated part into its name and [index] groups."""
        match = _PART_RE.match(part)
        if match is None:
            # Unbalanced brackets are taken literally
            return [Field(part)]

        name, indexes = match.groups()
        segments: list = [Field(name)] if name else []
        for index in _INDEX_RE.findall(indexes):
            segments.append(Field(index) if index else EACH)
        return segments

    @property
    def is_root(self) -> bool:
        """True for the empty path."""
        return not self.segments

    @property
    def is_each(self) -> bool:
        """True when the path fans out over a collection."""
        return bool(self.segments) and isinstance(self.segments[-1], Each)

    @property
    def lookup(self) -> 'SpecPath':
        """The path with a trailing wildcard removed."""
        if self.is_each:
            return SpecPath(self.segments[:-1])
        return self

    def join(self, other: 'SpecPath') -> 'SpecPath':
        """Concatenate two paths."""
        if other.is_root:
            return self
        return SpecPath(self.segments + other.segments)

    def child(self, key: Any) -> 'SpecPath':
        """Path to one key below this path."""
        return SpecPath(self.segments + (Field(key),))

    def __str__(self) -> str:
        rendered = ''
        for segment in self.segments:
            if isinstance(segment, Each):
                rendered += WILDCARD_MARKER
            elif rendered:
                rendered += f'{PATH_SEPARATOR}{segment}'
            else:
                rendered = str(segment)
        return rendered


SpecPath.ROOT = SpecPath()


__all__ = ['Field', 'Each', 'EACH', 'SpecPath']
