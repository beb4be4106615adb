# Path: predmatch/tests/unit/test_matcher/test_spec_path.py
"""
Tests for specification path parsing and composition.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent.parent))

from predmatch.process.matcher.models import EACH, Field, SpecError, SpecPath


class TestSpecPathParsing:
    """Test SpecPath.parse()."""

    def test_empty_string_is_root(self):
        """Empty key addresses the root."""
        path = SpecPath.parse('')
        assert path.is_root
        assert path == SpecPath.ROOT

    def test_plain_field(self):
        """Plain field parses to one segment."""
        assert SpecPath.parse('date').segments == (Field('date'),)

    def test_dotted_path(self):
        """Dotted path parses to one segment per part."""
        path = SpecPath.parse('deep.deeper.deepest')
        assert path.segments == (Field('deep'), Field('deeper'), Field('deepest'))

    def test_empty_parts_dropped(self):
        """Empty parts between dots are dropped."""
        assert SpecPath.parse('.a..b.').segments == (Field('a'), Field('b'))

    def test_bracket_index(self):
        """Bracketed index becomes its own segment."""
        path = SpecPath.parse('items[0].name')
        assert path.segments == (Field('items'), Field('0'), Field('name'))

    def test_wildcard_suffix(self):
        """'list[]' is an each-path over 'list'."""
        path = SpecPath.parse('list[]')
        assert path.segments == (Field('list'), EACH)
        assert path.is_each

    def test_bare_wildcard(self):
        """'[]' alone is an each-path over the current value."""
        path = SpecPath.parse('[]')
        assert path.segments == (EACH,)
        assert path.is_each
        assert path.lookup.is_root

    def test_wildcard_in_middle_rejected(self):
        """A wildcard followed by more segments is an error."""
        with pytest.raises(SpecError):
            SpecPath.parse('list[].name')

    def test_unbalanced_brackets_taken_literally(self):
        """Unbalanced brackets are a literal key."""
        assert SpecPath.parse('odd]key').segments == (Field('odd]key'),)


class TestSpecPathComposition:
    """Test joining and rendering paths."""

    def test_plain_path_is_not_each(self):
        """Plain path is not an each-path and its lookup is itself."""
        path = SpecPath.parse('a.b')
        assert not path.is_each
        assert path.lookup is path

    def test_lookup_strips_wildcard(self):
        """lookup drops the trailing wildcard."""
        assert SpecPath.parse('data.references[]').lookup == SpecPath.parse('data.references')

    def test_join(self):
        """join concatenates segments."""
        joined = SpecPath.parse('a').join(SpecPath.parse('b.c'))
        assert joined == SpecPath.parse('a.b.c')

    def test_join_root_is_identity(self):
        """Joining the root path changes nothing."""
        path = SpecPath.parse('a')
        assert path.join(SpecPath.ROOT) is path
        assert SpecPath.ROOT.join(path) == path

    def test_child_keeps_raw_key(self):
        """child() keeps integer keys as they are."""
        path = SpecPath.parse('list').child(0)
        assert path.segments == (Field('list'), Field(0))

    def test_str_renders_dotted(self):
        """Paths render as dotted strings."""
        assert str(SpecPath.parse('list').child(0)) == 'list.0'
        assert str(SpecPath.parse('deep.deeper')) == 'deep.deeper'

    def test_str_renders_wildcard(self):
        """Wildcards render with the suffix marker."""
        assert str(SpecPath.parse('list[]')) == 'list[]'
        assert str(SpecPath.parse('[]')) == '[]'

    def test_str_root_is_empty(self):
        """Root path renders as empty string."""
        assert str(SpecPath.ROOT) == ''

    def test_paths_are_hashable(self):
        """Paths can be used as dict keys."""
        seen = {SpecPath.parse('a.b'): 1}
        assert seen[SpecPath.parse('a.b')] == 1
