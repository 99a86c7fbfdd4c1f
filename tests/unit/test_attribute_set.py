"""Tests for the AttributeSet registry."""

from __future__ import annotations

from typing import Any

import pytest

from castable.Attributes import AttributeSet
from castable.Casts import IntegerCast, StringCast
from castable.Exceptions import InvalidAttributeName, UnknownAttributeType


class TestAttributeSet:
    """Test suite for attribute registration and lookup."""

    @pytest.fixture
    def attribute_set(self) -> AttributeSet:
        """Create a registry with two attributes."""
        attributes = AttributeSet()
        attributes.declare('title', str)
        attributes.declare('page_count', int, {'strict': True})
        return attributes

    def test_declare_then_lookup(self, attribute_set: AttributeSet) -> None:
        """Test that lookup returns the declared attribute."""
        title = attribute_set.lookup('title')

        assert title is not None
        assert title.name == 'title'
        assert isinstance(title.cast, StringCast)
        assert attribute_set['page_count'].strict is True
        assert attribute_set.lookup('missing') is None
        assert attribute_set.get('title') is title

    def test_names_follow_declaration_order(self, attribute_set: AttributeSet) -> None:
        """Test insertion-ordered names."""
        attribute_set.declare('author', str)

        assert attribute_set.names() == ['title', 'page_count', 'author']

    def test_redeclaring_replaces_in_place(self, attribute_set: AttributeSet) -> None:
        """Test that redeclaration overwrites without duplicating."""
        attribute_set.declare('title', int)
        attribute_set.declare('title', int)

        assert len(attribute_set) == 2
        assert attribute_set.names() == ['title', 'page_count']
        assert isinstance(attribute_set['title'].cast, IntegerCast)

    @pytest.mark.parametrize("type_ref", [str, None, list[int], 'json'])
    def test_reserved_name_always_fails(self, type_ref: Any) -> None:
        """Test that `attributes` is rejected regardless of its type."""
        with pytest.raises(InvalidAttributeName):
            AttributeSet().declare('attributes', type_ref)

    @pytest.mark.parametrize("name", ['fill', '_secret', 'not valid', '', 42])
    def test_invalid_names(self, name: Any) -> None:
        """Test names that cannot be declared."""
        with pytest.raises(InvalidAttributeName):
            AttributeSet().declare(name, str)

    def test_failed_declaration_leaves_registry_unchanged(self, attribute_set: AttributeSet) -> None:
        """Test that declaration errors are atomic."""
        with pytest.raises(UnknownAttributeType):
            attribute_set.declare('title', 'nonsense')
        with pytest.raises(UnknownAttributeType):
            attribute_set.declare('isbn', 'nonsense')

        assert attribute_set.names() == ['title', 'page_count']
        assert isinstance(attribute_set['title'].cast, StringCast)

    def test_iteration_is_restartable(self, attribute_set: AttributeSet) -> None:
        """Test that iterating twice yields the same sequence."""
        first = [attribute.name for attribute in attribute_set]
        second = [attribute.name for attribute in attribute_set]

        assert first == second == ['title', 'page_count']

    def test_copy_is_independent(self, attribute_set: AttributeSet) -> None:
        """Test that declaring on a copy leaves the original untouched."""
        child = attribute_set.copy()
        child.declare('author', str)

        assert 'author' in child
        assert 'author' not in attribute_set
        assert child['title'] is attribute_set['title']

    def test_missing_item_raises_key_error(self, attribute_set: AttributeSet) -> None:
        """Test item access for undeclared names."""
        with pytest.raises(KeyError):
            attribute_set['missing']

    def test_custom_reserved_names(self) -> None:
        """Test that owners can reserve extra names."""
        attributes = AttributeSet(reserved=frozenset({'save'}))

        with pytest.raises(InvalidAttributeName):
            attributes.declare('save', str)
        attributes.declare('attributes', str)
        assert attributes.names() == ['attributes']
