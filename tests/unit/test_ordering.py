# -*- coding: utf-8 -*-
"""
Unit tests for listing order.

Tests cover:
- natural kind classification of values and types
- sorted listing of integer, real and string sets
- unordered fallback for other kinds, and caller-supplied keys
"""
import enum
import logging
from fractions import Fraction

import pytest

from gensets import InMemorySet
from gensets.collections.ordering import (
    INTEGER,
    REAL,
    STRING,
    has_natural_order,
    kind_of_type,
    natural_kind,
)


class Color(enum.Enum):
    RED = 1
    BLUE = 2


class Level(enum.IntEnum):
    LOW = 1
    HIGH = 2


class TestNaturalKind:
    """Test natural kind classification."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (1, INTEGER),
            (-7, INTEGER),
            (Level.HIGH, INTEGER),
            (1.5, REAL),
            (Fraction(1, 3), REAL),
            ("a", STRING),
            ("", STRING),
            (True, None),
            (None, None),
            ((1, 2), None),
            (b"x", None),
            (Color.RED, None),
        ],
    )
    def test_natural_kind(self, value, kind):
        """Test the kind reported for individual values."""
        assert natural_kind(value) == kind

    def test_kind_of_type(self):
        """Test the kind reported for types, with bool excluded."""
        assert kind_of_type(int) == INTEGER
        assert kind_of_type(float) == REAL
        assert kind_of_type(str) == STRING
        assert kind_of_type(bool) is None
        assert kind_of_type(object) is None

    def test_natural_order_from_element_type(self):
        """Test a fixed element type decides without inspecting members."""
        assert has_natural_order([], element_type=str) is True
        assert has_natural_order(["a"], element_type=object) is False

    def test_natural_order_from_members(self):
        """Test member inspection when no element type is fixed."""
        assert has_natural_order([1, 2.5]) is True
        assert has_natural_order(["a", 1]) is False
        assert has_natural_order([True, False]) is False
        assert has_natural_order([]) is False


class TestListOrder:
    """Test the order produced by list()."""

    def test_strings_sorted(self):
        """Test string members list in ascending order."""
        s = InMemorySet("z", "y", "x", "a")
        assert s.list() == ["a", "x", "y", "z"]

    def test_integers_sorted_numerically(self):
        """Test integers sort by value, not by their text."""
        s = InMemorySet(10, -3, 2, 100, 0)
        assert s.list() == [-3, 0, 2, 10, 100]

    def test_reals_sorted_numerically(self):
        """Test float members list in ascending order."""
        s = InMemorySet(2.5, -1.25, 0.0, 10.0)
        assert s.list() == [-1.25, 0.0, 2.5, 10.0]

    def test_mixed_int_and_float_sorted_as_reals(self):
        """Test a mix of ints and floats sorts as real numbers."""
        s = InMemorySet(3, 1.5, 2)
        assert s.list() == [1.5, 2, 3]

    def test_strings_sort_by_code_point(self):
        """Test upper case sorts before lower case."""
        s = InMemorySet("b", "B", "a", "A")
        assert s.list() == ["A", "B", "a", "b"]

    def test_other_kinds_list_every_member(self):
        """Test unordered kinds still list each member once."""
        s = InMemorySet((2, "b"), (1, "a"), Color.RED, True)
        listed = s.list()
        assert len(listed) == 4
        assert InMemorySet(*listed).equal(s)

    def test_unordered_fallback_is_logged(self, caplog):
        """Test the unordered fallback emits a debug record."""
        s = InMemorySet(Color.RED, Color.BLUE)
        with caplog.at_level(
            logging.DEBUG,
            logger="gensets.collections.base_set",
        ):
            s.list()
        assert "no natural order" in caplog.text

    def test_caller_supplied_key(self):
        """Test an explicit key orders any kind of member."""
        s = InMemorySet(Color.BLUE, Color.RED)
        assert s.list(key=lambda c: c.value) == [Color.RED, Color.BLUE]

        words = InMemorySet("ccc", "a", "bb")
        assert words.list(key=len) == ["a", "bb", "ccc"]

    def test_sorted_listing_disabled(self):
        """Test sorted_listing=False lists in storage order."""
        s = InMemorySet(3, 1, 2, sorted_listing=False)
        assert sorted(s.list()) == [1, 2, 3]
        assert s.list() == s.unsorted_list()

    def test_element_type_decides_kind(self):
        """Test a set with a fixed element type sorts by that type."""
        s = InMemorySet(3, 1, 2, element_type=int)
        assert s.list() == [1, 2, 3]

    def test_empty_list(self):
        """Test an empty set lists as an empty list."""
        assert InMemorySet().list() == []
