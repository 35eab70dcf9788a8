# -*- coding: utf-8 -*-
"""Sets whose element type is fixed by the class."""
from .in_memory_set import InMemorySet


class StringSet(InMemorySet[str]):
    element_type = str


class IntSet(InMemorySet[int]):
    """Integer members only; ``bool`` values are rejected."""

    element_type = int


class FloatSet(InMemorySet[float]):
    """Real-number members. ``int`` values are accepted and kept as given."""

    element_type = float
