# -*- coding: utf-8 -*-
from .base_set import SetCollection
from .in_memory_set import InMemorySet, Set, new, key_set
from .typed_set import StringSet, IntSet, FloatSet

__all__ = [
    "SetCollection",
    "InMemorySet",
    "Set",
    "new",
    "key_set",
    "StringSet",
    "IntSet",
    "FloatSet",
]
