# -*- coding: utf-8 -*-
# file: base_set.py
import logging

from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from ..config import DEFAULT_CONFIG, SetConfig
from ..exception import EmptySetError
from .ordering import has_natural_order

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

_MISSING: Any = object()


class SetCollection(ABC, Generic[T]):
    """
    Abstract base class for set collections.

    Subclasses provide the storage primitives (``insert``, ``delete``,
    ``has``, ``clear``, ``__len__``, ``__iter__`` and ``_new_empty``); the
    predicates, listing and set algebra are derived from them here. Every
    algebra operation returns a new set of the receiver's class and config
    and never mutates its operands.
    """

    def __init__(self, config: Optional[SetConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def insert(self, *elements: T) -> None:
        """Add each element. Re-inserting a member is a no-op."""

    @abstractmethod
    def delete(self, *elements: T) -> None:
        """Remove each element if present. Absent elements are ignored."""

    @abstractmethod
    def has(self, element: T) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    @abstractmethod
    def _new_empty(self) -> "SetCollection[T]":
        """Return a new, empty set of the same class and config."""

    def len(self) -> int:
        return len(self)

    def has_all(self, *elements: T) -> bool:
        return all(self.has(element) for element in elements)

    def has_any(self, *elements: T) -> bool:
        return any(self.has(element) for element in elements)

    def is_superset(self, other: "SetCollection[T]") -> bool:
        return all(self.has(item) for item in other)

    def is_subset(self, other: "SetCollection[T]") -> bool:
        return other.is_superset(self)

    def equal(self, other: "SetCollection[T]") -> bool:
        # Same cardinality plus superset implies subset as well.
        return len(self) == len(other) and self.is_superset(other)

    def pop_any(self, default: Any = _MISSING) -> T:
        """
        Remove and return an arbitrary member.

        Args:
            default: Returned instead when the set is empty.

        Raises:
            EmptySetError: If the set is empty and no default was given.
        """
        for item in self:
            self.delete(item)
            return item
        if default is _MISSING:
            raise EmptySetError()
        return default

    def unsorted_list(self) -> List[T]:
        """Members in arbitrary order. Callers must not rely on it."""
        return list(self)

    def list(self, key: Optional[Callable[[T], Any]] = None) -> List[T]:
        """
        List every member exactly once.

        Integer, real-number and string members are sorted ascending by
        their natural order. Members of any other kind come back in
        arbitrary order unless a ``key`` is supplied.

        Args:
            key: Optional sort key. When given, the members are always
                sorted with it.

        Returns:
            A new list of the members.
        """
        members = self.unsorted_list()
        if key is not None:
            return sorted(members, key=key)
        if not members or not self.config.sorted_listing:
            return members

        if not has_natural_order(members, self.config.element_type):
            logger.debug(
                "%s members have no natural order, listing unsorted",
                type(self).__name__,
            )
            return members

        members.sort()
        return members

    def clone(self) -> "SetCollection[T]":
        result = self._new_empty()
        result.insert(*self)
        return result

    def difference(self, other: "SetCollection[T]") -> "SetCollection[T]":
        """Members of this set that are not in ``other``."""
        result = self._new_empty()
        result.insert(*(item for item in self if not other.has(item)))
        return result

    def union(self, other: "SetCollection[T]") -> "SetCollection[T]":
        result = self._new_empty()
        result.insert(*self)
        result.insert(*other)
        return result

    def intersection(self, other: "SetCollection[T]") -> "SetCollection[T]":
        """
        Members present in both sets.

        The smaller operand is walked and probed against the larger one.
        """
        if len(self) < len(other):
            walk, probe = self, other
        else:
            walk, probe = other, self

        result = self._new_empty()
        result.insert(*(item for item in walk if probe.has(item)))
        return result

    def symmetric_difference(
        self,
        other: "SetCollection[T]",
    ) -> "SetCollection[T]":
        """Members of exactly one of the two sets."""
        result = self.difference(other)
        result.insert(*(item for item in other if not self.has(item)))
        return result

    def __contains__(self, element: object) -> bool:
        return self.has(element)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.equal(other)

    def __le__(self, other: "SetCollection[T]") -> bool:
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.is_subset(other)

    def __ge__(self, other: "SetCollection[T]") -> bool:
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.is_superset(other)

    def __or__(self, other: "SetCollection[T]") -> "SetCollection[T]":
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "SetCollection[T]") -> "SetCollection[T]":
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: "SetCollection[T]") -> "SetCollection[T]":
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: "SetCollection[T]") -> "SetCollection[T]":
        if not isinstance(other, SetCollection):
            return NotImplemented
        return self.symmetric_difference(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.list()!r})"
