# -*- coding: utf-8 -*-
# file: in_memory_set.py
import logging

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from ..config import SetConfig
from ..exception import ElementTypeError, UnhashableElementError
from .base_set import SetCollection, T, _MISSING
from .ordering import INTEGER, REAL, kind_of_type, natural_kind

logger = logging.getLogger(__name__)


def _find_unhashable(elements: Iterable[Any]) -> Any:
    for element in elements:
        try:
            hash(element)
        except TypeError:
            return element
    return None


class InMemorySet(SetCollection[T]):
    """
    Set backed by a dict mapping each member to ``None``.

    Not synchronized: a single thread of control must own an instance, or
    the caller has to serialize access. Plain assignment aliases the same
    storage; use ``clone()`` for an independent copy.
    """

    element_type: Optional[type] = None

    def __init__(
        self,
        *elements: T,
        element_type: Optional[type] = None,
        sorted_listing: bool = True,
        config: Optional[SetConfig] = None,
    ):
        if config is None:
            config = SetConfig(
                element_type=element_type,
                sorted_listing=sorted_listing,
            )
        super().__init__(self._bind_class_type(config))
        self._store: Dict[T, None] = {}
        self.insert(*elements)

    @classmethod
    def _bind_class_type(cls, config: SetConfig) -> SetConfig:
        """Apply the element type fixed by the class to ``config``."""
        class_type = cls.element_type
        if class_type is None:
            return config
        if config.element_type is None:
            return config.model_copy(update={"element_type": class_type})
        if not issubclass(config.element_type, class_type):
            raise ElementTypeError(
                config.element_type,
                class_type,
                message=f"{cls.__name__} holds '{class_type.__name__}' "
                f"elements, cannot use element_type "
                f"'{config.element_type.__name__}'",
            )
        return config

    def _new_empty(self) -> "InMemorySet[T]":
        return type(self)(config=self.config)

    def _accepts(self, element: Any) -> bool:
        expected = self.config.element_type
        kind = kind_of_type(expected)
        if isinstance(element, bool) and kind in (INTEGER, REAL):
            return False
        if isinstance(element, expected):
            return True
        # integers widen to reals
        return kind == REAL and natural_kind(element) == INTEGER

    def _check_types(self, elements: Iterable[Any]) -> None:
        for element in elements:
            if not self._accepts(element):
                logger.debug(
                    "%s rejected %r of type %s",
                    type(self).__name__,
                    element,
                    type(element).__name__,
                )
                raise ElementTypeError(element, self.config.element_type)

    def insert(self, *elements: T) -> None:
        if self.config.element_type is not None:
            self._check_types(elements)
        try:
            # fromkeys fails before the store is touched
            self._store.update(dict.fromkeys(elements))
        except TypeError as e:
            raise UnhashableElementError(_find_unhashable(elements)) from e

    def delete(self, *elements: T) -> None:
        for element in elements:
            # True == 1 and 1.0 == 1, so typed sets filter by type first
            if self.config.element_type is not None and not self._accepts(
                element,
            ):
                continue
            try:
                self._store.pop(element, None)
            except TypeError as e:
                raise UnhashableElementError(element) from e

    def has(self, element: T) -> bool:
        if self.config.element_type is not None and not self._accepts(
            element,
        ):
            return False
        try:
            return element in self._store
        except TypeError as e:
            raise UnhashableElementError(element) from e

    def clear(self) -> None:
        self._store.clear()

    def pop_any(self, default: Any = _MISSING) -> T:
        if self._store:
            element, _ = self._store.popitem()
            return element
        return super().pop_any(default)

    def clone(self) -> "InMemorySet[T]":
        result = self._new_empty()
        result._store = dict(self._store)
        return result

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[T]:
        return iter(self._store)


Set = InMemorySet


def new(*elements: T, **config: Any) -> InMemorySet[T]:
    """Return a set holding the given elements, deduplicated."""
    return InMemorySet(*elements, **config)


def key_set(mapping: Mapping[T, Any], **config: Any) -> InMemorySet[T]:
    """Return a set of the keys of ``mapping``."""
    return InMemorySet(*mapping.keys(), **config)
