# -*- coding: utf-8 -*-
"""Natural ordering of set members for deterministic listing."""
import numbers
from typing import Any, Iterable, Optional

INTEGER = "integer"
REAL = "real"
STRING = "string"


def kind_of_type(tp: type) -> Optional[str]:
    """Return the natural kind of a type, or None if it has no natural
    order."""
    if issubclass(tp, bool):
        return None
    if issubclass(tp, str):
        return STRING
    if issubclass(tp, numbers.Integral):
        return INTEGER
    if issubclass(tp, numbers.Real):
        return REAL
    return None


def natural_kind(value: Any) -> Optional[str]:
    return kind_of_type(type(value))


def _common_kind(elements: Iterable[Any]) -> Optional[str]:
    kind = None
    for element in elements:
        current = natural_kind(element)
        if current is None:
            return None
        if kind is None or kind == current:
            kind = current
        elif {kind, current} == {INTEGER, REAL}:
            # ints and floats order together as real numbers
            kind = REAL
        else:
            return None
    return kind


def has_natural_order(
    elements: Iterable[Any],
    element_type: Optional[type] = None,
) -> bool:
    """
    Tell whether ``elements`` can be listed in natural order.

    Args:
        elements: The members to be listed.
        element_type: The element type fixed by the set, if any. When given,
            the kind is taken from it instead of inspecting the members.

    Returns:
        True if the members share an integer, real or string kind and can
        be sorted by value. False if they must be listed in arbitrary order.
    """
    if element_type is not None:
        kind = kind_of_type(element_type)
    else:
        kind = _common_kind(elements)

    return kind is not None
