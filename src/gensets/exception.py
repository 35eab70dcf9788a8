# -*- coding: utf-8 -*-
"""
Set Collection Exception Definitions

Every set operation is total for hashable elements of an accepted type, so
the only failures are violations of the element type constraint. Each error
also derives from the builtin exception Python raises in the same situation.
"""

from typing import Any, Dict, Optional


class SetError(Exception):
    """
    Set collection exception base class

    Attributes:
        code: Error code, used to tell error categories apart
        message: Error message
        details: Additional error details
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(code='{self.code}', "
            f"message='{self.message}')"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class UnhashableElementError(SetError, TypeError):
    """An element, or a configured element type, cannot be hashed"""

    def __init__(
        self,
        value: Any,
        message: Optional[str] = None,
    ):
        type_name = (
            value.__name__ if isinstance(value, type) else type(value).__name__
        )
        super().__init__(
            code="UNHASHABLE_ELEMENT",
            message=message
            or f"Set elements must be hashable, got type '{type_name}'",
            details={"type": type_name},
        )


class ElementTypeError(SetError, TypeError):
    """A value of the wrong type was offered to a typed set"""

    def __init__(
        self,
        value: Any,
        expected: type,
        message: Optional[str] = None,
    ):
        super().__init__(
            code="ELEMENT_TYPE_MISMATCH",
            message=message
            or f"Expected element of type '{expected.__name__}', "
            f"got {value!r} of type '{type(value).__name__}'",
            details={
                "expected": expected.__name__,
                "actual": type(value).__name__,
            },
        )
        self.expected = expected


class EmptySetError(SetError, KeyError):
    """pop_any() was called on an empty set"""

    def __init__(self, message: str = "pop from an empty set"):
        super().__init__(code="EMPTY_SET", message=message)
