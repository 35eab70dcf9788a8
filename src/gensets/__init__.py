# -*- coding: utf-8 -*-
from typing import TYPE_CHECKING
from .utils.lazy_loader import install_lazy_loader

if TYPE_CHECKING:
    from .collections import (
        SetCollection,
        InMemorySet,
        Set,
        new,
        key_set,
        StringSet,
        IntSet,
        FloatSet,
    )
    from .config import SetConfig
    from .exception import (
        SetError,
        UnhashableElementError,
        ElementTypeError,
        EmptySetError,
    )

__version__ = "0.1.0"

install_lazy_loader(
    globals(),
    {
        "SetCollection": ".collections",
        "InMemorySet": ".collections",
        "Set": ".collections",
        "new": ".collections",
        "key_set": ".collections",
        "StringSet": ".collections",
        "IntSet": ".collections",
        "FloatSet": ".collections",
        "SetConfig": ".config",
        "SetError": ".exception",
        "UnhashableElementError": ".exception",
        "ElementTypeError": ".exception",
        "EmptySetError": ".exception",
    },
)
