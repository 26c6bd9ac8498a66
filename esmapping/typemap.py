# Default elastic types for python kinds.
# Python has no sized numbers, so the sized elastic types are reached through the NewTypes below
# (e.g. `count: int16` gives a short field). A plain int is an integer and a plain float a double.
import datetime
import ipaddress
from typing import Any, Literal, NewType, get_args, get_origin

from esmapping.models import PrimitiveType

int8 = NewType("int8", int)
int16 = NewType("int16", int)
int32 = NewType("int32", int)
int64 = NewType("int64", int)
float32 = NewType("float32", float)
float64 = NewType("float64", float)

# Sized kinds come first: they are NewTypes and cannot be found through the class hierarchy
_TYPEMAP_PY_TO_ES: dict[Any, PrimitiveType] = {
    int8: "byte",
    int16: "short",
    int32: "integer",
    int64: "long",
    float32: "float",
    float64: "double",
    bool: "boolean",
    int: "integer",
    float: "double",
    str: "keyword",
    datetime.datetime: "date",
    datetime.date: "date",
    ipaddress.IPv4Address: "ip",
    ipaddress.IPv6Address: "ip",
}


def default_elastic_type(kind: Any) -> PrimitiveType | None:
    """
    Get the default elastic type for a (unwrapped) python type, or None if there is none.
    Subclasses map like their first known base class (so str enums are keywords), and NewTypes
    map like their supertype unless they are one of the sized kinds.
    """
    while True:
        if kind in _TYPEMAP_PY_TO_ES:
            return _TYPEMAP_PY_TO_ES[kind]
        supertype = getattr(kind, "__supertype__", None)
        if supertype is None:
            break
        kind = supertype

    if get_origin(kind) is Literal:
        value_types = {type(value) for value in get_args(kind)}
        if len(value_types) == 1:
            return default_elastic_type(value_types.pop())
        return None

    if isinstance(kind, type):
        for base in kind.__mro__:
            if base in _TYPEMAP_PY_TO_ES:
                return _TYPEMAP_PY_TO_ES[base]
    return None
