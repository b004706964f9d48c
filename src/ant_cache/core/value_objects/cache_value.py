"""Cache value model.

ONLY the storable value shapes - the closed set of values the cache can
hand to a codec without losing information.

A value is a primitive (None, bool, int of any size, float including NaN
and infinities, str, date, datetime), a container (list, set, dict keyed by
the value model) or a string-keyed record, recursively.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Set, Union

CachePrimitive = Union[None, bool, int, float, str, date, datetime]
CacheValue = Union[
    CachePrimitive,
    List["CacheValue"],
    Set[CachePrimitive],
    Dict[Any, "CacheValue"],
]

PRIMITIVE_TYPES = (type(None), bool, int, float, str, date, datetime)


def find_unsupported_value(value: Any, path: str = "$") -> Optional[str]:
    """Return the path of the first value outside the model, or None.

    Containers are walked recursively; dict keys are checked as well as
    values. Only exact container types are accepted (tuples, frozensets and
    custom mappings are rejected) so that a round trip returns the same
    shapes that went in.
    """
    if isinstance(value, PRIMITIVE_TYPES):
        return None

    value_type = type(value)
    if value_type is list:
        for index, item in enumerate(value):
            found = find_unsupported_value(item, f"{path}[{index}]")
            if found is not None:
                return found
        return None

    if value_type is set:
        for item in value:
            if not isinstance(item, PRIMITIVE_TYPES):
                return f"{path}{{{item!r}}}"
        return None

    if value_type is dict:
        for key, item in value.items():
            if not isinstance(key, PRIMITIVE_TYPES):
                return f"{path}<key {key!r}>"
            found = find_unsupported_value(item, f"{path}[{key!r}]")
            if found is not None:
                return found
        return None

    return path


def is_cache_value(value: Any) -> bool:
    """Check whether ``value`` belongs to the value model."""
    return find_unsupported_value(value) is None
