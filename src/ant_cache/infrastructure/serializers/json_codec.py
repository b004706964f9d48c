"""JSON cache codec.

ONLY JSON encoding - implements the CacheCodec protocol with tagged JSON
objects so every shape of the value model survives a round trip.

Following maximum separation architecture - one file = one purpose.
"""

import json
import math
from datetime import date, datetime
from typing import Any, Dict

from ...core.exceptions.deserialization_error import DeserializationError
from ...core.exceptions.serialization_error import SerializationError

# Integers beyond this magnitude lose precision in IEEE-754 based JSON readers
MAX_SAFE_INTEGER = 2 ** 53 - 1

DATETIME_TAG = "__datetime__"
DATE_TAG = "__date__"
SET_TAG = "__set__"
FLOAT_TAG = "__float__"
BIGINT_TAG = "__bigint__"
MAP_TAG = "__map__"

TAGS = frozenset({DATETIME_TAG, DATE_TAG, SET_TAG, FLOAT_TAG, BIGINT_TAG, MAP_TAG})


def encode_json_value(value: Any) -> Any:
    """Convert a value-model graph into plain JSON-compatible data.

    Non-JSON shapes become single-key tagged objects. A string-keyed dict
    that would itself look like a tag is written in ``__map__`` form so it
    cannot be mistaken for one on the way back.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return {BIGINT_TAG: str(value)}
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return {FLOAT_TAG: "nan"}
        if math.isinf(value):
            return {FLOAT_TAG: "inf" if value > 0 else "-inf"}
        return value
    if isinstance(value, datetime):
        return {DATETIME_TAG: value.isoformat()}
    if isinstance(value, date):
        return {DATE_TAG: value.isoformat()}
    if isinstance(value, list):
        return [encode_json_value(item) for item in value]
    if isinstance(value, set):
        return {SET_TAG: [encode_json_value(item) for item in value]}
    if isinstance(value, dict):
        if _is_plain_record(value):
            return {key: encode_json_value(item) for key, item in value.items()}
        return {MAP_TAG: [[encode_json_value(key), encode_json_value(item)] for key, item in value.items()]}

    raise TypeError(f"Object of type {type(value).__name__} is not supported by the JSON cache codec")


def _is_plain_record(value: Dict[Any, Any]) -> bool:
    if not all(isinstance(key, str) for key in value):
        return False
    return not (len(value) == 1 and next(iter(value)) in TAGS)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode tagged JSON objects back to Python types."""
    if len(obj) != 1:
        return obj

    tag, payload = next(iter(obj.items()))
    if tag == DATETIME_TAG:
        return datetime.fromisoformat(payload)
    elif tag == DATE_TAG:
        return date.fromisoformat(payload)
    elif tag == SET_TAG:
        return set(payload)
    elif tag == FLOAT_TAG:
        return float(payload)
    elif tag == BIGINT_TAG:
        return int(payload)
    elif tag == MAP_TAG:
        return {key: item for key, item in payload}

    return obj


class JSONCacheCodec:
    """JSON cache codec with extended type support.

    Produces compact, strict JSON (no NaN/Infinity tokens) readable by any
    JSON parser; the tags are only needed to rebuild Python types.
    """

    def __init__(self, sort_keys: bool = False):
        """Initialize JSON codec.

        Args:
            sort_keys: Sort record keys in the output
        """
        self._sort_keys = sort_keys

    def encode(self, value: Any) -> str:
        """Encode value graph to a JSON string."""
        try:
            return json.dumps(
                encode_json_value(value),
                allow_nan=False,
                separators=(",", ":"),
                sort_keys=self._sort_keys,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"JSON serialization failed: {e}",
                value=value,
                codec_name=self.get_format_name(),
                original_error=e,
            ) from e

    def decode(self, data: str) -> Any:
        """Decode a JSON string produced by ``encode``."""
        try:
            return json.loads(data, object_hook=decode_json_object)
        except (TypeError, ValueError, RecursionError) as e:
            raise DeserializationError(
                f"JSON deserialization failed: {e}",
                data=data if isinstance(data, str) else None,
                codec_name=self.get_format_name(),
                original_error=e,
            ) from e

    def get_format_name(self) -> str:
        return "json"

    def __repr__(self) -> str:
        return f"JSONCacheCodec(sort_keys={self._sort_keys})"
