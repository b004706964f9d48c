"""Cache codecs.

Codec implementations of the CacheCodec protocol.
"""

from .json_codec import JSONCacheCodec, decode_json_object, encode_json_value

__all__ = [
    "JSONCacheCodec",
    "encode_json_value",
    "decode_json_object",
]
