"""JSON codec: encode values, decode text into plain data or a target type."""

from objtasks.codec.errors import CodecError, ParseError, SerializationError
from objtasks.codec.json_codec import decode, decode_structure, encode

__all__ = [
    "CodecError",
    "ParseError",
    "SerializationError",
    "decode",
    "decode_structure",
    "encode",
]
