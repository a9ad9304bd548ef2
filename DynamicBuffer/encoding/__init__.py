"""
Byte payload encoding and decoding for DynamicBuffer.

Packs bytes into 15-bit code units and back.
"""

from DynamicBuffer.encoding.codec import encode, decode, encode_to_text, decode_text
from DynamicBuffer.encoding.batch import encode_batch, decode_batch, decode_batch_tensor
from DynamicBuffer.encoding.constants import (
    MAX_PAYLOAD_LENGTH,
    BITS_PER_BYTE,
    BITS_PER_WORD,
    PAYLOAD_MARKER,
)

__all__ = [
    "encode",
    "decode",
    "encode_to_text",
    "decode_text",
    "encode_batch",
    "decode_batch",
    "decode_batch_tensor",
    "MAX_PAYLOAD_LENGTH",
    "BITS_PER_BYTE",
    "BITS_PER_WORD",
    "PAYLOAD_MARKER",
]
