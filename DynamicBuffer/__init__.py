"""
DynamicBuffer - Binary buffers on text-only property stores

Packs arbitrary byte payloads into 16-bit text code units so that a
key-value store accepting only scalar values can hold binary data.
"""

from DynamicBuffer.version import __version__

from DynamicBuffer.encoding.codec import encode, decode, encode_to_text, decode_text
from DynamicBuffer.encoding.constants import MAX_PAYLOAD_LENGTH

from DynamicBuffer.protocol.stream import CodeUnitStream

from DynamicBuffer.config import BufferConfig

from DynamicBuffer.storage.buffer import BufferStore, set_dynamic_buffer, get_dynamic_buffer
from DynamicBuffer.storage.memory import MemoryStorage
from DynamicBuffer.storage.adapter import PropertyStore, PropertyHostAdapter

from DynamicBuffer import encoding
from DynamicBuffer import protocol
from DynamicBuffer import storage
from DynamicBuffer import validation
from DynamicBuffer import utils

__all__ = [
    "__version__",
    "encode",
    "decode",
    "encode_to_text",
    "decode_text",
    "MAX_PAYLOAD_LENGTH",
    "CodeUnitStream",
    "BufferConfig",
    "BufferStore",
    "set_dynamic_buffer",
    "get_dynamic_buffer",
    "MemoryStorage",
    "PropertyStore",
    "PropertyHostAdapter",
    "encoding",
    "protocol",
    "storage",
    "validation",
    "utils",
]
