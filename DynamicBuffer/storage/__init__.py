"""
DynamicBuffer storage module.
"""

from DynamicBuffer.storage.adapter import (
    PropertyStore,
    DynamicPropertyHost,
    PropertyHostAdapter,
    as_property_store,
)
from DynamicBuffer.storage.memory import MemoryStorage
from DynamicBuffer.storage.buffer import BufferStore, set_dynamic_buffer, get_dynamic_buffer

__all__ = [
    "PropertyStore",
    "DynamicPropertyHost",
    "PropertyHostAdapter",
    "as_property_store",
    "MemoryStorage",
    "BufferStore",
    "set_dynamic_buffer",
    "get_dynamic_buffer",
]
