from DynamicBuffer.validation.checks import (
    check_identifier,
    is_buffer,
    normalize_buffer,
    check_buffer_length,
    check_buffer,
    BufferSource,
)

__all__ = [
    "check_identifier",
    "is_buffer",
    "normalize_buffer",
    "check_buffer_length",
    "check_buffer",
    "BufferSource",
]
