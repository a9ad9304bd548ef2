"""
Binary buffer storage on top of a scalar property store.
"""

import logging
from typing import Any, Optional

from DynamicBuffer.config import BufferConfig
from DynamicBuffer.encoding.codec import encode, decode
from DynamicBuffer.protocol.stream import CodeUnitStream
from DynamicBuffer.storage.adapter import PropertyStore, as_property_store
from DynamicBuffer.utils.logging import get_logger
from DynamicBuffer.validation.checks import BufferSource, check_identifier, check_buffer


class BufferStore:
    """
    Stores arbitrary byte buffers in a text-only property store.

    Usage:
        store = BufferStore(MemoryStorage())
        store.set_buffer("inventory", b"\\x00\\x01\\x02")
        data = store.get_buffer("inventory")
    """

    def __init__(self, target: Any, config: Optional[BufferConfig] = None):
        self.target: PropertyStore = as_property_store(target)
        self.config = config or BufferConfig()
        self.logger = get_logger()

    def _log(self, level: int, msg: str) -> None:
        if level >= self.config.log_level:
            self.logger.log(level, msg)

    def set_buffer(self, identifier: str, buffer: Optional[BufferSource] = None) -> None:
        """
        Encodes and stores a buffer under the identifier.

        Args:
            identifier: Property identifier, non-empty string
            buffer: Byte source, or None to clear the property

        Raises:
            TypeError: If identifier or buffer has the wrong shape
            ValueError: If the buffer is empty or too long
        """
        check_identifier(identifier)
        payload = check_buffer(buffer, self.config.max_payload_length)

        if payload is None:
            self._log(logging.DEBUG, f"Clearing buffer '{identifier}'")
            self.target.store(identifier, None)
            return

        stream = encode(payload)
        self._log(
            logging.DEBUG,
            f"Storing buffer '{identifier}': {len(payload)} bytes in {len(stream)} code units"
        )
        self.target.store(identifier, stream.to_text())

    def get_buffer(self, identifier: str) -> Optional[bytes]:
        """
        Loads and decodes the buffer stored under the identifier.

        Args:
            identifier: Property identifier, non-empty string

        Returns:
            Decoded bytes, or None if the property holds no text

        Raises:
            TypeError: If identifier has the wrong shape
            ValueError: If the stored stream declares an oversized length, or
                fails verification with strict_decode enabled
        """
        check_identifier(identifier)
        value = self.target.load(identifier)

        if not isinstance(value, str):
            self._log(logging.DEBUG, f"Buffer '{identifier}' absent ({type(value).__name__})")
            return None

        stream = CodeUnitStream.from_text(value)

        if stream.length > self.config.max_payload_length:
            self._log(
                logging.WARNING,
                f"Rejected buffer '{identifier}': declared length {stream.length} "
                f"exceeds {self.config.max_payload_length}"
            )
            raise ValueError(
                f"Invalid stream: declared length {stream.length} exceeds "
                f"{self.config.max_payload_length} bytes"
            )

        if self.config.strict_decode and not stream.verify():
            self._log(logging.WARNING, f"Rejected buffer '{identifier}': malformed stream")
            raise ValueError(f"Invalid stream: '{identifier}' was not produced by encode()")

        return decode(stream)

    def delete_buffer(self, identifier: str) -> None:
        """Clears the property under the identifier."""
        self.set_buffer(identifier, None)


def set_dynamic_buffer(target: Any, identifier: str, buffer: Optional[BufferSource] = None) -> None:
    """Stores a buffer on a property store or dynamic-property host."""
    BufferStore(target).set_buffer(identifier, buffer)

def get_dynamic_buffer(target: Any, identifier: str) -> Optional[bytes]:
    """Loads a buffer from a property store or dynamic-property host."""
    return BufferStore(target).get_buffer(identifier)
