"""
Buffer store configuration for DynamicBuffer.
"""

import logging
from dataclasses import dataclass

from DynamicBuffer.encoding.constants import MAX_PAYLOAD_LENGTH


@dataclass
class BufferConfig:
    """
    Configuration for a BufferStore.

    The payload ceiling can be lowered below the wire format limit, never raised.
    log_level filters what a store emits; the package logger level still applies.
    """

    max_payload_length: int = MAX_PAYLOAD_LENGTH
    strict_decode: bool = False
    log_level: int = logging.WARNING

    def __post_init__(self):
        if not 1 <= self.max_payload_length <= MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"max_payload_length must be between 1 and {MAX_PAYLOAD_LENGTH}, "
                f"got {self.max_payload_length}"
            )

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "BufferConfig":
        """Creates a BufferConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
