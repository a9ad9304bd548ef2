import math
import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np
import torch

from DynamicBuffer.encoding.constants import MAX_PAYLOAD_LENGTH, BYTE_MASK


BufferSource = Union[Sequence[numbers.Real], bytes, bytearray, memoryview, np.ndarray, torch.Tensor]

ACCEPTED_BUFFERS = "list | tuple | bytes | bytearray | memoryview | numpy.ndarray | torch.Tensor | None"


def check_identifier(identifier: Any) -> str:
    if not isinstance(identifier, str):
        raise TypeError("Invalid identifier: expected a string")
    if not identifier:
        raise TypeError("Invalid identifier: string can not be empty")
    return identifier

def is_buffer(buffer: Any) -> bool:
    return isinstance(buffer, (list, tuple, bytes, bytearray, memoryview, np.ndarray, torch.Tensor))

def normalize_buffer(buffer: BufferSource) -> bytes:
    """
    Converts any accepted byte source to bytes.

    Number sequences wrap modulo 256, with NaN and infinities stored as 0.
    Arrays, tensors and views contribute their raw memory in C order.
    """
    if isinstance(buffer, (bytes, bytearray)):
        return bytes(buffer)

    if isinstance(buffer, memoryview):
        return buffer.tobytes()

    if isinstance(buffer, np.ndarray):
        return np.ascontiguousarray(buffer).tobytes()

    if isinstance(buffer, torch.Tensor):
        return buffer.detach().cpu().contiguous().reshape(-1).view(torch.uint8).numpy().tobytes()

    if isinstance(buffer, (list, tuple)):
        out = bytearray(len(buffer))
        for i, value in enumerate(buffer):
            if not isinstance(value, numbers.Real):
                raise TypeError(f"Invalid buffer: element {i} is not a number")
            if isinstance(value, numbers.Integral) or math.isfinite(value):
                out[i] = int(value) & BYTE_MASK
        return bytes(out)

    raise TypeError(f"Invalid buffer: expected one of {ACCEPTED_BUFFERS}")

def check_buffer_length(payload: bytes, max_length: int = MAX_PAYLOAD_LENGTH) -> bytes:
    if len(payload) == 0 or len(payload) > max_length:
        raise ValueError(
            f"Invalid buffer: length can not be lesser than 1 or greater than {max_length} bytes"
        )
    return payload

def check_buffer(buffer: Optional[BufferSource], max_length: int = MAX_PAYLOAD_LENGTH) -> Optional[bytes]:
    """
    Runs every payload check and returns the normalized payload.

    Returns None when no buffer was given.
    """
    if buffer is None:
        return None
    if not is_buffer(buffer):
        raise TypeError(f"Invalid buffer: expected one of {ACCEPTED_BUFFERS}")
    return check_buffer_length(normalize_buffer(buffer), max_length)
