"""
Batch encoding and decoding of payloads to stored text values and vice versa.
"""

import torch
import numpy as np
from typing import Any, List, Optional

from DynamicBuffer.config import BufferConfig
from DynamicBuffer.encoding.codec import encode_to_text, decode_text
from DynamicBuffer.utils.device import get_device


def encode_batch(payloads: List[bytes]) -> List[str]:
    """
    Encodes a batch of payloads to text.

    Args:
        payloads: List of byte payloads, each 1..20476 long

    Returns:
        List of encoded text values
    """
    return [encode_to_text(payload) for payload in payloads]

def decode_batch(
    texts: List[Any],
    config: Optional[BufferConfig] = None,
) -> List[Optional[bytes]]:
    """
    Decodes a batch of stored values.

    Declared lengths are bounded by config.max_payload_length and, with
    config.strict_decode, every stream must pass verification.

    Args:
        texts: Stored values; anything that is not text decodes to None
        config: Decoding limits (default: BufferConfig())

    Returns:
        List of decoded payloads or None
    """
    config = config or BufferConfig()
    return [
        decode_text(text, config.max_payload_length, config.strict_decode)
        if isinstance(text, str) else None
        for text in texts
    ]

def decode_batch_tensor(
    texts: List[Any],
    device: Optional[torch.device] = None,
    config: Optional[BufferConfig] = None,
) -> List[Optional[torch.Tensor]]:
    """
    Decodes a batch of stored values into uint8 tensors.

    Args:
        texts: Stored values; anything that is not text decodes to None
        device: Target device for tensors (default: auto-detect)
        config: Decoding limits, as for decode_batch()

    Returns:
        List of 1-D uint8 tensors or None
    """
    if device is None:
        device = get_device()

    tensors = []
    for payload in decode_batch(texts, config):
        if payload is None:
            tensors.append(None)
            continue
        array = np.frombuffer(payload, dtype=np.uint8).copy()
        tensors.append(torch.from_numpy(array).to(device))
    return tensors
