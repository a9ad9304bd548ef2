"""
Encoding and decoding functions for byte payloads to code-unit streams and vice versa.
"""

from typing import Optional

from DynamicBuffer.encoding.constants import (
    BITS_PER_BYTE,
    BITS_PER_WORD,
    BYTE_MASK,
    MAX_PAYLOAD_LENGTH,
    PAYLOAD_MARKER,
    WORD_MASK,
)
from DynamicBuffer.protocol.stream import CodeUnitStream


def encode(payload: bytes) -> CodeUnitStream:
    """
    Packs a byte payload into a code-unit stream.

    The first word holds the payload length. Every following word carries
    15 payload bits with bit 15 set; the last one is zero-padded.

    Args:
        payload: Bytes to encode, 1..20476 long (checked by the caller)

    Returns:
        CodeUnitStream holding the length and payload words
    """
    words = []
    acc = 0
    acc_bits = 0

    for byte in payload:
        acc = (acc << BITS_PER_BYTE) | byte
        acc_bits += BITS_PER_BYTE

        while acc_bits >= BITS_PER_WORD:
            acc_bits -= BITS_PER_WORD
            words.append(((acc >> acc_bits) & WORD_MASK) | PAYLOAD_MARKER)
            acc &= (1 << acc_bits) - 1

    if acc_bits > 0:
        words.append(((acc << (BITS_PER_WORD - acc_bits)) & WORD_MASK) | PAYLOAD_MARKER)

    return CodeUnitStream(length=len(payload), words=words)

def decode(stream: CodeUnitStream) -> bytes:
    """
    Unpacks a code-unit stream back into its byte payload.

    Bit 15 of every payload word is cleared before use. Output never grows
    past the declared length; surplus bits are dropped.

    Args:
        stream: Stream produced by encode()

    Returns:
        Decoded bytes, exactly stream.length long
    """
    length = stream.length
    buf = bytearray(length)
    pos = 0
    acc = 0
    acc_bits = 0

    for word in stream.words:
        if pos >= length:
            break
        acc = (acc << BITS_PER_WORD) | (word & WORD_MASK)
        acc_bits += BITS_PER_WORD

        while acc_bits >= BITS_PER_BYTE and pos < length:
            acc_bits -= BITS_PER_BYTE
            buf[pos] = (acc >> acc_bits) & BYTE_MASK
            pos += 1
            acc &= (1 << acc_bits) - 1

    if acc_bits > 0 and pos < length:
        buf[pos] = (acc << (BITS_PER_BYTE - acc_bits)) & BYTE_MASK

    return bytes(buf)

def encode_to_text(payload: bytes) -> str:
    """Encodes a payload straight to its stored text form."""
    return encode(payload).to_text()

def decode_text(
    text: str,
    max_length: Optional[int] = MAX_PAYLOAD_LENGTH,
    strict: bool = False,
) -> bytes:
    """
    Decodes stored text back into bytes.

    Args:
        text: Stored text value
        max_length: Upper bound for the declared length, None to skip the check
        strict: Reject streams failing CodeUnitStream.verify()

    Returns:
        Decoded bytes
    """
    stream = CodeUnitStream.from_text(text)
    if max_length is not None and stream.length > max_length:
        raise ValueError(
            f"Invalid stream: declared length {stream.length} exceeds {max_length} bytes"
        )
    if strict and not stream.verify():
        raise ValueError("Invalid stream: text was not produced by encode()")
    return decode(stream)
