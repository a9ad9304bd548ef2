MAX_PAYLOAD_LENGTH = 20476

BITS_PER_BYTE = 8
BITS_PER_WORD = 15

BYTE_MASK = 0xFF
WORD_MASK = 0x7FFF
PAYLOAD_MARKER = 0x8000
