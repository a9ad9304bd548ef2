"""
Code-unit stream for DynamicBuffer wire format.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from DynamicBuffer.encoding.constants import (
    BITS_PER_BYTE,
    BITS_PER_WORD,
    PAYLOAD_MARKER,
)


@dataclass
class CodeUnitStream:
    """
    Length-prefixed stream of 16-bit code units.

    Layout:
        - length: 1 word, payload byte length, unmarked
        - words: ceil(length * 8 / 15) words, bit 15 always set,
          15 payload bits each
    """

    length: int
    words: List[int] = field(default_factory=list)

    def to_words(self) -> List[int]:
        """Gets the full word sequence, Length Word first."""
        return [self.length] + list(self.words)

    def to_text(self) -> str:
        """Serialize stream to text, one character per code unit."""
        return "".join(map(chr, self.to_words()))

    @classmethod
    def from_words(cls, words: Sequence[int]) -> "CodeUnitStream":
        """Creates a stream from a raw word sequence."""
        if len(words) == 0:
            return cls(length=0)
        for word in words:
            if not 0 <= word <= 0xFFFF:
                raise ValueError(f"Invalid code unit: {word} does not fit in 16 bits")
        return cls(length=int(words[0]), words=[int(w) for w in words[1:]])

    @classmethod
    def from_text(cls, text: str) -> "CodeUnitStream":
        """Deserialize stream from text."""
        return cls.from_words([ord(c) for c in text])

    @staticmethod
    def expected_word_count(length: int) -> int:
        """Gets the number of payload words needed for a payload of given length."""
        return -(-length * BITS_PER_BYTE // BITS_PER_WORD)

    def verify(self) -> bool:
        """Checks word count and payload markers against the declared length."""
        if len(self.words) != self.expected_word_count(self.length):
            return False
        return all(word & PAYLOAD_MARKER for word in self.words)

    def __len__(self) -> int:
        return 1 + len(self.words)
