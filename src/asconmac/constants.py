"""
Pinned Parameters for Ascon-Mac

All values here are PINNED - changing any of them produces a different,
non-interoperable MAC.

Parameters (Ascon-Mac v1.2):
- k  = 128 bits key
- ri = 256 bits absorb rate (four state words)
- ro = 128 bits output rate (two state words)
- t  = 128 bits tag
- a  = 12 rounds for every permutation call
"""

from __future__ import annotations
from dataclasses import dataclass


KEY_SIZE = 16       # bytes
TAG_SIZE = 16       # bytes
RATE = 32           # bytes absorbed per block
WORD_SIZE = 8       # bytes per state word
STATE_WORDS = 5
ROUNDS = 12

PAD_BYTE = 0x80          # 1 || 0* padding at byte granularity
DOMAIN_SEPARATOR = 0x01  # XORed into word 4 before the final permutation

MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class MacParams:
    """
    Field encoding of the initialization word.

    IV = k || ro || (0x80 | a) || (a - b) || t   (8 bits each, t is 32 bits)
    """

    key_bits: int = KEY_SIZE * 8
    output_rate_bits: int = 128
    rounds: int = ROUNDS
    rounds_b: int = ROUNDS
    tag_bits: int = TAG_SIZE * 8

    @property
    def iv(self) -> int:
        """The 64-bit initialization word loaded into state word 0."""
        iv_bytes = bytes([
            self.key_bits & 0xFF,
            self.output_rate_bits & 0xFF,
            0x80 | self.rounds,
            self.rounds - self.rounds_b,
        ]) + self.tag_bits.to_bytes(4, 'big')
        return int.from_bytes(iv_bytes, 'big')


IV = 0x80808C0000000080
