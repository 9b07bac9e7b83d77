"""
Byte/word codec.

Every multi-byte quantity (key halves, message chunks, tag halves) is read
and written most-significant-byte first.
"""

from __future__ import annotations
from typing import List, Sequence

from .constants import STATE_WORDS, WORD_SIZE


def bytes_to_word(data: bytes) -> int:
    """Load 8 bytes as a big-endian 64-bit word."""
    return int.from_bytes(data, 'big')


def word_to_bytes(word: int) -> bytes:
    """Store a 64-bit word as 8 big-endian bytes."""
    return word.to_bytes(WORD_SIZE, 'big')


def bytes_to_state(data: bytes) -> List[int]:
    """Split 40 bytes into the five state words."""
    return [
        bytes_to_word(data[WORD_SIZE * i:WORD_SIZE * (i + 1)])
        for i in range(STATE_WORDS)
    ]


def state_to_bytes(state: Sequence[int]) -> bytes:
    return b''.join(word_to_bytes(w) for w in state)


def format_state(state: Sequence[int]) -> str:
    """One-line hex dump of the state, used for debug tracing."""
    return ' '.join(f"x{i}={w:016x}" for i, w in enumerate(state))
