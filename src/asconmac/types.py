"""
Boundary Types for Ascon-Mac

Fixed-size key and tag types validated at construction, and an
explicit-length read-only view over the message.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union

from .constants import KEY_SIZE, PAD_BYTE, RATE, TAG_SIZE
from .errors import InvalidKeyLength

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(value: BytesLike, what: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{what} must be bytes-like, got {type(value).__name__}")


@dataclass(frozen=True)
class Key:
    """A 128-bit secret key."""

    data: bytes

    def __post_init__(self):
        data = _as_bytes(self.data, "Key")
        if len(data) != KEY_SIZE:
            raise InvalidKeyLength(len(data))
        object.__setattr__(self, 'data', data)

    @classmethod
    def coerce(cls, key: Union['Key', BytesLike]) -> 'Key':
        """Return key unchanged if already validated, else validate it."""
        if isinstance(key, Key):
            return key
        return cls(key)

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return "Key(<redacted>)"


@dataclass(frozen=True)
class Tag:
    """A 128-bit authentication tag."""

    data: bytes

    def __post_init__(self):
        data = _as_bytes(self.data, "Tag")
        if len(data) != TAG_SIZE:
            raise ValueError(f"Tag must be {TAG_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, 'data', data)

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return self.data.hex()


class MessageView:
    """
    Read-only view over a message of explicit length.

    The message is split into floor(len / RATE) full blocks followed by
    exactly one padded final block, so block_count is always at least 1.
    """

    __slots__ = ('_view',)

    def __init__(self, message: BytesLike):
        if not isinstance(message, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Message must be bytes-like, got {type(message).__name__}"
            )
        view = memoryview(message)
        if not view.c_contiguous:
            # Strided views cannot be cast; take a contiguous copy.
            view = memoryview(view.tobytes())
        self._view = view.cast('B').toreadonly()

    def __len__(self) -> int:
        return self._view.nbytes

    @property
    def full_block_count(self) -> int:
        return len(self) // RATE

    @property
    def block_count(self) -> int:
        return self.full_block_count + 1

    def full_blocks(self) -> Iterator[memoryview]:
        """Yield every complete RATE-byte block in message order."""
        for i in range(self.full_block_count):
            yield self._view[i * RATE:(i + 1) * RATE]

    def final_block(self) -> bytes:
        """
        The trailing len % RATE bytes, then 0x80, then zeros up to RATE.

        When the message length is a multiple of RATE this is a block of
        pure padding.
        """
        tail = self._view[self.full_block_count * RATE:]
        block = bytearray(RATE)
        block[:len(tail)] = tail
        block[len(tail)] = PAD_BYTE
        return bytes(block)
