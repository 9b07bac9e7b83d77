"""
Error taxonomy for Ascon-Mac.

Both errors are precondition violations and are raised before any state
is created.
"""

from .constants import KEY_SIZE, TAG_SIZE


class AsconMacError(ValueError):
    """Base class for rejected Ascon-Mac inputs."""


class InvalidKeyLength(AsconMacError):
    """The key is not exactly KEY_SIZE bytes."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be {KEY_SIZE} bytes, got {length}")


class BufferTooSmall(AsconMacError):
    """The output buffer cannot hold a full tag."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Output buffer must hold {TAG_SIZE} bytes, got {size}")
