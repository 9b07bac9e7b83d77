"""
asconmac: Ascon-Mac in pure Python

128-bit tag over an arbitrary-length message under a 128-bit key, using a
sponge over the 320-bit Ascon permutation (p^12 everywhere).

Usage:
    from asconmac import compute_tag

    tag = compute_tag(bytes(range(16)), b"abc")

    # Bind a key once and reuse it
    from asconmac import AsconMac
    mac = AsconMac(key)
    tag = mac.compute_tag(message)

    # Write into a caller-owned buffer
    from asconmac import compute_tag_into
    out = bytearray(16)
    compute_tag_into(key, message, out)

Tag comparison is left to the caller (use hmac.compare_digest).
"""

import logging

# Parameters
from .constants import KEY_SIZE, TAG_SIZE, RATE, ROUNDS, IV, MacParams

# Errors
from .errors import AsconMacError, InvalidKeyLength, BufferTooSmall

# Types
from .types import Key, Tag, MessageView

# Codec
from .codec import bytes_to_word, word_to_bytes

# Permutation
from .permutation import (
    ROUND_CONSTANTS,
    rotr,
    ascon_round,
    ascon_permutation,
    SpongePermutation,
    AsconPermutation,
)

# Main API
from .mac import AsconMac, MacPhase, compute_tag, compute_tag_into

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Parameters
    "KEY_SIZE",
    "TAG_SIZE",
    "RATE",
    "ROUNDS",
    "IV",
    "MacParams",
    # Errors
    "AsconMacError",
    "InvalidKeyLength",
    "BufferTooSmall",
    # Types
    "Key",
    "Tag",
    "MessageView",
    # Codec
    "bytes_to_word",
    "word_to_bytes",
    # Permutation
    "ROUND_CONSTANTS",
    "rotr",
    "ascon_round",
    "ascon_permutation",
    "SpongePermutation",
    "AsconPermutation",
    # Main API
    "AsconMac",
    "MacPhase",
    "compute_tag",
    "compute_tag_into",
]
