"""
Ascon-Mac Driver

Sponge sequencing for one MAC computation:

    INIT          S = IV || K || 0^128,  S = p^12(S)
    ABSORB_FULL   for each full 256-bit block M_i:  S[0..3] ^= M_i,  S = p^12(S)
    ABSORB_FINAL  S[0..3] ^= pad(M_last),  S[4] ^= 1,  S = p^12(S)
    SQUEEZE       T = S[0] || S[1]
    DONE

A 128-bit tag exactly fills two output-rate words, so squeezing needs no
further permutation call. There is no keyed finalization; that belongs to
the AEAD mode only.
"""

from __future__ import annotations
import logging
from enum import IntEnum
from typing import List, Union

from .codec import bytes_to_word, format_state, word_to_bytes
from .constants import DOMAIN_SEPARATOR, IV, ROUNDS, TAG_SIZE
from .errors import BufferTooSmall
from .permutation import ascon_permutation
from .types import BytesLike, Key, MessageView, Tag

logger = logging.getLogger(__name__)


class MacPhase(IntEnum):
    """Phases of one MAC computation."""
    INIT = 0
    ABSORB_FULL = 1
    ABSORB_FINAL = 2
    SQUEEZE = 3
    DONE = 4


def _trace(phase: MacPhase, S: List[int]) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s: %s", phase.name, format_state(S))


def _absorb(S: List[int], block) -> None:
    """XOR one 32-byte block into the rate words x0..x3."""
    S[0] ^= bytes_to_word(block[0:8])
    S[1] ^= bytes_to_word(block[8:16])
    S[2] ^= bytes_to_word(block[16:24])
    S[3] ^= bytes_to_word(block[24:32])


def _run(key: Key, message: MessageView) -> bytes:
    """The full state machine. Inputs are already validated."""
    # INIT
    k = key.data
    S = [IV, bytes_to_word(k[0:8]), bytes_to_word(k[8:16]), 0, 0]
    ascon_permutation(S, ROUNDS)
    _trace(MacPhase.INIT, S)

    # ABSORB_FULL
    for block in message.full_blocks():
        _absorb(S, block)
        ascon_permutation(S, ROUNDS)
    _trace(MacPhase.ABSORB_FULL, S)

    # ABSORB_FINAL
    _absorb(S, message.final_block())
    S[4] ^= DOMAIN_SEPARATOR
    ascon_permutation(S, ROUNDS)
    _trace(MacPhase.ABSORB_FINAL, S)

    # SQUEEZE
    tag = word_to_bytes(S[0]) + word_to_bytes(S[1])
    _trace(MacPhase.SQUEEZE, S)
    return tag


def _check_out(out) -> memoryview:
    try:
        view = memoryview(out).cast('B')
    except TypeError:
        raise TypeError(
            f"Output buffer must be a writable bytes-like object, got {type(out).__name__}"
        ) from None
    if view.readonly:
        raise TypeError("Output buffer is read-only")
    if view.nbytes < TAG_SIZE:
        raise BufferTooSmall(view.nbytes)
    return view


class AsconMac:
    """
    Ascon-Mac bound to one key.

    Only the validated key is stored; every call builds and discards its
    own state, so one instance may be shared between threads.

    Usage:
        mac = AsconMac(key)
        tag = mac.compute_tag(b"message")
    """

    TAG_SIZE = TAG_SIZE

    def __init__(self, key: Union[Key, BytesLike]):
        self._key = Key.coerce(key)

    def compute_tag(self, message: BytesLike) -> bytes:
        """Return the 16-byte tag of message."""
        return _run(self._key, MessageView(message))

    def tag(self, message: BytesLike) -> Tag:
        """Same as compute_tag, wrapped in a Tag."""
        return Tag(self.compute_tag(message))

    def compute_tag_into(self, message: BytesLike, out) -> int:
        """
        Write the tag into the first 16 bytes of out.

        Raises BufferTooSmall before any computation if out is shorter
        than 16 bytes. Returns the number of bytes written.
        """
        view = _check_out(out)
        msg = MessageView(message)
        view[:TAG_SIZE] = _run(self._key, msg)
        return TAG_SIZE


def compute_tag(key: Union[Key, BytesLike], message: BytesLike) -> bytes:
    """
    Ascon-Mac of message under a 16-byte key.

    Raises InvalidKeyLength if key is not 16 bytes.
    """
    return _run(Key.coerce(key), MessageView(message))


def compute_tag_into(key: Union[Key, BytesLike], message: BytesLike, out) -> int:
    """Ascon-Mac written into a caller-provided buffer; returns 16."""
    return AsconMac(key).compute_tag_into(message, out)
