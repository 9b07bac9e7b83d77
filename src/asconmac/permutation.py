"""
The Ascon Permutation

320-bit state as five 64-bit words x0..x4. One round is

    p = pL ∘ pS ∘ pC

- pC: round constant XORed into x2
- pS: 5-bit S-box, bit-sliced across the five words (x0 is the MSB)
- pL: per-word linear diffusion with fixed rotation pairs

p^r applies the LAST r rounds of the 12-round constant schedule, so
reduced-round variants always end on the same constants as p^12.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from .codec import bytes_to_state, state_to_bytes
from .constants import MASK64, RATE, ROUNDS, STATE_WORDS, WORD_SIZE


# =============================================================================
# ROUND CONSTANTS AND ROTATIONS
# =============================================================================

ROUND_CONSTANTS = (
    0xf0, 0xe1, 0xd2, 0xc3, 0xb4, 0xa5,
    0x96, 0x87, 0x78, 0x69, 0x5a, 0x4b,
)

# (a, b) for x_i ^= rotr(x_i, a) ^ rotr(x_i, b)
ROTATIONS = (
    (19, 28),
    (61, 39),
    (1, 6),
    (10, 17),
    (7, 41),
)


def rotr(x: int, n: int) -> int:
    """64-bit right rotation."""
    return ((x >> n) | (x << (64 - n))) & MASK64


# =============================================================================
# ROUND FUNCTION
# =============================================================================

def add_constant(S: List[int], c: int) -> None:
    """pC"""
    S[2] ^= c


def substitution_layer(S: List[int]) -> None:
    """
    pS: 64 parallel 5-bit S-boxes, bit i of x0..x4 forming one S-box
    input (x0 is the most significant bit).
    """
    S[0] ^= S[4]
    S[4] ^= S[3]
    S[2] ^= S[1]
    t0 = ~S[0] & S[1]
    t1 = ~S[1] & S[2]
    t2 = ~S[2] & S[3]
    t3 = ~S[3] & S[4]
    t4 = ~S[4] & S[0]
    S[0] ^= t1
    S[1] ^= t2
    S[2] ^= t3
    S[3] ^= t4
    S[4] ^= t0
    S[1] ^= S[0]
    S[0] ^= S[4]
    S[3] ^= S[2]
    S[2] ^= MASK64


def linear_layer(S: List[int]) -> None:
    """pL"""
    for i, (a, b) in enumerate(ROTATIONS):
        S[i] ^= rotr(S[i], a) ^ rotr(S[i], b)


def ascon_round(S: List[int], c: int) -> None:
    """One full round with round constant c."""
    add_constant(S, c)
    substitution_layer(S)
    linear_layer(S)


def ascon_permutation(S: List[int], rounds: int = ROUNDS) -> None:
    """Apply p^rounds to the five-word state in place."""
    if not 1 <= rounds <= ROUNDS:
        raise ValueError(f"Round count must be in [1, {ROUNDS}], got {rounds}")
    for c in ROUND_CONSTANTS[ROUNDS - rounds:]:
        ascon_round(S, c)


# =============================================================================
# SPONGE PERMUTATION INTERFACE
# =============================================================================

class SpongePermutation(ABC):
    """
    Fixed-width permutation seen by a sponge mode.

    For Ascon the 40-byte state is five big-endian words: the rate is the
    leading words a mode XORs its input into (x0..x3 for Ascon-Mac), the
    capacity is what remains (x4), never written directly by the mode
    except for its domain-separation bit.
    """

    @property
    @abstractmethod
    def state_size(self) -> int:
        """Total state size in bytes."""
        pass

    @property
    @abstractmethod
    def rate(self) -> int:
        """Rate (absorb size) in bytes."""
        pass

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Capacity (security parameter) in bytes."""
        pass

    @abstractmethod
    def permute(self, state: bytearray) -> None:
        """Apply the permutation in-place."""
        pass


class AsconPermutation(SpongePermutation):
    """
    Ascon p^r over a 40-byte state buffer.

    State: 320 bits = 40 bytes, words stored big-endian.
    Rate is the 256-bit absorb rate of Ascon-Mac; word 4 is the capacity.
    """

    def __init__(self, rounds: int = ROUNDS):
        if not 1 <= rounds <= ROUNDS:
            raise ValueError(f"Round count must be in [1, {ROUNDS}], got {rounds}")
        self.rounds = rounds

    @property
    def state_size(self) -> int:
        return STATE_WORDS * WORD_SIZE

    @property
    def rate(self) -> int:
        return RATE

    @property
    def capacity(self) -> int:
        return self.state_size - RATE

    def permute(self, state: bytearray) -> None:
        """Apply p^rounds to a 40-byte buffer."""
        if len(state) != self.state_size:
            raise ValueError(f"State must be {self.state_size} bytes, got {len(state)}")
        words = bytes_to_state(state)
        ascon_permutation(words, self.rounds)
        state[:] = state_to_bytes(words)

    def permute_words(self, words: List[int]) -> None:
        ascon_permutation(words, self.rounds)
