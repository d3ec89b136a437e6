"""
Seeded Random
=============
Reproducible pseudo-random stream derived from an arbitrary string.

Seeding:
    The string is folded into a 32-bit accumulator, one code point at a
    time: acc = (acc * 31 + code_point) mod 2**32.

Drawing:
    xorshift32 (13, 17, 5). The right shift is sign-propagating on the
    32-bit two's-complement view of the state, matching the browser build
    the reports were first generated with. The drawn value is
    state / (2**32 - 1).

Determinism:
    Same string → same stream, on every run and platform.
    The empty string seeds 0, which xorshift never leaves: every draw is 0.0.
"""

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def seed_from_string(text: str) -> int:
    """Fold `text` into a 32-bit unsigned seed."""
    acc = 0
    for ch in text:
        acc = (acc * 31 + ord(ch)) & _MASK
    return acc


def _shift_right_signed(value: int, bits: int) -> int:
    if value & _SIGN_BIT:
        value -= 1 << 32
    return (value >> bits) & _MASK


def xorshift32(state: int) -> int:
    """Advance a 32-bit state by one xorshift step."""
    state ^= (state << 13) & _MASK
    state ^= _shift_right_signed(state, 17)
    state ^= (state << 5) & _MASK
    return state


class SeededRandom:
    """
    Pseudo-random source bound to one input string.

    Each instance owns its state; nothing is shared between instances.
    """

    def __init__(self, text: str):
        self.seed = seed_from_string(text)
        self.state = self.seed
        self.draws = 0

    def random(self) -> float:
        """Advance the state and return it scaled to [0, 1]."""
        self.state = xorshift32(self.state)
        self.draws += 1
        return self.state / _MASK

    def pick(self, n: int) -> int:
        """
        Return floor(random() * n), clamped to n - 1.

        The clamp only matters for the single state 0xFFFFFFFF, whose draw
        is exactly 1.0.
        """
        if n < 1:
            raise ValueError(f"pick() needs n >= 1, got {n}")
        return min(int(self.random() * n), n - 1)
