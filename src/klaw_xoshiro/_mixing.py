"""Per-width constant tables and the splitmix seed expander.

Both engine variants share one algorithm shape; everything that differs
between the 64-bit and 32-bit engines lives in a `WordWidth` table so the
engine code never branches on width.

The seed expander is the splitmix step: a Weyl-sequence accumulator advanced by
a golden-ratio increment, followed by two xorshift-multiply rounds and a final
xorshift. Constants:

    64-bit: gamma 0x9e3779b97f4a7c15, shifts (30, 27, 31),
            multipliers (0xbf58476d1ce4e5b9, 0x94d049bb133111eb)
    32-bit: gamma 0x9e3779b9, shifts (16, 13, 16),
            multipliers (0x85ebca6b, 0xc2b2ae35)

Each output is a bijection of its accumulator value, and the four accumulators
used for one seed are distinct, so at most one state word can be zero.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'DEFAULT_SEED',
    'STATE_WORDS',
    'W32',
    'W64',
    'WordWidth',
    'expand_seed',
    'rotl',
    'seed_sequence_words',
    'splitmix',
]

STATE_WORDS = 4
DEFAULT_SEED = 1234567890


@dataclass(frozen=True, slots=True)
class WordWidth:
    """Fixed constants for one word width.

    Attributes:
        bits: Word width W.
        mask: 2**W - 1.
        shift: Left shift applied to s1 in the linear update.
        rotate: Rotation applied to s3 at the end of the linear update.
        output_rotate: Rotation in the ++ scrambler.
        jump: Polynomial coefficients for the short jump.
        long_jump: Polynomial coefficients for the long jump.
        jump_exponent: Log2 of the step count covered by `jump`.
        long_jump_exponent: Log2 of the step count covered by `long_jump`.
        golden_gamma: Odd Weyl increment for the seed expander.
        mix_shifts: Xorshift amounts of the three mixing rounds.
        mix_multipliers: Odd multipliers of the first two mixing rounds.
    """

    bits: int
    shift: int
    rotate: int
    output_rotate: int
    jump: tuple[int, int, int, int]
    long_jump: tuple[int, int, int, int]
    jump_exponent: int
    long_jump_exponent: int
    golden_gamma: int
    mix_shifts: tuple[int, int, int]
    mix_multipliers: tuple[int, int]

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1


W64 = WordWidth(
    bits=64,
    shift=17,
    rotate=45,
    output_rotate=23,
    jump=(0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C),
    long_jump=(0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635),
    jump_exponent=128,
    long_jump_exponent=192,
    golden_gamma=0x9E3779B97F4A7C15,
    mix_shifts=(30, 27, 31),
    mix_multipliers=(0xBF58476D1CE4E5B9, 0x94D049BB133111EB),
)

W32 = WordWidth(
    bits=32,
    shift=9,
    rotate=11,
    output_rotate=7,
    jump=(0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B),
    long_jump=(0xB523952E, 0x0B6F099F, 0xCCF5A0EF, 0x1C580662),
    jump_exponent=64,
    long_jump_exponent=96,
    golden_gamma=0x9E3779B9,
    mix_shifts=(16, 13, 16),
    mix_multipliers=(0x85EBCA6B, 0xC2B2AE35),
)


def rotl(x: int, k: int, width: WordWidth) -> int:
    """Rotate the W-bit word `x` left by `k` bits."""
    return ((x << k) | (x >> (width.bits - k))) & width.mask


def splitmix(accumulator: int, width: WordWidth) -> tuple[int, int]:
    """Advance the accumulator one step and mix it.

    Returns:
        The new accumulator and the mixed output word.
    """
    mask = width.mask
    a, b, c = width.mix_shifts
    m1, m2 = width.mix_multipliers

    accumulator = (accumulator + width.golden_gamma) & mask
    z = accumulator
    z = ((z ^ (z >> a)) * m1) & mask
    z = ((z ^ (z >> b)) * m2) & mask
    return accumulator, z ^ (z >> c)


def expand_seed(seed: int, width: WordWidth) -> tuple[int, int, int, int]:
    """Expand a scalar seed into four state words.

    The seed is reduced modulo 2**W first, so negative and oversized integers
    are accepted.
    """
    accumulator = seed & width.mask
    words = []
    for _ in range(STATE_WORDS):
        accumulator, word = splitmix(accumulator, width)
        words.append(word)
    return words[0], words[1], words[2], words[3]


def seed_sequence_words(width: WordWidth) -> int:
    """Number of 32-bit words requested from a seed sequence."""
    return 2 * -(-(STATE_WORDS * width.bits) // 32)
