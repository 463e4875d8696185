"""xoshiro256++ and xoshiro128++ engines.

Both variants share `XoshiroEngine`; a subclass selects its width with a class
keyword, which binds the shift, rotation and jump constants as class attributes
so the step function never branches on width:

    class Xoshiro256PlusPlus(XoshiroEngine, width=W64): ...

Example:
    ```python
    from klaw_xoshiro import Engine64

    rng = Engine64(12345)
    first = rng()
    worker_rng = rng.long_jump()  # independent stream, rng is unchanged
    ```

The step function, for state (s0, s1, s2, s3) and width W:

    out = rotl(s0 + s3, o) + s0
    t = s1 << a
    s2 ^= s0; s3 ^= s1; s1 ^= s2; s0 ^= s3; s2 ^= t
    s3 = rotl(s3, b)

with every addition and shift taken modulo 2**W.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, ClassVar, Self

from klaw_xoshiro._logging import get_logger
from klaw_xoshiro._mixing import (
    DEFAULT_SEED,
    STATE_WORDS,
    W32,
    W64,
    WordWidth,
    expand_seed,
    seed_sequence_words,
)
from klaw_xoshiro.errors import ShortSeedSequence
from klaw_xoshiro.protocols import SeedSequence
from klaw_xoshiro.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

    from klaw_xoshiro.errors import MalformedState

__all__ = [
    'Engine32',
    'Engine64',
    'Xoshiro128PlusPlus',
    'Xoshiro256PlusPlus',
    'XoshiroEngine',
]

type Seed = int | SeedSequence | None


def _as_index(value: object, what: str) -> int:
    """Return `value` as an int. Any integer type is accepted except bool."""
    if not isinstance(value, bool) and hasattr(type(value), '__index__'):
        return operator.index(value)  # type: ignore[arg-type]
    msg = f'{what} must be an int, not {type(value).__name__}'
    raise TypeError(msg)


def _pack_seed_sequence(seq: SeedSequence, width: WordWidth) -> Result[tuple[int, int, int, int], ShortSeedSequence]:
    """Pack seed-sequence output into state words without further mixing.

    The requested buffer is split in two halves. Each half is read as four
    little-endian state words (least significant 32-bit word first) and the
    two halves are XOR-folded together.
    """
    requested = seed_sequence_words(width)
    words = [int(w) & 0xFFFFFFFF for w in seq.generate_state(requested)]
    if len(words) < requested:
        return Err(ShortSeedSequence(requested, len(words)))

    per_word = width.bits // 32
    half = requested // 2
    state = [0] * STATE_WORDS
    for offset in (0, half):
        for i in range(STATE_WORDS):
            base = offset + i * per_word
            packed = 0
            for j in range(per_word):
                packed |= words[base + j] << (32 * j)
            state[i] ^= packed

    if not any(state):
        return Err(ShortSeedSequence(requested, len(words), 'words pack to the all-zero state'))
    return Ok((state[0], state[1], state[2], state[3]))


class XoshiroEngine:
    """Shared implementation of the xoshiro ++ engines.

    Not usable directly; instantiate `Xoshiro256PlusPlus` or
    `Xoshiro128PlusPlus`. An instance owns its four state words exclusively
    and is not safe to share between threads. Derive per-worker engines with
    `jump()` / `long_jump()` instead.
    """

    __slots__ = ('_s0', '_s1', '_s2', '_s3')

    width: ClassVar[WordWidth]
    result_bits: ClassVar[int]

    _bits: ClassVar[int]
    _mask: ClassVar[int]
    _shift: ClassVar[int]
    _rotate: ClassVar[int]
    _output_rotate: ClassVar[int]

    def __init_subclass__(cls, *, width: WordWidth | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if width is None:
            return
        cls.width = width
        cls.result_bits = width.bits
        cls._bits = width.bits
        cls._mask = width.mask
        cls._shift = width.shift
        cls._rotate = width.rotate
        cls._output_rotate = width.output_rotate

    def __init__(self, seed: Seed = None) -> None:
        self.seed(seed)

    # --- Seeding ---

    def seed(self, seed: Seed = None) -> None:
        """Re-initialize the state in place.

        Args:
            seed: None for `DEFAULT_SEED`, an int (reduced modulo 2**W and
                expanded with splitmix), or a `SeedSequence` whose words are
                packed into the state directly.

        Raises:
            TypeError: If seed is not an int, a SeedSequence or None.
            DomainError: If a seed sequence supplies too few words. The
                previous state is kept.
        """
        if seed is None:
            seed = DEFAULT_SEED
        if isinstance(seed, SeedSequence):
            match _pack_seed_sequence(seed, self.width):
                case Ok(value=words):
                    pass
                case Err(error=error):
                    get_logger(__name__).warning(
                        'seed_sequence_rejected',
                        engine=type(self).__name__,
                        requested=error.requested,
                        received=error.received,
                        reason=error.reason,
                    )
                    raise error.to_exception()
        else:
            words = expand_seed(_as_index(seed, 'seed'), self.width)
        self._s0, self._s1, self._s2, self._s3 = words

    @classmethod
    def from_state(cls, words: Iterable[int]) -> Self:
        """Build an engine with explicit state words.

        This is the only way to reach the all-zero state, which makes the
        engine emit zeros forever.

        Raises:
            ValueError: If `words` is not four ints in `[0, 2**W)`.
        """
        raw = tuple(words)
        if len(raw) != STATE_WORDS:
            msg = f'{cls.__name__} state needs {STATE_WORDS} words, got {len(raw)}'
            raise ValueError(msg)
        values: list[int] = []
        for value in raw:
            try:
                word = _as_index(value, 'state word')
            except TypeError as e:
                msg = f'{cls.__name__} state word is not an int: {value!r}'
                raise ValueError(msg) from e
            if not 0 <= word <= cls._mask:
                msg = f'{cls.__name__} state word out of range: {value!r}'
                raise ValueError(msg)
            values.append(word)
        if not any(values):
            get_logger(__name__).warning('all_zero_state_forced', engine=cls.__name__)
        return cls._from_words(*values)

    @classmethod
    def _from_words(cls, s0: int, s1: int, s2: int, s3: int) -> Self:
        engine = cls.__new__(cls)
        engine._s0, engine._s1, engine._s2, engine._s3 = s0, s1, s2, s3
        return engine

    @property
    def state(self) -> tuple[int, int, int, int]:
        """The four state words, in order."""
        return self._s0, self._s1, self._s2, self._s3

    # --- Generation ---

    def next(self) -> int:
        """Advance one step and return the scrambled output of the old state."""
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        bits = self._bits
        mask = self._mask

        x = (s0 + s3) & mask
        k = self._output_rotate
        result = ((((x << k) | (x >> (bits - k))) & mask) + s0) & mask

        t = (s1 << self._shift) & mask
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        r = self._rotate
        s3 = ((s3 << r) | (s3 >> (bits - r))) & mask

        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result

    __call__ = next

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        return self.next()

    @classmethod
    def min(cls) -> int:
        return 0

    @classmethod
    def max(cls) -> int:
        return cls._mask

    def discard(self, n: int) -> None:
        """Advance the state by `n` steps without producing outputs.

        Raises:
            TypeError: If n is not an int.
            ValueError: If n is negative.
        """
        n = _as_index(n, 'discard count')
        if n < 0:
            msg = f'discard count must be non-negative, got {n}'
            raise ValueError(msg)
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        bits = self._bits
        mask = self._mask
        a = self._shift
        r = self._rotate
        for _ in range(n):
            t = (s1 << a) & mask
            s2 ^= s0
            s3 ^= s1
            s1 ^= s2
            s0 ^= s3
            s2 ^= t
            s3 = ((s3 << r) | (s3 >> (bits - r))) & mask
        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3

    # --- Jumps ---

    def jump(self) -> Self:
        """Return a new engine advanced by 2**128 (64-bit) or 2**64 (32-bit) steps.

        This engine is unchanged. Use it to split one stream into
        non-overlapping sub-streams.
        """
        return self._polynomial_jump(self.width.jump)

    def long_jump(self) -> Self:
        """Return a new engine advanced by 2**192 (64-bit) or 2**96 (32-bit) steps.

        This engine is unchanged. Use it to derive one stream per top-level
        worker, then `jump()` to subdivide inside a worker.
        """
        return self._polynomial_jump(self.width.long_jump)

    def _polynomial_jump(self, coefficients: tuple[int, int, int, int]) -> Self:
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        bits = self._bits
        mask = self._mask
        a = self._shift
        r = self._rotate
        j0 = j1 = j2 = j3 = 0
        for word in coefficients:
            for b in range(bits):
                if (word >> b) & 1:
                    j0 ^= s0
                    j1 ^= s1
                    j2 ^= s2
                    j3 ^= s3
                t = (s1 << a) & mask
                s2 ^= s0
                s3 ^= s1
                s1 ^= s2
                s0 ^= s3
                s2 ^= t
                s3 = ((s3 << r) | (s3 >> (bits - r))) & mask
        return self._from_words(j0, j1, j2, j3)

    # --- Comparison and copying ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state == other.state

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Self:
        """Return an independent engine with the same state."""
        return self._from_words(self._s0, self._s1, self._s2, self._s3)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self)._from_words, self.state

    # --- Text form ---

    def to_text(self) -> str:
        """Canonical text form: the four state words in decimal, space separated."""
        from klaw_xoshiro.serialize import serialize

        return serialize(self)

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Parse the canonical text form.

        Raises:
            FormatError: If text is not four in-range decimal words.
        """
        from klaw_xoshiro.serialize import deserialize

        return deserialize(text, cls).unwrap()

    def restore(self, text: str) -> Result[None, MalformedState]:
        """Replace this engine's state from its text form.

        The state is only touched when the whole text parses.
        """
        from klaw_xoshiro.serialize import deserialize

        match deserialize(text, type(self)):
            case Ok(value=engine):
                self._s0, self._s1, self._s2, self._s3 = engine.state
                return Ok(None)
            case Err() as err:
                return err

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f'{type(self).__name__}(state={self.state!r})'


class Xoshiro256PlusPlus(XoshiroEngine, width=W64):
    """xoshiro256++: 256-bit state, 64-bit outputs, period 2**256 - 1."""

    __slots__ = ()


class Xoshiro128PlusPlus(XoshiroEngine, width=W32):
    """xoshiro128++: 128-bit state, 32-bit outputs, period 2**128 - 1."""

    __slots__ = ()


Engine64 = Xoshiro256PlusPlus
Engine32 = Xoshiro128PlusPlus
