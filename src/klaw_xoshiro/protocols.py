"""Engine protocols: the bit-generator capability set and the seed-sequence source.

Samplers and shuffles should be written against `UniformRandomBitGenerator`
so either engine width can be substituted without changes.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ['SeedSequence', 'UniformRandomBitGenerator']


@runtime_checkable
class UniformRandomBitGenerator(Protocol):
    """Source of uniformly distributed integers in `[min(), max()]`.

    Example:
        ```python
        def unit_float(gen: UniformRandomBitGenerator) -> float:
            span = gen.max() - gen.min() + 1
            return (gen() - gen.min()) / span
        ```
    """

    @classmethod
    @abstractmethod
    def min(cls) -> int:
        """Smallest value the generator can return."""
        ...

    @classmethod
    @abstractmethod
    def max(cls) -> int:
        """Largest value the generator can return."""
        ...

    @abstractmethod
    def __call__(self) -> int:
        """Advance one step and return the next value."""
        ...

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Generators are equal when they will produce the same sequence."""
        ...


@runtime_checkable
class SeedSequence(Protocol):
    """Producer of well-mixed 32-bit words, consumed once per seeding.

    `numpy.random.SeedSequence` satisfies this protocol structurally.
    """

    @abstractmethod
    def generate_state(self, n_words: int) -> Sequence[int]:
        """Return `n_words` integers in `[0, 2**32)`.

        Args:
            n_words: Number of words requested by the engine.
        """
        ...
