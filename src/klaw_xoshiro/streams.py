"""Jump-derived parallel streams.

One seeded engine is split into non-overlapping streams up front, and each
worker gets its own instance:

    ```python
    from klaw_xoshiro import Engine64, spawn, split

    root = Engine64(2024)
    workers = spawn(root, 8)          # 2**192 steps apart
    tasks = split(workers[0], 100)    # 2**128 steps apart inside worker 0
    ```

The source engine is never mutated.
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING

from klaw_xoshiro._config import get_config
from klaw_xoshiro._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from klaw_xoshiro.engine import XoshiroEngine

__all__ = ['iter_jumps', 'spawn', 'split']


def iter_jumps[E: XoshiroEngine](engine: E, *, long: bool = False) -> Iterator[E]:
    """Yield a copy of `engine`, then successively jumped engines, forever.

    Args:
        engine: Source engine.
        long: Use `long_jump()` instead of `jump()`.
    """
    current = engine.copy()
    while True:
        yield current
        current = current.long_jump() if long else current.jump()


def _take[E: XoshiroEngine](engine: E, count: int, *, long: bool) -> list[E]:
    if count < 1:
        msg = f'stream count must be at least 1, got {count}'
        raise ValueError(msg)
    get_logger(__name__).debug('streams_derived', engine=type(engine).__name__, count=count, long=long)
    return list(islice(iter_jumps(engine, long=long), count))


def split[E: XoshiroEngine](engine: E, count: int) -> list[E]:
    """Return `count` engines, each one `jump()` after the previous.

    The first engine has the same state as the source.

    Raises:
        ValueError: If count is less than 1.
    """
    return _take(engine, count, long=False)


def spawn[E: XoshiroEngine](engine: E, count: int | None = None) -> list[E]:
    """Return `count` engines, each one `long_jump()` after the previous.

    Args:
        engine: Source engine.
        count: Number of streams. Defaults to the configured concurrency.

    Raises:
        ValueError: If count is less than 1.
    """
    if count is None:
        count = get_config().concurrency
    return _take(engine, count, long=True)
