"""Canonical text form of engine state.

The text form is the four state words in decimal, in state order, separated by
single spaces:

    >>> serialize(Engine64.from_state((1, 2, 3, 4)))
    '1 2 3 4'

Parsing accepts any whitespace between tokens. Each token must be plain ASCII
digits with a value in `[0, 2**W)`. Failures are returned as
`Err(MalformedState)` rather than raised, and never touch an existing engine.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from klaw_xoshiro._logging import get_logger
from klaw_xoshiro._mixing import STATE_WORDS
from klaw_xoshiro.engine import Engine64, XoshiroEngine
from klaw_xoshiro.errors import MalformedState
from klaw_xoshiro.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ['deserialize', 'read_state', 'serialize']

_DECIMAL = re.compile(r'[0-9]+')


def serialize(engine: XoshiroEngine) -> str:
    """Return the canonical text form of the engine's state."""
    return ' '.join(str(word) for word in engine.state)


def _reject[E: XoshiroEngine](kind: type[E], reason: str, token: str | None = None) -> Err[MalformedState]:
    get_logger(__name__).debug('engine_state_rejected', engine=kind.__name__, reason=reason, token=token)
    return Err(MalformedState(reason, kind.width.bits, token))


def read_state[E: XoshiroEngine](tokens: Iterable[str], kind: type[E] = Engine64) -> Result[E, MalformedState]:
    """Build an engine from the next four tokens of a token stream.

    Consumes exactly four tokens (fewer if the stream ends or a token is
    invalid), so the state can be embedded in a longer whitespace-separated
    record.

    Args:
        tokens: Iterator or iterable of already-split tokens.
        kind: Engine class to build.

    Returns:
        Ok(engine) or Err(MalformedState).
    """
    mask = kind.width.mask
    max_digits = len(str(mask))
    it = iter(tokens)
    words: list[int] = []
    for _ in range(STATE_WORDS):
        token = next(it, None)
        if token is None:
            return _reject(kind, f'expected {STATE_WORDS} words, got {len(words)}')
        if not _DECIMAL.fullmatch(token):
            return _reject(kind, 'not a non-negative decimal integer', token)
        # Length check first: int() refuses very long digit strings.
        digits = token.lstrip('0') or '0'
        word = int(digits) if len(digits) <= max_digits else mask + 1
        if word > mask:
            return _reject(kind, f'word exceeds {kind.width.bits} bits', token)
        words.append(word)
    return Ok(kind._from_words(words[0], words[1], words[2], words[3]))


def deserialize[E: XoshiroEngine](text: str, kind: type[E] = Engine64) -> Result[E, MalformedState]:
    """Parse a complete text form into a new engine.

    Unlike `read_state`, the text must contain exactly four tokens.

    Example:
        ```python
        match deserialize(saved, Engine32):
            case Ok(value=engine):
                ...
            case Err(error=problem):
                log.warning('bad state', reason=problem.reason)
        ```
    """
    tokens = text.split()
    if len(tokens) > STATE_WORDS:
        return _reject(kind, f'expected {STATE_WORDS} words, got {len(tokens)}')
    return read_state(tokens, kind)
