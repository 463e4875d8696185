"""klaw-xoshiro: xoshiro ++ engines for the Klaw ecosystem.

Deterministic 64-bit (xoshiro256++) and 32-bit (xoshiro128++) engines with
splitmix seeding, jump-derived parallel streams, and a canonical text form.

Flat imports (preferred):
    from klaw_xoshiro import Engine64, Engine32, spawn, split
    from klaw_xoshiro import serialize, deserialize, Ok, Err

Submodule imports (for organization):
    from klaw_xoshiro.engine import Xoshiro256PlusPlus, Xoshiro128PlusPlus
    from klaw_xoshiro.serialize import read_state
    from klaw_xoshiro.errors import FormatError, MalformedState
"""

from klaw_xoshiro._config import Variant, XoshiroConfig, create_engine, get_config, init
from klaw_xoshiro._logging import configure_logging, get_logger
from klaw_xoshiro._mixing import DEFAULT_SEED, expand_seed
from klaw_xoshiro.engine import (
    Engine32,
    Engine64,
    Xoshiro128PlusPlus,
    Xoshiro256PlusPlus,
    XoshiroEngine,
)
from klaw_xoshiro.errors import DomainError, FormatError, MalformedState, ShortSeedSequence
from klaw_xoshiro.protocols import SeedSequence, UniformRandomBitGenerator
from klaw_xoshiro.result import Err, Ok, Result
from klaw_xoshiro.serialize import deserialize, read_state, serialize
from klaw_xoshiro.streams import iter_jumps, spawn, split

__all__ = [
    'DEFAULT_SEED',
    # Errors
    'DomainError',
    # Engines
    'Engine32',
    'Engine64',
    # Result types
    'Err',
    'FormatError',
    'MalformedState',
    'Ok',
    'Result',
    # Protocols
    'SeedSequence',
    'ShortSeedSequence',
    'UniformRandomBitGenerator',
    # Config
    'Variant',
    'Xoshiro128PlusPlus',
    'Xoshiro256PlusPlus',
    'XoshiroConfig',
    'XoshiroEngine',
    'configure_logging',
    'create_engine',
    # Serialization
    'deserialize',
    'expand_seed',
    'get_config',
    'get_logger',
    'init',
    # Streams
    'iter_jumps',
    'read_state',
    'serialize',
    'spawn',
    'split',
]
