"""klaw-well: WELL1024a pseudo-random numbers for the Klaw ecosystem.

A deterministic WELL1024a generator plus the usual derived draws, with two
precision tiers: 32-bit draws from a single word and 53-bit draws built
from two words.

Classes:
    Rand: Stateful RNG owning one stream; use one per thread or worker.
    Well1024a: The raw 32-bit word generator.
    PrecisionMode: STANDARD (32-bit) or HIGH (53-bit) draws.

Functions (shared default stream, lock protected):
    rand_int([start,] [stop,] [step]): Integer from range(start, stop, step).
    random(): Float in [0.0, 1.0).
    uniform([start,] stop): Float in [start, stop).
    triangular(low, high, mode): Triangular distribution.
    gauss(mu, sigma): Normal distribution.
    choice(seq): Random element of a non-empty sequence.
    choices(population, k): k elements with replacement.
    shuffle(seq): Shuffled copy.
    shuffle_inplace(seq): Shuffle a mutable sequence in place.
    sample(population, count): count elements without replacement.
    get_rand_bits(n): Integer with n random bits, 1 <= n <= 53.
    seed(value): Re-seed the shared stream.

The ``klaw_well.good`` namespace offers the same functions with HIGH
precision forced.
"""

from klaw_well import good
from klaw_well._bits import PrecisionMode
from klaw_well._config import WellConfig, get_config, init
from klaw_well._generator import Well1024a
from klaw_well._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from klaw_well._ranges import Range
from klaw_well._shared import (
    choice,
    choices,
    gauss,
    get_rand_bits,
    rand_int,
    random,
    sample,
    seed,
    shuffle,
    shuffle_inplace,
    triangular,
    uniform,
)
from klaw_well.errors import (
    EmptyCollection,
    EmptyCollectionError,
    InvalidBitWidth,
    InvalidBitWidthError,
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    PrecisionCeiling,
    PrecisionCeilingError,
)
from klaw_well.rand import Rand

__version__ = '0.1.0'

__all__ = [
    # Errors - struct variants
    'EmptyCollection',
    # Errors - exception variants
    'EmptyCollectionError',
    'InvalidBitWidth',
    'InvalidBitWidthError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'PrecisionCeiling',
    'PrecisionCeilingError',
    # Core
    'PrecisionMode',
    'Rand',
    'Range',
    'Well1024a',
    # Config
    'WellConfig',
    # Logging
    'add_log_hook',
    # Functional API
    'choice',
    'choices',
    'clear_log_hooks',
    'configure_logging',
    'gauss',
    'get_config',
    'get_logger',
    'get_rand_bits',
    'good',
    'init',
    'rand_int',
    'random',
    'remove_log_hook',
    'sample',
    'seed',
    'shuffle',
    'shuffle_inplace',
    'triangular',
    'uniform',
]
