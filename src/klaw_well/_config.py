"""Configuration: WellConfig and initialization of the shared generator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_well._bits import PrecisionMode
from klaw_well._logging import configure_logging
from klaw_well._shared import reset_default

__all__ = [
    'WellConfig',
    'get_config',
    'init',
]

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class WellConfig:
    """Configuration for the shared generator.

    Attributes:
        precision: Default draw width of the module-level functions.
        strict: Use rejection sampling for integer draws.
        seed: Integer seed, or None for OS entropy.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    precision: PrecisionMode = PrecisionMode.STANDARD
    strict: bool = False
    seed: int | None = None
    log_level: str | None = None


_config: WellConfig | None = None


def _detect_precision() -> PrecisionMode:
    """Read KLAW_WELL_PRECISION ("standard" or "high"), defaulting to STANDARD."""
    env_precision = os.environ.get('KLAW_WELL_PRECISION', '').lower()
    if not env_precision:
        return PrecisionMode.STANDARD
    try:
        return PrecisionMode(env_precision)
    except ValueError:
        logger.warning("Unknown KLAW_WELL_PRECISION value '%s', defaulting to standard", env_precision)
        return PrecisionMode.STANDARD


def _detect_strict() -> bool:
    env_strict = os.environ.get('KLAW_WELL_STRICT', '').lower()
    if env_strict in _TRUTHY:
        return True
    if env_strict not in _FALSY:
        logger.warning("Unknown KLAW_WELL_STRICT value '%s', defaulting to off", env_strict)
    return False


def _detect_seed() -> int | None:
    env_seed = os.environ.get('KLAW_WELL_SEED', '').strip()
    if not env_seed:
        return None
    try:
        return int(env_seed, 0)
    except ValueError:
        logger.warning("Invalid KLAW_WELL_SEED value '%s', seeding from OS entropy", env_seed)
        return None


def init(
    precision: PrecisionMode | str | None = None,
    strict: bool | None = None,
    seed: int | None = None,
    log_level: str | None = None,
) -> WellConfig:
    """Initialize the shared generator with the given configuration.

    Unset arguments fall back to the KLAW_WELL_PRECISION, KLAW_WELL_STRICT
    and KLAW_WELL_SEED environment variables. The shared stream is re-seeded
    on every call.

    Args:
        precision: Default precision. Can be PrecisionMode or string
            ("standard", "high").
        strict: Rejection sampling for integer draws.
        seed: Integer seed. None reads KLAW_WELL_SEED, then OS entropy.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The WellConfig that was set.

    Example:
        ```python
        import klaw_well

        klaw_well.init(seed=1234, precision='high')
        klaw_well.rand_int(1, 7)
        ```
    """
    global _config  # noqa: PLW0603

    if precision is None:
        resolved_precision = _detect_precision()
    elif isinstance(precision, str):
        resolved_precision = PrecisionMode(precision.lower())
    else:
        resolved_precision = precision

    _config = WellConfig(
        precision=resolved_precision,
        strict=_detect_strict() if strict is None else strict,
        seed=_detect_seed() if seed is None else seed,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    reset_default(_config.seed, precision=_config.precision, strict=_config.strict)
    logger.info(
        'klaw_well initialized',
        extra={'precision': _config.precision.value, 'strict': _config.strict, 'seeded': _config.seed is not None},
    )
    return _config


def get_config() -> WellConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw_well not initialized. Call klaw_well.init() first.'
        raise RuntimeError(msg)
    return _config
