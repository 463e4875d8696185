"""Package configuration: Variant enum, XoshiroConfig, and initialization."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass
from enum import Enum

import psutil

from klaw_xoshiro._logging import configure_logging, get_logger
from klaw_xoshiro.engine import Engine32, Engine64, Seed, XoshiroEngine

__all__ = [
    'Variant',
    'XoshiroConfig',
    'create_engine',
    'get_config',
    'init',
]


class Variant(Enum):
    """Engine word width."""

    U64 = '64'
    U32 = '32'

    @property
    def engine(self) -> type[XoshiroEngine]:
        return Engine64 if self is Variant.U64 else Engine32


@dataclass(frozen=True)
class XoshiroConfig:
    """Configuration for klaw-xoshiro.

    Attributes:
        variant: Engine width used by `create_engine` when none is given.
        concurrency: Default number of worker streams for `streams.spawn`.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    variant: Variant = Variant.U64
    concurrency: int = 4
    log_level: str | None = None


_config: XoshiroConfig | None = None


def _detect_variant() -> Variant:
    """Detect the default variant from the KLAW_XOSHIRO_VARIANT environment variable."""
    env_variant = os.environ.get('KLAW_XOSHIRO_VARIANT', '').strip()
    if not env_variant:
        return Variant.U64
    try:
        return Variant(env_variant)
    except ValueError:
        get_logger(__name__).warning('unknown_variant', value=env_variant, default=Variant.U64.value)
        return Variant.U64


def _detect_concurrency() -> int:
    """Detect how many top-level worker streams to spawn by default.

    Uses physical CPU cores with awareness of container CPU limits (cgroups),
    clamped to [1, 256].
    """
    try:
        physical_cores = psutil.cpu_count(logical=False)
        if physical_cores is None:
            physical_cores = psutil.cpu_count(logical=True) or 4

        container_limit = _detect_container_cpu_limit()
        if container_limit is not None:
            physical_cores = min(physical_cores, container_limit)

        return max(1, min(256, physical_cores))
    except Exception:
        return 4  # Safe default


def _detect_container_cpu_limit() -> int | None:
    """Detect CPU limit in containerized environments."""
    # cgroups v2
    try:
        with pathlib.Path('/sys/fs/cgroup/cpu.max').open() as f:
            content = f.read().strip()
            if content != 'max':
                quota, period = content.split()
                if quota != 'max':
                    return max(1, int(int(quota) / int(period)))
    except (FileNotFoundError, ValueError, PermissionError):
        pass

    # cgroups v1
    try:
        with pathlib.Path('/sys/fs/cgroup/cpu/cpu.cfs_quota_us').open() as quota_f:
            quota_v1 = int(quota_f.read().strip())
        with pathlib.Path('/sys/fs/cgroup/cpu/cpu.cfs_period_us').open() as period_f:
            period_v1 = int(period_f.read().strip())
        if quota_v1 > 0:
            return max(1, quota_v1 // period_v1)
    except (FileNotFoundError, ValueError, PermissionError):
        pass

    return None


def init(
    variant: Variant | str | None = None,
    concurrency: int | None = None,
    log_level: str | None = None,
) -> XoshiroConfig:
    """Initialize klaw-xoshiro with the specified configuration.

    Args:
        variant: Default engine width. Read from KLAW_XOSHIRO_VARIANT if None.
            Can be a Variant or a string ("64", "32").
        concurrency: Default stream count for `spawn`. Auto-detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The XoshiroConfig that was set.

    Example:
        ```python
        from klaw_xoshiro import init, create_engine

        init(variant='32', concurrency=8, log_level='INFO')
        rng = create_engine(42)  # Xoshiro128PlusPlus
        ```
    """
    global _config  # noqa: PLW0603

    if variant is None:
        resolved_variant = _detect_variant()
    elif isinstance(variant, str):
        resolved_variant = Variant(variant)
    else:
        resolved_variant = variant

    if concurrency is None:
        resolved_concurrency = _detect_concurrency()
    else:
        resolved_concurrency = max(1, min(256, concurrency))

    _config = XoshiroConfig(
        variant=resolved_variant,
        concurrency=resolved_concurrency,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> XoshiroConfig:
    """Get the current configuration, initializing defaults on first use."""
    if _config is None:
        return init()
    return _config


def create_engine(seed: Seed = None, variant: Variant | str | None = None) -> XoshiroEngine:
    """Build an engine of the given or configured variant.

    Args:
        seed: Passed to the engine constructor.
        variant: Overrides the configured variant.
    """
    if variant is None:
        resolved = get_config().variant
    elif isinstance(variant, str):
        resolved = Variant(variant)
    else:
        resolved = variant
    return resolved.engine(seed)
