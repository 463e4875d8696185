"""Pytest configuration and shared fixtures for klaw-xoshiro tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog
from klaw_xoshiro import Engine32, Engine64
from klaw_xoshiro import _config as config_module
from klaw_xoshiro import _logging as logging_module

from tests.strategies import CountingSeedSequence

if TYPE_CHECKING:
    from collections.abc import Generator

    from klaw_xoshiro import XoshiroEngine


@pytest.fixture(params=[Engine64, Engine32], ids=['u64', 'u32'])
def engine_kind(request: pytest.FixtureRequest) -> type[XoshiroEngine]:
    """Each engine variant in turn."""
    return request.param


@pytest.fixture
def engine64() -> Engine64:
    """Engine64 seeded with 12345."""
    return Engine64(12345)


@pytest.fixture
def engine32() -> Engine32:
    """Engine32 seeded with 12345."""
    return Engine32(12345)


@pytest.fixture
def counting_seq() -> CountingSeedSequence:
    return CountingSeedSequence()


def _reset_logging() -> None:
    structlog.reset_defaults()
    package_logger = logging.getLogger('klaw_xoshiro')
    if logging_module._handler is not None:
        package_logger.removeHandler(logging_module._handler)
        logging_module._handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def reset_state() -> Generator[None]:
    """Reset global configuration and logging around each test."""
    config_module._config = None
    _reset_logging()
    yield
    config_module._config = None
    _reset_logging()
