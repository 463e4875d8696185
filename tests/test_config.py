"""Tests for configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from klaw_xoshiro import Engine32, Engine64, Variant, XoshiroConfig, create_engine, get_config, init
from klaw_xoshiro._config import _detect_concurrency, _detect_variant
from structlog.testing import capture_logs

pytestmark = pytest.mark.usefixtures('reset_state')


class TestVariantEnum:
    """Tests for the Variant enum."""

    def test_variant_values(self) -> None:
        assert Variant.U64.value == '64'
        assert Variant.U32.value == '32'

    def test_variant_from_string(self) -> None:
        assert Variant('64') == Variant.U64
        assert Variant('32') == Variant.U32

    def test_variant_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            Variant('16')

    def test_variant_engine(self) -> None:
        assert Variant.U64.engine is Engine64
        assert Variant.U32.engine is Engine32


class TestXoshiroConfig:
    """Tests for the XoshiroConfig dataclass."""

    def test_default_values(self) -> None:
        config = XoshiroConfig()
        assert config.variant == Variant.U64
        assert config.concurrency == 4
        assert config.log_level is None

    def test_config_is_frozen(self) -> None:
        config = XoshiroConfig()
        with pytest.raises(AttributeError):
            config.concurrency = 8  # type: ignore[misc]


class TestDetectVariant:
    """Tests for environment-based variant detection."""

    def test_default_without_env(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_variant() == Variant.U64

    def test_env_32(self) -> None:
        with patch.dict(os.environ, {'KLAW_XOSHIRO_VARIANT': '32'}):
            assert _detect_variant() == Variant.U32

    def test_unknown_env_value_warns(self) -> None:
        with patch.dict(os.environ, {'KLAW_XOSHIRO_VARIANT': 'huge'}), capture_logs() as logs:
            assert _detect_variant() == Variant.U64
        assert logs == [{'event': 'unknown_variant', 'value': 'huge', 'default': '64', 'log_level': 'warning'}]


class TestDetectConcurrency:
    """Tests for CPU-based concurrency detection."""

    def test_uses_physical_cores(self) -> None:
        with (
            patch('klaw_xoshiro._config.psutil.cpu_count', return_value=6),
            patch('klaw_xoshiro._config._detect_container_cpu_limit', return_value=None),
        ):
            assert _detect_concurrency() == 6

    def test_container_limit_caps_cores(self) -> None:
        with (
            patch('klaw_xoshiro._config.psutil.cpu_count', return_value=32),
            patch('klaw_xoshiro._config._detect_container_cpu_limit', return_value=2),
        ):
            assert _detect_concurrency() == 2

    def test_falls_back_to_logical(self) -> None:
        with (
            patch('klaw_xoshiro._config.psutil.cpu_count', side_effect=[None, 3]),
            patch('klaw_xoshiro._config._detect_container_cpu_limit', return_value=None),
        ):
            assert _detect_concurrency() == 3

    def test_psutil_failure_defaults(self) -> None:
        with patch('klaw_xoshiro._config.psutil.cpu_count', side_effect=RuntimeError('boom')):
            assert _detect_concurrency() == 4

    def test_clamped(self) -> None:
        with (
            patch('klaw_xoshiro._config.psutil.cpu_count', return_value=1024),
            patch('klaw_xoshiro._config._detect_container_cpu_limit', return_value=None),
        ):
            assert _detect_concurrency() == 256


class TestInit:
    """Tests for init() and get_config()."""

    def test_explicit_values(self) -> None:
        config = init(variant=Variant.U32, concurrency=8)
        assert config == XoshiroConfig(variant=Variant.U32, concurrency=8, log_level=None)
        assert get_config() is config

    def test_variant_from_string(self) -> None:
        assert init(variant='32').variant == Variant.U32

    def test_concurrency_clamped(self) -> None:
        assert init(concurrency=0).concurrency == 1
        assert init(concurrency=10_000).concurrency == 256

    def test_env_variant_used_when_not_given(self) -> None:
        with patch.dict(os.environ, {'KLAW_XOSHIRO_VARIANT': '32'}):
            assert init(concurrency=2).variant == Variant.U32

    def test_get_config_initializes_lazily(self) -> None:
        with patch('klaw_xoshiro._config._detect_concurrency', return_value=5):
            config = get_config()
        assert config.concurrency == 5
        assert get_config() is config

    def test_log_level_configures_logging(self) -> None:
        with patch('klaw_xoshiro._config.configure_logging') as configure:
            init(concurrency=1, log_level='DEBUG')
        configure.assert_called_once_with('DEBUG')


class TestCreateEngine:
    """Tests for create_engine()."""

    def test_uses_configured_variant(self) -> None:
        init(variant='32', concurrency=1)
        rng = create_engine(12345)
        assert isinstance(rng, Engine32)
        assert rng == Engine32(12345)

    def test_variant_override(self) -> None:
        init(variant='32', concurrency=1)
        assert isinstance(create_engine(1, variant='64'), Engine64)
        assert isinstance(create_engine(1, variant=Variant.U64), Engine64)

    def test_default_seed(self) -> None:
        init(variant=Variant.U64, concurrency=1)
        assert create_engine() == Engine64()
