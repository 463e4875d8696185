"""Tests for seeding from a SeedSequence."""

from __future__ import annotations

import pytest
from klaw_xoshiro import DomainError, Engine32, Engine64, SeedSequence, ShortSeedSequence, XoshiroEngine

from tests.strategies import ConstantSeedSequence, CountingSeedSequence


class TestPacking:
    """Words are packed little-endian and the two halves XOR-folded."""

    def test_engine64_requests_sixteen_words(self, counting_seq: CountingSeedSequence) -> None:
        Engine64(counting_seq)
        assert counting_seq.requests == [16]

    def test_engine32_requests_eight_words(self, counting_seq: CountingSeedSequence) -> None:
        Engine32(counting_seq)
        assert counting_seq.requests == [8]

    def test_engine64_packing(self, counting_seq: CountingSeedSequence) -> None:
        # words 1..8 and 9..16; pairwise XOR gives 8 everywhere except 8 ^ 16
        low_high = 8 | (8 << 32)
        assert Engine64(counting_seq).state == (low_high, low_high, low_high, 8 | (24 << 32))

    def test_engine32_packing(self, counting_seq: CountingSeedSequence) -> None:
        assert Engine32(counting_seq).state == (4, 4, 4, 12)

    def test_words_masked_to_32_bits(self) -> None:
        class Wide:
            def generate_state(self, n_words: int) -> list[int]:
                return [(1 << 32) | i for i in range(n_words)]

        assert Engine32(Wide()) == Engine32.from_state((4, 4, 4, 4))

    def test_seed_in_place(self, engine32: Engine32, counting_seq: CountingSeedSequence) -> None:
        engine32.seed(counting_seq)
        assert engine32.state == (4, 4, 4, 12)

    def test_protocol_check(self, counting_seq: CountingSeedSequence) -> None:
        assert isinstance(counting_seq, SeedSequence)
        assert not isinstance(12345, SeedSequence)


class TestShortSupply:
    """Seed sequences that cannot fill the state fail explicitly."""

    def test_too_few_words(self, engine_kind: type[XoshiroEngine]) -> None:
        with pytest.raises(DomainError, match='supplied 5 of') as exc_info:
            engine_kind(CountingSeedSequence(limit=5))
        assert exc_info.value.received == 5
        assert exc_info.value.to_struct() == ShortSeedSequence(exc_info.value.requested, 5)

    def test_failure_keeps_previous_state(self, engine_kind: type[XoshiroEngine]) -> None:
        rng = engine_kind(42)
        before = rng.state
        with pytest.raises(DomainError):
            rng.seed(CountingSeedSequence(limit=0))
        assert rng.state == before

    def test_all_zero_packing_rejected(self, engine_kind: type[XoshiroEngine]) -> None:
        with pytest.raises(DomainError, match='all-zero'):
            engine_kind(ConstantSeedSequence(0xDEADBEEF))

    def test_failure_is_logged(self) -> None:
        from structlog.testing import capture_logs

        with capture_logs() as logs, pytest.raises(DomainError):
            Engine64(CountingSeedSequence(limit=3))
        assert logs[0]['event'] == 'seed_sequence_rejected'
        assert logs[0]['log_level'] == 'warning'
        assert logs[0]['requested'] == 16
        assert logs[0]['received'] == 3
