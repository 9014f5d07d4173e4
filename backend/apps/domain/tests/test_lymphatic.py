# apps/domain/tests/test_lymphatic.py
"""Tests for the lymphatic system (stimulus generator)"""
import numpy as np
import pytest

from apps.domain.lymphatic import (
    _BATCH_SIZE,
    MAX_ANTIGEN_VALUE,
    LymphaticSystem,
    produce_effort,
    validate_value,
)
from apps.domain.models import Antibody, Antigen, InvalidAntigenError


class TestProduceEffort:
    """Test produce_effort"""

    def test_counts_draws_until_match(self, scripted_random):
        rng = scripted_random([[1, 2, 3, 0]])

        assert produce_effort(3, 4, rng) == 3

    def test_match_on_first_draw(self, scripted_random):
        rng = scripted_random([[2, 2, 2]])

        assert produce_effort(2, 3, rng) == 1

    def test_counts_across_batches(self, scripted_random):
        rng = scripted_random([[0, 0, 0], [1, 1, 1], [0, 2, 1]])

        assert produce_effort(2, 3, rng) == 8
        assert len(rng.calls) == 3

    def test_draws_uniform_range(self, scripted_random):
        rng = scripted_random([[4, 0, 0, 0, 0]])

        produce_effort(4, 5, rng)

        assert rng.calls == [(0, 5, 5)]

    def test_large_bound_draws_fixed_batches(self, scripted_random):
        bound = 10 ** 12
        rng = scripted_random([[0] * _BATCH_SIZE, [7] + [0] * (_BATCH_SIZE - 1)])

        assert produce_effort(7, bound, rng) == _BATCH_SIZE + 1
        assert rng.calls[0] == (0, bound, _BATCH_SIZE)
        assert rng.calls[1][2] == _BATCH_SIZE

    @pytest.mark.parametrize("value", [-1, 10, 11, None])
    def test_out_of_range_value_rejected(self, value):
        with pytest.raises(InvalidAntigenError) as exc_info:
            produce_effort(value, 10, np.random.default_rng(0))

        assert exc_info.value.value == value

    def test_invalid_bound_rejected(self):
        with pytest.raises(ValueError):
            produce_effort(0, 0, np.random.default_rng(0))

    def test_single_value_space_takes_one_draw(self):
        assert produce_effort(0, 1, np.random.default_rng()) == 1

    def test_every_value_is_eventually_found(self):
        rng = np.random.default_rng(42)

        for value in range(20):
            assert produce_effort(value, 20, rng) >= 1

    def test_validate_value(self):
        validate_value(0, 10)
        validate_value(9, 10)

        with pytest.raises(InvalidAntigenError):
            validate_value(10, 10)


class TestLymphaticSystem:
    """Test LymphaticSystem"""

    def test_default_bound(self):
        assert LymphaticSystem().max_value == MAX_ANTIGEN_VALUE == 100

    def test_produce_returns_fresh_antibody(self, lymphatic_system):
        antigen = Antigen(5)

        antibody = lymphatic_system.produce(antigen)

        assert isinstance(antibody, Antibody)
        assert antibody.antigen == antigen
        assert antibody.effort > 0

    def test_produce_uses_injected_random_source(self, scripted_random):
        system = LymphaticSystem(max_value=4, rng=scripted_random([[3, 3, 1, 0]]))

        assert system.produce(Antigen(1)).effort == 3

    def test_same_seed_same_effort(self):
        first = LymphaticSystem(max_value=100, rng=np.random.default_rng(99))
        second = LymphaticSystem(max_value=100, rng=np.random.default_rng(99))

        assert first.produce(Antigen(42)).effort == second.produce(Antigen(42)).effort

    @pytest.mark.parametrize("value", [-1, 100])
    def test_produce_rejects_out_of_range(self, lymphatic_system, value):
        with pytest.raises(InvalidAntigenError) as exc_info:
            lymphatic_system.produce(Antigen(value))

        assert exc_info.value.value == value

    def test_invalid_max_value_rejected(self):
        with pytest.raises(ValueError):
            LymphaticSystem(max_value=0)
