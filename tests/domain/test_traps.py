"""Tests for hypercube_maze.domain.traps."""

from __future__ import annotations

import pytest

from hypercube_maze.config.types import TrapRule
from hypercube_maze.domain.coordinate import Coordinate
from hypercube_maze.domain.traps import (
    is_prime,
    prime_sum_trap,
    time_shifting_trap,
    time_shifting_value,
    trap_predicate,
)


class TestIsPrime:
    @pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 43, 89, 97])
    def test_primes(self, n: int) -> None:
        assert is_prime(n)

    @pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 49, 91, 96])
    def test_non_primes(self, n: int) -> None:
        assert not is_prime(n)


class TestPrimeSumTrap:
    def test_prime_sum_is_trap(self) -> None:
        assert prime_sum_trap(Coordinate(1, 1, 0, 0))
        assert prime_sum_trap(Coordinate(1, 1, 1, 2))

    def test_composite_or_small_sum_is_safe(self) -> None:
        assert not prime_sum_trap(Coordinate(0, 0, 0, 0))
        assert not prime_sum_trap(Coordinate(1, 0, 0, 0))
        assert not prime_sum_trap(Coordinate(2, 2, 2, 2))

    def test_independent_of_turn(self) -> None:
        coord = Coordinate(1, 2, 0, 0)
        results = {prime_sum_trap(coord, turn) for turn in range(50)}
        assert results == {True}


class TestTimeShiftingTrap:
    def test_value_formula(self) -> None:
        assert time_shifting_value(Coordinate(1, 0, 0, 1), 1) == 43
        assert time_shifting_value(Coordinate(1, 1, 1, 1), 0) == 48

    def test_value_wraps_modulo_97(self) -> None:
        assert time_shifting_value(Coordinate(3, 3, 3, 3), 0) == 47

    def test_trap_depends_on_turn(self) -> None:
        coord = Coordinate(1, 0, 0, 1)
        assert time_shifting_trap(coord, 1)
        assert not time_shifting_trap(coord, 2)

    def test_some_cell_changes_status_over_time(self) -> None:
        coord = Coordinate(2, 1, 0, 3)
        statuses = {time_shifting_trap(coord, turn) for turn in range(97)}
        assert statuses == {True, False}


class TestTrapPredicate:
    def test_lookup(self) -> None:
        assert trap_predicate(TrapRule.PRIME_SUM) is prime_sum_trap
        assert trap_predicate(TrapRule.TIME_SHIFTING) is time_shifting_trap
