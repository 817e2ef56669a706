"""Trap predicates.

Prime-sum rule: a cell is lethal iff ``x + y + z + w`` is prime. Static.

Time-shifting rule: a cell is lethal iff
``(7x + 11y + 13z + 17w + 19 * turn) mod 97`` is prime, so the same cell can
be safe on one visit and lethal on the next.
"""

from __future__ import annotations

from collections.abc import Callable
from math import isqrt

from hypercube_maze.config.constants import TRAP_MODULUS, TRAP_WEIGHTS, TURN_WEIGHT
from hypercube_maze.config.types import TrapRule
from hypercube_maze.domain.coordinate import Coordinate

TrapPredicate = Callable[[Coordinate, int], bool]


def is_prime(n: int) -> bool:
    """Trial division up to ``isqrt(n)``; values below 2 are not prime."""
    if n < 2:
        return False
    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            return False
    return True


def prime_sum_trap(coord: Coordinate, turn: int = 0) -> bool:
    """Static rule; ``turn`` is accepted for signature parity and ignored."""
    return is_prime(sum(coord.key()))


def time_shifting_value(coord: Coordinate, turn: int) -> int:
    weighted = sum(w * c for w, c in zip(TRAP_WEIGHTS, coord.key(), strict=True))
    return (weighted + TURN_WEIGHT * turn) % TRAP_MODULUS


def time_shifting_trap(coord: Coordinate, turn: int) -> bool:
    return is_prime(time_shifting_value(coord, turn))


TRAP_PREDICATES: dict[TrapRule, TrapPredicate] = {
    TrapRule.PRIME_SUM: prime_sum_trap,
    TrapRule.TIME_SHIFTING: time_shifting_trap,
}


def trap_predicate(rule: TrapRule) -> TrapPredicate:
    return TRAP_PREDICATES[rule]
