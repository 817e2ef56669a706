from hypercube_maze.config.constants import (
    AXES,
    COMMAND_TOKENS,
    DEFAULT_SIZE_PRIME_SUM,
    DEFAULT_SIZE_TIME_SHIFTING,
    MOVE_TOKENS,
    TRAP_MODULUS,
    TRAP_WEIGHTS,
    TURN_WEIGHT,
    UINT32_RANGE,
)
from hypercube_maze.domain.traps import is_prime


def test_default_sizes_match_variants() -> None:
    assert DEFAULT_SIZE_PRIME_SUM == 5
    assert DEFAULT_SIZE_TIME_SHIFTING == 4


def test_move_tokens_cover_every_axis_and_sign() -> None:
    assert len(MOVE_TOKENS) == 8
    assert {token[0] for token in MOVE_TOKENS} == set(AXES)
    assert {token[1] for token in MOVE_TOKENS} == {"p", "n"}


def test_command_tokens_do_not_collide_with_moves() -> None:
    assert not set(COMMAND_TOKENS) & set(MOVE_TOKENS)


def test_trap_weights_are_primes() -> None:
    assert all(is_prime(w) for w in TRAP_WEIGHTS)
    assert is_prime(TURN_WEIGHT)
    assert is_prime(TRAP_MODULUS)


def test_uint32_range() -> None:
    assert UINT32_RANGE == 4_294_967_296
