"""Unbiased bounded integers from a cryptographically secure 32-bit source."""

from __future__ import annotations

import secrets
from collections.abc import Callable

from hypercube_maze.config.constants import UINT32_RANGE


def _secure_uint32() -> int:
    return secrets.randbits(32)


class SecureRandom:
    """Uniform integers in ``[0, max)`` via rejection sampling.

    Draws that fall in the tail above the largest multiple of ``max`` are
    discarded so that ``draw % max`` carries no modulo bias. There is no cap
    on retries; at most ``max - 1`` of the ``2**32`` draw values are rejected.
    """

    def __init__(self, uint32_source: Callable[[], int] | None = None) -> None:
        self._draw = uint32_source if uint32_source is not None else _secure_uint32

    def next_int(self, max_value: int) -> int:
        if max_value <= 0:
            raise ValueError("max_value must be > 0")
        if max_value > UINT32_RANGE:
            raise ValueError("max_value must be <= 2**32")
        limit = (UINT32_RANGE // max_value) * max_value
        while True:
            draw = self._draw()
            if draw < limit:
                return draw % max_value
