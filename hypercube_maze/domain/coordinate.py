"""Immutable 4D coordinates and the eight movement directions.

``Coordinate.key()`` is the canonical visited-memory key. It is a plain
``(x, y, z, w)`` tuple, so it is hashable, orderable, and injective over the
whole integer domain.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from hypercube_maze.config.constants import AXES
from hypercube_maze.domain.errors import InvalidDirection

CoordinateKey = tuple[int, int, int, int]


@dataclass(frozen=True)
class Coordinate:
    """A single cell of the hypercube."""

    x: int
    y: int
    z: int
    w: int

    @classmethod
    def center(cls, size: int) -> Coordinate:
        mid = size // 2
        return cls(mid, mid, mid, mid)

    def key(self) -> CoordinateKey:
        return (self.x, self.y, self.z, self.w)

    def is_inside(self, size: int) -> bool:
        """Return True iff every component lies in ``[0, size)``."""
        return all(0 <= component < size for component in self.key())

    def shifted(self, axis: str, delta: int) -> Coordinate:
        """Return a new coordinate moved ``delta`` along ``axis``."""
        if axis not in AXES:
            raise ValueError(f"axis must be one of {', '.join(AXES)}")
        return replace(self, **{axis: getattr(self, axis) + delta})

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z},{self.w}"


class Direction(Enum):
    """Movement tokens: axis letter followed by ``p`` (plus) or ``n`` (minus)."""

    XP = "xp"
    XN = "xn"
    YP = "yp"
    YN = "yn"
    ZP = "zp"
    ZN = "zn"
    WP = "wp"
    WN = "wn"

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def delta(self) -> int:
        return 1 if self.value[1] == "p" else -1

    @classmethod
    def parse(cls, token: str | Direction) -> Direction:
        """Parse a case-sensitive movement token.

        Raises :exc:`InvalidDirection` for anything outside the eight tokens.
        """
        if isinstance(token, Direction):
            return token
        try:
            return cls(token)
        except ValueError as exc:
            raise InvalidDirection(str(token)) from exc
