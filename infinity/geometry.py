"""Two-component vectors used for positions, sizes and grid cells."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

_Scalar = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another vector."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        """True when both components are exactly zero."""
        return self.x == 0.0 and self.y == 0.0

    @staticmethod
    def _operand(other: object) -> tuple[float, float] | None:
        if isinstance(other, Vec2):
            return other.x, other.y
        if isinstance(other, (int, float)):
            value = float(other)
            return value, value
        return None

    def __add__(self, other: Vec2 | _Scalar) -> Vec2:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x + pair[0], self.y + pair[1])

    def __sub__(self, other: Vec2 | _Scalar) -> Vec2:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x - pair[0], self.y - pair[1])

    def __mul__(self, other: Vec2 | _Scalar) -> Vec2:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2(self.x * pair[0], self.y * pair[1])

    def __truediv__(self, other: Vec2 | _Scalar) -> Vec2:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        if pair[0] == 0.0 or pair[1] == 0.0:
            raise ZeroDivisionError("vector division by zero")
        return Vec2(self.x / pair[0], self.y / pair[1])


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True)
class Vec2Int:
    """A 2D vector of integers, used for grid cells."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def length_squared(self) -> int:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    @staticmethod
    def _operand(other: object) -> tuple[int, int] | None:
        if isinstance(other, Vec2Int):
            return other.x, other.y
        if isinstance(other, int):
            return other, other
        return None

    def __add__(self, other: Vec2Int | int) -> Vec2Int:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2Int(self.x + pair[0], self.y + pair[1])

    def __sub__(self, other: Vec2Int | int) -> Vec2Int:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2Int(self.x - pair[0], self.y - pair[1])

    def __mul__(self, other: Vec2Int | int) -> Vec2Int:
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        return Vec2Int(self.x * pair[0], self.y * pair[1])

    def __truediv__(self, other: Vec2Int | int) -> Vec2Int:
        """Component-wise integer division, truncating toward zero."""
        pair = self._operand(other)
        if pair is None:
            return NotImplemented
        if pair[0] == 0 or pair[1] == 0:
            raise ZeroDivisionError("vector division by zero")
        return Vec2Int(_trunc_div(self.x, pair[0]), _trunc_div(self.y, pair[1]))