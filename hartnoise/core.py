from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Union


class ConfigurationError(ValueError):
    """Raised when a noise or render configuration violates its constraints."""


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    @classmethod
    def zero(cls) -> Position:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, x: float, y: float) -> Position:
        return cls(float(x), float(y))

    def __add__(self, other: Position | float) -> Position:
        ox, oy = _components(other)
        return Position(self.x + ox, self.y + oy)

    def __sub__(self, other: Position | float) -> Position:
        ox, oy = _components(other)
        return Position(self.x - ox, self.y - oy)

    def __mul__(self, other: Position | float) -> Position:
        ox, oy = _components(other)
        return Position(self.x * ox, self.y * oy)

    __rmul__ = __mul__

    def __truediv__(self, other: Position | float) -> Position:
        ox, oy = _components(other)
        return Position(self.x / ox, self.y / oy)

    def __neg__(self) -> Position:
        return Position(-self.x, -self.y)

    def len_sq(self) -> float:
        return self.x * self.x + self.y * self.y


Scalar = Union[int, float]


def _components(v: Position | Scalar) -> tuple[float, float]:
    if isinstance(v, Position):
        return v.x, v.y
    f = float(v)
    return f, f


class NoiseField(Protocol):
    def sample(self, p: Position) -> float:  # pragma: no cover
        ...


def clamp01(v: float) -> float:
    v = float(v)
    # NaN compares false against everything and would pass through min/max.
    if math.isnan(v):
        return 0.0
    return min(max(v, 0.0), 1.0)
