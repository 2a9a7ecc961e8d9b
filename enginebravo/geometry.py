"""Basic 2D value types: integer points and float vectors."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass
class Point:
    """A 2D point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        self.x = int(self.x)
        self.y = int(self.y)


@dataclass
class Vector2:
    """A 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)