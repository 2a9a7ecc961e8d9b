"""Identifiers, flags and property records for physics bodies and collision filtering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT16_MAX = 0xFFFF


class FilterCategory(IntFlag):
    """Collision categories used by game objects."""

    PLAYER = 0x00000002
    MONSTER = 0x00000004
    WALLACTIVE = 0x00000008
    WALLINACTIVE = 0x00000010
    BULLET = 0x00000020


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class BodyID:
    """Handle of a body in a physics world; ``body_id == -1`` means not created."""

    body_id: int = -1
    revision: int = 0
    world0: int = 0

    def __post_init__(self) -> None:
        _check_range("body_id", self.body_id, _INT32_MIN, _INT32_MAX)
        _check_range("revision", self.revision, 0, _UINT16_MAX)
        _check_range("world0", self.world0, 0, _UINT16_MAX)


@dataclass(frozen=True)
class WorldID:
    """Handle of a physics world."""

    world_id: int = 0
    revision: int = 0

    def __post_init__(self) -> None:
        _check_range("world_id", self.world_id, 0, _UINT16_MAX)
        _check_range("revision", self.revision, 0, _UINT16_MAX)


@dataclass
class BodyFlags:
    """Behaviour switches of a body."""

    has_gravity: bool = False
    is_moveable_by_force: bool = False
    can_rotate: bool = False


@dataclass
class BodyProperties:
    """Material and mass properties of a body."""

    density: float = 0.0
    friction: float = 0.0
    restitution: float = 0.0
    mass: float = 0.0
    gravity_scale: float = 0.0


def category_bits(category: int) -> int:
    """Return the filter bit for a category index."""
    if category < 0:
        raise ValueError(f"category must not be negative, got {category}")
    return 1 << category


def mask_bits(categories: Iterable[int]) -> int:
    """Combine category indices into a 16-bit collision mask."""
    mask = 0
    for category in categories:
        mask |= category_bits(category)
    return mask & _UINT16_MAX