"""Sprite definitions and helpers for laying out sprite-sheet frames."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SpriteDef:
    """Where a sprite lives in a texture and how large it is drawn.

    ``source_rect`` is ``(x, y, w, h)`` in texture pixels.
    """

    texture_path: str = ""
    source_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    width: float = 0.0
    height: float = 0.0


def extrapolate_sprite_def(sprite_def: SpriteDef, num_frames: int) -> list[SpriteDef]:
    """Build ``num_frames`` frames laid out left to right from ``sprite_def``.

    Each frame shifts the source rectangle right by one rectangle width.
    """
    x, y, w, h = sprite_def.source_rect
    return [
        replace(sprite_def, source_rect=(x + i * w, y, w, h))
        for i in range(num_frames)
    ]