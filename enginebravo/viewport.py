"""Mapping between camera viewports, the window and world coordinates.

A camera viewport is given as fractions ``(x, y, w, h)`` of the window. The
game keeps a fixed aspect ratio, so the shown area is letterboxed (bars above
and below) or pillarboxed (bars left and right) when the window's shape does
not match it.
"""

from __future__ import annotations

from .geometry import Point, Vector2


def _check_aspect_ratio(aspect_ratio: Point) -> None:
    if aspect_ratio.x <= 0 or aspect_ratio.y <= 0:
        raise ValueError(
            f"aspect ratio must be positive, got {aspect_ratio.x}:{aspect_ratio.y}"
        )


def screen_viewport(
    window_size: Vector2,
    aspect_ratio: Point,
    viewport: tuple[float, float, float, float],
) -> tuple[int, int, int, int]:
    """Return the on-screen rectangle ``(x, y, w, h)`` in pixels for a camera viewport.

    The rectangle is scaled to the window and then fitted to ``aspect_ratio``,
    centring the shown area when the window is too tall or too wide.
    """
    _check_aspect_ratio(aspect_ratio)
    vx, vy, vw, vh = viewport
    width = float(window_size.x)
    height = float(window_size.y)

    x = int(vx * width)
    y = int(vy * height)
    w = int(vw * width)
    h = int(vh * height)

    per_unit_x = width / aspect_ratio.x
    per_unit_y = height / aspect_ratio.y

    if per_unit_x < per_unit_y:
        # Letterbox: the window is taller than the game's shape.
        new_height = int(per_unit_x * aspect_ratio.y)
        y = int((height - new_height) / 2 + new_height * vy)
        h = int(new_height * vh)
    elif per_unit_x > per_unit_y:
        # Pillarbox: the window is wider than the game's shape.
        new_width = int(per_unit_y * aspect_ratio.x)
        x = int((width - new_width) / 2 + new_width * vx)
        w = int(new_width * vw)

    return x, y, w, h


def screen_to_world(
    screen_pos: Point,
    window_size: Vector2,
    aspect_ratio: Point,
    viewport: tuple[float, float, float, float],
    camera_origin: Vector2,
    camera_width: float,
    camera_height: float,
) -> Vector2:
    """Convert a window pixel position to a world position seen by a camera."""
    x, y, w, h = screen_viewport(window_size, aspect_ratio, viewport)
    if w == 0 or h == 0:
        raise ValueError(f"screen viewport has no area: {(x, y, w, h)}")

    local_x = float(screen_pos.x) - x
    local_y = float(screen_pos.y) - y

    return Vector2(
        (local_x / w) * camera_width + camera_origin.x,
        (local_y / h) * camera_height + camera_origin.y,
    )