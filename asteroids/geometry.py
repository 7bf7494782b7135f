import math
from typing import List, Sequence, Tuple

from pygame import Vector2


def dist_between_points(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def point_in_circle(point: Vector2, centre: Vector2, radius: float) -> bool:
    return dist_between_points(point.x, point.y, centre.x, centre.y) < radius


def circles_overlap(c1: Vector2, r1: float, c2: Vector2, r2: float) -> bool:
    return dist_between_points(c1.x, c1.y, c2.x, c2.y) < r1 + r2


def wrap_with_margin(value: float, limit: float, margin: float) -> float:
    """Move a coordinate to the opposite edge once it fully leaves [0, limit]"""
    if value < -margin:
        return limit + margin
    if value > limit + margin:
        return -margin
    return value


def wrap_position(pos: Vector2, width: float, height: float, margin: float = 0.0) -> None:
    pos.x = wrap_with_margin(pos.x, width, margin)
    pos.y = wrap_with_margin(pos.y, height, margin)


def polygon_points(
    centre: Vector2, radius: float, angle: float, offsets: Sequence[float]
) -> List[Tuple[float, float]]:
    """Outline of a jagged polygon, one vertex per radius offset"""
    vert = len(offsets)
    points = []
    for j, offset in enumerate(offsets):
        theta = angle + j * math.pi * 2 / vert
        points.append((
            centre.x + radius * offset * math.cos(theta),
            centre.y + radius * offset * math.sin(theta)
        ))
    return points


def ship_points(centre: Vector2, radius: float, angle: float) -> List[Tuple[float, float]]:
    """Nose, rear left and rear right of the ship triangle"""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return [
        (centre.x + 4 / 3 * radius * cos_a, centre.y - 4 / 3 * radius * sin_a),
        (centre.x - radius * (2 / 3 * cos_a + sin_a), centre.y + radius * (2 / 3 * sin_a - cos_a)),
        (centre.x - radius * (2 / 3 * cos_a - sin_a), centre.y + radius * (2 / 3 * sin_a + cos_a)),
    ]
