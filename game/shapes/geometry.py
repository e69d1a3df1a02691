"""
Polygon outlines for the selectable player shapes.

All coordinates are surface coordinates (origin top-left, y grows downward).
Every outline is centred on (cx, cy) and fits inside a circle of radius
``size``; the circle itself has no outline and is drawn natively.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .entities import ShapeKind

Point = Tuple[float, float]

HEART_SEGMENTS = 32


def regular_polygon(cx: float, cy: float, size: float, sides: int,
                    rotation: float = 0.0) -> List[Point]:
    """Vertices of a regular polygon, first vertex straight up when rotation is 0"""
    points = []
    for i in range(sides):
        ang = rotation + (math.pi * 2) * (i / sides) - math.pi / 2
        points.append((cx + size * math.cos(ang), cy + size * math.sin(ang)))
    return points


def star_points(cx: float, cy: float, size: float, spikes: int = 5,
                inner_ratio: float = 0.5) -> List[Point]:
    points = []
    for i in range(spikes * 2):
        r = size if i % 2 == 0 else size * inner_ratio
        ang = math.pi * i / spikes - math.pi / 2
        points.append((cx + r * math.cos(ang), cy + r * math.sin(ang)))
    return points


def cross_points(cx: float, cy: float, size: float, arm: float = 0.35) -> List[Point]:
    """Plus sign; ``arm`` is the half-width of each bar relative to its length"""
    # Outer corners (a, s) sit exactly on the radius
    s = size / math.sqrt(1 + arm * arm)
    a = s * arm
    return [
        (cx - a, cy - s), (cx + a, cy - s), (cx + a, cy - a),
        (cx + s, cy - a), (cx + s, cy + a), (cx + a, cy + a),
        (cx + a, cy + s), (cx - a, cy + s), (cx - a, cy + a),
        (cx - s, cy + a), (cx - s, cy - a), (cx - a, cy - a),
    ]


def heart_points(cx: float, cy: float, size: float,
                 segments: int = HEART_SEGMENTS) -> List[Point]:
    # Classic parametric heart, x in [-16, 16] and y in [-17, 12]; scaled to size.
    scale = size / 17.0
    points = []
    for i in range(segments):
        t = (math.pi * 2) * (i / segments)
        hx = 16 * math.sin(t) ** 3
        hy = 13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t)
        # Parametric y points up; surface y points down.
        points.append((cx + hx * scale, cy - hy * scale))
    return points


def shape_outline(kind: ShapeKind, cx: float, cy: float, size: float) -> Optional[List[Point]]:
    """Return the polygon for ``kind`` centred at (cx, cy), or None for a circle"""
    kind = ShapeKind(kind)
    if kind is ShapeKind.CIRCLE:
        return None
    if kind is ShapeKind.SQUARE:
        half = size / math.sqrt(2)
        return [(cx - half, cy - half), (cx + half, cy - half),
                (cx + half, cy + half), (cx - half, cy + half)]
    if kind is ShapeKind.TRIANGLE:
        return regular_polygon(cx, cy, size, 3)
    if kind is ShapeKind.DIAMOND:
        return regular_polygon(cx, cy, size, 4)
    if kind is ShapeKind.HEXAGON:
        return regular_polygon(cx, cy, size, 6, rotation=math.pi / 6)
    if kind is ShapeKind.STAR:
        return star_points(cx, cy, size)
    if kind is ShapeKind.CROSS:
        return cross_points(cx, cy, size)
    return heart_points(cx, cy, size)
