"""
Utility functions for game mechanics
"""

from __future__ import annotations
from typing import Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def circles_overlap(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching edges do not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def flip_y(y: float, height: float) -> float:
    """Convert a y-down surface coordinate to arcade's y-up space (and back)"""
    return height - y


def to_surface(x: float, y: float, window_size: Tuple[float, float],
               surface_size: Tuple[float, float]) -> Tuple[float, float]:
    """Map a y-up window pixel onto the y-down surface stretched across the window"""
    win_w, win_h = window_size
    surf_w, surf_h = surface_size
    sx = x * surf_w / win_w
    sy = y * surf_h / win_h
    return sx, flip_y(sy, surf_h)
