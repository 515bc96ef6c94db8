"""Small vector helpers: 2D cross product, perpendiculars and spring forces."""

from __future__ import annotations

import numpy as np


def cross_2d(vec, other) -> float:
    """Z component of the cross product of two 2D vectors."""
    return float(vec[0] * other[1] - vec[1] * other[0])


def perp_cw(vec) -> np.ndarray:
    """Perpendicular rotated clockwise."""
    return np.array([vec[1], -vec[0]], dtype=float)


def perp_ccw(vec) -> np.ndarray:
    """Perpendicular rotated counter-clockwise."""
    return np.array([-vec[1], vec[0]], dtype=float)


def spring_force(p1, v1, p2, v2, k: float, damping: float, rest: float) -> np.ndarray:
    """Damped spring force acting on the first point; works for 2D or 3D vectors."""
    p1, v1, p2, v2 = (np.asarray(v, dtype=float) for v in (p1, v1, p2, v2))
    offset = p1 - p2
    dist = float(np.linalg.norm(offset))
    if dist < 0.01:
        return np.zeros_like(p1)
    direction = offset / dist
    displacement = rest - dist
    relative_velocity = float(np.dot(v1 - v2, direction))
    return direction * (displacement * k - relative_velocity * damping)