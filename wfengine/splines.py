"""Cubic Bezier curves with position, tangent and orientation queries."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from wfengine.vecmath import Mat4

_UP = np.array([0.0, 1.0, 0.0])


def _mix(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a * (1.0 - t) + b * t


def _quat_from_columns(m: np.ndarray) -> np.ndarray:
    """Quaternion (w, x, y, z) from a rotation given as ``m[column][row]``."""
    four_x = m[0][0] - m[1][1] - m[2][2]
    four_y = m[1][1] - m[0][0] - m[2][2]
    four_z = m[2][2] - m[0][0] - m[1][1]
    four_w = m[0][0] + m[1][1] + m[2][2]

    biggest_index = 0
    biggest = four_w
    for index, candidate in ((1, four_x), (2, four_y), (3, four_z)):
        if candidate > biggest:
            biggest = candidate
            biggest_index = index

    big = math.sqrt(biggest + 1.0) * 0.5
    mult = 0.25 / big

    if biggest_index == 0:
        w = big
        x = (m[1][2] - m[2][1]) * mult
        y = (m[2][0] - m[0][2]) * mult
        z = (m[0][1] - m[1][0]) * mult
    elif biggest_index == 1:
        w = (m[1][2] - m[2][1]) * mult
        x = big
        y = (m[0][1] + m[1][0]) * mult
        z = (m[2][0] + m[0][2]) * mult
    elif biggest_index == 2:
        w = (m[2][0] - m[0][2]) * mult
        x = (m[0][1] + m[1][0]) * mult
        y = big
        z = (m[1][2] + m[2][1]) * mult
    else:
        w = (m[0][1] - m[1][0]) * mult
        x = (m[2][0] + m[0][2]) * mult
        y = (m[1][2] + m[2][1]) * mult
        z = big
    return np.array([w, x, y, z], dtype=float)


def _quat_look_at(direction: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed look-at rotation as a quaternion (w, x, y, z)."""
    back = -direction
    right = np.cross(up, back)
    right = right / math.sqrt(max(1e-5, float(np.dot(right, right))))
    true_up = np.cross(back, right)
    return _quat_from_columns(np.array([right, true_up, back]))


def _quat_to_matrix(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    columns = np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y + w * z), 2 * (x * z - w * y)],
        [2 * (x * y - w * z), 1 - 2 * (x * x + z * z), 2 * (y * z + w * x)],
        [2 * (x * z + w * y), 2 * (y * z - w * x), 1 - 2 * (x * x + y * y)],
    ])
    m = np.identity(4)
    m[:3, :3] = columns.T
    return m


@dataclass(eq=False)
class Bezier:
    """A cubic Bezier curve defined by its first four control points."""

    control_points: list

    def __post_init__(self) -> None:
        points = [np.asarray(p, dtype=float) for p in self.control_points]
        if len(points) < 4:
            raise ValueError(f"a cubic Bezier needs 4 control points, got {len(points)}")
        if any(p.shape != (3,) for p in points):
            raise ValueError("control points must be 3D vectors")
        self.control_points = points

    def _second_level(self, t: float) -> tuple[np.ndarray, np.ndarray]:
        p0, p1, p2, p3 = self.control_points[:4]
        a = _mix(p0, p1, t)
        b = _mix(p1, p2, t)
        c = _mix(p2, p3, t)
        return _mix(a, b, t), _mix(b, c, t)

    def position(self, t: float) -> np.ndarray:
        """Point on the curve at parameter ``t``."""
        d, e = self._second_level(t)
        return _mix(d, e, t)

    def tangent(self, t: float) -> np.ndarray:
        """Unit direction of travel at ``t``."""
        d, e = self._second_level(t)
        diff = e - d
        return diff / np.linalg.norm(diff)

    def orientation(self, t: float) -> np.ndarray:
        """Rotation facing along the tangent, as a quaternion (w, x, y, z)."""
        tangent = self.tangent(t)
        return _quat_look_at(tangent / np.linalg.norm(tangent), _UP)

    def transform(self, t: float) -> Mat4:
        """Translation to the curve point followed by the orientation."""
        m = Mat4().translate(self.position(t))
        m.matrix = m.matrix @ _quat_to_matrix(self.orientation(t))
        return m