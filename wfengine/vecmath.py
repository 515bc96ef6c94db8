"""Matrices, axis-aligned bounding boxes and transforms built on numpy."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

PI = 3.14159265359
DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
EPSILON = 0.000001
FLT_MAX = float(np.finfo(np.float32).max)


def _vec(values, size: int = 3) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Mat4:
    """A 4x4 matrix with in-place translate, scale and rotate helpers."""

    matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        self.matrix = np.array(self.matrix, dtype=float)
        if self.matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {self.matrix.shape}")

    def translate(self, pt) -> Mat4:
        """Post-multiply by a translation; returns self."""
        t = np.identity(4)
        t[:3, 3] = _vec(pt)
        self.matrix = self.matrix @ t
        return self

    def scale(self, dims) -> Mat4:
        """Post-multiply by a scale; returns self."""
        s = np.identity(4)
        s[:3, :3] = np.diag(_vec(dims))
        self.matrix = self.matrix @ s
        return self

    def rotate(self, angle_radians: float, axis) -> Mat4:
        """Post-multiply by a rotation about ``axis``; returns self."""
        a = _vec(axis)
        a = a / np.linalg.norm(a)
        c = math.cos(angle_radians)
        s = math.sin(angle_radians)
        x, y, z = a
        k = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
        r = np.identity(4)
        r[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * k
        self.matrix = self.matrix @ r
        return self

    @staticmethod
    def look_at(pos, target, up) -> Mat4:
        """Right-handed view matrix looking from ``pos`` towards ``target``."""
        eye = _vec(pos)
        f = _vec(target) - eye
        f = f / np.linalg.norm(f)
        s = np.cross(f, _vec(up))
        s = s / np.linalg.norm(s)
        u = np.cross(s, f)
        m = np.identity(4)
        m[0, :3] = s
        m[1, :3] = u
        m[2, :3] = -f
        m[0, 3] = -np.dot(s, eye)
        m[1, 3] = -np.dot(u, eye)
        m[2, 3] = np.dot(f, eye)
        return Mat4(m)

    def __mul__(self, rhs: Mat4) -> Mat4:
        return Mat4(self.matrix @ rhs.matrix)


@dataclass(eq=False)
class BoundingBox:
    """Axis-aligned bounding box that starts empty and grows by extension."""

    min: np.ndarray = field(default_factory=lambda: np.full(3, FLT_MAX))
    max: np.ndarray = field(default_factory=lambda: np.full(3, -FLT_MAX))
    is_valid: bool = False

    def __post_init__(self) -> None:
        self.min = _vec(self.min)
        self.max = _vec(self.max)

    def reset(self) -> None:
        self.min = np.full(3, FLT_MAX)
        self.max = np.full(3, -FLT_MAX)
        self.is_valid = False

    def extend(self, other) -> None:
        """Grow to include a point or another bounding box."""
        if isinstance(other, BoundingBox):
            self.extend(other.min)
            self.extend(other.max)
            return
        point = _vec(other)
        self.min = np.minimum(self.min, point)
        self.max = np.maximum(self.max, point)
        self.is_valid = bool(np.any(self.min != self.max))

    def size(self) -> np.ndarray:
        return self.max - self.min

    def midpoint(self) -> np.ndarray:
        return (self.min + self.max) * 0.5

    def intersects(self, other: BoundingBox) -> bool:
        """True if this box overlaps ``other``."""
        if not self.is_valid:
            return False
        return bool(np.all(self.min <= other.max) and np.all(self.max >= other.min))

    def contains(self, other) -> bool:
        """True if a point, or a whole other box, lies inside this box."""
        if isinstance(other, BoundingBox):
            return self.contains(other.min) and self.contains(other.max)
        if not self.is_valid:
            return False
        point = _vec(other)
        return bool(np.all(point >= self.min) and np.all(point <= self.max))


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation in degrees, and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec(self.position)
        self.rotation = _vec(self.rotation)
        self.scale = _vec(self.scale)

    def matrix(self) -> Mat4:
        """Full transform: translate, rotate Y then X then Z, then scale."""
        m = Mat4()
        m.translate(self.position)
        m.rotate(self.rotation[1] * DEG2RAD, (0.0, 1.0, 0.0))
        m.rotate(self.rotation[0] * DEG2RAD, (1.0, 0.0, 0.0))
        m.rotate(self.rotation[2] * DEG2RAD, (0.0, 0.0, 1.0))
        m.scale(self.scale)
        return m

    def world_position(self, point) -> np.ndarray:
        """Transform a local point into world space."""
        local = np.append(_vec(point), 1.0)
        return (self.matrix().matrix @ local)[:3]

    def up(self) -> np.ndarray:
        return self.matrix().matrix[:3, 1].copy()

    def forward(self) -> np.ndarray:
        """Forward direction (-Z)."""
        return -self.matrix().matrix[:3, 2]

    def right(self) -> np.ndarray:
        return self.matrix().matrix[:3, 0].copy()

    @staticmethod
    def t(position) -> Transform:
        return Transform(position=position)

    @staticmethod
    def r(rotation) -> Transform:
        return Transform(rotation=rotation)

    @staticmethod
    def s(scale) -> Transform:
        if np.isscalar(scale):
            scale = (scale, scale, scale)
        return Transform(scale=scale)