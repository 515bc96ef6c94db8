"""RGBA colours with conversion, luminance and contrast helpers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ColourDenorm:
    """A colour with 0-255 integer channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255


def _linear(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _to_byte(channel: float) -> int:
    return int(channel * 255) & 0xFF


@dataclass(frozen=True)
class Colour:
    """A colour with normalised float channels."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def to_vec3(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=float)

    def to_vec4(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b, self.a], dtype=float)

    @staticmethod
    def from_vec3(vec) -> Colour:
        return Colour(float(vec[0]), float(vec[1]), float(vec[2]), 1.0)

    @staticmethod
    def from_vec4(vec) -> Colour:
        return Colour(float(vec[0]), float(vec[1]), float(vec[2]), float(vec[3]))

    @staticmethod
    def from_denorm(denorm: ColourDenorm) -> Colour:
        return Colour(denorm.r / 255.0, denorm.g / 255.0, denorm.b / 255.0, denorm.a / 255.0)

    def denormalised(self) -> ColourDenorm:
        return ColourDenorm(_to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a))

    def to_hex(self) -> str:
        """Hex string of the form ``#rrggbbaa``."""
        d = self.denormalised()
        return f"#{d.r:02x}{d.g:02x}{d.b:02x}{d.a:02x}"

    def luminance(self) -> float:
        """Relative luminance as defined by WCAG 2.0."""
        return 0.2126 * _linear(self.r) + 0.7152 * _linear(self.g) + 0.0722 * _linear(self.b)

    def contrast_ratio(self, other: Colour) -> float:
        l1, l2 = self.luminance(), other.luminance()
        return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)

    def is_contrast_sufficient(self, other: Colour, threshold: float = 4.5) -> bool:
        return self.contrast_ratio(other) >= threshold


BLANK = Colour(0.0, 0.0, 0.0, 0.0)
BLACK = Colour(0.0, 0.0, 0.0, 1.0)
WHITE = Colour(1.0, 1.0, 1.0, 1.0)

RED = Colour(0.90, 0.16, 0.22, 1.0)
ORANGE = Colour(1.0, 0.63, 0.0, 1.0)
YELLOW = Colour(0.99, 0.98, 0.0, 1.0)
GREEN = Colour(0.0, 0.89, 0.19, 1.0)
BLUE = Colour(0.0, 0.47, 0.95, 1.0)
PURPLE = Colour(0.78, 0.48, 1.0, 1.0)

GREY = Colour(0.51, 0.51, 0.51, 1.0)
PINK = Colour(1.0, 0.43, 0.76, 1.0)
VIOLET = Colour(0.53, 0.24, 0.75, 1.0)
LIME = Colour(0.0, 0.62, 0.18, 1.0)
BEIGE = Colour(0.83, 0.69, 0.51, 1.0)
BROWN = Colour(0.50, 0.42, 0.31, 1.0)
MAGENTA = Colour(1.0, 0.0, 1.0, 1.0)
EGGSHELL = Colour(0.94, 0.92, 0.84, 1.0)
GOLD = Colour(1.0, 0.80, 0.0, 1.0)
MAROON = Colour(0.75, 0.13, 0.22, 1.0)

LIGHTGREY = Colour(0.78, 0.78, 0.78, 1.0)
LIGHTBLUE = Colour(0.40, 0.75, 1.0, 1.0)
DARKGREY = Colour(0.31, 0.31, 0.31, 1.0)
DARKGREEN = Colour(0.0, 0.46, 0.17, 1.0)
DARKBLUE = Colour(0.0, 0.32, 0.67, 1.0)
DARKPURPLE = Colour(0.44, 0.12, 0.49, 1.0)
DARKBROWN = Colour(0.30, 0.25, 0.18, 1.0)
OFFBLACK = Colour(0.1, 0.1, 0.1, 1.0)

CUTTINGMAT = Colour(0.19, 0.39, 0.25, 1.0)