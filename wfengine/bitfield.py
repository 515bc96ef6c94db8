"""Bit masks for coarse spatial partitioning."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Bitfield:
    """An integer mask with per-bit helpers."""

    mask: int = 0

    def clear(self) -> None:
        self.mask = 0

    def set_on(self, bit: int) -> None:
        self.mask |= 1 << bit

    def set_off(self, bit: int) -> None:
        self.mask &= ~(1 << bit)

    def get_bit(self, bit: int) -> bool:
        return (self.mask & (1 << bit)) != 0


@dataclass
class Bitfields:
    """Per-axis bit masks; objects whose masks share no bits are in disjoint regions."""

    x: Bitfield = field(default_factory=Bitfield)
    y: Bitfield = field(default_factory=Bitfield)
    z: Bitfield = field(default_factory=Bitfield)

    def same(self, other: Bitfields) -> bool:
        return not self.miss(other)

    def miss(self, other: Bitfields) -> bool:
        """True when no axis shares any bit with ``other``."""
        return (
            (self.x.mask & other.x.mask) == 0
            and (self.y.mask & other.y.mask) == 0
            and (self.z.mask & other.z.mask) == 0
        )

    def clear(self) -> None:
        self.x.clear()
        self.y.clear()
        self.z.clear()