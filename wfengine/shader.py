"""A compiled shader handle with its uniform locations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Shader:
    """A shader program id plus a map of uniform names to locations."""

    handle: int = 0
    locs: dict[str, int] = field(default_factory=dict)

    def is_valid_location(self, loc: str) -> bool:
        """True if ``loc`` is known and resolved to a real location."""
        return loc in self.locs and self.locs[loc] >= 0

    def location(self, loc: str) -> int:
        return self.locs[loc]