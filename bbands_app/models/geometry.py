"""Screen-space shapes produced by a render pass"""

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass(frozen=True)
class DrawablePath:
    """Ordered pixel points forming one polyline, or a polygon when closed"""
    points: tuple[Point, ...] = ()
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class BandPaths:
    """All shapes for one render pass. Lines may hold several sub-paths when gaps break them."""
    basis: list[DrawablePath] = field(default_factory=list)
    upper: list[DrawablePath] = field(default_factory=list)
    lower: list[DrawablePath] = field(default_factory=list)
    fill: list[DrawablePath] = field(default_factory=list)

    @property
    def fill_vertex_count(self) -> int:
        return sum(len(p) for p in self.fill)
