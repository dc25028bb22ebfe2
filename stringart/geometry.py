"""Pin placement and string generation for polygon string art.

Pins are laid out along one canonical side (edge mode) or one vertex bisector
(crossed mode) and then rotated about the polygon incenter to populate every
side.  Strings are straight segments between pins of neighbouring columns;
together they trace the envelope of quadratic Bezier curves.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import RGB, StringArtConfig

XY = Tuple[float, float]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Segment:
    """One string, drawn from ``p1`` to ``p2``."""

    p1: XY
    p2: XY
    color: RGB = (0.0, 0.0, 0.0)

    def length(self) -> float:
        return math.hypot(self.p2[0] - self.p1[0], self.p2[1] - self.p1[1])


@dataclass(frozen=True)
class PinGrid:
    """Pins indexed as ``pins[row][side]``.

    There are ``density`` rows and ``sides + 1`` columns.  The last column is
    a full revolution of column 0 and closes the polygon.
    """

    sides: int
    density: int
    incenter: XY
    pins: Tuple[Tuple[XY, ...], ...]

    def __getitem__(self, row: int) -> Tuple[XY, ...]:
        return self.pins[row]

    def pin(self, row: int, side: int) -> XY:
        return self.pins[row][side]

    def column(self, side: int) -> List[XY]:
        return [row[side] for row in self.pins]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.density, self.sides + 1


def apothem_ratio(sides: int) -> float:
    """Apothem of a regular polygon with unit side, divided by half the side."""
    return math.tan(math.pi * (0.5 - 1.0 / sides))


def rotate(pt: XY, theta: float, center: XY) -> XY:
    """Rotate ``pt`` counter-clockwise by ``theta`` radians about ``center``."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    dx = pt[0] - center[0]
    dy = pt[1] - center[1]
    return cos_t * dx - sin_t * dy + center[0], sin_t * dx + cos_t * dy + center[1]


def _base_pins(sides: int, density: int, crossed: bool) -> Tuple[List[XY], XY]:
    ratio = apothem_ratio(sides)
    steps = [i / (density - 1) for i in range(density)]
    if crossed:
        mp = [0.5 * t for t in steps]
        h = [m * ratio for m in mp]
        pins = list(zip(mp, h))
    else:
        mp = [0.5]
        h = [0.5 * ratio]
        pins = [(t, 0.0) for t in steps]
    # the final midpoint/apothem sample is the rotation pivot in both modes
    incenter = (mp[-1], h[-1])
    return pins, incenter


def build_pin_grid(sides: int, density: int, crossed: bool) -> PinGrid:
    base, incenter = _base_pins(sides, density, crossed)
    k = 2.0 * math.pi / sides
    columns = [base]
    for s in range(1, sides + 1):
        theta = k * s
        columns.append([rotate(p, theta, incenter) for p in base])
    pins = tuple(tuple(col[row] for col in columns) for row in range(density))
    return PinGrid(sides=sides, density=density, incenter=incenter, pins=pins)


def generate_segments(
    grid: PinGrid,
    sides: int,
    density: int,
    crossed: bool,
    color: RGB = (0.0, 0.0, 0.0),
) -> Iterator[Segment]:
    """Yield strings row by row, then side by side.

    Edge mode joins the same row on adjacent sides.  Crossed mode walks the
    near end of one bisector against the far end of the next: row ``i`` of
    side ``j`` meets row ``density - i`` of side ``j + 1``.
    """
    if crossed:
        for i in range(1, density - 1):
            for j in range(sides):
                yield Segment(grid[i][j], grid[density - i][j + 1], color)
    else:
        for i in range(density - 1):
            for j in range(sides):
                yield Segment(grid[i + 1][j], grid[i + 1][j + 1], color)


# ---------------------------------------------------------------------------
# Pattern container
# ---------------------------------------------------------------------------


@dataclass
class Pattern:
    """Generated strings in drawing order, with the config that produced them."""

    config: StringArtConfig = field(default_factory=StringArtConfig)
    segments: List[Segment] = field(default_factory=list)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, idx: int) -> Segment:
        return self.segments[idx]

    # ----------------------------- high level info ---------------------------
    def bounding_box(self) -> Optional[Tuple[XY, XY]]:
        xs: List[float] = []
        ys: List[float] = []
        for seg in self.segments:
            for x, y in (seg.p1, seg.p2):
                xs.append(x)
                ys.append(y)
        if not xs or not ys:
            return None
        return (min(xs), min(ys)), (max(xs), max(ys))

    def total_length(self) -> float:
        return sum(seg.length() for seg in self.segments)

    # ------------------------------- serialisation ---------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "segments": [
                {
                    "p1": [float(seg.p1[0]), float(seg.p1[1])],
                    "p2": [float(seg.p2[0]), float(seg.p2[1])],
                    "color": list(seg.color),
                }
                for seg in self.segments
            ],
        }


def generate_pattern(config: StringArtConfig) -> Pattern:
    """Compute every string for ``config`` in drawing order."""

    grid = build_pin_grid(config.sides, config.density, config.crossed)
    segments = list(
        generate_segments(grid, config.sides, config.density, config.crossed, config.color)
    )
    return Pattern(config=config, segments=segments)


__all__ = [
    "XY",
    "Segment",
    "PinGrid",
    "Pattern",
    "apothem_ratio",
    "rotate",
    "build_pin_grid",
    "generate_segments",
    "generate_pattern",
]
