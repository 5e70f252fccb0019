"""Line, Rect and Triangle value types.

Shapely has no segment, box or triangle geometry classes (``shapely.box``
returns a plain Polygon), so these fill the gap in the source model. Each one
degrades to the Shapely geometry it is equivalent to.

Vertices are (x, y) or (x, y, z) tuples.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import LineString, Polygon


@dataclass(frozen=True)
class Line:
    """A single segment between two vertices."""

    start: tuple[float, ...]
    end: tuple[float, ...]

    def to_linestring(self) -> LineString:
        return LineString([self.start, self.end])


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.

    Corners are normalized on construction so that ``min`` holds the smaller
    value on each axis, whichever order they were given in.
    """

    min: tuple[float, float]
    max: tuple[float, float]

    def __post_init__(self):
        (x0, y0), (x1, y1) = self.min, self.max
        object.__setattr__(self, "min", (min(x0, x1), min(y0, y1)))
        object.__setattr__(self, "max", (max(x0, x1), max(y0, y1)))

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]

    def to_polygon(self) -> Polygon:
        """Closed 4-sided polygon, exterior wound counter-clockwise."""
        (minx, miny), (maxx, maxy) = self.min, self.max
        return Polygon([
            (maxx, miny),
            (maxx, maxy),
            (minx, maxy),
            (minx, miny),
            (maxx, miny),
        ])


@dataclass(frozen=True)
class Triangle:
    """Three vertices, kept in the order given."""

    v0: tuple[float, ...]
    v1: tuple[float, ...]
    v2: tuple[float, ...]

    def to_polygon(self) -> Polygon:
        """Closed 3-sided polygon ``v0, v1, v2, v0``."""
        return Polygon([self.v0, self.v1, self.v2, self.v0])
