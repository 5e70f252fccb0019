"""Ring winding detection and normalization.

Esri polygons wind the opposite way to GeoJSON (RFC 7946) and OGC simple
features: outer boundaries run clockwise, holes counter-clockwise, with x
increasing to the right and y increasing upward. Each ring is checked on its
own via the shoelace signed area and reversed only when needed, so mixed or
already-normalized input comes out the same.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

Ring = Sequence[Sequence[float]]


def signed_area(coords: Ring) -> float:
    """Shoelace signed area of a ring over its x/y components.

    Positive for counter-clockwise rings, negative for clockwise ones, zero
    for degenerate ones. The closing edge is implied, so open and closed
    rings give the same result.

    Args:
        coords: Ring vertices as (x, y) or (x, y, z) sequences.

    Returns:
        Signed area in squared coordinate units.
    """
    if len(coords) < 3:
        return 0.0
    xy = np.asarray([(c[0], c[1]) for c in coords], dtype=np.float64)
    x, y = xy[:, 0], xy[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0


def is_clockwise(coords: Ring) -> bool:
    return signed_area(coords) < 0


def is_counter_clockwise(coords: Ring) -> bool:
    return signed_area(coords) > 0


def orient_ring(coords: Ring, clockwise: bool) -> list:
    """Return the ring wound in the requested direction.

    A ring that already has the requested winding is returned unchanged (as a
    new list); otherwise its vertex order is reversed. A closed ring stays
    closed because its shared endpoint simply becomes the shared endpoint of
    the reversed ring. Rings with zero or undefined (NaN) area have no
    winding and are left as is.

    Args:
        coords: Ring vertices.
        clockwise: True for clockwise, False for counter-clockwise.

    Returns:
        List of vertices in the requested winding.
    """
    area = signed_area(coords)
    wound_cw = area < 0
    # Zero and NaN areas compare false both ways.
    if (wound_cw or area > 0) and wound_cw != clockwise:
        return list(reversed(coords))
    return list(coords)


def polygon_rings(exterior: Ring, interiors: Iterable[Ring] = ()) -> list[list]:
    """Orient one polygon's rings the Esri way.

    The exterior comes first, wound clockwise, followed by every interior
    ring wound counter-clockwise, in their original relative order.
    """
    rings = [orient_ring(exterior, clockwise=True)]
    rings.extend(orient_ring(ring, clockwise=False) for ring in interiors)
    return rings
