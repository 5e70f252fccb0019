"""Convert Shapely geometries (plus Line/Rect/Triangle) to Esri JSON geometry.

Mapping:
    Point                                   -> EsriPoint
    MultiPoint                              -> EsriMultiPoint
    Line, LineString, MultiLineString       -> EsriPolyline
    Polygon, MultiPolygon, Rect, Triangle   -> EsriPolygon
    GeometryCollection                      -> UnsupportedGeometryError

All functions are pure: the source geometry is only read, and a new target
model is returned. Coordinates are copied verbatim (first 2 or 3 components);
there is no reprojection and no validation, so NaN and Infinity pass through.

Every converter takes ``dims`` (2 or 3) and an optional ``spatial_reference``
(a SpatialReference or a WKID). With the defaults no optional Esri field is
set.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

from loguru import logger
from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from esrigeo.errors import MissingZError, UnsupportedGeometryError
from esrigeo.geometry import (
    Coord,
    EsriGeometry,
    EsriMultiPoint,
    EsriPoint,
    EsriPolygon,
    EsriPolyline,
    SpatialReference,
)
from esrigeo.shapes import Line, Rect, Triangle
from esrigeo.winding import polygon_rings

SpatialReferenceLike = Union[SpatialReference, int, None]

SourceGeometry = Union[
    Point, MultiPoint, Line, LineString, MultiLineString,
    Polygon, MultiPolygon, Rect, Triangle,
]


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _check_dims(dims: int) -> None:
    if dims not in (2, 3):
        raise ValueError(f"dims must be 2 or 3, got {dims}")


def as_spatial_reference(sr: SpatialReferenceLike) -> SpatialReference | None:
    """Normalize a SpatialReference, WKID or None."""
    if sr is None or isinstance(sr, SpatialReference):
        return sr
    if isinstance(sr, int) and not isinstance(sr, bool):
        return SpatialReference(wkid=sr)
    raise TypeError(
        f"spatial_reference must be SpatialReference or int WKID, got {type(sr).__name__}"
    )


def _common_fields(dims: int, spatial_reference: SpatialReferenceLike) -> dict:
    """Optional fields shared by the multi-vertex geometry kinds."""
    return {
        "has_z": True if dims == 3 else None,
        "spatial_reference": as_spatial_reference(spatial_reference),
    }


def coord_to_esri(coord: Sequence[float], dims: int = 2) -> Coord:
    """Copy the first ``dims`` components of a source coordinate.

    Args:
        coord: Source coordinate, (x, y) or (x, y, z).
        dims: Number of components to keep (2 or 3).

    Returns:
        Tuple of ``dims`` floats.

    Raises:
        MissingZError: If ``dims`` is 3 and the coordinate has no z.
    """
    _check_dims(dims)
    if len(coord) < dims:
        raise MissingZError(
            f"Coordinate {tuple(coord)} has {len(coord)} components, {dims} requested"
        )
    return tuple(float(c) for c in coord[:dims])


def _path(coords: Sequence[Sequence[float]], dims: int) -> tuple[Coord, ...]:
    return tuple(coord_to_esri(c, dims) for c in coords)


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------

def point_to_esri(
    point: Point, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPoint:
    """Point -> EsriPoint. An empty point becomes x = y = NaN."""
    _check_dims(dims)
    sr = as_spatial_reference(spatial_reference)
    if point.is_empty:
        return EsriPoint(x=math.nan, y=math.nan, spatial_reference=sr)
    coord = coord_to_esri(point.coords[0], dims)
    return EsriPoint(
        x=coord[0],
        y=coord[1],
        z=coord[2] if dims == 3 else None,
        spatial_reference=sr,
    )


def multipoint_to_esri(
    multipoint: MultiPoint, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriMultiPoint:
    """MultiPoint -> EsriMultiPoint, member order preserved."""
    _check_dims(dims)
    points = tuple(
        coord_to_esri(pt.coords[0], dims)
        for pt in multipoint.geoms
        if not pt.is_empty
    )
    return EsriMultiPoint(points=points, **_common_fields(dims, spatial_reference))


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def line_to_esri(
    line: Line, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPolyline:
    """Line -> EsriPolyline with a single 2-vertex path."""
    _check_dims(dims)
    path = (coord_to_esri(line.start, dims), coord_to_esri(line.end, dims))
    return EsriPolyline(paths=(path,), **_common_fields(dims, spatial_reference))


def linestring_to_esri(
    linestring: LineString, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPolyline:
    """LineString (or LinearRing) -> EsriPolyline with one path.

    An empty LineString gives a polyline with no paths.
    """
    _check_dims(dims)
    paths = () if linestring.is_empty else (_path(linestring.coords, dims),)
    return EsriPolyline(paths=paths, **_common_fields(dims, spatial_reference))


def multilinestring_to_esri(
    multilinestring: MultiLineString,
    dims: int = 2,
    spatial_reference: SpatialReferenceLike = None,
) -> EsriPolyline:
    """MultiLineString -> EsriPolyline, one path per member in order."""
    _check_dims(dims)
    paths = tuple(_path(ls.coords, dims) for ls in multilinestring.geoms)
    return EsriPolyline(paths=paths, **_common_fields(dims, spatial_reference))


# ---------------------------------------------------------------------------
# Polygons
# ---------------------------------------------------------------------------

def _polygon_paths(polygon: Polygon, dims: int) -> list[tuple[Coord, ...]]:
    if polygon.is_empty:
        return []
    rings = polygon_rings(
        list(polygon.exterior.coords),
        [list(ring.coords) for ring in polygon.interiors],
    )
    return [_path(ring, dims) for ring in rings]


def polygon_to_esri(
    polygon: Polygon, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPolygon:
    """Polygon -> EsriPolygon.

    The exterior ring is emitted first, wound clockwise; holes follow in
    their original order, wound counter-clockwise. Rings are reversed only
    when their current winding is wrong.
    """
    _check_dims(dims)
    rings = tuple(_polygon_paths(polygon, dims))
    return EsriPolygon(rings=rings, **_common_fields(dims, spatial_reference))


def multipolygon_to_esri(
    multipolygon: MultiPolygon,
    dims: int = 2,
    spatial_reference: SpatialReferenceLike = None,
) -> EsriPolygon:
    """MultiPolygon -> a single EsriPolygon with a flat ring list.

    Each member is oriented as in ``polygon_to_esri`` and the ring lists are
    concatenated in member order. Which rings belonged to which member is
    not kept: Esri polygons have no place for it.
    """
    _check_dims(dims)
    rings: list[tuple[Coord, ...]] = []
    for polygon in multipolygon.geoms:
        rings.extend(_polygon_paths(polygon, dims))
    return EsriPolygon(rings=tuple(rings), **_common_fields(dims, spatial_reference))


def rect_to_esri(
    rect: Rect, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPolygon:
    """Rect -> EsriPolygon via its closed 4-sided polygon."""
    return polygon_to_esri(rect.to_polygon(), dims, spatial_reference)


def triangle_to_esri(
    triangle: Triangle, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriPolygon:
    """Triangle -> EsriPolygon via its closed 3-sided polygon."""
    return polygon_to_esri(triangle.to_polygon(), dims, spatial_reference)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

# Order matters only for subclasses: LinearRing is a LineString.
_CONVERTERS = (
    (Point, point_to_esri),
    (MultiPoint, multipoint_to_esri),
    (Line, line_to_esri),
    (LineString, linestring_to_esri),
    (MultiLineString, multilinestring_to_esri),
    (Polygon, polygon_to_esri),
    (MultiPolygon, multipolygon_to_esri),
    (Rect, rect_to_esri),
    (Triangle, triangle_to_esri),
)


def to_esri(
    geometry: SourceGeometry,
    dims: int = 2,
    spatial_reference: SpatialReferenceLike = None,
) -> EsriGeometry:
    """Convert any supported source geometry to its Esri counterpart.

    Args:
        geometry: Shapely geometry, or a Line/Rect/Triangle.
        dims: 2 for (x, y) output, 3 to keep z.
        spatial_reference: Optional SpatialReference or WKID to attach.

    Returns:
        EsriPoint, EsriMultiPoint, EsriPolyline or EsriPolygon.

    Raises:
        UnsupportedGeometryError: For any GeometryCollection, empty or not.
        TypeError: If ``geometry`` is not part of the source model.
        ValueError: If ``dims`` is invalid or z is requested but missing.
    """
    for source_type, converter in _CONVERTERS:
        if isinstance(geometry, source_type):
            result = converter(geometry, dims, spatial_reference)
            logger.debug(
                f"Converted {type(geometry).__name__} -> {type(result).__name__}"
            )
            return result

    if isinstance(geometry, GeometryCollection):
        raise UnsupportedGeometryError(
            "GeometryCollection",
            f"GeometryCollection with {len(geometry.geoms)} member(s) has no "
            "Esri geometry representation",
        )
    raise TypeError(f"Cannot convert {type(geometry).__name__} to Esri geometry")
