"""Shapely geometry to Esri JSON geometry conversion.

Converts points, lines and polygons (and their multi- variants) into the
geometry objects ArcGIS REST services accept, normalizing ring winding to
the Esri convention (outer rings clockwise, holes counter-clockwise).
"""

from esrigeo.convert import to_esri
from esrigeo.errors import (
    EsriGeometryError,
    InvalidEsriGeometryError,
    MissingZError,
    MixedGeometryTypesError,
    UnsupportedGeometryError,
)
from esrigeo.geometry import (
    EsriGeometry,
    EsriMultiPoint,
    EsriPoint,
    EsriPolygon,
    EsriPolyline,
    GeometryType,
    SpatialReference,
    parse_esri_geometry,
)
from esrigeo.shapes import Line, Rect, Triangle

__all__ = [
    "to_esri",
    "EsriGeometry",
    "EsriPoint",
    "EsriMultiPoint",
    "EsriPolyline",
    "EsriPolygon",
    "GeometryType",
    "SpatialReference",
    "parse_esri_geometry",
    "Line",
    "Rect",
    "Triangle",
    "EsriGeometryError",
    "UnsupportedGeometryError",
    "InvalidEsriGeometryError",
    "MissingZError",
    "MixedGeometryTypesError",
]
