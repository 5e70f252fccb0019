"""Esri JSON geometry model.

Frozen pydantic models for the four geometry kinds ArcGIS REST services
accept. Coordinates are tuples of 2 (x, y) or 3 (x, y, z) floats; paths and
rings are tuples of coordinates.

Optional fields default to None and are dropped from serialized output, which
Esri reads as "2-D, default spatial reference".
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from esrigeo.errors import InvalidEsriGeometryError

Coord = Union[tuple[float, float], tuple[float, float, float]]
CoordSequence = tuple[Coord, ...]


class GeometryType(str, Enum):
    """Esri geometry type names, as used in FeatureSet ``geometryType``."""
    POINT = "esriGeometryPoint"
    MULTIPOINT = "esriGeometryMultipoint"
    POLYLINE = "esriGeometryPolyline"
    POLYGON = "esriGeometryPolygon"


class _EsriModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        ser_json_inf_nan="constants",
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to an Esri JSON mapping (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to an Esri JSON string."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class SpatialReference(_EsriModel):
    """Spatial reference by well-known ID or WKT."""
    wkid: int | None = None
    latest_wkid: int | None = Field(default=None, alias="latestWkid")
    vcs_wkid: int | None = Field(default=None, alias="vcsWkid")
    latest_vcs_wkid: int | None = Field(default=None, alias="latestVcsWkid")
    wkt: str | None = None


class EsriPoint(_EsriModel):
    """Esri point geometry."""

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    x: float
    y: float
    z: float | None = None
    m: float | None = None
    spatial_reference: SpatialReference | None = Field(
        default=None, alias="spatialReference"
    )


class EsriMultiPoint(_EsriModel):
    """Esri multipoint geometry."""

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    has_z: bool | None = Field(default=None, alias="hasZ")
    has_m: bool | None = Field(default=None, alias="hasM")
    points: CoordSequence
    spatial_reference: SpatialReference | None = Field(
        default=None, alias="spatialReference"
    )


class EsriPolyline(_EsriModel):
    """Esri polyline geometry: independent paths, open or closed."""

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYLINE

    has_z: bool | None = Field(default=None, alias="hasZ")
    has_m: bool | None = Field(default=None, alias="hasM")
    paths: tuple[CoordSequence, ...]
    spatial_reference: SpatialReference | None = Field(
        default=None, alias="spatialReference"
    )


class EsriPolygon(_EsriModel):
    """Esri polygon geometry.

    ``rings`` is flat. Outer boundaries are wound clockwise and holes
    counter-clockwise; which hole belongs to which boundary is not recorded.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    has_z: bool | None = Field(default=None, alias="hasZ")
    has_m: bool | None = Field(default=None, alias="hasM")
    rings: tuple[CoordSequence, ...]
    spatial_reference: SpatialReference | None = Field(
        default=None, alias="spatialReference"
    )


EsriGeometry = Union[EsriPoint, EsriMultiPoint, EsriPolyline, EsriPolygon]

# Esri JSON carries no type tag; each kind is recognised by its coordinate key.
_KEY_TO_MODEL: dict[str, type[_EsriModel]] = {
    "rings": EsriPolygon,
    "paths": EsriPolyline,
    "points": EsriMultiPoint,
    "x": EsriPoint,
}


def parse_esri_geometry(data: dict[str, Any]) -> EsriGeometry:
    """Read an Esri JSON geometry mapping into the matching model.

    Args:
        data: Mapping as produced by ``to_dict()`` or an ArcGIS REST response.

    Returns:
        EsriPoint, EsriMultiPoint, EsriPolyline or EsriPolygon.

    Raises:
        InvalidEsriGeometryError: If no geometry key is present or the
            mapping fails validation.
    """
    if not isinstance(data, dict):
        raise InvalidEsriGeometryError(
            f"Esri geometry must be a mapping, got {type(data).__name__}"
        )
    for key, model in _KEY_TO_MODEL.items():
        if key in data:
            try:
                return model.model_validate(data)
            except ValueError as e:
                raise InvalidEsriGeometryError(
                    f"Invalid {model.__name__}: {e}"
                ) from e
    raise InvalidEsriGeometryError(
        f"No geometry key found in Esri JSON (keys: {sorted(data)})"
    )
