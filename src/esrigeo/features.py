"""Convert GeoJSON (RFC 7946) input into Esri FeatureSet dicts.

Handles bare geometries, Feature and FeatureCollection objects. Geometries go
through Shapely (``shapely.geometry.shape``) and then the converters in
``esrigeo.convert``, so GeoJSON's counter-clockwise outer rings come out
clockwise as Esri expects.

A FeatureSet carries one ``geometryType`` for all its features, so mixing
kinds is an error. Features whose geometry cannot be read, has no Esri
equivalent or lacks the z values ``dims=3`` asks for are skipped with a
warning; features with a null geometry keep their attributes and no
geometry.
"""

from __future__ import annotations

from typing import Any, Iterable

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import shape

from esrigeo.convert import SpatialReferenceLike, as_spatial_reference, to_esri
from esrigeo.errors import (
    EsriGeometryError,
    MixedGeometryTypesError,
    UnsupportedGeometryError,
)
from esrigeo.geometry import EsriGeometry


def geometry_from_geojson(
    geometry: dict, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> EsriGeometry:
    """Convert a GeoJSON geometry mapping to an Esri geometry model.

    Args:
        geometry: GeoJSON geometry object (``type`` and ``coordinates``).
        dims: 2 or 3 coordinate components.
        spatial_reference: Optional SpatialReference or WKID.

    Returns:
        The converted Esri geometry.

    Raises:
        UnsupportedGeometryError: For GeometryCollection.
        MissingZError: If ``dims`` is 3 and the geometry has no z values.
        EsriGeometryError: If the mapping is not a readable GeoJSON geometry.
    """
    if not isinstance(geometry, dict) or not isinstance(geometry.get("type"), str):
        raise EsriGeometryError("GeoJSON geometry must be a mapping with a 'type'")
    if geometry["type"] == "GeometryCollection":
        raise UnsupportedGeometryError("GeometryCollection")
    try:
        source = shape(geometry)
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError) as e:
        raise EsriGeometryError(f"Invalid GeoJSON {geometry['type']}: {e}") from e
    return to_esri(source, dims=dims, spatial_reference=spatial_reference)


def feature_set(
    features: Iterable[tuple[EsriGeometry | None, dict[str, Any]]],
    spatial_reference: SpatialReferenceLike = None,
) -> dict:
    """Assemble an Esri FeatureSet dict from converted geometries.

    Args:
        features: (geometry, attributes) pairs; geometry may be None.
        spatial_reference: Optional SpatialReference or WKID for the set.

    Returns:
        Dict with ``geometryType`` (when any geometry is present),
        ``spatialReference`` (when given) and ``features``.

    Raises:
        MixedGeometryTypesError: If the geometries are of different kinds.
    """
    geometry_type = None
    esri_features = []
    for geometry, attributes in features:
        esri_feature: dict[str, Any] = {"attributes": dict(attributes)}
        if geometry is not None:
            if geometry_type is None:
                geometry_type = geometry.geometry_type
            elif geometry.geometry_type != geometry_type:
                raise MixedGeometryTypesError(
                    f"FeatureSet holds {geometry_type.value}, "
                    f"got {geometry.geometry_type.value}"
                )
            esri_feature["geometry"] = geometry.to_dict()
        esri_features.append(esri_feature)

    result: dict[str, Any] = {}
    if geometry_type is not None:
        result["geometryType"] = geometry_type.value
    sr = as_spatial_reference(spatial_reference)
    if sr is not None:
        result["spatialReference"] = sr.to_dict()
    result["features"] = esri_features
    return result


def feature_set_from_geojson(
    data: dict, dims: int = 2, spatial_reference: SpatialReferenceLike = None
) -> dict:
    """Convert a GeoJSON Feature or FeatureCollection to an Esri FeatureSet.

    A bare geometry is treated as a single feature with no attributes.

    Args:
        data: Parsed GeoJSON object.
        dims: 2 or 3 coordinate components.
        spatial_reference: Optional SpatialReference or WKID for the set.

    Returns:
        Esri FeatureSet dict (see ``feature_set``).

    Raises:
        EsriGeometryError: If ``data`` is not a GeoJSON object.
        MixedGeometryTypesError: If features mix geometry kinds.
    """
    if not isinstance(data, dict):
        raise EsriGeometryError(f"GeoJSON must be an object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "FeatureCollection":
        raw_features = data.get("features") or []
    elif kind == "Feature":
        raw_features = [data]
    else:
        raw_features = [{"type": "Feature", "geometry": data, "properties": {}}]

    converted = []
    for idx, raw in enumerate(raw_features):
        feature = _convert_feature(raw, idx, dims)
        if feature is not None:
            converted.append(feature)

    logger.debug(f"Converted {len(converted)}/{len(raw_features)} GeoJSON features")
    return feature_set(converted, spatial_reference)


def _convert_feature(
    raw: Any, idx: int, dims: int
) -> tuple[EsriGeometry | None, dict[str, Any]] | None:
    """Convert one GeoJSON Feature; None when it has to be skipped."""
    if not isinstance(raw, dict):
        logger.warning(f"Skipping feature {idx}: not an object")
        return None

    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        properties = {}

    geometry = raw.get("geometry")
    if geometry is None:
        return None, properties

    try:
        return geometry_from_geojson(geometry, dims=dims), properties
    except EsriGeometryError as e:
        logger.warning(f"Skipping feature {raw.get('id', idx)}: {e}")
        return None
