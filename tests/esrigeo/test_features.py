"""Tests for GeoJSON -> Esri FeatureSet conversion."""

import pytest
from esrigeo.errors import (
    EsriGeometryError,
    MissingZError,
    MixedGeometryTypesError,
    UnsupportedGeometryError,
)
from esrigeo.features import (
    feature_set,
    feature_set_from_geojson,
    geometry_from_geojson,
)
from esrigeo.geometry import EsriPoint, EsriPolygon


@pytest.fixture
def parcel_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": "p1",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
                },
                "properties": {"name": "Lot 1", "acres": 1.2},
            },
            {
                "type": "Feature",
                "id": "p2",
                "geometry": {
                    "type": "MultiPolygon",
                    "coordinates": [
                        [[[5, 5], [6, 5], [6, 6], [5, 5]]],
                        [[[8, 8], [9, 8], [9, 9], [8, 8]]],
                    ],
                },
                "properties": {"name": "Lot 2"},
            },
        ],
    }


class TestGeometryFromGeoJSON:

    def test_point(self):
        result = geometry_from_geojson({"type": "Point", "coordinates": [-122.4, 37.7]})
        assert result == EsriPoint(x=-122.4, y=37.7)

    def test_polygon_rewound(self):
        """GeoJSON exteriors are CCW; Esri wants CW."""
        result = geometry_from_geojson({
            "type": "Polygon",
            "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
        })
        assert isinstance(result, EsriPolygon)
        assert result.rings[0][1] == (0.0, 1.0)

    def test_geometry_collection_unsupported(self):
        with pytest.raises(UnsupportedGeometryError):
            geometry_from_geojson({"type": "GeometryCollection", "geometries": []})

    def test_missing_type(self):
        with pytest.raises(EsriGeometryError):
            geometry_from_geojson({"coordinates": [0, 0]})

    def test_unknown_type(self):
        with pytest.raises(EsriGeometryError):
            geometry_from_geojson({"type": "Circle", "coordinates": [0, 0]})

    def test_missing_z(self):
        with pytest.raises(MissingZError):
            geometry_from_geojson({"type": "Point", "coordinates": [1, 2]}, dims=3)


class TestFeatureSet:

    def test_feature_collection(self, parcel_collection):
        result = feature_set_from_geojson(parcel_collection, spatial_reference=4326)
        assert result["geometryType"] == "esriGeometryPolygon"
        assert result["spatialReference"] == {"wkid": 4326}
        assert len(result["features"]) == 2
        first = result["features"][0]
        assert first["attributes"] == {"name": "Lot 1", "acres": 1.2}
        assert first["geometry"]["rings"][0] == [
            [0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0], [0.0, 0.0]
        ]
        assert "spatialReference" not in first["geometry"]
        # MultiPolygon members flattened into one ring list
        assert len(result["features"][1]["geometry"]["rings"]) == 2

    def test_single_feature(self):
        result = feature_set_from_geojson({
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            "properties": None,
        })
        assert result["geometryType"] == "esriGeometryPolyline"
        assert result["features"][0]["attributes"] == {}

    def test_bare_geometry(self):
        result = feature_set_from_geojson({"type": "MultiPoint", "coordinates": [[0, 0], [1, 1]]})
        assert result["geometryType"] == "esriGeometryMultipoint"
        assert result["features"][0]["geometry"] == {"points": [[0.0, 0.0], [1.0, 1.0]]}

    def test_null_geometry_keeps_attributes(self):
        result = feature_set_from_geojson({
            "type": "FeatureCollection",
            "features": [{"type": "Feature", "geometry": None, "properties": {"a": 1}}],
        })
        assert "geometryType" not in result
        assert result["features"] == [{"attributes": {"a": 1}}]

    def test_unconvertible_features_skipped(self, parcel_collection):
        parcel_collection["features"].extend([
            {"type": "Feature", "geometry": {"type": "GeometryCollection", "geometries": []},
             "properties": {}},
            "not a feature",
        ])
        result = feature_set_from_geojson(parcel_collection)
        assert len(result["features"]) == 2

    def test_mixed_types_rejected(self, parcel_collection):
        parcel_collection["features"].append({
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [0, 0]},
            "properties": {},
        })
        with pytest.raises(MixedGeometryTypesError):
            feature_set_from_geojson(parcel_collection)

    def test_missing_z_features_skipped_in_3d(self):
        """With dims=3, 2-D features are skipped and 3-D ones kept."""
        result = feature_set_from_geojson({
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0, 5]},
                 "properties": {"name": "tower"}},
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 1]},
                 "properties": {"name": "flat"}},
            ],
        }, dims=3)
        assert len(result["features"]) == 1
        assert result["features"][0]["attributes"] == {"name": "tower"}
        assert result["features"][0]["geometry"] == {"x": 0.0, "y": 0.0, "z": 5.0}

    def test_not_an_object(self):
        with pytest.raises(EsriGeometryError):
            feature_set_from_geojson([1, 2, 3])

    def test_empty_feature_set(self):
        assert feature_set([]) == {"features": []}
