"""Exceptions raised by the Esri geometry conversion layer."""

from __future__ import annotations


class EsriGeometryError(Exception):
    """Base class for esrigeo errors."""


class UnsupportedGeometryError(EsriGeometryError):
    """Raised when a source geometry has no Esri representation.

    Esri JSON has no container for mixed geometry kinds, so every
    GeometryCollection (empty ones included) lands here instead of being
    partially converted.
    """

    def __init__(self, geometry_type: str, message: str | None = None) -> None:
        self.geometry_type = geometry_type
        super().__init__(
            message or f"{geometry_type} has no Esri geometry representation"
        )


class InvalidEsriGeometryError(EsriGeometryError):
    """Raised when an Esri JSON mapping is not a recognisable geometry."""


class MixedGeometryTypesError(EsriGeometryError):
    """Raised when a FeatureSet would hold more than one geometry type."""


class MissingZError(EsriGeometryError, ValueError):
    """Raised when z values are requested from a coordinate that has none."""
