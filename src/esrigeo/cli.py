"""esrigeo command line: convert GeoJSON or WKT to Esri JSON.

Usage:
    esrigeo input.geojson                 # FeatureCollection -> FeatureSet
    echo 'POLYGON ((0 0, 1 0, 1 1, 0 0))' | esrigeo --format wkt
    esrigeo --dims 3 --wkid 4326 --indent 2 shapes.geojson

Defaults come from ESRIGEO_* environment variables (see esrigeo.config).
"""

from __future__ import annotations

import argparse
import json
import sys

import shapely.wkt
from loguru import logger
from shapely.errors import ShapelyError

from esrigeo.config import settings
from esrigeo.convert import to_esri
from esrigeo.errors import EsriGeometryError
from esrigeo.features import feature_set_from_geojson, geometry_from_geojson

EXIT_OK = 0
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esrigeo", description="Convert GeoJSON or WKT geometry to Esri JSON"
    )
    parser.add_argument(
        "input", nargs="?", default="-", help="Input file ('-' or omitted for stdin)"
    )
    parser.add_argument(
        "--format", choices=("auto", "geojson", "wkt"), default="auto",
        help="Input format (auto tries GeoJSON, then WKT)",
    )
    parser.add_argument(
        "--dims", type=int, choices=(2, 3), default=settings.default_dims,
        help="Coordinate components to keep",
    )
    parser.add_argument(
        "--wkid", type=int, default=settings.default_wkid,
        help="Spatial reference WKID to attach",
    )
    parser.add_argument(
        "--indent", type=int, default=settings.json_indent, help="JSON indent"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log conversion details"
    )
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def convert_text(text: str, fmt: str = "auto", dims: int = 2,
                 wkid: int | None = None, indent: int | None = None) -> str:
    """Convert GeoJSON or WKT text to an Esri JSON string.

    GeoJSON Features and FeatureCollections become a FeatureSet; bare
    geometries (GeoJSON or WKT) become a single Esri geometry.

    Raises:
        EsriGeometryError: If the input cannot be read or converted.
        ValueError: If ``dims`` asks for z the input does not have.
    """
    if fmt in ("auto", "geojson"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            if fmt == "geojson":
                raise EsriGeometryError(f"Invalid GeoJSON: {e}") from e
            logger.debug("Input is not JSON, trying WKT")
        else:
            if isinstance(data, dict) and data.get("type") in ("Feature", "FeatureCollection"):
                result = feature_set_from_geojson(data, dims=dims, spatial_reference=wkid)
                return json.dumps(result, indent=indent)
            return geometry_from_geojson(
                data, dims=dims, spatial_reference=wkid
            ).to_json(indent=indent)

    try:
        geometry = shapely.wkt.loads(text.strip())
    except ShapelyError as e:
        raise EsriGeometryError(f"Invalid WKT: {e}") from e
    return to_esri(geometry, dims=dims, spatial_reference=wkid).to_json(indent=indent)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else settings.log_level)

    try:
        text = _read_input(args.input)
    except OSError as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return EXIT_FAILED

    try:
        output = convert_text(
            text, fmt=args.format, dims=args.dims, wkid=args.wkid, indent=args.indent
        )
    except (EsriGeometryError, ValueError) as e:
        logger.error(f"Conversion failed: {e}")
        return EXIT_FAILED

    sys.stdout.write(output + "\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
