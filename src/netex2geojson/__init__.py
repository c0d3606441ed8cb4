"""
netex2geojson - Convert NeTEx stop place data to GeoJSON

A Python library and CLI tool for converting NeTEx (Nordic/European Transport
EXchange) stop places and quays into GeoJSON point features, ready for vector
tile generation with tippecanoe.
"""

__version__ = "0.1.0"

from .models import KeyValue, Quay, StopPlace
from .netex_parser import NetexParseError, find_stop_places, parse_document
from .geojson_builder import GeoJSONBuilder, build_features, write_geojson
from .converter import NetexConverter, convert

__all__ = [
    "KeyValue",
    "Quay",
    "StopPlace",
    "NetexParseError",
    "find_stop_places",
    "parse_document",
    "GeoJSONBuilder",
    "build_features",
    "write_geojson",
    "NetexConverter",
    "convert",
]
