"""
Tests for GeoJSON feature building and writing.
"""

import json

import pytest

from netex2geojson.geojson_builder import (
    GeoJSONBuilder,
    build_features,
    feature_collection,
    write_geojson,
)
from netex2geojson.models import KeyValue, Quay, StopPlace
from netex2geojson.netex_parser import find_stop_places, parse_document


def stop_place_node(netex, *args, **kwargs):
    """Return the parsed element for a single StopPlace."""
    xml = netex.publication([netex.stop_place(*args, **kwargs)])
    return find_stop_places(parse_document(xml))[0]


class TestBuildFeatures:
    """Tests for turning stop places into features."""

    def test_airport_with_quay(self, netex):
        """A stop place with one quay gives two features."""
        node = stop_place_node(
            netex, "NSR:StopPlace:1", name="Oslo lufthavn",
            stop_place_type="airport", lat=60.1, lon=11.1,
            quays=[netex.quay("NSR:Quay:1", 60.11, 11.11)]
        )
        features = build_features(node)

        assert len(features) == 2
        stop_feature, quay_feature = features

        assert stop_feature == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [11.1, 60.1]},
            "tippecanoe": {"layer": "major", "minzoom": 8},
            "properties": {
                "type": "StopPlace",
                "id": "NSR:StopPlace:1",
                "name": "Oslo lufthavn",
                "stopPlaceType": "airport",
                "stopPlaceCategory": "airport",
            },
        }
        assert quay_feature == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [11.11, 60.11]},
            "tippecanoe": {"layer": "quays", "minzoom": 14},
            "properties": {
                "type": "Quay",
                "id": "NSR:Quay:1",
                "parentStopPlaceId": "NSR:StopPlace:1",
            },
        }

    @pytest.mark.parametrize("value", ["true", "TRUE", "True"])
    def test_parent_stop_place_keeps_quays(self, netex, value):
        """A parent stop place is dropped but its quays are not."""
        node = stop_place_node(
            netex, "NSR:StopPlace:2", lat=59.9, lon=10.7,
            key_values=[("IS_PARENT_STOP_PLACE", value)],
            quays=[netex.quay("NSR:Quay:2", 59.91, 10.71)]
        )
        features = build_features(node)

        assert len(features) == 1
        assert features[0]["properties"]["type"] == "Quay"
        assert features[0]["properties"]["parentStopPlaceId"] == "NSR:StopPlace:2"

    def test_parent_flag_false(self, netex):
        node = stop_place_node(
            netex, "NSR:StopPlace:2", lat=59.9, lon=10.7,
            key_values=[("IS_PARENT_STOP_PLACE", "false")]
        )
        assert len(build_features(node)) == 1

    def test_zero_coordinates(self, netex):
        """A stop place at 0,0 is dropped, its quay is still emitted."""
        node = stop_place_node(
            netex, "NSR:StopPlace:3", lat=0, lon=0,
            quays=[netex.quay("NSR:Quay:3", 63.4, 10.4)]
        )
        features = build_features(node)

        assert len(features) == 1
        assert features[0]["properties"] == {
            "type": "Quay",
            "id": "NSR:Quay:3",
            "parentStopPlaceId": "NSR:StopPlace:3",
        }

    @pytest.mark.parametrize("lat,lon", [
        (None, None),
        (60.0, None),
        (None, 10.0),
        (0, 10.0),
        (60.0, 0),
    ])
    def test_missing_coordinates(self, netex, lat, lon):
        node = stop_place_node(
            netex, "NSR:StopPlace:4", lat=lat, lon=lon,
            quays=[netex.quay("NSR:Quay:4", lat, lon)]
        )
        assert build_features(node) == []

    def test_quays_follow_stop_place(self, netex):
        node = stop_place_node(
            netex, "NSR:StopPlace:5", lat=60.0, lon=10.0,
            quays=[
                netex.quay("NSR:Quay:51", 60.01, 10.01),
                netex.quay("NSR:Quay:52"),
                netex.quay("NSR:Quay:53", 60.03, 10.03),
            ]
        )
        ids = [f["properties"]["id"] for f in build_features(node)]
        assert ids == ["NSR:StopPlace:5", "NSR:Quay:51", "NSR:Quay:53"]

    def test_unknown_type(self, netex):
        node = stop_place_node(
            netex, "NSR:StopPlace:6", stop_place_type="unknownFutureType",
            lat=60.0, lon=10.0
        )
        [feature] = build_features(node)

        assert feature["tippecanoe"] == {"layer": "minor", "minzoom": 12}
        assert feature["properties"]["stopPlaceCategory"] == "other"
        assert feature["properties"]["stopPlaceType"] == "unknownFutureType"

    def test_missing_name_and_type(self, netex):
        node = stop_place_node(
            netex, "NSR:StopPlace:7", name="", stop_place_type="",
            lat=60.0, lon=10.0
        )
        [feature] = build_features(node)

        assert feature["properties"]["name"] == ""
        assert feature["properties"]["stopPlaceCategory"] == "other"
        assert feature["tippecanoe"]["layer"] == "minor"


class TestGeoJSONBuilder:
    """Tests for builder configuration and model input."""

    def test_accepts_model(self):
        stop_place = StopPlace(
            stop_place_id="NSR:StopPlace:10",
            name="Bergen busstasjon",
            stop_place_type="busStation",
            latitude=60.39,
            longitude=5.33,
            quays=(Quay("NSR:Quay:10", "NSR:StopPlace:10", 60.391, 5.331),)
        )
        features = GeoJSONBuilder().build_features(stop_place)

        assert features[0]["tippecanoe"] == {"layer": "medium", "minzoom": 10}
        assert features[0]["properties"]["stopPlaceCategory"] == "bus"
        assert features[1]["geometry"]["coordinates"] == [5.331, 60.391]

    def test_parent_model(self):
        stop_place = StopPlace(
            stop_place_id="NSR:StopPlace:11",
            latitude=60.0,
            longitude=10.0,
            key_values=(KeyValue("IS_PARENT_STOP_PLACE", "true"),)
        )
        assert GeoJSONBuilder().build_features(stop_place) == []

    def test_transport_mode_off_by_default(self, netex):
        node = stop_place_node(netex, "A", lat=60.0, lon=10.0, transport_mode="bus")
        [feature] = GeoJSONBuilder().build_features(node)
        assert "transportMode" not in feature["properties"]

    def test_include_transport_mode(self, netex):
        node = stop_place_node(
            netex, "A", lat=60.0, lon=10.0, transport_mode="bus",
            quays=[netex.quay("Q", 60.0, 10.0)]
        )
        stop_feature, quay_feature = GeoJSONBuilder(
            include_transport_mode=True
        ).build_features(node)

        assert stop_feature["properties"]["transportMode"] == "bus"
        assert "transportMode" not in quay_feature["properties"]


class TestWriteGeoJSON:
    """Tests for writing feature collections."""

    def test_write(self, tmp_path, netex):
        node = stop_place_node(netex, "NSR:StopPlace:1", name="Ålesund", lat=62.47, lon=6.15)
        collection = feature_collection(build_features(node))
        output_path = tmp_path / "out" / "stops.geojson"

        write_geojson(collection, output_path)

        text = output_path.read_text(encoding="utf-8")
        assert "Ålesund" in text
        assert "\n  " in text
        assert json.loads(text) == collection

    def test_empty_collection(self, tmp_path):
        output_path = tmp_path / "empty.geojson"
        write_geojson(feature_collection([]), output_path)

        assert json.loads(output_path.read_text(encoding="utf-8")) == {
            "type": "FeatureCollection",
            "features": [],
        }
