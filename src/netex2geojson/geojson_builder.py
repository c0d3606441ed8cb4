"""
GeoJSON feature builder for NeTEx stop places.

This module handles converting StopPlace objects into GeoJSON Point features
with tippecanoe layer hints, and writing feature collections to disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from . import classification
from .models import Quay, StopPlace
from .netex_parser import read_stop_place

logger = logging.getLogger(__name__)

Feature = Dict[str, Any]
FeatureCollection = Dict[str, Any]


def point_feature(
    coordinates: Tuple[float, float],
    layer: str,
    properties: Dict[str, Any]
) -> Feature:
    """Assemble a GeoJSON Point feature with a tippecanoe layer hint."""
    lon, lat = coordinates
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "tippecanoe": {
            "layer": layer,
            "minzoom": classification.minzoom(layer),
        },
        "properties": properties,
    }


def feature_collection(features: List[Feature]) -> FeatureCollection:
    """Wrap features in a GeoJSON FeatureCollection."""
    return {"type": "FeatureCollection", "features": list(features)}


class GeoJSONBuilder:
    """
    Builder for GeoJSON features from NeTEx stop places.

    Emits one feature per stop place and one per quay. Structural parent
    stop places and entities without coordinates are left out.
    """

    def __init__(self, include_transport_mode: bool = False):
        """
        Initialize GeoJSON builder.

        Args:
            include_transport_mode: Add the TransportMode of stop places
                to their feature properties
        """
        self.include_transport_mode = include_transport_mode

    def build_features(self, stop_place: Union[StopPlace, Any]) -> List[Feature]:
        """
        Build the features for one stop place.

        Args:
            stop_place: StopPlace object or StopPlace XML element

        Returns:
            The stop place feature (if any) followed by its quay features
        """
        if not isinstance(stop_place, StopPlace):
            stop_place = read_stop_place(stop_place)

        features = []

        if stop_place.is_parent:
            logger.debug(f"Skipping parent stop place {stop_place.stop_place_id}")
        elif not stop_place.has_location:
            logger.debug(f"Stop place {stop_place.stop_place_id} has no location")
        else:
            features.append(self.stop_place_feature(stop_place))

        for quay in stop_place.quays:
            if not quay.has_location:
                logger.debug(f"Quay {quay.quay_id} has no location")
                continue
            features.append(self.quay_feature(quay))

        return features

    def stop_place_feature(self, stop_place: StopPlace) -> Feature:
        """Build the feature for a stop place, ignoring the parent flag."""
        stop_place_type = stop_place.stop_place_type
        properties = {
            "type": "StopPlace",
            "id": stop_place.stop_place_id,
            "name": stop_place.name,
            "stopPlaceType": stop_place_type,
            "stopPlaceCategory": classification.category(stop_place_type),
        }
        if self.include_transport_mode:
            properties["transportMode"] = stop_place.transport_mode

        return point_feature(
            stop_place.geojson_coordinates,
            classification.layer(stop_place_type),
            properties
        )

    def quay_feature(self, quay: Quay) -> Feature:
        """Build the feature for a quay."""
        return point_feature(
            quay.geojson_coordinates,
            classification.QUAY_LAYER,
            {
                "type": "Quay",
                "id": quay.quay_id,
                "parentStopPlaceId": quay.parent_stop_place_id,
            }
        )


def build_features(stop_place: Union[StopPlace, Any]) -> List[Feature]:
    """Build features for one stop place with default builder settings."""
    return GeoJSONBuilder().build_features(stop_place)


def write_geojson(collection: FeatureCollection, output_path: Path) -> None:
    """
    Write a feature collection as pretty-printed UTF-8 JSON.

    Args:
        collection: GeoJSON FeatureCollection to write
        output_path: Path where the GeoJSON file will be saved
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(collection, f, ensure_ascii=False, indent=2)

    logger.info(
        f"Saved {len(collection['features'])} features to {output_path}"
    )
