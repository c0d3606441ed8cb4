"""
Data models for NeTEx stop entities.

This module defines the read-only structures read from a NeTEx SiteFrame.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

PARENT_STOP_PLACE_KEY = "IS_PARENT_STOP_PLACE"


@dataclass(frozen=True)
class KeyValue:
    """A single entry of a NeTEx keyList."""

    key: str
    value: str


def _has_location(latitude: Optional[float], longitude: Optional[float]) -> bool:
    # Zero is how missing location data shows up in the source feeds
    return bool(latitude) and bool(longitude)


@dataclass(frozen=True)
class Quay:
    """Represents a boarding point within a stop place."""

    quay_id: str
    parent_stop_place_id: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_location(self) -> bool:
        """Check if both coordinates are present and non-zero."""
        return _has_location(self.latitude, self.longitude)

    @property
    def geojson_coordinates(self) -> Tuple[float, float]:
        """Return GeoJSON-ordered coordinates (lon, lat)."""
        return (self.longitude, self.latitude)


@dataclass(frozen=True)
class StopPlace:
    """Represents a physical transit location with its quays."""

    stop_place_id: str
    name: str = ""
    stop_place_type: str = ""
    transport_mode: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    key_values: Tuple[KeyValue, ...] = ()
    quays: Tuple[Quay, ...] = ()

    def values_for(self, key: str) -> List[str]:
        """Return every keyList value stored under ``key``, in order."""
        return [kv.value for kv in self.key_values if kv.key == key]

    @property
    def is_parent(self) -> bool:
        """
        Check if this is a structural parent of other stop places.

        Parents carry ``IS_PARENT_STOP_PLACE=true`` (any letter case) in
        their keyList and are not drawn themselves.
        """
        return any(
            value.lower() == "true"
            for value in self.values_for(PARENT_STOP_PLACE_KEY)
        )

    @property
    def has_location(self) -> bool:
        """Check if both coordinates are present and non-zero."""
        return _has_location(self.latitude, self.longitude)

    @property
    def geojson_coordinates(self) -> Tuple[float, float]:
        """Return GeoJSON-ordered coordinates (lon, lat)."""
        return (self.longitude, self.latitude)
