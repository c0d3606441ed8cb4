"""
Classification tables for NeTEx stop place types.

Maps a StopPlaceType onto a semantic category and a vector tile layer, and
each layer onto the lowest zoom level at which it is rendered.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

DEFAULT_CATEGORY = "other"
DEFAULT_LAYER = "minor"
DEFAULT_MINZOOM = 12

QUAY_LAYER = "quays"

# One category per group of related stop types, not per type.
CATEGORY_GROUPS: Dict[str, List[str]] = {
    "train": ["railStation", "onstreetTram", "metroStation"],
    "bus": ["onstreetBus", "busStation"],
    "water": ["harbourPort", "ferryStop"],
    "liftStation": ["liftStation"],
    "airport": ["airport"],
    "taxiStand": ["taxiStand"],
}

# Order matters: a type listed in several groups ends up in the last one.
LAYER_GROUPS: Dict[str, List[str]] = {
    "major": ["harbourPort", "airport"],
    "medium": [
        "railStation", "liftStation", "ferryStop",
        "metroStation", "busStation", "taxiStand",
    ],
    "minor": ["onstreetTram", "onstreetBus", "taxiStand"],
}

LAYER_MIN_ZOOM: Mapping[str, int] = MappingProxyType({
    "major": 8,
    "medium": 10,
    "minor": 12,
    QUAY_LAYER: 14,
})


def _invert(groups: Dict[str, List[str]]) -> Mapping[str, str]:
    """Turn {group: [members]} into a read-only {member: group} lookup."""
    lookup: Dict[str, str] = {}
    for group, members in groups.items():
        for member in members:
            lookup[member] = group
    return MappingProxyType(lookup)


STOP_PLACE_CATEGORIES = _invert(CATEGORY_GROUPS)
STOP_PLACE_LAYERS = _invert(LAYER_GROUPS)


def category(stop_place_type: str) -> str:
    """Return the category of a StopPlaceType, ``other`` when unmapped."""
    return STOP_PLACE_CATEGORIES.get(stop_place_type, DEFAULT_CATEGORY)


def layer(stop_place_type: str) -> str:
    """Return the tile layer of a StopPlaceType, ``minor`` when unmapped."""
    return STOP_PLACE_LAYERS.get(stop_place_type, DEFAULT_LAYER)


def minzoom(layer_name: str) -> int:
    """Return the minimum zoom for a tile layer, 12 when unmapped."""
    return LAYER_MIN_ZOOM.get(layer_name, DEFAULT_MINZOOM)
