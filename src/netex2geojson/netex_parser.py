"""
NeTEx document navigation.

This module locates StopPlace elements inside a NeTEx PublicationDelivery and
reads them into data model objects. Element names are matched on their local
name, so documents work the same with or without the NeTEx namespace.
"""

import logging
import math
from typing import Any, List, Optional, Union

try:
    from lxml import etree
except ImportError:
    raise ImportError(
        "lxml is required. Install it with: pip install lxml"
    )

from .models import KeyValue, Quay, StopPlace

logger = logging.getLogger(__name__)

# PublicationDelivery is the document root; the rest are nested below it
STOP_PLACE_PATH = ("dataObjects", "SiteFrame", "stopPlaces", "StopPlace")
ROOT_ELEMENT = "PublicationDelivery"

XmlDocument = Union[str, bytes, Any]


class NetexParseError(ValueError):
    """Raised when a document is not well-formed XML."""

    def __init__(self, document: str, message: str):
        super().__init__(f"Failed to parse XML in {document}: {message}")
        self.document = document


def local_name(tag: Any) -> Optional[str]:
    """
    Return an element tag without its namespace.

    Comments and processing instructions have non-string tags and yield None.
    """
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


def children(element: Any, name: str) -> List[Any]:
    """Return all direct children named ``name``, in document order."""
    return [child for child in element if local_name(child.tag) == name]


def descendants(element: Any, *path: str) -> List[Any]:
    """
    Follow a path of child names from ``element``.

    Every step may match zero, one or many elements; all matches are
    returned in document order.
    """
    nodes = [element]
    for name in path:
        nodes = [child for node in nodes for child in children(node, name)]
    return nodes


def child_text(element: Any, *path: str, strip: bool = True) -> str:
    """Return the text of the first element along ``path``, or ''."""
    nodes = descendants(element, *path)
    if not nodes or nodes[0].text is None:
        return ""
    text = nodes[0].text
    return text.strip() if strip else text


def parse_document(xml: XmlDocument, document: str = "<document>") -> Any:
    """
    Return the root element of a NeTEx document.

    Args:
        xml: XML text (str or bytes), a parsed element tree, or an element
        document: Name used to identify the document in errors

    Raises:
        NetexParseError: If the text is not well-formed XML
    """
    if isinstance(xml, (str, bytes)):
        try:
            if isinstance(xml, str):
                # Already decoded, so any declared encoding no longer applies
                parser = etree.XMLParser(
                    resolve_entities=False, no_network=True, huge_tree=True,
                    encoding="utf-8"
                )
                data = xml.encode("utf-8")
            else:
                parser = etree.XMLParser(
                    resolve_entities=False, no_network=True, huge_tree=True
                )
                data = xml
            return etree.fromstring(data, parser)
        except (etree.XMLSyntaxError, UnicodeError, ValueError) as e:
            raise NetexParseError(document, str(e)) from e

    if hasattr(xml, "getroot"):
        return xml.getroot()
    return xml


def find_stop_places(root: Any) -> List[Any]:
    """
    Return the StopPlace elements of a PublicationDelivery, in order.

    A document missing any level of the path has no stop places.
    """
    if local_name(root.tag) != ROOT_ELEMENT:
        logger.debug(f"Root element is {root.tag}, not {ROOT_ELEMENT}")
        return []
    return descendants(root, *STOP_PLACE_PATH)


def _coordinate(text: str) -> Optional[float]:
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _centroid(element: Any):
    latitude = _coordinate(child_text(element, "Centroid", "Location", "Latitude"))
    longitude = _coordinate(child_text(element, "Centroid", "Location", "Longitude"))
    return latitude, longitude


def read_key_values(element: Any) -> List[KeyValue]:
    """Read the keyList of an element as ordered key/value pairs, verbatim."""
    return [
        KeyValue(
            key=child_text(kv, "Key", strip=False),
            value=child_text(kv, "Value", strip=False)
        )
        for kv in descendants(element, "keyList", "KeyValue")
    ]


def read_quay(element: Any, parent_stop_place_id: str) -> Quay:
    """Read a Quay element belonging to the given stop place."""
    latitude, longitude = _centroid(element)
    return Quay(
        quay_id=element.get("id", ""),
        parent_stop_place_id=parent_stop_place_id,
        latitude=latitude,
        longitude=longitude,
    )


def read_stop_place(element: Any) -> StopPlace:
    """Read a StopPlace element, including its quays."""
    stop_place_id = element.get("id", "")
    latitude, longitude = _centroid(element)

    return StopPlace(
        stop_place_id=stop_place_id,
        name=child_text(element, "Name"),
        stop_place_type=child_text(element, "StopPlaceType"),
        transport_mode=child_text(element, "TransportMode"),
        latitude=latitude,
        longitude=longitude,
        key_values=tuple(read_key_values(element)),
        quays=tuple(
            read_quay(quay, stop_place_id)
            for quay in descendants(element, "quays", "Quay")
        ),
    )
