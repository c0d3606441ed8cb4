"""
Shared fixtures for building small NeTEx documents.
"""

import pytest

NETEX_NS = "http://www.netex.org.uk/netex"


def _centroid(lat, lon):
    if lat is None and lon is None:
        return ""
    parts = []
    if lat is not None:
        parts.append(f"<Latitude>{lat}</Latitude>")
    if lon is not None:
        parts.append(f"<Longitude>{lon}</Longitude>")
    return f"<Centroid><Location>{''.join(parts)}</Location></Centroid>"


def quay_xml(quay_id, lat=None, lon=None):
    """Build a Quay element."""
    return f'<Quay id="{quay_id}" version="1">{_centroid(lat, lon)}</Quay>'


def stop_place_xml(
    stop_place_id,
    name="Test Stop",
    stop_place_type="onstreetBus",
    lat=None,
    lon=None,
    key_values=(),
    quays=(),
    transport_mode=None
):
    """Build a StopPlace element."""
    parts = [f"<Name>{name}</Name>"]
    if key_values:
        entries = "".join(
            f"<KeyValue><Key>{key}</Key><Value>{value}</Value></KeyValue>"
            for key, value in key_values
        )
        parts.append(f"<keyList>{entries}</keyList>")
    parts.append(_centroid(lat, lon))
    if transport_mode:
        parts.append(f"<TransportMode>{transport_mode}</TransportMode>")
    if stop_place_type:
        parts.append(f"<StopPlaceType>{stop_place_type}</StopPlaceType>")
    if quays:
        parts.append(f"<quays>{''.join(quays)}</quays>")
    return f'<StopPlace id="{stop_place_id}" version="1">{"".join(parts)}</StopPlace>'


def publication_xml(stop_places=(), namespace=NETEX_NS):
    """Wrap StopPlace elements in a PublicationDelivery document."""
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<PublicationDelivery{xmlns} version="1.15:NO-NeTEx-stops:1.0">'
        "<PublicationTimestamp>2024-01-01T00:00:00</PublicationTimestamp>"
        "<dataObjects>"
        '<SiteFrame id="NSR:SiteFrame:1" version="1">'
        f"<stopPlaces>{''.join(stop_places)}</stopPlaces>"
        "</SiteFrame>"
        "</dataObjects>"
        "</PublicationDelivery>"
    )


@pytest.fixture
def netex():
    """Access to the NeTEx document builders."""

    class Builders:
        quay = staticmethod(quay_xml)
        stop_place = staticmethod(stop_place_xml)
        publication = staticmethod(publication_xml)

    return Builders
