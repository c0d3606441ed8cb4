"""
NeTEx to GeoJSON conversion pipeline.

Runs every StopPlace of every document through the GeoJSON builder and
collects the features, in encounter order, into one FeatureCollection.
"""

import logging
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .geojson_builder import (
    Feature,
    FeatureCollection,
    GeoJSONBuilder,
    feature_collection,
)
from .netex_parser import (
    NetexParseError,
    XmlDocument,
    find_stop_places,
    parse_document,
)

logger = logging.getLogger(__name__)

Documents = Union[Mapping[str, XmlDocument], Iterable[XmlDocument]]


def named_documents(xml_documents: Documents) -> Iterator[Tuple[str, XmlDocument]]:
    """
    Pair every document with a name used in error messages.

    Mappings keep their keys; documents in a plain sequence are named by
    their position.
    """
    if isinstance(xml_documents, Mapping):
        yield from xml_documents.items()
    else:
        for index, document in enumerate(xml_documents):
            yield f"document[{index}]", document


class NetexConverter:
    """
    Converter from NeTEx documents to a GeoJSON FeatureCollection.

    Documents are processed one after another; nothing is deduplicated
    between them.
    """

    def __init__(
        self,
        builder: Optional[GeoJSONBuilder] = None,
        skip_invalid: bool = False
    ):
        """
        Initialize converter.

        Args:
            builder: Feature builder to use (default settings if None)
            skip_invalid: Log and skip malformed documents instead of raising
        """
        self.builder = builder or GeoJSONBuilder()
        self.skip_invalid = skip_invalid

    def convert_document(
        self,
        xml: XmlDocument,
        document: str = "<document>"
    ) -> List[Feature]:
        """
        Convert a single document into a list of features.

        Raises:
            NetexParseError: If the document is not well-formed XML
        """
        root = parse_document(xml, document)
        stop_places = find_stop_places(root)

        if not stop_places:
            logger.debug(f"No StopPlace elements found in {document}")

        features = []
        for stop_place in stop_places:
            features.extend(self.builder.build_features(stop_place))

        logger.debug(
            f"{document}: {len(stop_places)} stop places, {len(features)} features"
        )
        return features

    def iter_features(
        self,
        documents: Iterable[Tuple[str, XmlDocument]]
    ) -> Iterator[Feature]:
        """
        Yield features from (name, document) pairs in order.

        Raises:
            NetexParseError: If a document is malformed and skip_invalid is off
        """
        for name, xml in documents:
            try:
                features = self.convert_document(xml, name)
            except NetexParseError as e:
                if not self.skip_invalid:
                    raise
                logger.warning(f"Skipping {name}: {e}")
                continue
            yield from features

    def convert(self, xml_documents: Documents) -> FeatureCollection:
        """
        Convert documents into one FeatureCollection.

        Args:
            xml_documents: Sequence of documents, or mapping of name to
                document. A document is XML text or an already parsed tree.

        Returns:
            GeoJSON FeatureCollection dictionary
        """
        features = list(self.iter_features(named_documents(xml_documents)))
        logger.info(f"Converted {len(features)} features")
        return feature_collection(features)


def convert(xml_documents: Documents) -> FeatureCollection:
    """Convert NeTEx documents into a GeoJSON FeatureCollection."""
    return NetexConverter().convert(xml_documents)
