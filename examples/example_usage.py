"""
Example usage of netex2geojson Python API.

This demonstrates how to use netex2geojson programmatically instead of via CLI.
"""

from pathlib import Path
from netex2geojson import GeoJSONBuilder, NetexConverter, convert, write_geojson
from netex2geojson.archive import load_documents
from netex2geojson.tippecanoe import TippecanoeRunner


def example_basic_usage():
    """Basic example: Convert a NeTEx archive to GeoJSON."""
    print("Example 1: Basic conversion")

    documents = load_documents(Path("./netex/stops.zip"))
    collection = convert(documents)

    print(f"Converted {len(collection['features'])} features")

    write_geojson(collection, Path("./output/stops.geojson"))


def example_inline_xml():
    """Example: Convert XML text directly."""
    print("\nExample 2: Inline XML")

    xml = """
    <PublicationDelivery xmlns="http://www.netex.org.uk/netex">
      <dataObjects>
        <SiteFrame>
          <stopPlaces>
            <StopPlace id="NSR:StopPlace:58366">
              <Name>Oslo lufthavn</Name>
              <Centroid><Location>
                <Longitude>11.097</Longitude><Latitude>60.193</Latitude>
              </Location></Centroid>
              <StopPlaceType>airport</StopPlaceType>
            </StopPlace>
          </stopPlaces>
        </SiteFrame>
      </dataObjects>
    </PublicationDelivery>
    """
    collection = convert([xml])

    for feature in collection["features"]:
        props = feature["properties"]
        print(f"{props['id']}: {props['name']} on layer {feature['tippecanoe']['layer']}")


def example_vector_tiles():
    """Example: Skip broken files, keep transport modes and build MBTiles."""
    print("\nExample 3: Vector tiles")

    converter = NetexConverter(
        builder=GeoJSONBuilder(include_transport_mode=True),
        skip_invalid=True
    )
    collection = converter.convert(load_documents(Path("./netex/stops.zip")))

    geojson_path = Path("./output/stops.geojson")
    write_geojson(collection, geojson_path)

    runner = TippecanoeRunner(force=True, extra_args=["--drop-densest-as-needed"])
    runner.run(geojson_path, Path("./output/stops.mbtiles"))


if __name__ == "__main__":
    example_inline_xml()
