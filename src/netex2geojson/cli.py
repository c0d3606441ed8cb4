"""
Command-line interface for netex2geojson.

Provides a Click-based CLI for converting NeTEx ZIP archives to GeoJSON and,
optionally, MBTiles.
"""

import logging
import sys
import zipfile
from pathlib import Path
from typing import Optional

try:
    import click
except ImportError:
    raise ImportError(
        "click is required. Install it with: pip install click"
    )

from . import __version__
from .archive import load_documents
from .converter import NetexConverter
from .geojson_builder import GeoJSONBuilder, feature_collection, write_geojson
from .netex_parser import NetexParseError
from .tippecanoe import TippecanoeError, TippecanoeRunner


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@click.command()
@click.option(
    '--input', '-i',
    'input_path',
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to the NeTEx ZIP archive (or a single XML file)'
)
@click.option(
    '--output', '-o',
    'output_path',
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to the output GeoJSON file'
)
@click.option(
    '--mbtiles', '-m',
    'mbtiles_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Optional output .mbtiles file (runs tippecanoe)'
)
@click.option(
    '--force',
    is_flag=True,
    help='Let tippecanoe overwrite an existing MBTiles file'
)
@click.option(
    '--skip-invalid',
    is_flag=True,
    help='Skip XML files that are not well-formed instead of aborting'
)
@click.option(
    '--include-transport-mode',
    is_flag=True,
    help='Add the TransportMode of stop places to feature properties'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Enable verbose logging'
)
@click.version_option(version=__version__, prog_name='netex2geojson')
def main(
    input_path: Path,
    output_path: Path,
    mbtiles_path: Optional[Path],
    force: bool,
    skip_invalid: bool,
    include_transport_mode: bool,
    verbose: bool
) -> None:
    """
    Convert NeTEx stop place data to GeoJSON.

    Examples:

      Convert a NeTEx archive to GeoJSON:
        netex2geojson -i stops.zip -o stops.geojson

      Also build vector tiles with tippecanoe:
        netex2geojson -i stops.zip -o stops.geojson -m stops.mbtiles --force
    """
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Reading NeTEx data from {input_path}")
        documents = load_documents(input_path)

        converter = NetexConverter(
            builder=GeoJSONBuilder(include_transport_mode=include_transport_mode),
            skip_invalid=skip_invalid
        )

        with click.progressbar(
            documents.items(),
            length=len(documents),
            label='Processing XML files'
        ) as bar:
            features = list(converter.iter_features(bar))

        logger.info(f"Parsed {len(features)} features from {len(documents)} XML file(s)")
        if not features:
            logger.warning("No features found. The GeoJSON file will be empty.")

        write_geojson(feature_collection(features), output_path)
        click.echo(f"\nSuccess! Wrote {len(features)} features to {output_path}")

        if mbtiles_path:
            runner = TippecanoeRunner(force=force)
            runner.run(output_path, mbtiles_path)
            click.echo(f"MBTiles written to {mbtiles_path}")

    except NetexParseError as e:
        logger.error(f"Invalid XML in {e.document}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except (FileNotFoundError, ValueError, zipfile.BadZipFile) as e:
        logger.error(f"Input error: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except TippecanoeError as e:
        logger.error(f"Tile generation failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except Exception as e:
        logger.exception("Unexpected error during conversion")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
