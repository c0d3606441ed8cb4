"""
Vector tile generation with tippecanoe.

Runs the external tippecanoe tool over a GeoJSON file to produce MBTiles.
The features carry their own layer and minzoom hints.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class TippecanoeError(RuntimeError):
    """Raised when tippecanoe is unavailable or fails."""


class TippecanoeRunner:
    """Wrapper around the tippecanoe command line tool."""

    def __init__(
        self,
        executable: str = "tippecanoe",
        force: bool = False,
        extra_args: Optional[Sequence[str]] = None
    ):
        """
        Initialize tippecanoe runner.

        Args:
            executable: Name or path of the tippecanoe binary
            force: Overwrite an existing MBTiles file
            extra_args: Additional command line arguments for tippecanoe
        """
        self.executable = executable
        self.force = force
        self.extra_args = list(extra_args or [])

    def build_command(self, geojson_path: Path, mbtiles_path: Path) -> List[str]:
        """Build the tippecanoe command line."""
        command = [self.executable, "-o", str(mbtiles_path)]
        if self.force:
            command.append("--force")
        command.extend(self.extra_args)
        command.append(str(geojson_path))
        return command

    def run(self, geojson_path: Path, mbtiles_path: Path) -> None:
        """
        Generate an MBTiles file from a GeoJSON file.

        Raises:
            TippecanoeError: If tippecanoe is not installed or exits non-zero
        """
        if shutil.which(self.executable) is None:
            raise TippecanoeError(
                f"{self.executable} not found. Install tippecanoe to generate MBTiles"
            )

        command = self.build_command(geojson_path, mbtiles_path)
        logger.info(f"Running tippecanoe to generate {mbtiles_path}")
        logger.debug(f"Command: {' '.join(command)}")

        # Output goes straight to the console
        result = subprocess.run(command)
        if result.returncode != 0:
            raise TippecanoeError(f"tippecanoe exited with code {result.returncode}")

        logger.info(f"MBTiles written to {mbtiles_path}")
