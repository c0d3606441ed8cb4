"""
Reading NeTEx XML payloads from disk.
"""

import logging
import zipfile
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)


def extract_xml_documents(zip_path: Path) -> Dict[str, bytes]:
    """
    Read every XML entry of a ZIP archive.

    Args:
        zip_path: Path to the NeTEx ZIP archive

    Returns:
        Dictionary mapping entry name to raw XML bytes, in archive order

    Raises:
        FileNotFoundError: If the archive does not exist
        ValueError: If the archive contains no XML files
        zipfile.BadZipFile: If the file is not a valid ZIP archive
    """
    zip_path = Path(zip_path)
    if not zip_path.exists():
        raise FileNotFoundError(f"ZIP archive not found: {zip_path}")

    documents: Dict[str, bytes] = {}
    with zipfile.ZipFile(zip_path) as archive:
        for info in archive.infolist():
            if info.is_dir() or not info.filename.lower().endswith('.xml'):
                continue
            logger.debug(f"Reading {info.filename} ({info.file_size} bytes)")
            documents[info.filename] = archive.read(info)

    if not documents:
        raise ValueError(f"No XML files found in ZIP: {zip_path}")

    logger.info(f"Found {len(documents)} XML file(s) in {zip_path}")
    return documents


def load_documents(input_path: Path) -> Dict[str, bytes]:
    """
    Load NeTEx documents from a ZIP archive or a single XML file.

    Returns:
        Dictionary mapping document name to raw XML bytes
    """
    input_path = Path(input_path)
    if input_path.suffix.lower() == '.xml':
        if not input_path.exists():
            raise FileNotFoundError(f"XML file not found: {input_path}")
        return {input_path.name: input_path.read_bytes()}
    return extract_xml_documents(input_path)
