"""Utility functions for reading schemas and writing generated code.

This module provides functions for loading schema text from files and URLs,
and for writing generated output without leaving partial files behind.
"""

import os
import tempfile
from pathlib import Path
from urllib.parse import urlparse

import requests

from .codegen.core.errors import CatalogIOError
from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_SUFFIXES = {".yaml", ".yml"}


def read_schema_file(file_path: str | Path) -> tuple[str, str]:
    """Read schema text from a local file.

    Args:
        file_path: Path to the YAML schema.

    Returns:
        Tuple of (source description, schema text).

    Raises:
        CatalogIOError: If the file is missing or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading schema from file: {file_path}")

    if not file_path.is_file():
        logger.error(f"Schema file not found: {file_path}")
        raise CatalogIOError(f"Schema file not found: {file_path}")

    if file_path.suffix.lower() not in SCHEMA_SUFFIXES:
        logger.warning(f"Schema file does not have a .yaml extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading schema file {file_path}: {e}")
        raise CatalogIOError(f"Error reading schema file {file_path}: {e}") from e

    return str(file_path), text


def read_schema_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch schema text from a URL.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, schema text).

    Raises:
        CatalogIOError: If the URL is invalid or the request fails.
    """
    logger.debug(f"Fetching schema from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise CatalogIOError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise CatalogIOError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise CatalogIOError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise CatalogIOError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}")
        raise CatalogIOError(f"Request error for URL {url}: {e}") from e

    # YAML is UTF-8 unless the server says otherwise
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"

    logger.info(f"Fetched schema from {url}")
    return url, response.text


def read_schema_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Read schema text from either a file or a URL.

    Args:
        file_path: Path to a local schema (mutually exclusive with url).
        url: URL to fetch the schema from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, schema text).

    Raises:
        CatalogIOError: If neither or both sources are given, or reading fails.
    """
    if not file_path and not url:
        raise CatalogIOError("Either file_path or url must be provided")

    if file_path and url:
        raise CatalogIOError("Cannot specify both file_path and url")

    if file_path:
        return read_schema_file(file_path)
    return read_schema_url(url, timeout)


def write_atomic(output_path: str | Path, text: str) -> Path:
    """Write text so that output_path holds either the old or the new content.

    The text is written to a temporary file in the destination directory and
    moved into place with os.replace.

    Args:
        output_path: Destination file.
        text: Complete content to write.

    Returns:
        The destination path.

    Raises:
        CatalogIOError: If the file cannot be written.
    """
    output_path = Path(output_path)
    directory = output_path.parent

    if not directory.is_dir():
        raise CatalogIOError(f"Output directory does not exist: {directory}")

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.error(f"Failed to write {output_path}: {e}")
        raise CatalogIOError(f"Failed to write {output_path}: {e}") from e

    logger.info(f"Wrote {output_path}")
    return output_path
