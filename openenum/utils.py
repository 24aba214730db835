"""Utility functions for loading enum schema documents.

This module provides functions for loading schema JSON from files, URLs
and streams with proper error handling and validation.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def _require_object(data: Any, source: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaLoaderError(f"Schema document from {source} must be a JSON object")
    return data


def load_schema_from_file(file_path: str | Path) -> tuple[str, dict[str, Any]]:
    """Load a schema document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load schema from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        # Might still be valid JSON
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded schema from %s", file_path)
    return str(file_path), _require_object(data, str(file_path))


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, dict[str, Any]]:
    """Load a schema document from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load schema from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "unknown"
        logger.error("HTTP error %s for URL: %s", status, url)
        raise SchemaLoaderError(f"HTTP error {status} for URL: {url}") from e
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info("Loaded schema from %s", url)
    return url, _require_object(data, url)


def load_schema_from_stream(stream: TextIO | None = None) -> tuple[str, dict[str, Any]]:
    """Load a schema document from a text stream (stdin by default).

    Raises:
        SchemaLoaderError: If the stream does not hold a JSON object.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON on stdin: %s", e)
        raise SchemaLoaderError(f"Invalid JSON on stdin: {e}") from e

    return "<stdin>", _require_object(data, "stdin")


def load_schema_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, dict[str, Any]]:
    """Load a schema document from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    return load_schema_from_url(url, timeout)
