"""Utility functions for loading Smithy JSON AST documents.

This module provides functions for loading model documents from files, URLs
and streams with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .codegen.core.model import Model, load_model
from .logging_config import get_logger

logger = get_logger(__name__)


class ModelSourceError(Exception):
    """Raised when a model document cannot be read or parsed."""

    pass


def _check_document(data: Any, source: str) -> None:
    if not isinstance(data, dict) or "shapes" not in data:
        logger.warning("%s does not look like a Smithy JSON AST", source)


def load_model_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a JSON AST document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ModelSourceError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load model from file: %s", file_path)

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
        raise ModelSourceError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise ModelSourceError(f"Error reading file {file_path}: {e}") from e

    _check_document(data, str(file_path))
    logger.info("Loaded model document from %s", file_path)
    return str(file_path), data


def load_model_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a JSON AST document from a URL.

    Args:
        url: URL to fetch the model from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        ModelSourceError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load model from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise ModelSourceError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise ModelSourceError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise ModelSourceError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise ModelSourceError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise ModelSourceError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise ModelSourceError(f"Invalid JSON response from URL {url}: {e}") from e

    _check_document(data, url)
    logger.info("Loaded model document from %s", url)
    return url, data


def load_model_from_stream(stream: TextIO, name: str = "<stdin>") -> tuple[str, Any]:
    """Load a JSON AST document from an open text stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise ModelSourceError(f"Invalid JSON in {name}: {e}") from e
    _check_document(data, name)
    return name, data


def load_model_source(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a JSON AST document from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        ModelSourceError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise ModelSourceError("Either file_path or url must be provided")

    if file_path and url:
        raise ModelSourceError("Cannot specify both file_path and url")

    if file_path:
        return load_model_from_file(file_path)
    return load_model_from_url(url, timeout)


def read_model(file_path: str | Path | None = None, url: str | None = None) -> Model:
    """Load and convert a JSON AST document in one step."""
    _, data = load_model_source(file_path, url)
    return load_model(data)
