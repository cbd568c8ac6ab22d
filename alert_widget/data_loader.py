"""
Data loaders for the alert widget.

A loader fetches the JSON document holding the top-level "Events" array.
Two sources are supported:
- HTTP(S) URLs: fetched with aiohttp
- Local paths: read from disk

Usage:
    loader = create_loader()                      # from ALERT_WIDGET_DATA_SOURCE
    loader = create_loader("https://host/data.json")
    document = await loader.fetch()
"""
import asyncio
import json
import logging
import ssl
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiohttp

from .config import DATA_SOURCE, LOAD_TIMEOUT, VERIFY_SSL
from .exceptions import DataLoadError

logger = logging.getLogger(__name__)


def extract_events(document: Any) -> List[Any]:
    """
    Return the Events array of a fetched document.

    Raises:
        DataLoadError: If the document is not an object with an Events array
    """
    if not isinstance(document, dict):
        raise DataLoadError(f"Malformed document: expected an object, got {type(document).__name__}")
    events = document.get("Events")
    if not isinstance(events, list):
        raise DataLoadError("Malformed document: missing top-level Events array")
    return events


class DataLoader(ABC):
    """Fetches the widget's JSON document"""

    @abstractmethod
    async def fetch(self) -> Dict[str, Any]:
        """
        Fetch and decode the document.

        Returns:
            The decoded document, guaranteed to hold an Events list

        Raises:
            DataLoadError: On any fetch, decode or shape failure
        """
        pass


class HttpDataLoader(DataLoader):
    """Loads the document from an HTTP(S) endpoint"""

    def __init__(self, url: str, timeout: float = LOAD_TIMEOUT, verify_ssl: bool = VERIFY_SSL):
        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    def _ssl_context(self) -> Optional[ssl.SSLContext]:
        if not self.url.startswith("https://") or self.verify_ssl:
            return None
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        return ssl_context

    async def fetch(self) -> Dict[str, Any]:
        ssl_context = self._ssl_context()
        connector = aiohttp.TCPConnector(ssl=ssl_context) if ssl_context else aiohttp.TCPConnector()
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(connector=connector, timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise DataLoadError(
                            f"Data source returned HTTP {response.status}: {error_text[:200]}"
                        )
                    document = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise DataLoadError(f"Request to {self.url} timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise DataLoadError(f"Cannot connect to data source {self.url}: {e}") from e
        except (ValueError, RecursionError) as e:
            raise DataLoadError(f"Invalid JSON from {self.url}: {e}") from e

        extract_events(document)
        logger.info(f"Fetched data document from {self.url}")
        return document


class FileDataLoader(DataLoader):
    """Loads the document from a local JSON file"""

    def __init__(self, path):
        self.path = Path(path)

    async def fetch(self) -> Dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except OSError as e:
            raise DataLoadError(f"Cannot read data file: {e}") from e
        except (ValueError, RecursionError) as e:
            raise DataLoadError(f"Invalid JSON in {self.path}: {e}") from e

        extract_events(document)
        logger.info(f"Read data document from {self.path}")
        return document


def create_loader(source: Optional[str] = None) -> DataLoader:
    """
    Create a loader for a URL or a local path.

    Args:
        source: URL or path; defaults to ALERT_WIDGET_DATA_SOURCE

    Returns:
        HttpDataLoader for http(s) URLs, FileDataLoader otherwise
    """
    source = source or DATA_SOURCE
    if source.startswith(("http://", "https://")):
        logger.info(f"Using HTTP data loader: {source}")
        return HttpDataLoader(source)

    logger.info(f"Using file data loader: {source}")
    return FileDataLoader(source)
