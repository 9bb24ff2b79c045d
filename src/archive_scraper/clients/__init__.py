"""Network clients for the article archive."""

from .archive_client import DEFAULT_ARCHIVE_BASE_URL, ArchiveClient
from .client import Client
from .exceptions import APIError, ClientError, ConnectionError

__all__ = [
    "Client",
    "ArchiveClient",
    "DEFAULT_ARCHIVE_BASE_URL",
    "ClientError",
    "ConnectionError",
    "APIError",
]
