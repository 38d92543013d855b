"""
HTTP transport collaborator.

The client only needs ``fetch(url) -> bytes``. Any object with a conforming
``fetch`` method can be injected; RequestsTransport is the default.
"""

import logging
from typing import Optional, Protocol

import requests

from newznab_client.config import get_app_config
from newznab_client.exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Blocking "GET a URL, return the body" capability."""

    def fetch(self, url: str) -> bytes:
        ...


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.

    Timeout and User-Agent default to AppConfig (NEWZNAB_TIMEOUT,
    NEWZNAB_USER_AGENT). No retries are attempted.

    Usage:
        transport = RequestsTransport(timeout=10)
        data = transport.fetch("https://indexer.example/api?t=caps")
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        config = get_app_config()
        self.timeout = timeout if timeout is not None else config.newznab_timeout
        self.user_agent = user_agent or config.newznab_user_agent
        self._session = session or requests.Session()

    def fetch(self, url: str) -> bytes:
        """
        GET ``url`` and return the response body.

        Raises:
            TransportError: On connection failure, timeout or HTTP error status
        """
        logger.debug(f"Getting url: {url}")
        try:
            response = self._session.get(
                url,
                headers={'User-Agent': self.user_agent},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        data = response.content
        logger.debug(f"Retrieved {len(data)} bytes")
        return data
