"""
Shared capability set of indexer clients.

Each concrete client is specialized to one indexer's URL templates and
category vocabulary. Callers can treat several clients polymorphically and
merge their results, using ``NZB.source_endpoint`` to track provenance.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from newznab_client.models.nzb import NZB
from newznab_client.models.requests import SearchRequest
from newznab_client.services.transport import RequestsTransport, Transport


class Indexer(ABC):
    """
    Abstract base for indexer clients.

    The API key is bound at construction and never changes. Clients hold no
    other mutable state, so concurrent use is safe whenever the transport is.

    Subclasses implement ``search``, ``populate_comments`` and
    ``download_url``; ``download`` is shared.
    """

    def __init__(self, api_key: str = "", transport: Optional[Transport] = None):
        self._api_key = api_key or ""
        self._transport = transport if transport is not None else RequestsTransport()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def transport(self) -> Transport:
        return self._transport

    def with_api_key(self, url: str) -> str:
        """Append ``&apikey=`` when a key is configured."""
        if self._api_key:
            url += "&apikey=" + self._api_key
        return url

    @abstractmethod
    def search(self, category: int, series_id: int, season: int, episode: int) -> List[NZB]:
        """Return NZBs matching the given parameters."""

    def search_request(self, request: SearchRequest) -> List[NZB]:
        """``search`` driven by a validated SearchRequest."""
        return self.search(
            category=request.category,
            series_id=request.series_id,
            season=request.season,
            episode=request.episode
        )

    @abstractmethod
    def populate_comments(self, nzb: NZB) -> None:
        """Append the indexer's comments for ``nzb`` to ``nzb.comments``."""

    @abstractmethod
    def download_url(self, nzb: NZB) -> str:
        """URL of the NZB file. Pure; performs no I/O."""

    def download(self, nzb: NZB) -> bytes:
        """Fetch the NZB file itself."""
        return self._transport.fetch(self.download_url(nzb))
