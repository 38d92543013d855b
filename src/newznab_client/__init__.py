"""
newznab-client: search client for newznab-style Usenet indexers.

Main package exports for user-facing API.
"""

from newznab_client.exceptions import (
    NewznabError,
    TransportError,
    DecodeError,
    FormatError,
    IndexerAPIError,
)
from newznab_client.models import NZB, Comment, SearchRequest
from newznab_client.services import (
    Indexer,
    UsenetCrawlerClient,
    RequestsTransport,
    CATEGORY_TV_HD,
    CATEGORY_TV_SD,
)
from newznab_client.types import Categories

__version__ = '0.1.0'

__all__ = [
    'NewznabError',
    'TransportError',
    'DecodeError',
    'FormatError',
    'IndexerAPIError',
    'NZB',
    'Comment',
    'SearchRequest',
    'Indexer',
    'UsenetCrawlerClient',
    'RequestsTransport',
    'CATEGORY_TV_HD',
    'CATEGORY_TV_SD',
    'Categories',
]
