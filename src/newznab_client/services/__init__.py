"""
Service layer for newznab-client.

- Indexer: shared capability set of indexer clients
- UsenetCrawlerClient: usenet-crawler implementation
- RequestsTransport: default HTTP transport
- normalize_item / normalize_items: raw feed item -> NZB
"""

from newznab_client.services.indexer import Indexer
from newznab_client.services.normalizer import (
    ATTRIBUTE_CONVERTERS,
    normalize_item,
    normalize_items,
)
from newznab_client.services.transport import RequestsTransport, Transport
from newznab_client.services.usenetcrawler import (
    CATEGORY_TV_HD,
    CATEGORY_TV_SD,
    UsenetCrawlerClient,
)

__all__ = [
    'Indexer',
    'ATTRIBUTE_CONVERTERS',
    'normalize_item',
    'normalize_items',
    'RequestsTransport',
    'Transport',
    'CATEGORY_TV_HD',
    'CATEGORY_TV_SD',
    'UsenetCrawlerClient',
]
