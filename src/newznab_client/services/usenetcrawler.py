"""
usenet-crawler indexer client.

Searches by TVRage ID, category, season and episode using the newznab
``tvsearch`` endpoint with extended attributes.
"""

import logging
from typing import List, Optional

from newznab_client.config import DEFAULT_BASE_URL, get_app_config
from newznab_client.exceptions import IndexerAPIError
from newznab_client.models.nzb import NZB, Comment
from newznab_client.parsers.feed_parser import decode_comment_response, decode_search_response
from newznab_client.services.indexer import Indexer
from newznab_client.services.normalizer import normalize_item
from newznab_client.services.transport import Transport
from newznab_client.timecodec import parse_rfc1123z_lenient

logger = logging.getLogger(__name__)

# Category for high-definition TV shows
CATEGORY_TV_HD = 5040
# Category for standard-definition TV shows
CATEGORY_TV_SD = 5030


class UsenetCrawlerClient(Indexer):
    """
    Client for usenet-crawler.

    Usage:
        client = UsenetCrawlerClient(api_key="...")
        nzbs = client.search(CATEGORY_TV_HD, tvrage_id, season=5, episode=1)
        client.populate_comments(nzbs[0])
        data = client.download(nzbs[0])

    Args:
        api_key: Indexer API key; omitted from URLs when empty
        transport: Object with ``fetch(url) -> bytes`` (default: RequestsTransport)
        base_url: API endpoint, for mirrors or testing
    """

    SEARCH_PATH = "?t=tvsearch&rid={series_id}&cat={category}&season={season}&ep={episode}&extended=1"
    COMMENTS_PATH = "?t=comments&id={id}"
    DOWNLOAD_PATH = "?t=get&id={id}"

    def __init__(
        self,
        api_key: str = "",
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL
    ):
        super().__init__(api_key=api_key, transport=transport)
        self.base_url = base_url

    @classmethod
    def from_config(cls, transport: Optional[Transport] = None) -> 'UsenetCrawlerClient':
        """Build a client from NEWZNAB_API_KEY / NEWZNAB_BASE_URL."""
        config = get_app_config()
        return cls(
            api_key=config.newznab_api_key or "",
            transport=transport,
            base_url=config.newznab_base_url
        )

    def search(self, category: int, series_id: int, season: int, episode: int) -> List[NZB]:
        """
        Search for episodes of a show.

        Args:
            category: Newznab category (CATEGORY_TV_HD, CATEGORY_TV_SD, ...)
            series_id: TVRage ID of the show
            season: Season number
            episode: Episode number

        Returns:
            One NZB per feed item, in feed order

        Raises:
            TransportError: If the request fails
            DecodeError: If the response is not a well-formed feed
            FormatError: If an item's pubDate is not RFC1123Z
            IndexerAPIError: If the indexer returned an error document
        """
        logger.debug("Searching")
        url = self.with_api_key(self.base_url + self.SEARCH_PATH.format(
            series_id=series_id,
            category=category,
            season=season,
            episode=episode
        ))
        data = self.transport.fetch(url)
        feed = decode_search_response(data)

        if feed.error_code:
            raise IndexerAPIError(feed.error_code, feed.error_description)

        logger.info(f"Found {len(feed.channel.items)} NZBs")

        nzbs = []
        for raw in feed.channel.items:
            logger.debug(raw.model_dump_json(indent=2))
            nzb = normalize_item(raw)
            nzb.source_endpoint = self.base_url
            nzb.source_apikey = self.api_key
            nzbs.append(nzb)
        return nzbs

    def populate_comments(self, nzb: NZB) -> None:
        """
        Append the comments for ``nzb`` in feed order.

        A comment whose pubDate cannot be parsed is logged and kept with
        ``pub_date=None``. Existing comments are left in place.

        Raises:
            TransportError: If the request fails
            DecodeError: If the response is not a well-formed feed
        """
        logger.debug(f"Getting comments for {nzb.id}")
        data = self.transport.fetch(self.with_api_key(
            self.base_url + self.COMMENTS_PATH.format(id=nzb.id)
        ))
        response = decode_comment_response(data)

        for raw in response.channel.items:
            nzb.comments.append(Comment(
                title=raw.title,
                content=raw.description,
                pub_date=parse_rfc1123z_lenient(raw.pub_date, field='comment pub_date'),
            ))

    def download_url(self, nzb: NZB) -> str:
        return self.with_api_key(self.base_url + self.DOWNLOAD_PATH.format(id=nzb.id))
