"""
Wire-format models for newznab RSS feeds.

These mirror the XML shape one-to-one and are consumed immediately by the
normalizer. They are never returned to callers of the client.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Attribute(BaseModel):
    """A ``newznab:attr`` (or ``torznab:attr``) name/value pair."""
    name: str = ""
    value: str = ""


class ItemCategory(BaseModel):
    domain: str = ""
    value: str = ""


class ItemGUID(BaseModel):
    value: str = ""
    is_perma_link: bool = False


class ItemSource(BaseModel):
    url: str = ""
    value: str = ""


class Enclosure(BaseModel):
    url: str = ""
    length: str = ""
    type: str = ""


class RawNZB(BaseModel):
    """
    A single ``<item>`` of a search feed.

    ``pub_date`` is decoded eagerly with the RFC1123Z codec; every other
    piece of source-specific metadata lives in ``attributes``.
    """

    title: str = ""
    link: str = ""
    size: int = 0
    category: ItemCategory = Field(default_factory=ItemCategory)
    guid: ItemGUID = Field(default_factory=ItemGUID)
    comments: str = ""
    description: str = ""
    author: str = ""
    source: ItemSource = Field(default_factory=ItemSource)
    pub_date: Optional[datetime] = None
    enclosure: Enclosure = Field(default_factory=Enclosure)
    attributes: List[Attribute] = Field(default_factory=list)


class AtomLink(BaseModel):
    href: str = ""
    rel: str = ""
    type: str = ""


class ChannelImage(BaseModel):
    url: str = ""
    title: str = ""
    link: str = ""
    description: str = ""
    width: int = 0
    height: int = 0


class ResponseInfo(BaseModel):
    """``newznab:response`` paging counters, passed through as reported."""
    offset: int = 0
    total: int = 0


class Channel(BaseModel):
    title: str = ""
    link: AtomLink = Field(default_factory=AtomLink)
    description: str = ""
    language: str = ""
    webmaster: str = ""
    category: str = ""
    image: ChannelImage = Field(default_factory=ChannelImage)
    response: ResponseInfo = Field(default_factory=ResponseInfo)
    items: List[RawNZB] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """
    Envelope of a search feed.

    ``error_code``/``error_description`` are filled when the indexer answers
    with an ``<error code=".." description=".."/>`` document instead of RSS.
    """

    version: str = ""
    error_code: int = 0
    error_description: str = ""
    channel: Channel = Field(default_factory=Channel)


class RawComment(BaseModel):
    """A comment ``<item>``; pubDate is kept as text and parsed leniently."""
    title: str = ""
    description: str = ""
    pub_date: str = ""


class CommentChannel(BaseModel):
    items: List[RawComment] = Field(default_factory=list)


class CommentResponse(BaseModel):
    """Envelope of a comments feed."""
    channel: CommentChannel = Field(default_factory=CommentChannel)
