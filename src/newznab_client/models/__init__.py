"""
Pydantic models for domain records, wire-format envelopes and requests.
"""

from newznab_client.models.nzb import NZB, Comment
from newznab_client.models.feed import (
    Attribute,
    RawNZB,
    Channel,
    SearchResponse,
    RawComment,
    CommentResponse,
)
from newznab_client.models.requests import SearchRequest

__all__ = [
    'NZB',
    'Comment',
    'Attribute',
    'RawNZB',
    'Channel',
    'SearchResponse',
    'RawComment',
    'CommentResponse',
    'SearchRequest',
]
