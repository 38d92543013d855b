"""
XML codecs for newznab search and comment feeds.
"""

from .feed_parser import (
    decode_search_response,
    decode_comment_response,
    encode_search_response,
)

__all__ = [
    'decode_search_response',
    'decode_comment_response',
    'encode_search_response',
]
