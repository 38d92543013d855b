"""
Domain records returned to callers.

NZB is the normalized search result. Only a subset of its extension fields
(TV, movie, torrent) is filled by any single indexer; everything else keeps
its zero value and is dropped from the JSON rendering, mirroring
``omitempty`` semantics of the indexer's own JSON output.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


_ALWAYS_SERIALIZED = ("source_endpoint", "source_apikey")


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == 0 or value == "" or value == [] or value == {}


class Comment(BaseModel):
    """
    A user comment left on an NZB.

    Created only while populating an existing NZB's comment list.
    """

    title: str = ""
    content: str = ""
    pub_date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict without zero-valued fields."""
        data = self.model_dump(mode="json")
        return {k: v for k, v in data.items() if not _is_empty(v)}

    def json_string(self) -> str:
        """Pretty-printed JSON for diagnostics."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


class NZB(BaseModel):
    """
    An NZB found on an indexer.

    ``id`` is opaque and only meaningful within the indexer that produced it;
    ``source_endpoint`` identifies that indexer when merging results from
    several sources.

    Attributes:
        id: Indexer-specific identifier (the ``guid`` attribute)
        title: Release title
        description: Release description
        size: Size in bytes
        air_date: Original air date (TV)
        pub_date: Date the NZB was posted to the indexer
        usenet_date: Date the articles were posted to usenet
        num_grabs: Download count reported by the indexer
        num_comments: Comment count reported by the indexer
        comments: Comments, filled by ``populate_comments``
        source_endpoint: API endpoint the record came from
        source_apikey: API key used against that endpoint

    Example:
        >>> nzb = NZB(id='abc', title='Show.S01E01.720p', size=1024)
        >>> print(nzb.json_string())
        {
          "id": "abc",
          "title": "Show.S01E01.720p",
          "size": 1024,
          "source_endpoint": "",
          "source_apikey": ""
        }
    """

    id: str = ""
    title: str = ""
    description: str = ""
    size: int = 0
    air_date: Optional[datetime] = None
    pub_date: Optional[datetime] = None
    usenet_date: Optional[datetime] = None
    num_grabs: int = 0
    num_comments: int = 0
    comments: List[Comment] = Field(default_factory=list)

    source_endpoint: str = ""
    source_apikey: str = ""

    category: List[str] = Field(default_factory=list)
    info: str = ""
    genre: str = ""

    # TV
    tvdb_id: str = Field(default="", serialization_alias="tvdbid")
    tvrage_id: str = Field(default="", serialization_alias="tvrageid")
    season: str = ""
    episode: str = ""
    tv_title: str = Field(default="", serialization_alias="tvtitle")
    rating: int = 0

    # Movie
    imdb_id: str = Field(default="", serialization_alias="imdb")
    imdb_title: str = Field(default="", serialization_alias="imdbtitle")
    imdb_year: int = Field(default=0, serialization_alias="imdbyear")
    imdb_score: float = Field(default=0.0, serialization_alias="imdbscore")
    cover_url: str = Field(default="", serialization_alias="coverurl")

    # Torznab
    seeders: int = 0
    peers: int = 0
    info_hash: str = Field(default="", serialization_alias="infohash")
    download_url: str = ""
    is_torrent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready dict without zero-valued fields.

        ``source_endpoint`` and ``source_apikey`` are always present.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude={"comments"})
        data["comments"] = [c.to_dict() for c in self.comments]
        ordered = {}
        for name, field in type(self).model_fields.items():
            key = field.serialization_alias or name
            value = data[key]
            if key in _ALWAYS_SERIALIZED or not _is_empty(value):
                ordered[key] = value
        return ordered

    def json_string(self) -> str:
        """Pretty-printed JSON for diagnostics."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
