"""
Request models for client operations.

These Pydantic models provide a validated, immutable alternative to passing
loose positional arguments to ``Indexer.search``.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from newznab_client.validators import validate_category


class SearchRequest(BaseModel):
    """
    Request model for a TV search.

    Attributes:
        category: Newznab category code (e.g., 5040 for TV/HD)
        series_id: Series identifier understood by the indexer (TVRage ID
                   for usenet-crawler)
        season: Season number
        episode: Episode number

    Example:
        >>> request = SearchRequest(category=5040, series_id=2870, season=5, episode=1)
        >>> request.category
        5040

    Raises:
        ValidationError: If category is not a known newznab category
    """

    category: int = Field(
        ...,
        description="Newznab category code",
        examples=[5040]
    )

    series_id: int = Field(
        ...,
        description="Series identifier in the indexer's namespace",
        examples=[2870]
    )

    season: int = Field(..., description="Season number", examples=[5])

    episode: int = Field(..., description="Episode number", examples=[1])

    _validate_category = field_validator('category')(validate_category)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [{
                "category": 5040,
                "series_id": 2870,
                "season": 5,
                "episode": 1
            }]
        }
    )
