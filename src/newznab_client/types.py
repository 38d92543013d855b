"""
Discovery helper for newznab category codes.

Provides a user-facing API over data/categories.yaml.
"""

from typing import Dict
from newznab_client.config import get_config


class Categories:
    """
    Helper class for discovering newznab category codes.

    All methods return copies to prevent accidental mutation of the
    shared configuration.

    Example:
        >>> Categories.get_description(5030)
        'TV/SD'
        >>> Categories.list_tv()[5040]
        'TV/HD'
    """

    @staticmethod
    def list_available() -> Dict[int, str]:
        """List all category codes with descriptions."""
        return get_config().categories.copy()

    @staticmethod
    def list_by_parent(parent: int) -> Dict[int, str]:
        """
        List a top-level category and its subcategories.

        Args:
            parent: Top-level code, a multiple of 1000 (e.g., 5000 for TV)

        Raises:
            ValueError: If parent is not a multiple of 1000
        """
        if parent % 1000 != 0:
            raise ValueError(f"Not a top-level category: {parent}")
        return {
            k: v for k, v in get_config().categories.items()
            if parent <= k < parent + 1000
        }

    @staticmethod
    def list_tv() -> Dict[int, str]:
        """List the TV categories (5000-5999)."""
        return Categories.list_by_parent(5000)

    @staticmethod
    def get_description(code: int) -> str:
        """
        Get the description for a category code.

        Raises:
            ValueError: If code is not found
        """
        try:
            return get_config().get_category_description(code)
        except KeyError as e:
            raise ValueError(f"Unknown category: {code}") from e

    @staticmethod
    def is_valid(code: int) -> bool:
        return get_config().is_valid_category(code)
