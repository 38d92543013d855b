"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- Newznab category codes (loaded from the packaged data/categories.yaml)
- Indexer connection settings (API key, endpoint, timeout) from the
  environment or a .env file
"""

from pathlib import Path
from typing import Dict, Optional
import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


CATEGORIES_PATH = Path(__file__).parent / 'data' / 'categories.yaml'

DEFAULT_BASE_URL = "https://www.usenet-crawler.com/api"


class CategoriesConfig(BaseSettings):
    """
    Newznab category codes, loaded from data/categories.yaml.

    Attributes:
        categories: Mapping of category code to description

    Example:
        >>> config = CategoriesConfig()
        >>> config.is_valid_category(5040)
        True
        >>> config.get_category_description(5040)
        'TV/HD'
    """

    categories: Dict[int, str] = Field(
        default_factory=dict,
        description="Newznab category codes with descriptions"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load data/categories.yaml unless values were provided explicitly.
        """
        # Explicit values (e.g., from tests) win
        if data:
            return data

        if not CATEGORIES_PATH.exists():
            raise FileNotFoundError(
                f"Category file not found at {CATEGORIES_PATH}. "
                f"The package data was not installed."
            )

        with open(CATEGORIES_PATH, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        return {'categories': yaml_data.get('categories', {})}

    def is_valid_category(self, code: Optional[int]) -> bool:
        """
        Check if a category code is known.

        Example:
            >>> CategoriesConfig().is_valid_category(9999)
            False
        """
        if code is None:
            return False
        return code in self.categories

    def get_category_description(self, code: int) -> str:
        """
        Get the description of a category code.

        Raises:
            KeyError: If code is not found in configuration
        """
        if code not in self.categories:
            raise KeyError(f"Unknown category: {code}")
        return self.categories[code]


# Singleton pattern - loaded once, cached forever
_config: Optional[CategoriesConfig] = None


def get_config() -> CategoriesConfig:
    """
    Get global category config instance (lazy-loaded singleton).

    Example:
        >>> get_config() is get_config()
        True
    """
    global _config
    if _config is None:
        _config = CategoriesConfig()
    return _config


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        NEWZNAB_API_KEY: API key appended to every request (optional)
        NEWZNAB_BASE_URL: API endpoint of the indexer
        NEWZNAB_TIMEOUT: HTTP timeout in seconds for the default transport
        NEWZNAB_USER_AGENT: User-Agent header sent by the default transport

    Example:
        >>> config = get_app_config()
        >>> config.newznab_base_url
        'https://www.usenet-crawler.com/api'
    """

    newznab_api_key: Optional[str] = Field(
        default=None,
        description="API key for the indexer"
    )

    newznab_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Newznab API endpoint"
    )

    newznab_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds"
    )

    newznab_user_agent: str = Field(
        default="newznab-client/0.1.0",
        description="User-Agent header for HTTP requests"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Loaded from environment variables and .env on first access.
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
