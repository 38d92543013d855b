"""
Reusable field validators for Pydantic models.
"""

from newznab_client.config import get_config


def validate_category(code: int) -> int:
    """
    Validate a newznab category code against data/categories.yaml.

    Designed for use with Pydantic ``field_validator``.

    Raises:
        ValueError: If the code is unknown, listing the TV categories as a hint

    Example:
        >>> validate_category(5040)
        5040
        >>> validate_category(9999)  # Raises ValueError
    """
    config = get_config()

    if not config.is_valid_category(code):
        tv_codes = [c for c in config.categories if 5000 <= c < 6000]
        raise ValueError(
            f"Invalid category code: {code}\n"
            f"TV categories include: {tv_codes}\n"
            f"Use Categories.list_available() to see all options."
        )

    return code
