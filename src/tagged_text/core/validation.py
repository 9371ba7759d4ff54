"""Construction-time checks for tag to builder mappings."""

from collections.abc import Mapping
from typing import Any

from tagged_text.constants import RESERVED_TAG_NAMES
from tagged_text.errors import ConfigurationError


def find_invalid_case(mapping: Mapping[str, Any]) -> list[str]:
    """Return the keys that are not already lower-case."""
    return [key for key in mapping if key != key.lower()]


def find_reserved(mapping: Mapping[str, Any]) -> list[str]:
    """Return the keys that are real HTML tag names."""
    return sorted(key for key in mapping if key in RESERVED_TAG_NAMES)


def validate_tag_mapping(mapping: Mapping[str, Any]) -> None:
    """Check a tag to builder mapping before it is used.

    Args:
        mapping: Builders by tag name

    Raises:
        ConfigurationError: If a tag name is not lower-case or is an actual
            HTML tag name
    """
    upper = find_invalid_case(mapping)
    if upper:
        raise ConfigurationError(
            f"Tag names must be lower-case: {', '.join(upper)}",
            tags=upper,
        )

    reserved = find_reserved(mapping)
    if reserved:
        raise ConfigurationError(
            f"Tags that are actual HTML tags are not allowed: {', '.join(reserved)}",
            tags=reserved,
        )
