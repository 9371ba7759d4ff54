"""Core build logic for Tagged Text."""

from tagged_text.core.builder import FragmentBuilder, TextSpanBuilder
from tagged_text.core.tagged_text import (
    TaggedText,
    TaggedTextState,
    UpdateAction,
    build_fragments,
    plan_update,
)
from tagged_text.core.validation import validate_tag_mapping

__all__ = [
    "FragmentBuilder",
    "TextSpanBuilder",
    "TaggedText",
    "TaggedTextState",
    "UpdateAction",
    "build_fragments",
    "plan_update",
    "validate_tag_mapping",
]
