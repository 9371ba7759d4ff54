"""Tagged Text - style semantic tags in localized strings."""

__version__ = "0.1.0"

from tagged_text.core import (
    FragmentBuilder,
    TaggedText,
    TaggedTextState,
    UpdateAction,
    build_fragments,
    plan_update,
    validate_tag_mapping,
)
from tagged_text.errors import (
    ConfigurationError,
    NestedTagError,
    ParseError,
    TaggedTextError,
)
from tagged_text.formatting import (
    DisplayConfig,
    NestingPolicy,
    TaggedMarkupParser,
    TextRun,
    TextStyle,
)

__all__ = [
    "__version__",
    "FragmentBuilder",
    "TaggedText",
    "TaggedTextState",
    "UpdateAction",
    "build_fragments",
    "plan_update",
    "validate_tag_mapping",
    "ConfigurationError",
    "NestedTagError",
    "ParseError",
    "TaggedTextError",
    "DisplayConfig",
    "NestingPolicy",
    "TaggedMarkupParser",
    "TextRun",
    "TextStyle",
]
