"""Formatting utilities for parsing tagged text."""

from tagged_text.formatting.ir import (
    TextRun,
    TextStyle,
    TextNode,
    ElementNode,
    ParseNode,
    ParsedDocument,
    TextAlign,
    TextDirection,
    TextOverflow,
    DisplayConfig,
    Diagnostic,
    DiagnosticKind,
)
from tagged_text.formatting.parser import (
    NestingPolicy,
    ParseOutcome,
    TaggedMarkupParser,
)

__all__ = [
    "TextRun",
    "TextStyle",
    "TextNode",
    "ElementNode",
    "ParseNode",
    "ParsedDocument",
    "TextAlign",
    "TextDirection",
    "TextOverflow",
    "DisplayConfig",
    "Diagnostic",
    "DiagnosticKind",
    "NestingPolicy",
    "ParseOutcome",
    "TaggedMarkupParser",
]
