"""Intermediate Representation for tagged text.

This module defines the data structures that bridge tagged markup to
fragment rendering. Parse nodes describe what the markup contains, while
text runs describe how each piece should look once a builder has styled it.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Optional, Union


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    STRIKETHROUGH = auto()


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    This is the styled fragment produced for plain text and by the
    builders shipped with the CLI. Builders are free to return other
    fragment types; the core never looks inside them.

    Attributes:
        text: The text content
        style: Combined style flags
        color: Optional color name understood by the renderer
    """

    text: str
    style: TextStyle = TextStyle.NONE
    color: Optional[str] = None

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Parse nodes
# =============================================================================

@dataclass(frozen=True)
class TextNode:
    """A run of plain text found between tags."""

    text: str


@dataclass(frozen=True)
class ElementNode:
    """A tagged element.

    Attributes:
        tag_name: Lower-case tag name
        inner_text: Text content of the element, verbatim
    """

    tag_name: str
    inner_text: str


ParseNode = Union[TextNode, ElementNode]


@dataclass
class ParsedDocument:
    """Ordered sequence of nodes produced by one parse.

    Attributes:
        nodes: Text runs and tagged elements in document order
        diagnostics: Non-fatal problems noticed while parsing
    """

    nodes: list[ParseNode] = field(default_factory=list)
    diagnostics: list["Diagnostic"] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get all text content without tags."""
        return "".join(
            node.text if isinstance(node, TextNode) else node.inner_text
            for node in self.nodes
        )

    @property
    def tag_names(self) -> list[str]:
        """Tag names in document order, without duplicates."""
        names: list[str] = []
        for node in self.nodes:
            if isinstance(node, ElementNode) and node.tag_name not in names:
                names.append(node.tag_name)
        return names

    def __len__(self) -> int:
        return len(self.nodes)


# =============================================================================
# Display configuration
# =============================================================================

class TextAlign(str, Enum):
    """Horizontal alignment of the rendered fragments."""

    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


class TextDirection(str, Enum):
    """Directionality of the rendered text."""

    LTR = "ltr"
    RTL = "rtl"


class TextOverflow(str, Enum):
    """How visual overflow is handled."""

    CLIP = "clip"
    FADE = "fade"
    ELLIPSIS = "ellipsis"
    VISIBLE = "visible"


@dataclass(frozen=True)
class DisplayConfig:
    """Display settings forwarded untouched to the renderer.

    Attributes:
        style: Default style applied beneath every fragment
        color: Default color applied beneath every fragment
        text_align: Horizontal alignment
        text_direction: Text direction (None lets the renderer decide)
        soft_wrap: Whether lines break at soft line breaks
        overflow: Overflow handling
        text_scale_factor: Font pixels per logical pixel (None lets the
            renderer decide, falling back to 1.0)
        max_lines: Optional maximum number of lines
    """

    style: TextStyle = TextStyle.NONE
    color: Optional[str] = None
    text_align: TextAlign = TextAlign.START
    text_direction: Optional[TextDirection] = None
    soft_wrap: bool = True
    overflow: TextOverflow = TextOverflow.CLIP
    text_scale_factor: Optional[float] = None
    max_lines: Optional[int] = None


# =============================================================================
# Diagnostics
# =============================================================================

class DiagnosticKind(str, Enum):
    """Kinds of non-fatal problems found during a build pass."""

    MISSING_BUILDER = "missing_builder"
    NESTED_TAG = "nested_tag"
    PARSE_FAILED = "parse_failed"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem recorded while parsing or building.

    Attributes:
        kind: What went wrong
        message: Human-readable description
        tag: Tag name involved, if any
    """

    kind: DiagnosticKind
    message: str
    tag: Optional[str] = None

    def __str__(self) -> str:
        return self.message
