"""Tagged markup parser for converting content strings to IR."""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from tagged_text.constants import MARKUP_PARSER, NESTING_FLATTEN, NESTING_REJECT
from tagged_text.errors import NestedTagError, ParseError
from tagged_text.formatting.ir import (
    Diagnostic,
    DiagnosticKind,
    ElementNode,
    ParsedDocument,
    ParseNode,
    TextNode,
)
from tagged_text.logger import get_logger

logger = get_logger(__name__)


class _EveryTag(frozenset):
    """Tag-name set that contains every name.

    Passed as ``preserve_whitespace_tags`` so BeautifulSoup never collapses
    whitespace-only strings.
    """

    def __contains__(self, name: object) -> bool:
        return True


PRESERVE_ALL_WHITESPACE = _EveryTag()


class NestingPolicy(str, Enum):
    """What the parser does when a tag contains other tags.

    FLATTEN keeps the text of the child tags as part of the parent's inner
    text and records a diagnostic. REJECT fails the parse.
    """

    FLATTEN = NESTING_FLATTEN
    REJECT = NESTING_REJECT


@dataclass
class ParseOutcome:
    """Result of :meth:`TaggedMarkupParser.try_parse`.

    Exactly one of ``document`` and ``error`` is set.
    """

    document: Optional[ParsedDocument] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


@dataclass
class TaggedMarkupParser:
    """Parse flat tagged markup into a ParsedDocument.

    Only top-level tags are meaningful. Comments, doctypes and other
    non-text markup are dropped.
    """

    nesting: NestingPolicy = NestingPolicy.FLATTEN
    parse_count: int = field(default=0, init=False)

    def parse(self, content: str) -> ParsedDocument:
        """Convert tagged content to a ParsedDocument.

        Args:
            content: The markup to parse, e.g. ``"Hello <hl>world</hl>!"``

        Returns:
            ParsedDocument with one node per top-level text run or tag

        Raises:
            ParseError: If the markup parser rejects the content
            NestedTagError: If a tag contains tags and nesting is REJECT
        """
        self.parse_count += 1
        soup = self._make_soup(content)

        doc = ParsedDocument()
        for child in soup.contents:
            node = self._to_node(child, doc, content)
            if node is not None:
                doc.nodes.append(node)

        logger.debug("Parsed %d node(s) from %d character(s)", len(doc), len(content))
        return doc

    def try_parse(self, content: str) -> ParseOutcome:
        """Parse without raising, returning the document or the error."""
        try:
            return ParseOutcome(document=self.parse(content))
        except ParseError as e:
            logger.error("Could not parse tagged content: %s", e)
            return ParseOutcome(error=e)

    def _make_soup(self, content: str) -> BeautifulSoup:
        try:
            with warnings.catch_warnings():
                # Short strings like "readme.txt" trip a bs4 heuristic
                warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
                return BeautifulSoup(
                    content,
                    MARKUP_PARSER,
                    preserve_whitespace_tags=PRESERVE_ALL_WHITESPACE,
                )
        except ParserRejectedMarkup as e:
            raise ParseError(f"Markup rejected by parser: {e}", content) from e
        except UnicodeError as e:
            raise ParseError(f"Markup is not valid text: {e}", content) from e

    def _to_node(
        self,
        child: object,
        doc: ParsedDocument,
        content: str,
    ) -> Optional[ParseNode]:
        """Map one top-level soup child to a parse node."""
        if isinstance(child, Tag):
            # The parser always returns tag names as lower case.
            tag_name = child.name.lower()
            if child.find(True) is not None:
                self._handle_nested(tag_name, doc, content)
            return ElementNode(tag_name=tag_name, inner_text=child.get_text())

        # Comment, Doctype, CData and friends are not text
        if isinstance(child, NavigableString) and not isinstance(
            child, PreformattedString
        ):
            return TextNode(text=str(child))

        return None

    def _handle_nested(self, tag_name: str, doc: ParsedDocument, content: str) -> None:
        if self.nesting == NestingPolicy.REJECT:
            raise NestedTagError(tag_name, content)

        message = f"Tags should not be placed within tags: flattening <{tag_name}>"
        logger.warning(message)
        doc.diagnostics.append(
            Diagnostic(kind=DiagnosticKind.NESTED_TAG, message=message, tag=tag_name)
        )


def to_plain_text(doc: ParsedDocument) -> str:
    """Convert a ParsedDocument back to plain text."""
    return doc.plain_text
