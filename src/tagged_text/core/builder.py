"""Turn parsed documents into styled fragments."""

from collections.abc import Mapping
from typing import Any, Callable

from tagged_text.formatting.ir import (
    Diagnostic,
    DiagnosticKind,
    ElementNode,
    ParsedDocument,
    TextNode,
    TextRun,
)
from tagged_text.logger import get_logger

logger = get_logger(__name__)

# Builds a styled fragment from the inner text of a tag.
TextSpanBuilder = Callable[[str], Any]


class FragmentBuilder:
    """Map parse nodes to fragments using caller-supplied builders.

    Plain text and tags without a registered builder are wrapped with
    ``default_fragment``, which produces an unstyled :class:`TextRun`
    unless overridden.
    """

    def __init__(self, default_fragment: TextSpanBuilder = TextRun) -> None:
        self.default_fragment = default_fragment
        self.diagnostics: list[Diagnostic] = []
        self.build_count = 0

    def build(
        self,
        doc: ParsedDocument,
        tag_to_builder: Mapping[str, TextSpanBuilder],
    ) -> list[Any]:
        """Build the fragment list for a document.

        Args:
            doc: The parsed document
            tag_to_builder: Builders by lower-case tag name

        Returns:
            One fragment per node, in document order
        """
        self.build_count += 1
        self.diagnostics = []

        fragments: list[Any] = []
        for node in doc.nodes:
            if isinstance(node, TextNode):
                fragments.append(self.default_fragment(node.text))
                continue

            fragments.append(self._build_element(node, tag_to_builder))

        return fragments

    def _build_element(
        self,
        node: ElementNode,
        tag_to_builder: Mapping[str, TextSpanBuilder],
    ) -> Any:
        builder = tag_to_builder.get(node.tag_name)
        if builder is not None:
            return builder(node.inner_text)

        message = f"No builder registered for tag <{node.tag_name}>; using default style"
        logger.warning(message)
        self.diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.MISSING_BUILDER,
                message=message,
                tag=node.tag_name,
            )
        )
        return self.default_fragment(node.inner_text)
