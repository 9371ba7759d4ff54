"""Tagged text configuration and the state that owns its build passes."""

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from tagged_text.config import get_settings
from tagged_text.core.builder import FragmentBuilder, TextSpanBuilder
from tagged_text.core.validation import validate_tag_mapping
from tagged_text.errors import ParseError
from tagged_text.formatting.ir import (
    Diagnostic,
    DiagnosticKind,
    DisplayConfig,
    ParsedDocument,
)
from tagged_text.formatting.parser import NestingPolicy, TaggedMarkupParser
from tagged_text.logger import get_logger

if TYPE_CHECKING:
    from tagged_text.rendering.base import FragmentRenderer

logger = get_logger(__name__)


class TaggedText:
    """Tagged content plus the builders used to style it.

    This provides a convenient way to style localized text that is marked
    up with semantic tags, e.g. ``"Tap <hl>Save</hl> to continue"``.

    The mapping is validated once, here. Tag names must be lower-case and
    must not be actual HTML tag names.
    """

    def __init__(
        self,
        content: str,
        tag_to_builder: Mapping[str, TextSpanBuilder],
        display: Optional[DisplayConfig] = None,
    ) -> None:
        """Create a new configuration.

        Args:
            content: The tagged content to render
            tag_to_builder: Builders by lower-case tag name. A tag found in
                the content without a builder is rendered in the default
                style and reported as a diagnostic.
            display: Display settings passed through to the renderer

        Raises:
            ConfigurationError: If the mapping has an invalid tag name
        """
        validate_tag_mapping(tag_to_builder)
        self.content = content
        self.tag_to_builder = tag_to_builder
        self.display = display or DisplayConfig()

    def __repr__(self) -> str:
        return (
            f"TaggedText(content={self.content!r}, "
            f"tags={sorted(self.tag_to_builder)!r})"
        )


class UpdateAction(str, Enum):
    """Work needed after a configuration changes."""

    REPARSE = "reparse"
    REBUILD = "rebuild"
    NONE = "none"


def plan_update(old: TaggedText, new: TaggedText) -> UpdateAction:
    """Decide what has to be redone when ``old`` is replaced by ``new``.

    Content changes need a full reparse. Builder mappings are compared by
    value, so an equal mapping in a new dict object costs nothing.
    """
    if old.content != new.content:
        return UpdateAction.REPARSE
    if dict(old.tag_to_builder) != dict(new.tag_to_builder):
        return UpdateAction.REBUILD
    return UpdateAction.NONE


class TaggedTextState:
    """Owns the cached parse and fragments for one configuration.

    Not thread-safe: callers must serialize calls against one instance.
    """

    def __init__(
        self,
        config: TaggedText,
        parser: Optional[TaggedMarkupParser] = None,
        builder: Optional[FragmentBuilder] = None,
    ) -> None:
        if parser is None:
            parser = TaggedMarkupParser(nesting=NestingPolicy(get_settings().nesting))
        self.config = config
        self.parser = parser
        self.builder = builder or FragmentBuilder()

        self._document: Optional[ParsedDocument] = None
        self._parse_error: Optional[ParseError] = None
        self._fragments: list[Any] = []

        self._parse_content()
        self._build_fragments()

    @property
    def did_parse(self) -> bool:
        """Whether the current content parsed successfully."""
        return self._document is not None

    @property
    def document(self) -> Optional[ParsedDocument]:
        return self._document

    @property
    def parse_error(self) -> Optional[ParseError]:
        return self._parse_error

    @property
    def fragments(self) -> list[Any]:
        """Fragments of the last build pass (empty if parsing failed)."""
        return list(self._fragments)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics from the last parse and the last build pass."""
        if self._parse_error is not None:
            return [
                Diagnostic(
                    kind=DiagnosticKind.PARSE_FAILED,
                    message=str(self._parse_error),
                )
            ]
        if self._document is None:
            return []
        return self._document.diagnostics + self.builder.diagnostics

    def update(self, config: TaggedText) -> UpdateAction:
        """Switch to a new configuration, redoing only what changed.

        Returns:
            The action that was taken
        """
        action = plan_update(self.config, config)
        self.config = config

        if action == UpdateAction.REPARSE:
            self._parse_content()
            self._build_fragments()
        elif action == UpdateAction.REBUILD:
            self._build_fragments()

        logger.debug("Configuration updated: %s", action.value)
        return action

    def render(self, renderer: "FragmentRenderer") -> Any:
        """Hand the fragments to a renderer.

        Nothing is rendered when the content failed to parse.

        Returns:
            Whatever the renderer returns, or None if nothing was rendered
        """
        if not self.did_parse:
            return None
        return renderer.render(self.fragments, self.config.display)

    def _parse_content(self) -> None:
        outcome = self.parser.try_parse(self.config.content)
        if outcome.ok:
            self._document = outcome.document
            self._parse_error = None
        else:
            self._document = None
            self._parse_error = outcome.error

    def _build_fragments(self) -> None:
        if self._document is None:
            self._fragments = []
            return
        self._fragments = self.builder.build(self._document, self.config.tag_to_builder)


def build_fragments(
    content: str,
    tag_to_builder: Mapping[str, TextSpanBuilder],
    nesting: Optional[NestingPolicy] = None,
) -> list[Any]:
    """Validate, parse and build in one call.

    Returns an empty list if the content cannot be parsed.

    Raises:
        ConfigurationError: If the mapping has an invalid tag name
    """
    parser = TaggedMarkupParser(nesting=nesting) if nesting is not None else None
    state = TaggedTextState(TaggedText(content, tag_to_builder), parser=parser)
    return state.fragments
