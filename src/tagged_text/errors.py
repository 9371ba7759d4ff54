"""Exceptions raised by tagged_text."""

from typing import Iterable


class TaggedTextError(Exception):
    """Base class for tagged_text errors."""

    pass


class ConfigurationError(TaggedTextError, ValueError):
    """The tag to builder mapping is invalid.

    Attributes:
        tags: The offending tag names
    """

    def __init__(self, message: str, tags: Iterable[str] = ()) -> None:
        self.tags = tuple(tags)
        super().__init__(message)


class ParseError(TaggedTextError):
    """The markup could not be parsed.

    Attributes:
        content: The markup that failed to parse
    """

    def __init__(self, message: str, content: str = "") -> None:
        self.content = content
        super().__init__(message)


class NestedTagError(ParseError):
    """A tag was placed inside another tag."""

    def __init__(self, tag: str, content: str = "") -> None:
        self.tag = tag
        super().__init__(
            f"Tags should not be placed within tags: <{tag}> has child tags",
            content,
        )

    def __repr__(self) -> str:
        return f"NestedTagError(tag={self.tag!r})"
