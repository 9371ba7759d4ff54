"""Render fragments as plain text."""

from typing import Any, Sequence

from tagged_text.formatting.ir import DisplayConfig
from tagged_text.rendering.base import FragmentRenderer


class PlainTextRenderer(FragmentRenderer):
    """Join fragment text, dropping all styling.

    Honours ``max_lines`` by splitting on explicit line breaks only.
    """

    def render(self, fragments: Sequence[Any], display: DisplayConfig) -> str:
        text = "".join(str(fragment) for fragment in fragments)
        if display.max_lines is not None:
            text = "\n".join(text.split("\n")[: display.max_lines])
        return text
