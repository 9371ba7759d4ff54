"""Render fragments to a terminal with Rich."""

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.text import Text

from tagged_text.formatting.ir import (
    DisplayConfig,
    TextAlign,
    TextDirection,
    TextOverflow,
    TextRun,
    TextStyle,
)
from tagged_text.logger import get_logger
from tagged_text.rendering.base import FragmentRenderer, resolve_text_scale_factor

logger = get_logger(__name__)

ELLIPSIS = "…"

# Terminals cannot fade, and "fold" is the closest thing to visible overflow
OVERFLOW_METHODS = {
    TextOverflow.CLIP: "crop",
    TextOverflow.FADE: "ellipsis",
    TextOverflow.ELLIPSIS: "ellipsis",
    TextOverflow.VISIBLE: "fold",
}


def to_rich_style(style: TextStyle, color: Optional[str] = None) -> Style:
    """Convert style flags and an optional color to a Rich style."""
    return Style(
        bold=True if TextStyle.BOLD in style else None,
        italic=True if TextStyle.ITALIC in style else None,
        underline=True if TextStyle.UNDERLINE in style else None,
        strike=True if TextStyle.STRIKETHROUGH in style else None,
        color=color,
    )


def justify_for(align: TextAlign, direction: Optional[TextDirection]) -> str:
    """Map an alignment to a Rich justify method.

    START and END depend on the text direction; no direction means LTR.
    """
    rtl = direction == TextDirection.RTL
    if align == TextAlign.START:
        return "right" if rtl else "left"
    if align == TextAlign.END:
        return "left" if rtl else "right"
    if align == TextAlign.JUSTIFY:
        return "full"
    return align.value


class ConsoleRenderer(FragmentRenderer):
    """Print fragments to a Rich console.

    Accepts :class:`TextRun`, :class:`rich.text.Text` and plain strings.
    Anything else is rendered through ``str()``.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def to_text(self, fragments: Sequence[Any], display: DisplayConfig) -> Text:
        """Combine fragments into one Rich Text carrying the display settings."""
        text = Text(
            style=to_rich_style(display.style, display.color),
            justify=justify_for(display.text_align, display.text_direction),
            overflow=OVERFLOW_METHODS[display.overflow],
            no_wrap=not display.soft_wrap,
        )
        for fragment in fragments:
            if isinstance(fragment, Text):
                text.append_text(fragment)
            elif isinstance(fragment, TextRun):
                text.append(fragment.text, style=to_rich_style(fragment.style, fragment.color))
            else:
                text.append(str(fragment))
        return text

    def render(self, fragments: Sequence[Any], display: DisplayConfig) -> Text:
        """Print the fragments and return the Text that was printed."""
        scale = resolve_text_scale_factor(display)
        if scale != 1.0:
            logger.debug("Terminal output ignores text scale factor %.2f", scale)

        text = self.to_text(fragments, display)
        if display.max_lines is not None:
            text = self._truncate_lines(text, display)

        self.console.print(text)
        return text

    def _truncate_lines(self, text: Text, display: DisplayConfig) -> Text:
        width = self.console.width
        lines = list(
            text.wrap(
                self.console,
                width,
                justify=text.justify,
                overflow=text.overflow,
                no_wrap=text.no_wrap,
            )
        )
        if len(lines) <= display.max_lines:
            return text

        kept = lines[: display.max_lines]
        if display.overflow in (TextOverflow.ELLIPSIS, TextOverflow.FADE) and kept:
            last = kept[-1].copy()
            last.rstrip()
            last.append(ELLIPSIS)
            last.truncate(width, overflow="ellipsis")
            kept[-1] = last

        truncated = Text("\n", style=text.style).join(kept)
        truncated.justify = text.justify
        truncated.overflow = text.overflow
        truncated.no_wrap = text.no_wrap
        return truncated
