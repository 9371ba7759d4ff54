"""Renderers that draw fragment sequences."""

from tagged_text.rendering.base import FragmentRenderer, resolve_text_scale_factor
from tagged_text.rendering.console import ConsoleRenderer
from tagged_text.rendering.plain import PlainTextRenderer

__all__ = [
    "FragmentRenderer",
    "ConsoleRenderer",
    "PlainTextRenderer",
    "resolve_text_scale_factor",
]
