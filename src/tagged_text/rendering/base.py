"""Abstract base class for fragment renderers."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from tagged_text.config import get_settings
from tagged_text.formatting.ir import DisplayConfig


class FragmentRenderer(ABC):
    """Draws an ordered sequence of fragments.

    Renderers own everything visual: layout, wrapping, overflow and scale.
    They receive the display config exactly as the caller supplied it.
    """

    @abstractmethod
    def render(self, fragments: Sequence[Any], display: DisplayConfig) -> Any:
        """Render fragments with the given display settings.

        Args:
            fragments: Fragments in document order
            display: Display settings from the configuration

        Returns:
            Renderer-specific result
        """
        ...


def resolve_text_scale_factor(display: DisplayConfig) -> float:
    """Scale factor from the display config, or the configured default."""
    if display.text_scale_factor is not None:
        return display.text_scale_factor
    return get_settings().text_scale_factor
