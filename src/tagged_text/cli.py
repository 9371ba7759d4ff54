"""Command-line interface for Tagged Text."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.markup import escape

from tagged_text import __version__
from tagged_text.config import get_settings
from tagged_text.core.builder import TextSpanBuilder
from tagged_text.core.tagged_text import TaggedText, TaggedTextState
from tagged_text.errors import ConfigurationError
from tagged_text.formatting.ir import (
    DisplayConfig,
    TextAlign,
    TextDirection,
    TextOverflow,
    TextRun,
    TextStyle,
)
from tagged_text.formatting.parser import NestingPolicy, TaggedMarkupParser
from tagged_text.rendering.console import ConsoleRenderer
from tagged_text.rendering.plain import PlainTextRenderer

app = typer.Typer(
    name="tagged-text",
    help="Render text marked up with semantic tags.",
    add_completion=False,
)
console = Console()

STYLE_WORDS = {
    "bold": TextStyle.BOLD,
    "italic": TextStyle.ITALIC,
    "underline": TextStyle.UNDERLINE,
    "strike": TextStyle.STRIKETHROUGH,
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Tagged Text v{__version__}")
        raise typer.Exit()


def run_builder(style: TextStyle, color: Optional[str] = None) -> TextSpanBuilder:
    """Create a builder that wraps inner text in a styled TextRun."""

    def build(text: str) -> TextRun:
        return TextRun(text=text, style=style, color=color)

    return build


def parse_tag_option(option: str) -> tuple[str, TextSpanBuilder]:
    """Parse a ``NAME=STYLE`` option into a tag name and builder.

    STYLE is a space-separated list of bold, italic, underline, strike and at
    most one color, e.g. ``hl=bold red``.
    """
    name, sep, spec = option.partition("=")
    name = name.strip()
    if not sep or not name:
        raise typer.BadParameter(f"Expected NAME=STYLE, got {option!r}")

    style = TextStyle.NONE
    color: Optional[str] = None
    for word in spec.split():
        flag = STYLE_WORDS.get(word.lower())
        if flag is not None:
            style |= flag
            continue
        if color is not None:
            raise typer.BadParameter(f"Tag {name!r} has more than one color")
        try:
            Color.parse(word)
        except ColorParseError:
            raise typer.BadParameter(
                f"Unknown style or color {word!r} for tag {name!r}"
            ) from None
        color = word

    return name, run_builder(style, color)


def read_content(content: Optional[str], file: Optional[Path]) -> str:
    """Take content from the argument or from a file, but not both."""
    if content is not None and file is not None:
        raise typer.BadParameter("Pass CONTENT or --file, not both")
    if file is not None:
        return file.read_text(encoding="utf-8")
    if content is None:
        raise typer.BadParameter("Missing CONTENT (or --file)")
    return content


@app.command()
def main(
    content: Optional[str] = typer.Argument(
        None,
        help="Tagged content, e.g. 'Tap <hl>Save</hl> to continue'",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Read tagged content from a file",
    ),
    tags: List[str] = typer.Option(
        [],
        "--tag",
        "-t",
        help="Tag style as NAME=STYLE, e.g. 'hl=bold yellow'. Repeatable.",
    ),
    align: TextAlign = typer.Option(
        TextAlign.START,
        "--align",
        "-a",
        help="Horizontal alignment",
    ),
    direction: Optional[TextDirection] = typer.Option(
        None,
        "--direction",
        "-d",
        help="Text direction",
    ),
    no_wrap: bool = typer.Option(
        False,
        "--no-wrap",
        help="Do not break lines at soft line breaks",
    ),
    overflow: TextOverflow = typer.Option(
        TextOverflow.CLIP,
        "--overflow",
        "-o",
        help="How to handle overflowing text",
    ),
    max_lines: Optional[int] = typer.Option(
        None,
        "--max-lines",
        "-n",
        min=1,
        help="Truncate output to this many lines",
    ),
    nesting: Optional[NestingPolicy] = typer.Option(
        None,
        "--nesting",
        help="How to treat tags inside tags (default: TAGGED_TEXT_NESTING)",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print without styling",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List diagnostics after rendering",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render tagged content to the terminal.

    Examples:

        tagged-text "Tap <hl>Save</hl> to continue" -t "hl=bold yellow"

        tagged-text -f message.txt -t "warn=bold red" -t "note=italic"

        tagged-text "<x>oops</x>" --verbose  # Reports the missing builder
    """
    text = read_content(content, file)
    tag_to_builder = dict(parse_tag_option(option) for option in tags)

    display = DisplayConfig(
        text_align=align,
        text_direction=direction,
        soft_wrap=not no_wrap,
        overflow=overflow,
        max_lines=max_lines,
    )

    try:
        config = TaggedText(text, tag_to_builder, display)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    policy = nesting or NestingPolicy(get_settings().nesting)
    state = TaggedTextState(config, parser=TaggedMarkupParser(nesting=policy))

    if not state.did_parse:
        console.print(f"[red]Nothing to render:[/red] {escape(str(state.parse_error))}")
        raise typer.Exit(1)

    if plain:
        console.print(state.render(PlainTextRenderer()), markup=False, highlight=False)
    else:
        state.render(ConsoleRenderer(console))

    if verbose:
        for diagnostic in state.diagnostics:
            console.print(f"[yellow]{diagnostic.kind.value}:[/yellow] {escape(str(diagnostic))}")


if __name__ == "__main__":
    app()
