"""Tests for the CLI interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from bs4 import ParserRejectedMarkup
from typer.testing import CliRunner

from tagged_text.cli import app, parse_tag_option, read_content
from tagged_text.formatting.ir import TextRun, TextStyle


runner = CliRunner()


class TestParseTagOption:
    """Tests for NAME=STYLE parsing."""

    def test_style_words(self):
        name, build = parse_tag_option("hl=bold italic")

        assert name == "hl"
        assert build("x") == TextRun("x", TextStyle.BOLD | TextStyle.ITALIC)

    def test_color(self):
        name, build = parse_tag_option("warn=underline red")

        assert build("x") == TextRun("x", TextStyle.UNDERLINE, color="red")

    def test_empty_style(self):
        name, build = parse_tag_option("plain=")

        assert build("x") == TextRun("x")

    def test_missing_equals(self):
        with pytest.raises(typer.BadParameter):
            parse_tag_option("hl")

    def test_unknown_word(self):
        with pytest.raises(typer.BadParameter):
            parse_tag_option("hl=sparkly")

    def test_two_colors(self):
        with pytest.raises(typer.BadParameter):
            parse_tag_option("hl=red blue")


class TestReadContent:
    """Tests for content sources."""

    def test_argument(self):
        assert read_content("text", None) == "text"

    def test_file(self, tmp_path: Path):
        path = tmp_path / "message.txt"
        path.write_text("from <hl>file</hl>", encoding="utf-8")

        assert read_content(None, path) == "from <hl>file</hl>"

    def test_both(self, tmp_path: Path):
        with pytest.raises(typer.BadParameter):
            read_content("text", tmp_path / "x.txt")

    def test_neither(self):
        with pytest.raises(typer.BadParameter):
            read_content(None, None)


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Tagged Text" in result.stdout

    def test_render(self):
        result = runner.invoke(app, ["Tap <hl>Save</hl> now", "-t", "hl=bold"])

        assert result.exit_code == 0
        assert "Tap Save now" in result.stdout

    def test_render_from_file(self, tmp_path: Path):
        path = tmp_path / "message.txt"
        path.write_text("Read <note>this</note>", encoding="utf-8")

        result = runner.invoke(app, ["--file", str(path), "-t", "note=italic"])

        assert result.exit_code == 0
        assert "Read this" in result.stdout

    def test_plain(self):
        result = runner.invoke(app, ["[a] <hl>b</hl>", "-t", "hl=bold", "--plain"])

        assert result.exit_code == 0
        assert "[a] b" in result.stdout

    def test_reserved_tag_fails(self):
        result = runner.invoke(app, ["x", "-t", "div=bold"])

        assert result.exit_code == 1
        assert "not allowed" in result.stdout

    def test_upper_case_tag_fails(self):
        result = runner.invoke(app, ["x", "-t", "Hl=bold"])

        assert result.exit_code == 1
        assert "lower-case" in result.stdout

    def test_missing_builder_verbose(self):
        result = runner.invoke(app, ["<x>oops</x>", "--verbose"])

        assert result.exit_code == 0
        assert "oops" in result.stdout
        assert "missing_builder" in result.stdout

    def test_nesting_reject(self):
        result = runner.invoke(
            app, ["<hl><note>x</note></hl>", "-t", "hl=bold", "--nesting", "reject"]
        )

        assert result.exit_code == 1
        assert "Nothing to render" in result.stdout

    def test_unparseable_content(self):
        with patch(
            "tagged_text.formatting.parser.BeautifulSoup",
            side_effect=ParserRejectedMarkup("bad"),
        ):
            result = runner.invoke(app, ["anything"])

        assert result.exit_code == 1
        assert "Nothing to render" in result.stdout

    def test_bad_style_is_usage_error(self):
        result = runner.invoke(app, ["x", "-t", "hl=sparkly"])

        assert result.exit_code == 2

    def test_max_lines(self):
        result = runner.invoke(
            app, ["line one\nline two\nline three", "--max-lines", "2"]
        )

        assert result.exit_code == 0
        assert "line two" in result.stdout
        assert "line three" not in result.stdout
