"""Tests for the fragment builder."""

from tagged_text.core.builder import FragmentBuilder
from tagged_text.formatting.ir import (
    DiagnosticKind,
    ElementNode,
    ParsedDocument,
    TextNode,
    TextRun,
    TextStyle,
)
from tagged_text.formatting.parser import TaggedMarkupParser

from conftest import wrap_bold


class TestFragmentBuilder:
    """Tests for the FragmentBuilder class."""

    def test_plain_text_single_fragment(self, parser, builder, tag_to_builder):
        """Test that plain text becomes exactly one default fragment."""
        text = "Nothing to see here, move along."

        fragments = builder.build(parser.parse(text), tag_to_builder)

        assert fragments == [TextRun(text)]

    def test_whitespace_only_text_single_fragment(self, parser, builder, tag_to_builder):
        """Test that whitespace-only content is one fragment equal to it."""
        fragments = builder.build(parser.parse(" \t \n "), tag_to_builder)

        assert fragments == [TextRun(" \t \n ")]

    def test_plain_text_independent_of_mapping(self, parser, builder):
        """Test that the mapping does not affect tag-free content."""
        doc = parser.parse("just text")

        assert builder.build(doc, {}) == builder.build(doc, {"hl": wrap_bold})

    def test_single_tag_uses_builder(self, parser, builder, tag_to_builder):
        """Test that a registered tag goes through its builder."""
        fragments = builder.build(parser.parse("<hl>INNER</hl>"), tag_to_builder)

        assert fragments == [TextRun("INNER", TextStyle.BOLD)]
        assert builder.diagnostics == []

    def test_hello_world(self, parser: TaggedMarkupParser, builder: FragmentBuilder):
        """Test the bold example end to end through the core."""
        doc = parser.parse("Hello <b>world</b>!")

        fragments = builder.build(doc, {"b": wrap_bold})

        assert fragments == [
            TextRun("Hello "),
            TextRun("world", TextStyle.BOLD),
            TextRun("!"),
        ]

    def test_missing_builder_falls_back(self, parser, builder, caplog):
        """Test that an unknown tag keeps its text in the default style."""
        fragments = builder.build(parser.parse("<x>oops</x>"), {})

        assert fragments == [TextRun("oops")]
        assert len(builder.diagnostics) == 1
        assert builder.diagnostics[0].kind == DiagnosticKind.MISSING_BUILDER
        assert builder.diagnostics[0].tag == "x"
        assert "No builder registered for tag <x>" in caplog.text

    def test_missing_builder_does_not_stop_pass(self, parser, builder, tag_to_builder):
        """Test that later nodes are still built after a missing builder."""
        doc = parser.parse("<x>one</x> <hl>two</hl>")

        fragments = builder.build(doc, tag_to_builder)

        assert fragments == [
            TextRun("one"),
            TextRun(" "),
            TextRun("two", TextStyle.BOLD),
        ]

    def test_lookup_is_exact(self, builder):
        """Test that builder lookup does not fold case."""
        doc = ParsedDocument(nodes=[ElementNode(tag_name="hl", inner_text="x")])

        fragments = builder.build(doc, {"HL": wrap_bold})

        assert fragments == [TextRun("x")]
        assert builder.diagnostics[0].tag == "hl"

    def test_idempotent(self, parser, builder, tag_to_builder):
        """Test that building twice gives equal fragments."""
        doc = parser.parse("a <hl>b</hl> <note>c</note> <x>d</x>")

        first = builder.build(doc, tag_to_builder)
        second = builder.build(doc, dict(tag_to_builder))

        assert first == second

    def test_diagnostics_reset_per_pass(self, parser, builder, tag_to_builder):
        """Test that diagnostics only cover the last pass."""
        builder.build(parser.parse("<x>a</x>"), {})
        builder.build(parser.parse("<hl>a</hl>"), tag_to_builder)

        assert builder.diagnostics == []
        assert builder.build_count == 2

    def test_builder_result_is_opaque(self, parser, builder):
        """Test that builders may return any value."""
        doc = parser.parse("<hl>word</hl>")

        fragments = builder.build(doc, {"hl": lambda text: ("custom", text)})

        assert fragments == [("custom", "word")]

    def test_custom_default_fragment(self, parser):
        """Test overriding the default fragment factory."""
        builder = FragmentBuilder(default_fragment=str.upper)
        doc = ParsedDocument(nodes=[TextNode("abc"), ElementNode("x", "def")])

        assert builder.build(doc, {}) == ["ABC", "DEF"]

    def test_empty_document(self, builder, tag_to_builder):
        """Test that an empty document gives no fragments."""
        assert builder.build(ParsedDocument(), tag_to_builder) == []
