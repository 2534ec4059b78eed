"""Error-path and malformed input tests."""

import logging

import pytest

from pluma import HtmlRenderer, PlumaError, RenderError, parse, render, tokenize
from pluma.location import SourceLocation
from pluma.nodes import Document, Paragraph, Text


class TestRenderError:
    def test_is_pluma_error(self) -> None:
        assert issubclass(RenderError, PlumaError)

    def test_message_names_type(self) -> None:
        err = RenderError(object())
        assert str(err) == "cannot render node: object"

    def test_message_includes_location(self) -> None:
        node = Text("x", location=SourceLocation(4, 1, source_file="a.md"))
        err = RenderError(node, "bad")
        assert str(err) == "a.md:4:1 bad: Text"
        assert err.node is node

    def test_unknown_block(self) -> None:
        with pytest.raises(RenderError, match="Text"):
            HtmlRenderer().render(Document((Text("inline at block level"),)))  # type: ignore[arg-type]

    def test_unknown_inline(self) -> None:
        doc = Document((Paragraph((Document(()),)),))  # type: ignore[arg-type]
        with pytest.raises(RenderError, match="Document"):
            render(doc)

    def test_non_document_root(self) -> None:
        with pytest.raises(RenderError, match="expected a Document"):
            HtmlRenderer().render(Paragraph(()))  # type: ignore[arg-type]


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source",
        [
            "[",
            "![",
            "![x]",
            "[x](",
            "[x][",
            "*",
            "**",
            "***",
            "`",
            "#",
            "#######",
            ">",
            "1.",
            "[]:",
            "```",
            "\\",
            "\x00",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        assert isinstance(render(parse(source)), str)

    def test_empty_quote(self) -> None:
        (quote,) = tokenize(">")
        assert quote.children == ()  # type: ignore[union-attr]

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluma"):
            tokenize("a\nb")
        assert "Tokenized 2 lines into 2 blocks" in caplog.text
