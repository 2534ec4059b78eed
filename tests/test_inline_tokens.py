"""Tests for the inline scanner: emphasis, strong, code spans, links, images."""

import pytest

from pluma import ParseConfig, parse_config_context, scan_inline
from pluma.nodes import CodeSpan, Emphasis, Image, Link, Strong, Text


def _flatten(tokens) -> str:  # type: ignore[no-untyped-def]
    """Concatenate the text content of a token sequence (markup dropped)."""
    parts: list[str] = []
    for token in tokens:
        match token:
            case Text(content=content):
                parts.append(content)
            case Emphasis(children=children) | Strong(children=children) | CodeSpan(
                children=children
            ):
                parts.append(_flatten(children))
            case Link(label=label) | Image(label=label):
                parts.append(label)
    return "".join(parts)


class TestEmphasis:
    """Single and double marker spans."""

    def test_single_star(self) -> None:
        assert scan_inline("*Test*") == (Emphasis("*", (Text("Test"),)),)

    def test_double_star(self) -> None:
        assert scan_inline("**Test**") == (Strong("*", (Text("Test"),)),)

    def test_single_underscore(self) -> None:
        assert scan_inline("_Test_") == (Emphasis("_", (Text("Test"),)),)

    def test_double_underscore(self) -> None:
        assert scan_inline("__Test__") == (Strong("_", (Text("Test"),)),)

    def test_text_around_emphasis(self) -> None:
        assert scan_inline("a *b* c") == (
            Text("a "),
            Emphasis("*", (Text("b"),)),
            Text(" c"),
        )

    def test_non_greedy_match(self) -> None:
        """The first closer ends the span."""
        assert scan_inline("*a* b *c*") == (
            Emphasis("*", (Text("a"),)),
            Text(" b "),
            Emphasis("*", (Text("c"),)),
        )

    def test_double_preferred_over_single(self) -> None:
        tokens = scan_inline("**x** and *y*")
        assert isinstance(tokens[0], Strong)
        assert isinstance(tokens[2], Emphasis)

    def test_falls_back_to_single_when_double_unclosed(self) -> None:
        assert scan_inline("**a*") == (Emphasis("*", (Text("*"), Text("a"))),)

    def test_nested_strong_and_emphasis(self) -> None:
        assert scan_inline("**_x_**") == (
            Strong("*", (Emphasis("_", (Text("x"),)),)),
        )

    def test_mixed_markers_do_not_close_each_other(self) -> None:
        assert scan_inline("*a_") == (Text("*"), Text("a"), Text("_"))


class TestDegradation:
    """Unmatched triggers become literal text."""

    def test_unclosed_marker(self) -> None:
        assert scan_inline("*abc") == (Text("*"), Text("abc"))

    def test_empty_strong_is_two_literals(self) -> None:
        assert scan_inline("**") == (Text("*"), Text("*"))

    def test_empty_code_span_is_two_literals(self) -> None:
        assert scan_inline("``") == (Text("`"), Text("`"))

    @pytest.mark.parametrize("source", ["![*_`", "[", "!", "_", "`!*"])
    def test_lone_triggers(self, source: str) -> None:
        assert scan_inline(source) == tuple(Text(c) for c in source)

    def test_bang_without_bracket(self) -> None:
        assert scan_inline("Hi!") == (Text("Hi"), Text("!"))

    def test_empty_input(self) -> None:
        assert scan_inline("") == ()


class TestBackslash:
    """A backslash before a trigger suppresses it and is kept in the text."""

    def test_escaped_opener(self) -> None:
        assert scan_inline("\\*Test*") == (Text("\\"), Text("*Test"), Text("*"))

    def test_escaped_closer_is_skipped(self) -> None:
        assert scan_inline("*a\\*b*") == (
            Emphasis("*", (Text("a\\"), Text("*b"))),
        )

    def test_escaped_link_bracket(self) -> None:
        tokens = scan_inline("\\[a](b)")
        assert not any(isinstance(t, Link) for t in tokens)
        assert _flatten(tokens) == "\\[a](b)"

    def test_backslash_without_trigger(self) -> None:
        assert scan_inline("a\\b") == (Text("a\\b"),)


class TestCodeSpan:
    """Backtick spans."""

    def test_simple(self) -> None:
        assert scan_inline("`code`") == (CodeSpan((Text("code"),)),)

    def test_contents_are_scanned(self) -> None:
        assert scan_inline("`a*b*`") == (
            CodeSpan((Text("a"), Emphasis("*", (Text("b"),)))),
        )

    def test_never_doubled(self) -> None:
        """Two backticks open a single-backtick span whose body starts with one."""
        tokens = scan_inline("``a`")
        assert tokens == (CodeSpan((Text("`"), Text("a"))),)

    def test_literal_code_spans(self) -> None:
        with parse_config_context(ParseConfig(literal_code_spans=True)):
            assert scan_inline("`*a*`") == (CodeSpan((Text("*a*"),)),)


class TestLinks:
    """Links and images, literal and by reference."""

    def test_literal_link(self) -> None:
        assert scan_inline("[text](url)") == (Link("text", "url", False),)

    def test_reference_link(self) -> None:
        assert scan_inline("[text][ref]") == (Link("text", "ref", True),)

    def test_literal_image(self) -> None:
        assert scan_inline("![alt](pic.png)") == (Image("alt", "pic.png", False),)

    def test_reference_image(self) -> None:
        assert scan_inline("![alt][pic]") == (Image("alt", "pic", True),)

    def test_link_in_sentence(self) -> None:
        assert scan_inline("see [here](x), ok") == (
            Text("see "),
            Link("here", "x"),
            Text(", ok"),
        )

    def test_label_is_not_scanned(self) -> None:
        assert scan_inline("[*a*](b)") == (Link("*a*", "b"),)

    def test_empty_reference_name_is_not_a_link(self) -> None:
        tokens = scan_inline("[text][]")
        assert not any(isinstance(t, Link) for t in tokens)
        assert _flatten(tokens) == "[text][]"

    def test_unclosed_target(self) -> None:
        tokens = scan_inline("[a](b")
        assert not any(isinstance(t, Link) for t in tokens)
        assert _flatten(tokens) == "[a](b"

    def test_bracket_without_target(self) -> None:
        tokens = scan_inline("[a] b")
        assert not any(isinstance(t, Link) for t in tokens)
        assert _flatten(tokens) == "[a] b"

    def test_link_inside_emphasis(self) -> None:
        tokens = scan_inline("*click [here](url) now*")
        assert len(tokens) == 1
        em = tokens[0]
        assert isinstance(em, Emphasis)
        assert Link("here", "url") in em.children


class TestInlineDepth:
    """The depth cap keeps deeply nested content literal."""

    def test_default_recurses(self) -> None:
        assert scan_inline("**_x_**") == (
            Strong("*", (Emphasis("_", (Text("x"),)),)),
        )

    def test_cap_keeps_inner_text_literal(self) -> None:
        with parse_config_context(ParseConfig(max_inline_depth=1)):
            assert scan_inline("**_x_**") == (Strong("*", (Text("_x_"),)),)

    def test_deep_nesting_is_bounded(self) -> None:
        source = "*_" * 200 + "x" + "_*" * 200
        with parse_config_context(ParseConfig(max_inline_depth=8)):
            tokens = scan_inline(source)
        assert len(tokens) >= 1
        assert _flatten(tokens).replace("*", "").replace("_", "") == "x"
