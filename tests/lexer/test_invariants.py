"""Property-based tests for tokenizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pluma import (
    Lexer,
    ParseConfig,
    parse,
    parse_config_context,
    render,
    scan_inline,
    tokenize,
)
from pluma.nodes import (
    CodeSpan,
    Emphasis,
    Image,
    Inline,
    Link,
    OrderedListBlock,
    Strong,
    Text,
    UnorderedListBlock,
)
from pluma.tokens import LineKind

TRIGGERS = "_*`[!"


def _reconstruct(tokens: tuple[Inline, ...]) -> str:
    """Write inline tokens back out as the markup that produced them."""
    parts: list[str] = []
    for token in tokens:
        match token:
            case Text(content=content):
                parts.append(content)
            case Emphasis(marker=marker, children=children):
                parts.append(f"{marker}{_reconstruct(children)}{marker}")
            case Strong(marker=marker, children=children):
                parts.append(f"{marker * 2}{_reconstruct(children)}{marker * 2}")
            case CodeSpan(children=children):
                parts.append(f"`{_reconstruct(children)}`")
            case Link(label=label, target=target, via_reference=True):
                parts.append(f"[{label}][{target}]")
            case Link(label=label, target=target):
                parts.append(f"[{label}]({target})")
            case Image(label=label, target=target, via_reference=True):
                parts.append(f"![{label}][{target}]")
            case Image(label=label, target=target):
                parts.append(f"![{label}]({target})")
            case _:
                raise AssertionError(f"unexpected inline token {token!r}")
    return "".join(parts)


class TestInlineInvariants:
    """Properties of the inline scanner."""

    @given(st.text(alphabet=st.characters(exclude_characters=TRIGGERS), min_size=1))
    @settings(max_examples=200)
    def test_plain_text_round_trip(self, text: str) -> None:
        """Text without triggers scans to one Text token equal to the input."""
        assert scan_inline(text) == (Text(text),)

    @given(st.permutations(list("![*_`")))
    @settings(max_examples=120)
    def test_unmatched_triggers_degrade_per_character(self, chars: list[str]) -> None:
        source = "".join(chars)
        assert scan_inline(source) == tuple(Text(c) for c in chars)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_scan_never_raises(self, text: str) -> None:
        scan_inline(text)

    @given(st.text(alphabet="*_`[]()!\\ ab", max_size=120))
    @settings(max_examples=300)
    def test_tokens_cover_input_exactly(self, text: str) -> None:
        """Nothing is dropped or duplicated: the tokens re-emit the input."""
        assert _reconstruct(scan_inline(text)) == text

    @given(st.text(alphabet="*_`[]()!\\ ab", max_size=120))
    @settings(max_examples=200)
    def test_coverage_holds_at_depth_cap(self, text: str) -> None:
        with parse_config_context(ParseConfig(max_inline_depth=2)):
            tokens = scan_inline(text)
        assert _reconstruct(tokens) == text

    @given(st.text(alphabet="*_`[]()!\\ ab", max_size=120))
    @settings(max_examples=200)
    def test_coverage_holds_for_literal_code_spans(self, text: str) -> None:
        with parse_config_context(ParseConfig(literal_code_spans=True)):
            tokens = scan_inline(text)
        assert _reconstruct(tokens) == text


class TestBlockInvariants:
    """Properties of the line driver."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_tokenize_is_total(self, source: str) -> None:
        tokenize(source)

    @given(st.text(alphabet="-*#>`[]:!.)0123456789 ab\n", max_size=300))
    @settings(max_examples=200)
    def test_list_blocks_are_never_empty_and_homogeneous(self, source: str) -> None:
        for block in tokenize(source):
            if isinstance(block, OrderedListBlock | UnorderedListBlock):
                assert block.items
                assert all(item.marker == block.marker for item in block.items)

    @given(st.text(alphabet="-*#>`[]:!.)0123456789 ab\n", max_size=300))
    @settings(max_examples=100)
    def test_adjacent_list_blocks_differ(self, source: str) -> None:
        """Consecutive list blocks of one kind never share a marker."""
        blocks = tokenize(source)
        for prev, block in zip(blocks, blocks[1:], strict=False):
            if type(prev) is type(block) and isinstance(
                block, OrderedListBlock | UnorderedListBlock
            ):
                assert prev.marker != block.marker

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_render_is_total(self, source: str) -> None:
        assert isinstance(render(parse(source)), str)


class TestClassifierInvariants:
    """Properties of line classification."""

    @given(st.text(min_size=1, max_size=200).filter(lambda s: "\n" not in s))
    @settings(max_examples=200)
    def test_every_line_classifies(self, line: str) -> None:
        classified = Lexer().classify(line, 1)
        assert classified.kind in LineKind
        assert classified.line == line

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_classify_lines_skips_blanks(self, source: str) -> None:
        lexer = Lexer(source)
        classified = list(lexer.classify_lines())
        assert len(classified) == sum(1 for line in lexer.lines if line)
        assert all(c.lineno >= 1 for c in classified)
