"""Tests for pluma.serialization: token-tree JSON round-trip."""

import json

import pytest

from pluma import parse
from pluma.location import SourceLocation
from pluma.nodes import Document, Emphasis, Header, Link, Paragraph, Text
from pluma.serialization import from_dict, from_json, to_dict, to_json

SAMPLE = """# Title
Some *em* and **strong** with `code`.
>quote  
more
- a
- b
2) x
```
raw *text*
```
---
[ref]:http://example.com
See [it][ref] and ![pic](p.png)
"""


class TestToDict:
    def test_type_discriminator(self) -> None:
        data = to_dict(Text("hi"))
        assert data["_type"] == "Text"
        assert data["content"] == "hi"

    def test_children_become_lists(self) -> None:
        data = to_dict(Emphasis("*", (Text("a"),)))
        assert data["children"] == [{"_type": "Text", "content": "a", "location": None}]

    def test_location_serialized(self) -> None:
        loc = SourceLocation(3, 1, 4, "a.md")
        data = to_dict(Header(1, (), location=loc))
        assert data["location"] == {
            "_type": "SourceLocation",
            "lineno": 3,
            "col_offset": 1,
            "end_lineno": 4,
            "source_file": "a.md",
        }

    def test_references_serialized_as_tagged_mapping(self) -> None:
        data = to_dict(parse("[a]:b"))
        assert data["references"] == {"_type": "References", "items": {"a": "b"}}


class TestRoundTrip:
    def test_sample_document(self) -> None:
        doc = parse(SAMPLE)
        assert from_json(to_json(doc)) == doc

    def test_locations_preserved(self) -> None:
        doc = parse(SAMPLE, source_file="sample.md")
        restored = from_json(to_json(doc))
        assert [b.location for b in restored.children] == [
            b.location for b in doc.children
        ]

    @pytest.mark.parametrize("target", ["x", "Text", "Document"])
    def test_note_named_like_discriminator(self, target: str) -> None:
        doc = parse(f"[a][_type]\n[_type]:{target}")
        restored = from_json(to_json(doc))
        assert restored == doc
        assert restored.references == {"_type": target}

    def test_reference_flag_preserved(self) -> None:
        doc = parse("[x][r]")
        restored = from_json(to_json(doc))
        assert restored.children[0] == Paragraph((Link("x", "r", True),))

    def test_deterministic(self) -> None:
        assert to_json(parse(SAMPLE)) == to_json(parse(SAMPLE))

    def test_indent(self) -> None:
        assert "\n" in to_json(parse("x"), indent=2)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Table"})

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(json.dumps(to_dict(Text("x"))))

    def test_from_json_document(self) -> None:
        doc = from_json(json.dumps({"_type": "Document", "children": []}))
        assert doc == Document(())
